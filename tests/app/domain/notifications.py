from dataclasses import dataclass

from fastmediator import Notification


@dataclass
class AccountOpened(Notification):
    account_id: str
    owner: str


@dataclass
class AccountClosed(Notification):
    account_id: str
