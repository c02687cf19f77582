"""콘솔 출력용 헬퍼."""
from colorama import init as init_colors

init_colors()

from colorama import Fore, Style  # noqa


def fg(text, color=Fore.WHITE):
    """``color`` 전경색으로 감싼 문자열."""
    return f"{color}{text}{Fore.RESET}"


def bold(text, color=Fore.WHITE):
    """``fg`` 에 굵은 글씨를 더하고 모든 스타일을 되돌립니다."""
    return f"{Style.BRIGHT}{color}{text}{Style.RESET_ALL}"


def qualname(cls: type) -> str:
    """``module.ClassName`` 형식의 클래스 이름."""
    return f"{cls.__module__}.{cls.__qualname__}"
