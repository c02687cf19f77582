"""기본 환경 설정.

``setup.cfg`` 의 ``[fastmediator]`` 섹션에서 설정을 읽습니다. ::

    [fastmediator]
    name = shop
    handler_modules =
        shop.handlers.orders
        shop.handlers.emails
    log_level = DEBUG
"""

from __future__ import annotations

import importlib
import logging
import sys
from configparser import ConfigParser
from dataclasses import dataclass, field
from inspect import isclass
from pathlib import Path
from typing import Iterable, Optional

from fastmediator.core import MediatorError
from fastmediator.metadata import is_handler_class

SECTION = "fastmediator"


def _split_list(value: str) -> list[str]:
    return [it.strip() for it in value.replace(",", "\n").splitlines() if it.strip()]


@dataclass
class MediatorSetupConfig:
    name: str
    handler_modules: list[str] = field(default_factory=list)
    log_level: str = "INFO"
    retry_attempts: int = 3

    @staticmethod
    def from_section(section: dict[str, str], default_name: str) -> MediatorSetupConfig:
        try:
            retry_attempts = int(section.get("retry_attempts", 3))
        except ValueError:
            raise MediatorError(
                f"retry_attempts should be an integer: {section['retry_attempts']!r}"
            ) from None

        log_level = section.get("log_level", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise MediatorError(f"unknown log_level: {section['log_level']!r}")

        return MediatorSetupConfig(
            name=section.get("name", default_name),
            handler_modules=_split_list(section.get("handler_modules", "")),
            log_level=log_level,
            retry_attempts=retry_attempts,
        )


def load_setupcfg(path: Path = Path(".")) -> Optional[MediatorSetupConfig]:
    """``path`` 의 ``setup.cfg`` 에서 ``[fastmediator]`` 섹션을 읽습니다.

    파일이나 섹션이 없으면 ``None`` 을 리턴합니다.
    """
    cfg_path = path / "setup.cfg"
    if cfg_path.exists():
        config = ConfigParser()
        config.read(cfg_path, encoding="utf8")
        if SECTION in config:
            return MediatorSetupConfig.from_section(
                dict(config[SECTION]), path.absolute().name
            )
    return None


def load_handlers(modules: Iterable[str], path: Optional[Path] = None) -> list[type]:
    """모듈들을 임포트하고 그 안에 정의된 핸들러 클래스를 모두 찾아 리턴합니다.

    순서는 모듈 순서, 그리고 모듈 안에서의 정의 순서입니다.
    """
    old_sys_path = list(sys.path)
    if path:
        abs_path = str(path.absolute())
        if abs_path not in sys.path:
            sys.path.insert(0, abs_path)

    handlers = list[type]()

    try:
        for module_name in modules:
            module = _import_module(module_name)

            # 모듈 __dict__ 는 정의 순서를 유지합니다.
            handlers.extend(
                member
                for member in vars(module).values()
                if isclass(member)
                and member.__module__ == module.__name__
                and is_handler_class(member)
            )
    finally:
        sys.path[:] = old_sys_path

    return handlers


def _import_module(module_name: str):
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        # `a.b.c` 를 임포트할 때는 `a`, `a.b` 가 없어도 같은 에러가 납니다.
        parts = module_name.split(".")
        prefixes = {".".join(parts[:i]) for i in range(1, len(parts) + 1)}
        if e.name not in prefixes:
            raise
        raise MediatorError(f"handler module not found: {module_name}") from e
