"""Command line script for FastMediator."""
import os
import shutil
import sys
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter
from pathlib import Path
from textwrap import dedent
from typing import Optional, Sequence

from fastmediator.config import MediatorSetupConfig, load_handlers, load_setupcfg
from fastmediator.core import MediatorError, get_logger, set_log_level
from fastmediator.registry import HandlerRegistry, build_registry
from fastmediator.utils import Fore, bold, fg, qualname

YELLOW, CYAN, RED, GREEN = Fore.YELLOW, Fore.CYAN, Fore.RED, Fore.GREEN
WHITE_EX, CYAN_EX = Fore.LIGHTWHITE_EX, Fore.LIGHTCYAN_EX

logger = get_logger("fastmediator.command")


class MediatorCommand:
    def __init__(self, path: Optional[Path] = None):
        """Constructor.

        현재 경로(또는 ``path``)의 ``setup.cfg`` 에서 ``[fastmediator]`` 섹션을 읽습니다.
        섹션이 없으면 디렉토리 이름을 앱 이름으로 사용합니다.
        """
        self.path = Path(path or os.path.abspath("."))
        self.config = load_setupcfg(self.path) or MediatorSetupConfig(self.path.name)
        set_log_level(self.config.log_level)

    def banner(self, msg, icon=""):
        """배너를 표시합니다."""
        if os.name == "nt":
            icon = ""
        banner_width = min(75, shutil.get_terminal_size().columns)
        print("─" * banner_width)
        print(f"{icon} {msg}".strip())
        print("─" * banner_width)

    def info(self):
        """설정 정보를 출력합니다."""
        dot = bold("-", YELLOW)
        self.banner(bold("FastMediator Information"), icon="💡")
        modules = ", ".join(self.config.handler_modules) or "-"
        print(dot, fg("Name", CYAN), "     :", fg(self.config.name, WHITE_EX))
        print(dot, fg("Handlers", CYAN), " :", fg(modules, WHITE_EX))
        print(dot, fg("Retries", CYAN), "  :", fg(self.config.retry_attempts, WHITE_EX))
        print(dot, fg("Log level", CYAN), ":", fg(self.config.log_level, WHITE_EX))
        print(dot, fg("Path", CYAN), "     :", fg(self.path, WHITE_EX))

    def handlers(self, modules: Optional[Sequence[str]] = None) -> HandlerRegistry:
        """핸들러 모듈을 로드하고 레지스트리 내용을 출력합니다.

        모듈을 지정하지 않으면 setup.cfg 의 handler_modules 를 사용합니다.
        """
        modules = list(modules or self.config.handler_modules)
        if not modules:
            raise MediatorError("no handler modules given")

        registry = build_registry(load_handlers(modules, self.path))
        bullet = bold("✓" if os.name != "nt" else "v", GREEN)

        self.banner(bold("Request handlers"))
        for request_type, handler in registry.request_handlers.items():
            print(bullet, fg(qualname(request_type), CYAN), "->", qualname(handler))

        self.banner(bold("Notification handlers"))
        for notification_type, handlers in registry.notification_handlers.items():
            names = ", ".join(qualname(it) for it in handlers)
            print(bullet, fg(qualname(notification_type), CYAN), "->", names)

        logger.info(
            "%s request handlers, %s notification types loaded.",
            bold(len(registry.request_handlers), YELLOW),
            bold(len(registry.notification_handlers), YELLOW),
        )
        return registry


class MediatorCommandParser:
    """콘솔 커맨드 명령어 파서.

    실제 작업은 `MediatorCommand` 객체에 위임합니다.
    """

    def __init__(self, path: Optional[Path] = None):
        """기본 생성자."""
        self.parser = ArgumentParser(
            "mediator",
            description=f"✨ {bold('FastMediator')} : {fg('command line utility', CYAN_EX)}",
        )
        self._subparsers = self.parser.add_subparsers(dest="command")
        self._cmd = MediatorCommand(path)

        for handler in [self._cmd.info, self._cmd.handlers]:
            command = handler.__name__
            # 핸들러 함수의 주석을 커맨드라인 도움말로 변환하기 위한 작업입니다.
            doc = None
            if handler.__doc__:
                lines = handler.__doc__.splitlines()
                doc = lines[0] + "\n" + dedent("\n".join(lines[1:]))
            parser = self._subparsers.add_parser(
                command,
                description=doc,
                formatter_class=RawTextHelpFormatter,
            )
            if command == "handlers":
                parser.add_argument("modules", metavar="module", nargs="*")

    def parse_args(self, args: Sequence[str]):
        """콘솔 명령어를 해석해서 적절한 작업을 수행합니다."""
        if not args:
            self.parser.print_help()
            return

        ns = self.parser.parse_args(args)
        try:
            if hasattr(self, ns.command):
                getattr(self, ns.command)(ns)
            else:
                getattr(self._cmd, ns.command)()
        except MediatorError as e:
            print(
                f"{bold('FastMediator ERROR:', RED)} {fg(e.message, YELLOW)}",
                file=sys.stderr,
            )

    def handlers(self, ns: Namespace):
        """`handlers` 명령어 처리."""
        self._cmd.handlers(ns.modules)


def console_main():
    parser = MediatorCommandParser()
    parser.parse_args(sys.argv[1:])


if __name__ == "__main__":
    console_main()
