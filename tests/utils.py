"""테스트 전용 헬퍼."""
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Generator


@contextmanager
def cwd(path: Path) -> Generator[None, None, None]:
    """블록 안에서만 작업 디렉토리를 ``path`` 로 바꿉니다."""
    oldpwd = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(oldpwd)
