import logging
from typing import Union

from uvicorn.logging import DefaultFormatter

ROOT_LOGGER_NAME = "fastmediator"

LogLevel = Union[int, str]


def _level(log_level: LogLevel) -> int:
    if isinstance(log_level, str):
        return logging.getLevelName(log_level.upper())
    return log_level


def get_logger(name: str, log_level: LogLevel = logging.INFO) -> logging.Logger:
    """``fastmediator`` 로거를 리턴합니다.

    핸들러는 로거마다 한 번만 붙으며 출력 형식은 uvicorn 과 같습니다.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_level(log_level))
        ch = logging.StreamHandler()
        ch.setFormatter(DefaultFormatter(fmt="%(levelprefix)s %(message)s"))
        logger.addHandler(ch)

    return logger


def set_log_level(log_level: LogLevel):
    """이미 생성된 모든 ``fastmediator.*`` 로거의 레벨을 바꿉니다."""
    level = _level(log_level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
            if isinstance(logger, logging.Logger):
                logger.setLevel(level)
