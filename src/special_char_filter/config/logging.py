"""Logging configuration using loguru.

라이브러리 모듈은 표준 logging만 사용하고,
호스트 애플리케이션이 setup_logging()을 호출하면 loguru로 통합.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from special_char_filter.config.settings import get_settings


if TYPE_CHECKING:
    from loguru import Logger


log = logger.bind(name=__name__)


# 기본 로그 디렉토리 (현재 작업 디렉토리 기준)
DEFAULT_LOG_DIR = Path("logs")

# loguru 포맷 (공백 최소화)
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>|"
    "<level>{level:5}</level>|"
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>|"
    "<level>{message}</level>"
)

LOG_FORMAT_FILE = "{time:YYYY-MM-DD HH:mm:ss.SSS}|{level:5}|{extra[name]}|{message}"

LOG_FILE_NAME = "special-char-filter.log"
LOG_FILE_NAME_TEST = "special-char-filter-test.log"


@dataclass
class FileLogOptions:
    rotation: str = "10 MB"
    retention: str = "7 days"
    compression: str = "gz"
    json_logs: bool = False
    file_name: str | None = None


class InterceptHandler(logging.Handler):
    """표준 logging을 loguru로 리다이렉트하는 핸들러."""

    def emit(self, record: logging.LogRecord) -> None:
        # loguru level 매핑
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(name=record.name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    log_dir: Path | str | None = None,
    log_level: str | None = None,
    *,
    file_options: FileLogOptions | None = None,
) -> None:
    """로깅 설정 초기화.

    Args:
        log_dir: 로그 디렉토리 경로 (None이면 설정값 또는 기본값 사용)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        file_options: 파일 로깅 옵션 (회전/보관/압축/JSON/파일명)
    """
    settings = get_settings()
    options = file_options or FileLogOptions(
        rotation=settings.logging.rotation,
        retention=settings.logging.retention,
        compression=settings.logging.compression,
        json_logs=settings.logging.json_logs,
    )
    # 로그 레벨 정규화 (loguru는 대문자 필요)
    effective_level = (log_level or settings.logging.level).upper()

    log_path = (
        Path(log_dir or settings.logging.log_dir)
        if (log_dir or settings.logging.log_dir)
        else DEFAULT_LOG_DIR
    )
    log_path.mkdir(parents=True, exist_ok=True)

    # 기존 핸들러 제거
    logger.remove()

    # 기본 extra 값 설정 (root 표기 방지)
    logger.configure(extra={"name": "special-char-filter"})

    # 로그 파일 이름 결정 (테스트 시 분리)
    target_log_file = options.file_name or LOG_FILE_NAME
    if os.getenv("PYTEST_CURRENT_TEST") and options.file_name is None:
        target_log_file = LOG_FILE_NAME_TEST

    if settings.logging.console_enabled:
        logger.add(
            sys.stderr,
            format=LOG_FORMAT,
            level=effective_level,
            colorize=True,
            enqueue=True,
        )

    # 단일 파일 핸들러
    logger.add(
        log_path / target_log_file,
        format=LOG_FORMAT_FILE,
        level=effective_level,
        rotation=options.rotation,
        retention=options.retention,
        compression=options.compression,
        enqueue=True,  # 비동기, thread-safe
        serialize=options.json_logs,
    )

    # 표준 logging 라이브러리 인터셉트
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    log.info(
        "Logging initialized: dir={}, level={}, rotation={}, retention={}",
        log_path,
        effective_level,
        options.rotation,
        options.retention,
    )


def get_logger(name: str) -> "Logger":
    """모듈별 로거 반환.

    Args:
        name: 모듈 이름 (보통 __name__)

    Returns:
        loguru logger with bound name
    """
    return logger.bind(name=name)
