"""Configuration settings for special-char-filter"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum

from dotenv import load_dotenv


log = logging.getLogger(__name__)

load_dotenv(override=True)  # .env 파일이 시스템 환경 변수보다 우선


class ByteOrder(str, Enum):
    """Byte order for the membership export"""

    LITTLE = "little"
    BIG = "big"
    NATIVE = "native"

    @classmethod
    def from_string(cls, value: str) -> "ByteOrder":
        normalized = value.strip().lower()
        for order in cls:
            if order.value == normalized:
                return order
        log.warning("Invalid byte order %r, using default=%s", value, cls.LITTLE.value)
        return cls.LITTLE


def _get_bool(key: str, default: bool) -> bool:
    """Get bool from env ("true"/"false")"""
    return os.getenv(key, str(default)).strip().lower() == "true"


@dataclass(frozen=True)
class FilterSettings:
    """Special character filter settings"""

    # 비어 있으면 내장 emoji 테이블 사용 (파일 또는 디렉토리)
    ranges_path: str = field(
        default_factory=lambda: os.getenv("SPECIAL_CHAR_RANGES_PATH", "")
    )
    export_byteorder: ByteOrder = field(
        default_factory=lambda: ByteOrder.from_string(
            os.getenv("SPECIAL_CHAR_EXPORT_BYTEORDER", "little")
        )
    )
    warn_on_overlap: bool = field(
        default_factory=lambda: _get_bool("SPECIAL_CHAR_WARN_OVERLAP", True)
    )


@dataclass(frozen=True)
class LoggingSettings:
    """Logging settings"""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_dir: str = field(default_factory=lambda: os.getenv("LOG_DIR", "logs"))
    rotation: str = field(default_factory=lambda: os.getenv("LOG_ROTATION", "10 MB"))
    retention: str = field(default_factory=lambda: os.getenv("LOG_RETENTION", "7 days"))
    compression: str = field(default_factory=lambda: os.getenv("LOG_COMPRESSION", "gz"))
    json_logs: bool = field(default_factory=lambda: _get_bool("LOG_JSON", False))
    console_enabled: bool = field(
        default_factory=lambda: _get_bool("LOG_CONSOLE", False)
    )


@dataclass(frozen=True)
class Settings:
    """Main settings container"""

    filter: FilterSettings = field(default_factory=FilterSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (re-read env on next get_settings)"""
    global _settings
    _settings = None
