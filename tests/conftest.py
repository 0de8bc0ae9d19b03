"""Pytest configuration and fixtures"""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest


# 테스트 환경에서 외부 범위 테이블 설정 영향 방지
os.environ.pop("SPECIAL_CHAR_RANGES_PATH", None)

from special_char_filter.config import settings as settings_module  # noqa: E402
from special_char_filter.infra import registry as registry_module  # noqa: E402
from special_char_filter.infra import scanner as scanner_module  # noqa: E402
from special_char_filter.infra.registry import RangeRegistry  # noqa: E402
from special_char_filter.infra.scanner import Scanner  # noqa: E402


SAMPLE_TABLE_YAML = """
version: 1
name: sample
unicode_version: "10.0"
ranges:
  - 0x00A9
  - [0x2194, 0x2199]
  - "U+1F300..U+1F321"
  - {start: 0x1F600, end: 0x1F64F}
"""


@pytest.fixture
def small_registry() -> RangeRegistry:
    """Registry over a tiny custom range list"""
    return RangeRegistry([0x00A9, (0x1F300, 0x1F321)], name="small")


@pytest.fixture
def small_scanner(small_registry: RangeRegistry) -> Scanner:
    return Scanner.from_registry(small_registry)


@pytest.fixture
def sample_table_file(tmp_path: Path) -> Path:
    """Write a sample YAML range table"""
    path = tmp_path / "sample.yml"
    path.write_text(SAMPLE_TABLE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def reset_singletons(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings/registry/scanner singletons for the test"""
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.setattr(registry_module, "_registry", None)
    monkeypatch.setattr(scanner_module, "_scanner", None)
    yield
