"""Tests for range table loader."""

import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from special_char_filter.exceptions import ErrorCode, RangeTableLoadError
from special_char_filter.infra.range_loader import (
    RangeTableLoader,
    load_range_table,
    load_ranges,
)
from special_char_filter.models.ranges import CodepointRange, RangeTable


@pytest.fixture
def temp_ranges_dir() -> Iterator[Path]:
    """Create a temporary directory with range table files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        tmppath = Path(tmpdir)

        # emoji.yml
        (tmppath / "emoji.yml").write_text(
            """
version: 1
name: emoji
unicode_version: "10.0"
ranges:
  - 0x00A9
  - [0x1F300, 0x1F321]
""",
            encoding="utf-8",
        )

        # arrows.yaml (리스트만 있는 형식)
        (tmppath / "arrows.yaml").write_text(
            """
- "U+2194..U+2199"
- 0x21A9
""",
            encoding="utf-8",
        )

        # broken.yml (잘못된 범위)
        (tmppath / "broken.yml").write_text(
            """
ranges:
  - [0x2199, 0x2194]
""",
            encoding="utf-8",
        )

        # notes.txt (yaml 아님)
        (tmppath / "notes.txt").write_text("not yaml", encoding="utf-8")

        yield tmppath


class TestLoadRangeTable:
    """Tests for load_range_table function."""

    def test_load_mapping(self, sample_table_file: Path) -> None:
        table = load_range_table(sample_table_file)

        assert isinstance(table, RangeTable)
        assert table.name == "sample"
        assert table.unicode_version == "10.0"
        assert table.ranges[0] == CodepointRange(start=0xA9, end=0xA9)
        assert table.ranges[1] == CodepointRange(start=0x2194, end=0x2199)
        assert table.ranges[2] == CodepointRange(start=0x1F300, end=0x1F321)
        assert table.ranges[3] == CodepointRange(start=0x1F600, end=0x1F64F)

    def test_load_list_uses_file_stem(self, temp_ranges_dir: Path) -> None:
        table = load_range_table(temp_ranges_dir / "arrows.yaml")

        assert table.name == "arrows"
        assert len(table.ranges) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RangeTableLoadError) as exc_info:
            load_range_table(tmp_path / "nope.yml")
        assert exc_info.value.error_code == ErrorCode.RANGE_TABLE_LOAD_ERROR

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("ranges: [0x1, 0x2", encoding="utf-8")

        with pytest.raises(RangeTableLoadError):
            load_range_table(path)

    def test_scalar_document(self, tmp_path: Path) -> None:
        path = tmp_path / "scalar.yml"
        path.write_text("42", encoding="utf-8")

        with pytest.raises(RangeTableLoadError):
            load_range_table(path)

    def test_invalid_range(self, temp_ranges_dir: Path) -> None:
        with pytest.raises(RangeTableLoadError) as exc_info:
            load_range_table(temp_ranges_dir / "broken.yml")
        assert exc_info.value.context.details is not None
        assert exc_info.value.context.details["path"].endswith("broken.yml")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        table = load_range_table(path)
        assert table.name == "empty"
        assert table.ranges == []


class TestRangeTableLoader:
    """Tests for RangeTableLoader class."""

    def test_load_from_directory_skips_broken(self, temp_ranges_dir: Path) -> None:
        tables = RangeTableLoader(temp_ranges_dir).load_from_directory()

        names = sorted(t.name for t in tables)
        assert names == ["arrows", "emoji"]

    def test_custom_patterns(self, temp_ranges_dir: Path) -> None:
        tables = RangeTableLoader(temp_ranges_dir).load_from_directory(["*.yaml"])

        assert [t.name for t in tables] == ["arrows"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert RangeTableLoader(tmp_path).load_from_directory() == []


class TestLoadRanges:
    """Tests for load_ranges function."""

    def test_single_file(self, sample_table_file: Path) -> None:
        ranges = load_ranges(sample_table_file)
        assert len(ranges) == 4

    def test_directory_merges_tables(self, temp_ranges_dir: Path) -> None:
        ranges = load_ranges(temp_ranges_dir)

        starts = {r.start for r in ranges}
        assert starts == {0xA9, 0x1F300, 0x2194, 0x21A9}

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(RangeTableLoadError):
            load_ranges(tmp_path / "missing")
