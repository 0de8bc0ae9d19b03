"""Range table loader (YAML)"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from special_char_filter.exceptions import RangeConfigError, RangeTableLoadError
from special_char_filter.models.ranges import CodepointRange, RangeTable


log = logging.getLogger(__name__)

DEFAULT_PATTERNS = ["*.yml", "*.yaml"]


class RangeTableLoader:
    """Load range tables from YAML files"""

    def __init__(self, ranges_dir: str | Path) -> None:
        self._dir = Path(ranges_dir)

    def load_from_directory(self, patterns: list[str] | None = None) -> list[RangeTable]:
        """Load range tables matching patterns from directory

        Broken files are logged and skipped.

        Args:
            patterns: Glob patterns to match (default: ["*.yml", "*.yaml"])
        """
        if patterns is None:
            patterns = DEFAULT_PATTERNS

        tables = []
        for pattern in patterns:
            for path in sorted(self._dir.glob(pattern)):
                try:
                    table = load_range_table(path)
                except RangeConfigError as e:
                    log.error("Failed to load range table %s: %s", path, e)
                    continue
                tables.append(table)
                log.info(
                    "Loaded range table: %s (%d ranges, %d codepoints)",
                    path.name,
                    len(table.ranges),
                    table.codepoint_count,
                )

        return tables


def load_range_table(path: str | Path) -> RangeTable:
    """Load a single range table file

    Raises:
        RangeTableLoadError: file unreadable, not YAML, or not a valid table
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise RangeTableLoadError(str(path), str(e)) from e

    # 최상위가 리스트면 ranges만 있는 테이블로 취급
    if isinstance(data, list):
        data = {"name": path.stem, "ranges": data}
    if not isinstance(data, dict):
        raise RangeTableLoadError(str(path), "must contain a mapping or a list")
    data.setdefault("name", path.stem)

    try:
        return RangeTable.model_validate(data)
    except ValidationError as e:
        raise RangeTableLoadError(str(path), str(e)) from e


def load_ranges(path: str | Path) -> list[CodepointRange]:
    """Load ranges from a table file, or from every table in a directory

    Raises:
        RangeTableLoadError: path missing, or a single file failed to load
    """
    path = Path(path)
    if path.is_dir():
        tables = RangeTableLoader(path).load_from_directory()
        if not tables:
            log.warning("Range tables directory is empty: %s", path)
        return [r for table in tables for r in table.ranges]
    if not path.exists():
        raise RangeTableLoadError(str(path), "path does not exist")
    return list(load_range_table(path).ranges)
