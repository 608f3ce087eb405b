"""Record documents: YAML mapping of resource path to attributes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from RestCLI.models import Record

logger = logging.getLogger(__name__)

YES_NO: tuple[str, str] = ("yes", "no")


class RecordLoadError(Exception):
    """Raised when a record document cannot be turned into records."""


def load_records(text: str, yes_no: tuple[str, str] = YES_NO) -> list[Record]:
    """Parse a record document and return its records in document order.

    Expected shape:
        /languages/rust:
          GC: no
        /languages/rust/applications/restcli:
          category: ultility
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RecordLoadError(f"Invalid YAML: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, dict):
        raise RecordLoadError(
            f"Record document must be a mapping, got {type(data).__name__}"
        )

    records: list[Record] = []
    for path, block in data.items():
        if not isinstance(path, str):
            raise RecordLoadError(f"Record path must be a string: {path!r}")
        records.append(Record(path=path, attributes=_attributes(path, block, yes_no)))

    logger.debug("Loaded %d records", len(records))
    return records


def load_records_file(path: str | Path, yes_no: tuple[str, str] = YES_NO) -> list[Record]:
    """Read and parse a record document from disk."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordLoadError(f"Cannot read {path}: {exc}") from exc
    return load_records(text, yes_no=yes_no)


def _attributes(path: str, block: Any, yes_no: tuple[str, str]) -> dict[str, str]:
    if block is None:
        return {}
    if not isinstance(block, dict):
        raise RecordLoadError(
            f"{path}: attributes must be a mapping, got {type(block).__name__}"
        )
    attributes: dict[str, str] = {}
    for key, value in block.items():
        # YAML 1.1 reads bare `yes`/`no`/`on` keys as booleans
        name = _to_text(path, "", key, yes_no) if isinstance(key, bool) else str(key)
        attributes[name] = _to_text(path, name, value, yes_no)
    return attributes


def _to_text(path: str, key: str, value: Any, yes_no: tuple[str, str]) -> str:
    """Normalize a YAML scalar (or list of scalars) to its display string."""
    # bool before int: True is an int too
    if isinstance(value, bool):
        return yes_no[0] if value else yes_no[1]
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(_to_text(path, key, item, yes_no) for item in value)
    if isinstance(value, dict):
        raise RecordLoadError(f"{path}: nested mapping under {key!r} is not supported")
    return str(value)
