"""Record selection by subtree prefix and regex path filters."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from RestCLI.models import Record
from RestCLI.path_decoder import decode_path

logger = logging.getLogger(__name__)


class PatternError(Exception):
    """Raised when one or more path filter patterns are not valid regexes."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def split_patterns(raw: str) -> list[str]:
    """Split the comma-separated filter input, e.g. ``"etcd, ^/languages/go"``."""
    if not raw:
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile path filter patterns, reporting every invalid one at once."""
    compiled: list[re.Pattern[str]] = []
    errors: list[str] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as exc:
            errors.append(f"`{p}`: {exc}")
    if errors:
        raise PatternError(errors)
    return compiled


def filter_records(
    records: Iterable[Record],
    prefix: str = "/",
    patterns: Iterable[str] = (),
) -> list[Record]:
    """Keep the records at or below *prefix* whose raw path matches a pattern.

    Every record path is decoded before anything is dropped, so a document
    with a malformed path is rejected whatever the selection. Prefix
    matching works on decoded segments: ``/languages/go`` selects
    ``/languages/go/applications/etcd`` but not ``/languages/gopher``.
    Patterns are searched anywhere in the raw path; no patterns keeps all.

    Raises:
        MalformedPathError: for a malformed record path or prefix.
        PatternError: for invalid patterns.
    """
    compiled = compile_patterns(patterns)
    wanted = [] if prefix == "/" else decode_path(prefix)
    decoded = [(record, decode_path(record.path)) for record in records]

    selected = [
        record
        for record, segments in decoded
        if segments[: len(wanted)] == wanted
        and (not compiled or any(pat.search(record.path) for pat in compiled))
    ]
    logger.debug("Selected %d of %d records", len(selected), len(decoded))
    return selected
