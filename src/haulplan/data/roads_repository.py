"""Data access helpers for loading road-condition records."""

from __future__ import annotations

import asyncio
import csv
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence

from ..models.domain import RecordTable
from .errors import RecordNotFoundError, RecordParseError, RecordSourceError, RecordSourceTimeout

logger = logging.getLogger(__name__)

TIMESTAMP_FIELDS: tuple[str, ...] = ("date", "timestamp", "day")

_FALLBACK_TIMESTAMP_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
)


def _read_csv(path: Path, max_rows: Optional[int]) -> RecordTable:
    rows: list[dict[str, str]] = []
    consumed = 0
    try:
        with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
            reader = csv.DictReader(handle, strict=True)
            for row in reader:
                consumed += 1
                if None in row or any(value is None for value in row.values()):
                    raise RecordParseError(
                        f"Row {reader.line_num} in '{path}' does not match the header "
                        f"({len(reader.fieldnames or [])} columns expected)."
                    )
                # Keep consuming past the cap so the whole source is read.
                if not max_rows or len(rows) < max_rows:
                    rows.append(row)
    except csv.Error as exc:
        raise RecordParseError(f"Malformed CSV in '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RecordParseError(f"Unable to decode '{path}' as UTF-8: {exc}") from exc
    except OSError as exc:
        raise RecordSourceError(f"Unable to open record source '{path}': {exc}") from exc

    columns = list(rows[0].keys()) if rows else []
    return RecordTable(columns=columns, rows=rows, consumed=consumed)


async def read_records(
    path: Path,
    max_rows: Optional[int] = None,
    *,
    timeout: Optional[float] = None,
) -> RecordTable:
    """Read a header-delimited CSV file into column-keyed rows.

    At most ``max_rows`` rows are retained (``None`` or ``0`` keeps all of
    them) but the file is always read to the end before the coroutine
    returns. Parsing runs in a worker thread.
    """

    path = Path(path)
    if not path.exists():
        raise RecordNotFoundError(f"Record source not found: {path}")

    try:
        table = await asyncio.wait_for(asyncio.to_thread(_read_csv, path, max_rows), timeout)
    except asyncio.TimeoutError as exc:
        raise RecordSourceTimeout(f"Reading '{path}' exceeded {timeout}s") from exc

    logger.debug("Read %d of %d rows from %s", len(table.rows), table.consumed, path)
    return table


def _parse_datetime(value: str) -> Optional[datetime]:
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _FALLBACK_TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_timestamp(record: Mapping[str, Optional[str]], fields: Sequence[str] = TIMESTAMP_FIELDS) -> float:
    """Return the record's timestamp in epoch milliseconds, or 0 when unavailable.

    Only the first non-empty candidate field is considered.
    """

    raw = next((record[name] for name in fields if record.get(name)), None)
    if raw is None:
        return 0.0
    parsed = _parse_datetime(str(raw))
    if parsed is None:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp() * 1000.0


def _is_newer_or_equal(candidate_ts: float, current_ts: float) -> bool:
    return candidate_ts >= current_ts


def pick_latest_by_key(rows: Iterable[Mapping[str, str]], key: str = "road_id") -> list[Mapping[str, str]]:
    """Keep the most recent record per ``key`` value.

    Records without a value for ``key`` are dropped. When two records share
    a timestamp the one appearing later in ``rows`` wins. Results follow the
    order in which each key was first seen.
    """

    latest: dict[str, tuple[float, Mapping[str, str]]] = {}
    for row in rows:
        identifier = row.get(key)
        if not identifier:
            continue
        ts = parse_timestamp(row)
        current = latest.get(identifier)
        if current is None or _is_newer_or_equal(ts, current[0]):
            latest[identifier] = (ts, row)
    return [row for _, row in latest.values()]
