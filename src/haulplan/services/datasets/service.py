"""Bounded reads of the processed datasets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ...config import settings
from ...data.roads_repository import read_records
from ...models.domain import RecordTable

logger = logging.getLogger(__name__)


class UnknownDatasetError(ValueError):
    """Requested dataset is not part of the configured catalog."""


def list_datasets() -> list[str]:
    return list(settings.datasets)


def dataset_path(name: str, *, normalized: bool = False, root: Optional[Path] = None) -> Path:
    if name not in settings.datasets:
        raise UnknownDatasetError(f"Unknown dataset: {name}")
    suffix = "_normalized_processed.csv" if normalized else "_processed.csv"
    return (root or settings.data_root) / f"{name}{suffix}"


async def load_dataset(
    name: str,
    *,
    normalized: bool = False,
    limit: Optional[int] = None,
    root: Optional[Path] = None,
) -> RecordTable:
    path = dataset_path(name, normalized=normalized, root=root)
    table = await read_records(
        path,
        limit or settings.dataset_default_limit,
        timeout=settings.read_timeout_seconds,
    )
    logger.debug("Dataset %s: returning %d rows", path.name, len(table.rows))
    return table
