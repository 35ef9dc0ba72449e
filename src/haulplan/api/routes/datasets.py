"""Processed dataset endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...data.errors import RecordSourceError
from ...schemas.datasets import DatasetListResponse, DatasetRowsResponse
from ...services.datasets import UnknownDatasetError, list_datasets, load_dataset

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ml/datasets", tags=["datasets"])


@router.get("", response_model=DatasetListResponse, status_code=status.HTTP_200_OK)
def get_datasets() -> DatasetListResponse:
    return DatasetListResponse(datasets=list_datasets())


@router.get("/{name}", response_model=DatasetRowsResponse, status_code=status.HTTP_200_OK)
async def get_dataset(
    name: str,
    normalized: bool = Query(default=False, description="Read the normalized variant of the dataset"),
    limit: int | None = Query(default=None, ge=1, le=10_000, description="Maximum number of rows returned"),
) -> DatasetRowsResponse:
    try:
        table = await load_dataset(name, normalized=normalized, limit=limit)
    except UnknownDatasetError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except RecordSourceError as exc:
        logger.exception("Error reading dataset %s: %s", name, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read dataset",
        ) from exc

    return DatasetRowsResponse(
        dataset=name,
        normalized=normalized,
        rowCount=len(table.rows),
        columns=table.columns,
        rows=table.rows,
    )
