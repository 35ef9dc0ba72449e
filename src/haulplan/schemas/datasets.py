"""Dataset browsing schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class DatasetListResponse(BaseModel):
    status: str = "success"
    datasets: List[str]


class DatasetRowsResponse(BaseModel):
    status: str = "success"
    dataset: str
    normalized: bool
    rowCount: int
    columns: List[str]
    rows: List[dict[str, str]]
