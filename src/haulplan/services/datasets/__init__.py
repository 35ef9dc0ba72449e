"""Dataset browsing helpers."""

from .service import UnknownDatasetError, dataset_path, list_datasets, load_dataset

__all__ = ["UnknownDatasetError", "dataset_path", "list_datasets", "load_dataset"]
