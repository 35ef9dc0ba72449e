"""Errors raised while reading record sources."""

from __future__ import annotations


class RecordSourceError(Exception):
    """Base class for failures reading a record source."""


class RecordNotFoundError(RecordSourceError, FileNotFoundError):
    """The record source path does not exist."""


class RecordParseError(RecordSourceError, ValueError):
    """The record source content is malformed."""


class RecordSourceTimeout(RecordSourceError, TimeoutError):
    """Reading the record source took longer than allowed."""
