"""Errors raised while locating or loading the ACL specification."""

from __future__ import annotations

from pathlib import Path


class SpecificationError(Exception):
    """Base exception for specification delivery failures."""


class DocumentNotFoundError(SpecificationError):
    """No ancestor of the start directory contains the specification file."""

    def __init__(self, filename: str, start_dir: Path) -> None:
        super().__init__(f"{filename} not found in directory tree above {start_dir}")
        self.filename = filename
        self.start_dir = start_dir


class DocumentReadError(SpecificationError):
    """The specification file was found but could not be read as text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
