from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DataShape:
    """Number of rows and columns of a data structure."""
    rows: int
    columns: int
