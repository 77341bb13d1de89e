# Mlearning/__init__.py

# -------------------------
# Data tools layer
# -------------------------
from .datatools import (
    DataSeries,
    DataShape,
    DescriptiveStatistics,
    SeriesConfig,
)
from .datatools.coercion import convert, resolve_type, to_numeric
from .datatools.exceptions import (
    InsufficientDataError,
    ModeNotFoundError,
    NotNumericalError,
)

__all__ = [
    # series
    "DataSeries",
    "DataShape",
    "DescriptiveStatistics",
    "SeriesConfig",
    # coercion
    "convert",
    "resolve_type",
    "to_numeric",
    # errors
    "InsufficientDataError",
    "ModeNotFoundError",
    "NotNumericalError",
]
