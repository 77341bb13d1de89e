# Mlearning/datatools/__init__.py
from .coercion import TypeTag, Value, convert, resolve_type, to_numeric, type_of
from .config import SeriesConfig
from .exceptions import InsufficientDataError, ModeNotFoundError, NotNumericalError
from .series import DataSeries
from .shape import DataShape
from .statistics import DescriptiveStatistics

__all__ = [
    # coercion
    "TypeTag",
    "Value",
    "convert",
    "resolve_type",
    "to_numeric",
    "type_of",
    # series
    "DataSeries",
    "DataShape",
    "DescriptiveStatistics",
    "SeriesConfig",
    # errors
    "InsufficientDataError",
    "ModeNotFoundError",
    "NotNumericalError",
]
