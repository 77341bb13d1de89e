# Mlearning/datatools/series.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from .coercion import Value, convert, normalize_value, resolve_type, same_value, to_numeric, type_of
from .config import DEFAULT_CONFIG, SeriesConfig
from .exceptions import InsufficientDataError, ModeNotFoundError
from .shape import DataShape

logger = logging.getLogger(__name__)

_FLOAT_MAX = float(np.finfo(np.float64).max)
_FLOAT_MIN = float(np.finfo(np.float64).min)


class DataSeries:
    """
    Ordered, labelled, mutable sequence of heterogeneously typed values.

    Elements are ints, floats, bools or strs (see ``coercion.TypeTag``).
    A series may hold any mix of them; ``is_numerical()`` and
    ``is_categorical()`` tell the caller what the content is. Numeric
    operations do not pre-validate: each element is coerced through
    ``coercion.to_numeric`` in turn and the first non-numeric one raises
    ``NotNumericalError``.

    Statistics are recomputed from scratch on every call; nothing is cached.

    Equality is containment in one direction only: ``a == b`` holds when
    every element of ``a`` is present in ``b`` (so ``a == b`` does not imply
    ``b == a``). Membership compares type tags as well as values, so ``1``,
    ``1.0`` and ``True`` are different elements.

    The series is not thread-safe. Serialize access externally when sharing
    an instance across threads.

    Parameters
    ----------
    values : iterable, optional
        Initial elements, in order.
    label : str, default ''
        Descriptive name of the series.
    config : SeriesConfig, optional
        Behavioural switches for the empty-series extremes and the mode
        tie-break. Derived series inherit it.
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        values: Optional[Iterable[Value]] = None,
        label: str = "",
        config: Optional[SeriesConfig] = None,
    ) -> None:
        self._values: List[Value] = []
        self.label = label
        self.config = config or DEFAULT_CONFIG
        if values is not None:
            self.extend(values)

    # ------------------------------------------------------------------
    # Alternate constructors / interop
    # ------------------------------------------------------------------
    @classmethod
    def from_literals(
        cls,
        tokens: Iterable[str],
        label: str = "",
        config: Optional[SeriesConfig] = None,
    ) -> "DataSeries":
        """Build a series from raw text fields, typing each one with ``resolve_type``."""
        values = [convert(token, resolve_type(token)) for token in tokens]
        logger.debug("Parsed %d literals into DataSeries %r.", len(values), label)
        return cls(values, label=label, config=config)

    @classmethod
    def from_pandas(
        cls,
        series: pd.Series,
        label: Optional[str] = None,
        config: Optional[SeriesConfig] = None,
    ) -> "DataSeries":
        """
        Build a series from a ``pandas.Series``.

        The label defaults to the pandas name. Missing values (``None``) are
        not a supported element type; drop or fill them first.
        """
        if label is None:
            label = "" if series.name is None else str(series.name)
        values = series.tolist()
        logger.debug("Converted pandas Series of length %d into DataSeries %r.", len(values), label)
        return cls(values, label=label, config=config)

    def to_pandas(self) -> pd.Series:
        """Return a ``pandas.Series`` named after the label (numeric dtype when numerical)."""
        dtype = None if self._values and self.is_numerical() else object
        return pd.Series(list(self._values), name=self.label, dtype=dtype)

    def to_list(self) -> List[Value]:
        return list(self._values)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, label: str) -> None:
        if not isinstance(label, str):
            raise TypeError(f"label must be a str, got {type(label).__name__}.")
        self._label = label

    @property
    def shape(self) -> DataShape:
        return DataShape(rows=len(self._values), columns=1)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Value:
        return self._values[index]

    def __contains__(self, value: Any) -> bool:
        return any(same_value(element, value) for element in self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataSeries):
            return NotImplemented
        return all(element in other for element in self._values)

    def __repr__(self) -> str:
        return f"DataSeries(label={self.label!r}, values={self._values!r})"

    def append(self, value: Value) -> None:
        self._values.append(normalize_value(value))

    def extend(self, values: Iterable[Value]) -> None:
        self._values.extend([normalize_value(v) for v in values])

    def remove(self, value: Value) -> None:
        """Remove the first element equal to ``value`` (type tags must match)."""
        for i, element in enumerate(self._values):
            if same_value(element, value):
                del self._values[i]
                return
        raise ValueError(f"{value!r} not in DataSeries {self.label!r}.")

    def pop(self, index: int = -1) -> Value:
        return self._values.pop(index)

    def clear(self) -> None:
        self._values.clear()

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def is_categorical(self) -> bool:
        """True when every element is text or boolean (vacuously true when empty)."""
        return all(type_of(v) in ("str", "bool") for v in self._values)

    def is_numerical(self) -> bool:
        """True when every element is an integer or a real (vacuously true when empty)."""
        return all(type_of(v) in ("int", "float") for v in self._values)

    # ------------------------------------------------------------------
    # Aggregate statistics
    # ------------------------------------------------------------------
    def _numeric_values(self) -> List[float]:
        return [to_numeric(v) for v in self._values]

    def _sorted_numeric(self) -> np.ndarray:
        return np.sort(np.asarray(self._numeric_values(), dtype=float))

    def sum(self) -> float:
        total = 0.0
        for value in self._values:
            total += to_numeric(value)
        return total

    def count(self) -> int:
        return len(self._values)

    def mean(self) -> float:
        if not self._values:
            raise InsufficientDataError("Cannot calculate mean of an empty DataSeries.")
        return self.sum() / self.count()

    def median(self) -> float:
        """
        Middle value of the ascending-sorted data.

        For an even count, the average of the elements at positions
        ``n // 2 - 1`` and ``n // 2``.
        """
        if not self._values:
            raise InsufficientDataError("Cannot find median in an empty DataSeries.")

        values = self._sorted_numeric()
        size = len(values)
        middle = size // 2

        if size % 2 != 0:
            return float(values[middle])
        return float((values[middle] + values[middle - 1]) / 2.0)

    def mode(self) -> float:
        """
        Most frequent numeric value.

        Ties are broken per ``config.mode_tie_break``: by default the value
        whose first occurrence comes earliest wins.
        """
        if not self._values:
            raise InsufficientDataError("Cannot find mode in an empty DataSeries.")

        counter = self.frequencies()
        if not counter:
            raise ModeNotFoundError("No mode found in the DataSeries.")

        top = max(counter.values())
        tied = [key for key, frequency in counter.items() if frequency == top]
        if self.config.mode_tie_break == "lowest":
            return min(tied)
        return tied[0]

    def min(self) -> float:
        """
        Smallest value.

        An empty series returns the largest finite float unless
        ``config.empty_extremes == 'raise'``.
        """
        if not self._values and self.config.empty_extremes == "raise":
            raise InsufficientDataError("Cannot find minimum of an empty DataSeries.")

        min_value = _FLOAT_MAX
        for element in self._values:
            value = to_numeric(element)
            if value < min_value:
                min_value = value
        return min_value

    def max(self) -> float:
        """
        Largest value.

        An empty series returns the most negative finite float unless
        ``config.empty_extremes == 'raise'``.
        """
        if not self._values and self.config.empty_extremes == "raise":
            raise InsufficientDataError("Cannot find maximum of an empty DataSeries.")

        max_value = _FLOAT_MIN
        for element in self._values:
            value = to_numeric(element)
            if value > max_value:
                max_value = value
        return max_value

    def range(self) -> float:
        """
        ``abs(max - min)``.

        Raises ``InsufficientDataError`` whenever the minimum or the maximum
        is exactly zero.
        """
        max_value = self.max()
        min_value = self.min()

        if min_value == 0 or max_value == 0:
            raise InsufficientDataError("Insufficient data for calculation!")

        return abs(max_value - min_value)

    def _quartile(self, quarters: int, name: str) -> float:
        # Positional estimator: index = floor(size * quarters / 4).
        # Even sizes average the elements at index - 1 and index.
        values = self._sorted_numeric()
        size = len(values)
        if size == 0:
            raise InsufficientDataError(
                f"Insufficient data for {name} calculation. DataSeries is empty."
            )

        index = size * quarters // 4
        if size % 2 == 0:
            if index == 0:
                raise InsufficientDataError(
                    f"Insufficient data for {name} calculation. "
                    f"DataSeries has only {size} elements."
                )
            return float((values[index - 1] + values[index]) / 2)
        return float(values[index])

    def first_quartile(self) -> float:
        return self._quartile(1, "first quartile")

    def third_quartile(self) -> float:
        return self._quartile(3, "third quartile")

    def variance(self) -> float:
        """Population variance: ``sum((x - mean) ** 2) / count``."""
        mean = self.mean()
        total = 0.0
        for element in self._values:
            total += (to_numeric(element) - mean) ** 2
        return total / self.count()

    def standard_deviation(self) -> float:
        return float(np.sqrt(self.variance()))

    def frequencies(self) -> Dict[float, int]:
        """Occurrence count per numeric value, keyed in first-occurrence order."""
        counter: Dict[float, int] = {}
        for element in self._values:
            value = to_numeric(element)
            counter[value] = counter.get(value, 0) + 1
        return counter

    def covariance(self, other: "DataSeries") -> float:
        """
        ``sum((x_i - mean(x)) * (y_i - mean(x))) / count(x)`` over this
        series' positions.

        Both deviations are taken from this series' mean. Because the
        deviations of ``x`` sum to zero, the result equals the textbook
        covariance up to rounding.

        Raises ``IndexError`` when ``other`` is shorter than this series.
        """
        mean_this = self.mean()
        total = 0.0
        for i, element in enumerate(self._values):
            if i >= len(other):
                raise IndexError(
                    f"DataSeries {other.label!r} has {len(other)} elements; "
                    f"covariance needs at least {self.count()}."
                )
            value_this = to_numeric(element)
            value_other = to_numeric(other[i])
            total += (value_this - mean_this) * (value_other - mean_this)
        return total / self.count()

    def correlation(self, other: "DataSeries") -> float:
        """
        ``covariance(other) / (std(self) * std(other))``.

        When either standard deviation is zero the IEEE result is returned
        (``nan`` or ``inf``) instead of raising.
        """
        covariance = self.covariance(other)
        denominator = self.standard_deviation() * other.standard_deviation()
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(covariance) / np.float64(denominator))

    def describe(self) -> pd.Series:
        """
        Summary statistics as a ``pandas.Series`` named after the label.

        ``25%`` is ``nan`` when the first quartile has no position (two
        elements). Every other failure propagates.
        """
        mean = self.mean()
        if self.count() == 2:
            first_quartile = np.nan
        else:
            first_quartile = self.first_quartile()
        return pd.Series(
            {
                "count": float(self.count()),
                "mean": mean,
                "std": self.standard_deviation(),
                "min": self.min(),
                "25%": first_quartile,
                "50%": self.median(),
                "75%": self.third_quartile(),
                "max": self.max(),
            },
            name=self.label,
            dtype="float64",
        )

    # ------------------------------------------------------------------
    # Data wrangling
    # ------------------------------------------------------------------
    def code_values(self, mapping: Mapping[Any, Value]) -> None:
        """
        Replace every element in place with ``mapping[element]``.

        Raises ``KeyError`` if an element has no entry; the series is left
        untouched in that case.
        """
        coded: List[Value] = []
        for element in self._values:
            if element not in mapping:
                raise KeyError(f"No code for value {element!r} in DataSeries {self.label!r}.")
            coded.append(normalize_value(mapping[element]))
        self._values = coded
        logger.debug("Coded %d values of DataSeries %r.", len(coded), self.label)

    def unique(self) -> "DataSeries":
        """
        Distinct values in first-occurrence order, same label.

        Quadratic: each value is checked against the accumulated result.
        """
        unq = DataSeries(label=self.label, config=self.config)
        for element in self._values:
            if element not in unq:
                unq.append(element)
        return unq

    def indices_where(self, predicate: Callable[[Value], bool]) -> List[int]:
        return [i for i, element in enumerate(self._values) if predicate(element)]

    def auto_coding(self) -> Dict[Value, int]:
        """
        Sequential integer codes (from 0) for each value of ``unique()``.

        Values that Python hashes together (``1``, ``1.0``, ``True``) share
        the code of the first one seen.
        """
        mapping: Dict[Value, int] = {}
        for value in self.unique():
            if value not in mapping:
                mapping[value] = len(mapping)
        logger.debug("Auto-coded %d distinct values of DataSeries %r.", len(mapping), self.label)
        return mapping

    def get_all(self, indices: Sequence[int]) -> "DataSeries":
        """Elements at ``indices`` (in that order, repeats allowed), same label."""
        size = len(self._values)
        series = DataSeries(label=self.label, config=self.config)
        for index in indices:
            if not 0 <= index < size:
                raise IndexError(
                    f"Index {index} out of range for DataSeries {self.label!r} of length {size}."
                )
            series.append(self._values[index])
        return series

    def sorted(self) -> "DataSeries":
        """New, unlabelled series ordered ascending by numeric value (stable)."""
        return DataSeries(sorted(self._values, key=to_numeric), config=self.config)
