from __future__ import annotations

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class DescriptiveStatistics(Protocol):
    """
    Descriptive-statistics surface shared by series-like containers.

    Every numeric method raises ``NotNumericalError`` as soon as it meets an
    element that is not an integer or a real.
    """

    def is_categorical(self) -> bool: ...

    def is_numerical(self) -> bool: ...

    def sum(self) -> float: ...

    def count(self) -> int: ...

    def mean(self) -> float: ...

    def median(self) -> float: ...

    def mode(self) -> float: ...

    def min(self) -> float: ...

    def max(self) -> float: ...

    def range(self) -> float: ...

    def first_quartile(self) -> float: ...

    def third_quartile(self) -> float: ...

    def variance(self) -> float: ...

    def standard_deviation(self) -> float: ...

    def frequencies(self) -> Dict[float, int]: ...

    def covariance(self, other: "DescriptiveStatistics") -> float: ...

    def correlation(self, other: "DescriptiveStatistics") -> float: ...
