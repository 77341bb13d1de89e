from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EmptyExtremesPolicy = Literal["sentinel", "raise"]
ModeTieBreak = Literal["first", "lowest"]


@dataclass(frozen=True)
class SeriesConfig:
    """
    Behavioural switches for ``DataSeries`` statistics.

    Defaults reproduce the historical behaviour of the series.

    Parameters
    ----------
    empty_extremes : {'sentinel', 'raise'}, default 'sentinel'
        What ``min()`` / ``max()`` do on an empty series:
        - 'sentinel' : return the largest (for min) or smallest (for max)
          finite float instead of failing
        - 'raise'    : raise ``InsufficientDataError`` like the other
          statistics
    mode_tie_break : {'first', 'lowest'}, default 'first'
        How ``mode()`` picks among values sharing the top frequency:
        - 'first'  : the value whose first occurrence comes earliest
        - 'lowest' : the smallest numeric value
    """
    empty_extremes: EmptyExtremesPolicy = "sentinel"
    mode_tie_break: ModeTieBreak = "first"


DEFAULT_CONFIG = SeriesConfig()
