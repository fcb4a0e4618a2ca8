from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import pandas as pd


LINE = "line"
BARS = "bars"
VARIANTS = (LINE, BARS)

PALETTE_SIZE = 6
DEFAULT_BOUNDS = (0.0, 10.0, 0.0, 10.0)


@dataclass(frozen=True)
class Bounds:
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x(self) -> Tuple[float, float]:
        return (self.x_min, self.x_max)

    @property
    def y(self) -> Tuple[float, float]:
        return (self.y_min, self.y_max)


@dataclass(frozen=True)
class Bar:
    label: str
    value: int
    color_index: int


class ChartSeries:
    """
    An ordered, immutable set of two-column records.
    Subclasses decide the column names and what gets derived for drawing.
    """

    variant = ""
    columns: Tuple[str, str] = ("", "")

    def __init__(self, df: pd.DataFrame | None = None):
        if df is None:
            df = pd.DataFrame({c: [] for c in self.columns})
        self._df = df.reset_index(drop=True)

    @classmethod
    def from_records(cls, records):
        rows = list(records)
        df = pd.DataFrame(rows, columns=list(cls.columns))
        return cls(cls._coerce(df))

    @classmethod
    def _coerce(cls, df: pd.DataFrame) -> pd.DataFrame:
        return df

    @property
    def df(self) -> pd.DataFrame:
        return self._df

    def records(self) -> List[tuple]:
        key_col, val_col = self.columns
        return list(zip(self._df[key_col].tolist(), self._df[val_col].tolist()))

    def is_empty(self) -> bool:
        return len(self._df) == 0

    def __len__(self):
        return len(self._df)

    def __eq__(self, other):
        if not isinstance(other, ChartSeries):
            return NotImplemented
        return self.variant == other.variant and self.records() == other.records()

    def __repr__(self):
        return f"{type(self).__name__}({self.records()!r})"


class LineSeries(ChartSeries):
    variant = LINE
    columns = ("x", "y")

    @classmethod
    def _coerce(cls, df):
        return df.astype({"x": "float64", "y": "float64"})

    def points(self) -> List[Tuple[float, float]]:
        return self.records()

    def bounds(self) -> Bounds:
        if self.is_empty():
            return Bounds(*DEFAULT_BOUNDS)
        x = self._df["x"]
        y = self._df["y"]
        return Bounds(
            float(x.min()), float(x.max()), float(y.min()), float(y.max())
        )


class CategorySeries(ChartSeries):
    variant = BARS
    columns = ("label", "value")

    @classmethod
    def _coerce(cls, df):
        return df.astype({"label": "object", "value": "int64"})

    def color_indices(self) -> List[int]:
        return (np.arange(len(self._df)) % PALETTE_SIZE).tolist()

    def bars(self) -> List[Bar]:
        return [
            Bar(str(label), int(value), color)
            for (label, value), color in zip(self.records(), self.color_indices())
        ]

    def max_value(self) -> int:
        if self.is_empty():
            return 0
        return int(self._df["value"].max())


_SERIES_BY_VARIANT = {LINE: LineSeries, BARS: CategorySeries}


def series_class(variant: str):
    try:
        return _SERIES_BY_VARIANT[variant]
    except KeyError:
        raise ValueError(
            f"Unknown chart variant '{variant}' (use {' or '.join(VARIANTS)})"
        ) from None


def empty_series(variant: str) -> ChartSeries:
    return series_class(variant)()


def series_from_records(variant: str, records) -> ChartSeries:
    return series_class(variant).from_records(records)
