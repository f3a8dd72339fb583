from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List

import pandas as pd


def format_label(day: date) -> str:
    """MM/DD chart label; carries no year."""
    return day.strftime("%m/%d")


@dataclass(frozen=True)
class LayoutConfig:
    """URL segment and precipitation column for one report table arrangement."""
    url_type: str
    precip_col: int


class Layout(Enum):
    """The two ETRN daily report layouts (observatory vs. AMeDAS)."""
    PRIMARY = LayoutConfig(url_type="s1", precip_col=3)
    AUXILIARY = LayoutConfig(url_type="a1", precip_col=1)

    @property
    def url_type(self) -> str:
        return self.value.url_type

    @property
    def precip_col(self) -> int:
        return self.value.precip_col

    @classmethod
    def from_url_type(cls, url_type: str) -> "Layout":
        for layout in cls:
            if layout.url_type == url_type:
                return layout
        raise ValueError(f"Unknown report layout: {url_type}")


class HighlightState(Enum):
    NONE = "none"
    BELOW_3_DAY = "below_3_day"
    BELOW_30_DAY = "below_30_day"
    BELOW_BOTH = "below_both"


@dataclass(frozen=True)
class Station:
    """Represents a single observation point on the upstream service."""
    id: str
    region_code: str
    display_name: str
    layout: Layout


@dataclass(frozen=True)
class MonthKey:
    year: int
    month: int
    region_code: str
    station_id: str

    @property
    def cache_key(self) -> str:
        return f"{self.year}-{self.month}-{self.region_code}-{self.station_id}"


@dataclass(frozen=True)
class DailyValue:
    day: date
    amount: float

    @property
    def label(self) -> str:
        return format_label(self.day)


@dataclass
class AggregateResult:
    """Chronological precipitation window ending at base_date, with trailing totals."""
    base_date: date
    total3: float
    total30: float
    series: List[DailyValue] = field(default_factory=list)

    @property
    def labels(self) -> List[str]:
        return [v.label for v in self.series]

    @property
    def data(self) -> List[float]:
        return [v.amount for v in self.series]

    def to_payload(self, station: Station, locations: Dict[str, Dict]) -> Dict:
        return {
            "location": station.display_name,
            "base_date": self.base_date.isoformat(),
            "total_3_days": self.total3,
            "total_30_days": self.total30,
            "labels": self.labels,
            "data": self.data,
            "locations": locations,
        }

    def to_frame(self) -> pd.DataFrame:
        """Series as a DataFrame for charting; one row per day, oldest first."""
        return pd.DataFrame({
            "date": pd.to_datetime([v.day for v in self.series]),
            "label": self.labels,
            "precipitation_mm": self.data,
        })
