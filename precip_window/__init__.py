from .api import ApiError, query_panels, query_precipitation
from .data.processing import aggregate, classify
from .models import AggregateResult, HighlightState, Layout, Station
from .stations import UnknownStation, lookup_station
