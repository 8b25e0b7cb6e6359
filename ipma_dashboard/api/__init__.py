# ipma_dashboard/api/__init__.py
from .errors import (
    EmptyCandidateSet as EmptyCandidateSet,
    IpmaError as IpmaError,
    MissingStationDataError as MissingStationDataError,
    NoCurrentObservation as NoCurrentObservation,
    UpstreamFetchError as UpstreamFetchError,
    UpstreamSchemaError as UpstreamSchemaError,
)
from .geo import haversine_km as haversine_km, nearest as nearest
from .ipma_catalogs import IpmaCatalogs as IpmaCatalogs
from .ipma_models import WeatherReport as WeatherReport
from .observations import select_current as select_current
from .weather import (
    IpmaWeatherProvider as IpmaWeatherProvider,
    fetch_weather_report as fetch_weather_report,
    get_weather_for_dashboard as get_weather_for_dashboard,
)
