from __future__ import annotations
# API Endpoints
DATAHUB_BASE_URL = "https://data.hub.api.metoffice.gov.uk/sitespecific/v0/point"

# Fixed query flags sent with every point forecast request
DATA_SOURCE = "BD1"
FIXED_QUERY_PARAMS = (
    ("dataSource", DATA_SOURCE),
    ("excludeParameterMetadata", "true"),
    ("includeLocationName", "true"),
)

# Request header carrying the DataHub key
API_KEY_HEADER = "apikey"

# Model run and time series timestamps, e.g. "2023-07-05T10:00Z" (always UTC)
DATAHUB_TIME_FORMAT = "%Y-%m-%dT%H:%MZ"

# Geographic bounds (decimal degrees)
LATITUDE_BOUNDS = (-90.0, 90.0)
LONGITUDE_BOUNDS = (-180.0, 180.0)

__all__ = [
    "DATAHUB_BASE_URL",
    "DATA_SOURCE",
    "FIXED_QUERY_PARAMS",
    "API_KEY_HEADER",
    "DATAHUB_TIME_FORMAT",
    "LATITUDE_BOUNDS",
    "LONGITUDE_BOUNDS",
]
