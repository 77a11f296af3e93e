"""Client for the TripPin OData People API."""

from trippin.base import BasePeopleClient
from trippin.client import PeopleClient, ServerKeyResolver
from trippin.config import ApiConfig, AppConfig, get_current_config, load_default_config
from trippin.exceptions import (
    InvalidResponseShape,
    MissingServerKey,
    PeopleServiceError,
    RequestFailed,
)
from trippin.models import Person

__all__ = [
    "ApiConfig",
    "AppConfig",
    "BasePeopleClient",
    "InvalidResponseShape",
    "MissingServerKey",
    "PeopleClient",
    "PeopleServiceError",
    "Person",
    "RequestFailed",
    "ServerKeyResolver",
    "get_current_config",
    "load_default_config",
]
