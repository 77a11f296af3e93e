"""TripPin People API client.

All HTTP traffic for the People resource goes through ``PeopleClient``. Mutating
calls first resolve the deployment's routing key from the service document via
``ServerKeyResolver``; the key is looked up again on every call.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import unquote_plus

import aiohttp

from trippin.base import BasePeopleClient
from trippin.config import ApiConfig
from trippin.exceptions import (
    InvalidResponseShape,
    MissingServerKey,
    PeopleServiceError,
    RequestFailed,
)
from trippin.models import Person

logger = logging.getLogger(__name__)

PEOPLE_ENDPOINT = "People"
ODATA_CONTEXT_FIELD = "@odata.context"


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


def people_entity_path(user_name: str) -> str:
    """Build the entity path for a single person.

    The user name is placed inside the quoted key segment verbatim. Embedded
    quotes are not escaped, so the request reaches the server exactly as typed.
    """
    return f"{PEOPLE_ENDPOINT}('{user_name}')"


def derive_server_key(context: str, base_url: str) -> str:
    """Extract the routing key from an ``@odata.context`` URL.

    ``https://host/Service/(S(abc))/$metadata#People`` with base URL
    ``https://host/Service/`` yields ``(S(abc))``.
    """
    return context.removeprefix(base_url).split("/")[0]


def _decode_object(body: str) -> Dict[str, Any]:
    payload = json.loads(body)
    return payload if isinstance(payload, dict) else {}


class ServerKeyResolver:
    """Reads the API root's service document to find the mutation path prefix."""

    def __init__(self, config: ApiConfig, session: aiohttp.ClientSession):
        self.config = config
        self.session = session

    async def resolve(self) -> str:
        """Fetch the service document and return the routing key."""
        base_url = self.config.api_base_url

        async with self.session.request(method="GET", url=base_url) as response:
            body = await response.text()
            if not is_success_status(response.status):
                logger.error(
                    f"Unable to retrieve server key. Status code: {response.status}, "
                    f"message: {body}",
                    extra={"status_code": response.status, "response": body},
                )
                raise RequestFailed(
                    response.status, body, "Unable to retrieve server key"
                )

        context = _decode_object(body).get(ODATA_CONTEXT_FIELD)
        if not isinstance(context, str):
            context = ""

        key = derive_server_key(context, base_url)
        if not key:
            raise MissingServerKey()
        return key


class PeopleClient(BasePeopleClient):
    """Client for the OData People resource."""

    def __init__(
        self, config: ApiConfig, session: Optional[aiohttp.ClientSession] = None
    ):
        self.config = config
        self.session = session
        self._owns_session = False

    async def __aenter__(self) -> "PeopleClient":
        """Async context manager entry."""
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None
            self._owns_session = False

    def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active session."""
        if not self.session:
            self.session = aiohttp.ClientSession()
            self._owns_session = True
        return self.session

    async def _send_request(
        self,
        method: str,
        endpoint: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Send a request to ``{base_url}{endpoint}`` and return the response text."""
        session = self._ensure_session()

        # Base URL is expected to carry its own trailing slash
        url = f"{self.config.api_base_url}{endpoint}"

        request_kwargs: Dict[str, Any] = {}
        if body is not None:
            request_kwargs["json"] = body

        async with session.request(
            method=method, url=url, **request_kwargs
        ) as response:
            message = await response.text()
            if not is_success_status(response.status):
                logger.error(
                    f"Error response received, status code: {response.status}, "
                    f"message: {message}",
                    extra={"status_code": response.status, "response": message},
                )
                raise RequestFailed(response.status, message)
            return message

    async def search(self, filter: Optional[str] = None) -> List[Person]:
        """Search people, optionally narrowed by an OData ``$filter`` expression."""
        endpoint = PEOPLE_ENDPOINT
        if filter:
            endpoint += f"?$filter={unquote_plus(filter)}"

        try:
            message = await self._send_request("GET", endpoint)
            payload = _decode_object(message)
            if "value" not in payload:
                logger.error(
                    f"Invalid response format: {message}", extra={"response": message}
                )
                raise InvalidResponseShape("value", message)

            return [Person.model_validate(item) for item in payload["value"]]
        except PeopleServiceError:
            raise
        except Exception:
            logger.exception("Unhandled exception while searching people")
            raise

    async def get_by_user_name(self, user_name: str) -> Person:
        """Get a single person by user name."""
        if not user_name:
            raise ValueError("user_name must not be empty")

        try:
            message = await self._send_request("GET", people_entity_path(user_name))
            if "UserName" not in _decode_object(message):
                logger.error(
                    f"Invalid response format: {message}", extra={"response": message}
                )
                raise InvalidResponseShape("UserName", message)

            return Person.model_validate_json(message)
        except PeopleServiceError:
            raise
        except Exception:
            logger.exception(f"Unhandled exception while fetching person {user_name}")
            raise

    async def update_user_field(
        self, user_name: str, fields: Mapping[str, str]
    ) -> bool:
        """Patch the given fields of a person.

        Field names are sent as given; the server decides which ones it accepts.
        """
        if not user_name:
            raise ValueError("user_name must not be empty")
        if not fields:
            raise ValueError("fields must contain at least one entry")

        try:
            resolver = ServerKeyResolver(self.config, self._ensure_session())
            key = await resolver.resolve()
            await self._send_request(
                "PATCH", f"{key}/{people_entity_path(user_name)}", dict(fields)
            )
            return True
        except PeopleServiceError:
            raise
        except Exception:
            logger.exception(f"Unhandled exception while updating person {user_name}")
            raise
