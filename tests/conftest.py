"""Shared test fixtures and utilities for trippin tests.

The aiohttp session is replaced by a ``Mock`` whose ``request`` method returns
async context managers, one per queued response.
"""

import json
from typing import Any, Callable, List, Tuple
from unittest.mock import AsyncMock, Mock

import pytest

from trippin.config import ApiConfig

BASE_URL = "https://fakeUrl/"


def make_response(status: int = 200, body: Any = "") -> Mock:
    """Create a mock aiohttp response; dict and list bodies are JSON-encoded."""
    response = Mock()
    response.status = status
    text = body if isinstance(body, str) else json.dumps(body)
    response.text = AsyncMock(return_value=text)
    return response


def make_request_context(response: Mock) -> AsyncMock:
    """Wrap a response in an async context manager like ``session.request``."""
    context = AsyncMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=None)
    return context


def queue_responses(session: Mock, *responses: Mock) -> None:
    """Make successive ``session.request`` calls return the given responses."""
    session.request = Mock(
        side_effect=[make_request_context(response) for response in responses]
    )


def requested_urls(session: Mock) -> List[str]:
    return [call.kwargs["url"] for call in session.request.call_args_list]


@pytest.fixture
def api_config() -> ApiConfig:
    """Provide an API config pointing at a fake host."""
    return ApiConfig(api_base_url=BASE_URL)


@pytest.fixture
def mock_session() -> Mock:
    """Provide a session mock with no queued responses."""
    session = Mock()
    session.request = Mock()
    return session


@pytest.fixture
def respond(mock_session: Mock) -> Callable[..., Mock]:
    """Queue ``(status, body)`` pairs on the session and return the session."""

    def _respond(*replies: Tuple[int, Any]) -> Mock:
        queue_responses(
            mock_session, *(make_response(status, body) for status, body in replies)
        )
        return mock_session

    return _respond


@pytest.fixture
def urls() -> Callable[[Mock], List[str]]:
    """Provide a helper returning the URLs requested on a session mock."""
    return requested_urls
