"""Exceptions for People API operations."""


class PeopleServiceError(Exception):
    """Base class for failures surfaced by the People client."""

    kind = "people_service_error"


class RequestFailed(PeopleServiceError):
    """Exception raised when the API answers with a non-success status code."""

    kind = "request_failed"

    def __init__(
        self, status_code: int, body: str, message: str = "Error during request"
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidResponseShape(PeopleServiceError):
    """Exception raised when a successful response lacks an expected field."""

    kind = "invalid_response_shape"

    def __init__(self, missing_field: str, body: str):
        super().__init__("Invalid response format!")
        self.missing_field = missing_field
        self.body = body


class MissingServerKey(PeopleServiceError):
    """Exception raised when the service document yields no routing key."""

    kind = "missing_server_key"

    def __init__(self) -> None:
        super().__init__("Missing server key")
