"""Failure outcomes of a relay call.

Each error carries the HTTP status and the text placed in the ``error``
field of the response body.
"""

from healthbot.config import INVALID_REQUEST_MESSAGE, SERVER_ERROR_MESSAGE


class RelayError(Exception):
    """Base class for every relay outcome other than a successful answer."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequest(RelayError):
    """The client body has no usable ``messages`` list."""

    status_code = 400

    def __init__(self, message: str = INVALID_REQUEST_MESSAGE):
        super().__init__(message)


class RemoteError(RelayError):
    """The provider answered with a non-success status; passed through verbatim."""

    def __init__(self, status_code: int, body: str):
        super().__init__(body, status_code=status_code)


class ServerError(RelayError):
    """Any other failure: transport errors, undecodable bodies, bugs."""

    status_code = 500

    def __init__(self, message: str = SERVER_ERROR_MESSAGE):
        super().__init__(message)
