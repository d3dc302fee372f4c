"""
Notifer Errors

Exception hierarchy for the dispatch engine.

Configuration problems (CredentialNotFound, ExpansionError, CompositionError)
always reach the host. Delivery problems (TransportError) are fatal only when
the step is configured with fail_on_error.
"""

from typing import Optional


class NotiferError(Exception):
    """Base class for all Notifer errors."""


class CredentialNotFound(NotiferError):
    """Raised when a credential id does not resolve to a usable secret."""

    def __init__(self, credential_id: str, reason: str = "no matching credential"):
        super().__init__(f"Could not retrieve token from credentials '{credential_id}': {reason}")
        self.credential_id = credential_id
        self.reason = reason


class CompositionError(NotiferError):
    """Raised when an explicit priority cannot be interpreted at all."""


class ExpansionError(NotiferError):
    """Raised in strict mode when placeholders reference unknown variables."""

    def __init__(self, names):
        self.names = list(names)
        super().__init__(f"Unresolved variables: {', '.join(self.names)}")


class TransportError(NotiferError):
    """Delivery to the Notifer API failed."""

    status_code: Optional[int] = None
    body: Optional[str] = None


class HTTPStatusError(TransportError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Notifer API returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class NetworkError(TransportError):
    """The request never got an HTTP answer (DNS, refused connection, timeout)."""

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out


class DispatchError(NotiferError):
    """
    Fatal delivery failure surfaced to the host under fail_on_error.

    Wraps the originating TransportError (also available as __cause__).
    """

    def __init__(self, message: str, transport_error: TransportError):
        super().__init__(message)
        self.transport_error = transport_error

    @property
    def status_code(self) -> Optional[int]:
        return self.transport_error.status_code

    @property
    def body(self) -> Optional[str]:
        return self.transport_error.body
