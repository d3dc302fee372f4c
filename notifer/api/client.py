"""
Notifer API Client

Interface and implementations for publishing to a Notifer topic.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import requests
from requests.utils import quote

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from ..errors import HTTPStatusError, NetworkError, TransportError
from ..models.notification import NotificationRequest, NotificationResponse

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Topic-Token"


class NotificationTransport(ABC):
    """Abstract interface for sending a request to a topic."""

    @abstractmethod
    def send(self, topic: str, request: NotificationRequest, token: str) -> NotificationResponse:
        """
        Publish request to topic.

        Raises:
            TransportError: HTTPStatusError for non-2xx answers,
                NetworkError when no answer was received
        """
        pass


class NotiferClient(NotificationTransport):
    """
    HTTP client for the Notifer API.

    One attempt per send. Proxies from the environment (HTTP_PROXY,
    HTTPS_PROXY, NO_PROXY) are honored by requests; an explicit proxy_url
    takes precedence.

    Usage:
        client = NotiferClient(timeout=30)
        response = client.send("ci-builds", request, token)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        proxy_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize API client.

        Args:
            base_url: API root, without trailing slash
            timeout: Seconds allowed for connect and again for read
            proxy_url: Proxy for both http and https, overriding the environment
            session: Session to reuse; a fresh one is opened per send otherwise
        """
        self.base_url = base_url.rstrip("/")
        self.timeout: Tuple[float, float] = (timeout, timeout)
        self.proxies = {"http": proxy_url, "https": proxy_url} if proxy_url else None
        self._session = session

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> "NotiferClient":
        return cls(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            proxy_url=config.proxy_url,
            session=session,
        )

    def url_for(self, topic: str) -> str:
        """Topic URL; the topic is quoted as a single path segment."""
        return f"{self.base_url}/{quote(topic.strip(), safe='')}"

    def send(self, topic: str, request: NotificationRequest, token: str) -> NotificationResponse:
        url = self.url_for(topic)
        headers = {
            "Content-Type": "application/json",
            TOKEN_HEADER: token,
        }

        logger.debug("Sending notification to %s", url)

        session = self._session or requests.Session()
        try:
            response = session.post(
                url,
                json=request.to_payload(),
                headers=headers,
                timeout=self.timeout,
                proxies=self.proxies,
            )
        except requests.Timeout as e:
            logger.warning("Notifer request timed out: %s", e)
            raise NetworkError(f"timed out after {self.timeout[1]:.0f}s", timed_out=True) from e
        except requests.RequestException as e:
            logger.warning("Notifer request failed: %s", e)
            raise NetworkError(str(e)) from e
        finally:
            if self._session is None:
                session.close()

        if not 200 <= response.status_code < 300:
            logger.warning("Notifer API returned status %d", response.status_code)
            raise HTTPStatusError(response.status_code, response.text)

        return self._parse(response, request)

    def _parse(self, response: requests.Response, request: NotificationRequest) -> NotificationResponse:
        """Parse a 2xx reply. The reply is informational, so bad bodies only warn."""
        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            logger.warning("Unparseable Notifer response body (status %d)", response.status_code)
            return NotificationResponse.echo(request)

        try:
            parsed = NotificationResponse.from_dict(data)
        except (TypeError, ValueError):
            logger.warning("Unexpected Notifer response fields: %s", sorted(data))
            return NotificationResponse.echo(request)

        logger.debug("Notification sent successfully: %s", parsed)
        return parsed


class MockNotiferClient(NotificationTransport):
    """Recording transport for testing."""

    def __init__(self, response: Optional[NotificationResponse] = None, error: Optional[TransportError] = None):
        self.response = response
        self.error = error
        self.calls: List[Tuple[str, NotificationRequest, str]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def send(self, topic: str, request: NotificationRequest, token: str) -> NotificationResponse:
        self.calls.append((topic, request, token))
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return NotificationResponse(
            id=f"msg-{len(self.calls)}",
            topic=topic,
            message=request.message,
            priority=request.priority,
            tags=list(request.tags),
        )
