import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol

import requests
from typing_extensions import Self

from .constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    USER_AGENT,
)
from .exceptions import NetworkException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)


class HttpClient(Protocol):
    """Transport the license client talks through."""

    def get(self, path: str) -> HttpResponse:
        ...

    def post(self, path: str, data: dict) -> HttpResponse:
        ...


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"

    def request(self, session: requests.Session) -> Callable[..., requests.Response]:
        method_map = {HttpMethod.GET: session.get, HttpMethod.POST: session.post}

        return method_map[self]


class RequestsHttpClient:
    """
    `HttpClient` backed by a `requests.Session`.

    HTTP error statuses are returned as regular responses; only transport
    failures (DNS, refused connections, timeouts, TLS) raise, as
    `NetworkException`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self._session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        return {
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_USER_AGENT: USER_AGENT,
        }

    def _make_request(
        self, method: HttpMethod, path: str, data: Optional[dict] = None
    ) -> HttpResponse:
        url = self._url(path)
        kwargs: dict[str, Any] = {
            "headers": self._headers(),
            "timeout": (self.connect_timeout, self.timeout),
        }
        if data is not None:
            kwargs["json"] = data

        logger.debug("%s %s", method.value, url)
        try:
            response = method.request(self._session)(url, **kwargs)
        except requests.RequestException as err:
            raise NetworkException(
                f"Request to {url} failed: {err}", error_details={"url": url}
            ) from err

        logger.debug("%s %s -> %s", method.value, url, response.status_code)
        return HttpResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    def get(self, path: str) -> HttpResponse:
        return self._make_request(HttpMethod.GET, path)

    def post(self, path: str, data: dict) -> HttpResponse:
        return self._make_request(HttpMethod.POST, path, data=data)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
