"""HTTP client for catalog pages and CSV bodies."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import requests

from dascraper.common.constants import USER_AGENT
from dascraper.common.errors import StageError


@dataclass(frozen=True)
class TimeoutConfig:
    connect: float = 20.0
    read: float = 120.0


class HttpRequestError(StageError):
    error_code = "HTTP_ERROR"


class HttpClient:
    """Thin wrapper over a ``requests`` session.

    Every request is attempted once; a transport failure or an HTTP status
    of 400 and above raises ``HttpRequestError``. Bodies served without a
    charset are decoded as UTF-8.
    """

    def __init__(self, *, timeout: TimeoutConfig | None = None) -> None:
        self.timeout = timeout or TimeoutConfig()
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        out = {"User-Agent": USER_AGENT, "Accept": "text/html,text/csv,*/*;q=0.8"}
        if headers:
            out.update(headers)
        return out

    def _raise_for_status(self, url: str, response: requests.Response) -> None:
        if response.status_code >= 400:
            raise HttpRequestError(f"HTTP status {response.status_code} from {url}")

    def get_text(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: TimeoutConfig | None = None,
    ) -> str:
        req_timeout = timeout or self.timeout
        try:
            response = self.session.request(
                method="GET",
                url=url,
                headers=self._headers(headers),
                timeout=(req_timeout.connect, req_timeout.read),
            )
        except requests.RequestException as exc:
            raise HttpRequestError(f"Request to {url} failed: {exc}") from exc

        self._raise_for_status(url, response)
        # Without a declared charset requests falls back to ISO-8859-1 for text/*.
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text
