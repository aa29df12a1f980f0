"""HTTP(S) validation source."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import InputError
from .base import SourceItem

logger = logging.getLogger(__name__)


def http_session() -> requests.Session:
    s = requests.Session()
    retries = Retry(
        total=3,
        backoff_factor=0.6,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


def normalize_document_url(url: str) -> str:
    normalized = (url or "").strip()
    if not normalized:
        raise InputError("Document URL is required")
    if not normalized.startswith(("http://", "https://")):
        normalized = f"https://{normalized}"
    return normalized


class UrlSource:
    def __init__(
        self,
        urls: Iterable[str],
        *,
        timeout: int = 20,
        session: requests.Session | None = None,
    ) -> None:
        self.urls = [normalize_document_url(url) for url in urls]
        self.timeout = timeout
        self._session = session

    def _fetch(self, session: requests.Session, url: str) -> SourceItem:
        try:
            response = session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = getattr(exc.response, "status_code", None)
            raise InputError(f"Cannot fetch {url}: HTTP {status}", file_id=url) from exc
        except requests.RequestException as exc:
            raise InputError(f"Cannot fetch {url}: {exc}", file_id=url) from exc
        logger.debug("Fetched %s (%d bytes)", url, len(response.content))
        return SourceItem(file_id=url, content=response.text)

    def __iter__(self) -> Iterator[SourceItem]:
        session = self._session or http_session()
        try:
            for url in self.urls:
                yield self._fetch(session, url)
        finally:
            if self._session is None:
                session.close()


__all__ = ["UrlSource", "http_session", "normalize_document_url"]
