import asyncio
import logging

import requests

from rainman.settings import DEFAULT_REQUEST_TIMEOUT_SECONDS

LOGGER = logging.getLogger("rainman.http")


class RequestsTransport:
    """Async GET over a requests session; the blocking call runs on a worker thread."""

    def __init__(self, session: requests.Session | None = None, timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS):
        self.session = session or requests.Session()
        self.timeout_seconds = float(timeout_seconds)

    async def get(self, url: str):
        response = await asyncio.to_thread(self.session.get, url, timeout=self.timeout_seconds)
        LOGGER.debug("HTTP GET completed with status %s.", response.status_code)
        return response

    def close(self) -> None:
        self.session.close()
