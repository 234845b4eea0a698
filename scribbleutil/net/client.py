"""An asynchronous HTTP client that runs many requests at once.

Each request added to an :class:`HttpClient` runs in its own task on
the current event loop.  Its outcome goes to the request's handler,
unless the request is cancelled first.
"""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from scribbleutil.net.request import DEFAULT_USER_AGENT, HttpRequest, ResponseHandler


class HttpClient:
    """Owns one HTTP session and the requests running on it."""

    def __init__(self, proxy: str | None = None, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self.proxy = proxy
        self.user_agent = user_agent
        self._session: aiohttp.ClientSession | None = None
        self._tasks: dict[HttpRequest, asyncio.Task[None]] = {}
        self._closed = False

    async def __aenter__(self) -> "HttpClient":
        self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        exc_type = args[0] if args else None
        if exc_type is None:
            await self.wait()
        await self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of requests that have not finished yet."""
        return len(self._tasks)

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._closed:
            raise RuntimeError("HTTP client is closed")
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    def add(
        self,
        url: str,
        body: str | bytes | None,
        handler: ResponseHandler,
    ) -> HttpRequest:
        """Start a request; a non-empty *body* makes it a POST.

        Must be called while an event loop is running.
        """
        session = self._ensure_session()
        request = HttpRequest(
            url, body, handler, user_agent=self.user_agent, proxy=self.proxy
        )
        task = asyncio.get_running_loop().create_task(request.send(session))
        self._tasks[request] = task
        task.add_done_callback(lambda _t, r=request: self._tasks.pop(r, None))
        return request

    def cancel(self, request: HttpRequest) -> None:
        """Abort a running request; its handler is not called."""
        task = self._tasks.pop(request, None)
        if task is not None:
            task.cancel()

    async def wait(self) -> None:
        """Wait until every running request has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks.values()), return_exceptions=True)

    async def close(self) -> None:
        """Cancel outstanding requests and release the session."""
        if self._closed:
            return
        self._closed = True
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        if self._session is not None:
            await self._session.close()
            self._session = None