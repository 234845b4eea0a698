"""A single HTTP request whose outcome is reported to a handler object.

The response body is collected in chunks through :meth:`HttpRequest.feed`.
When the transfer ends, :meth:`HttpRequest.done` checks the result and
calls exactly one of the handler's two methods.
"""

from __future__ import annotations

import abc

import aiohttp

MAX_RESPONSE_BODY = 8192
"""Maximum length of a response body in bytes."""

BUFFER_SIZE = 2048
"""Size of the chunks the response body is read in."""

DEFAULT_USER_AGENT = "scribbleutil"


class HttpError(RuntimeError):
    """An HTTP request failed or returned an unusable response."""


class ResponseHandler(abc.ABC):
    """Receives the outcome of an :class:`HttpRequest`."""

    @abc.abstractmethod
    def on_http_response(self, body: str) -> None:
        """The request succeeded with this response body."""

    @abc.abstractmethod
    def on_http_error(self, error: BaseException) -> None:
        """The request failed."""


class HttpRequest:
    """One HTTP request: a POST when it has a body, a GET otherwise."""

    def __init__(
        self,
        url: str,
        body: str | bytes | None = None,
        handler: ResponseHandler | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        proxy: str | None = None,
    ) -> None:
        if handler is None:
            raise ValueError("a response handler is required")
        self.url = url
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.body: bytes = body or b""
        self.handler = handler
        self.user_agent = user_agent
        self.proxy = proxy
        self._response = bytearray()
        self._finished = False

    @property
    def method(self) -> str:
        return "POST" if self.body else "GET"

    @property
    def response_body(self) -> bytes:
        """The response bytes received so far."""
        return bytes(self._response)

    @property
    def finished(self) -> bool:
        """Has the handler been told the outcome?"""
        return self._finished

    def feed(self, data: bytes) -> bool:
        """Append response data; return False once the body is too large."""
        self._response += data
        return len(self._response) <= MAX_RESPONSE_BODY

    def _check(self, status: int, error: str | None) -> None:
        if error is not None and len(self._response) > MAX_RESPONSE_BODY:
            raise HttpError("response body is too large")
        if error is not None:
            raise HttpError(f"CURL failed: {error}")
        if not 200 <= status < 300:
            raise HttpError(f"got HTTP status {status}")

    def done(self, status: int, error: str | None = None) -> None:
        """The transfer is finished: report success or failure to the handler.

        *error* describes a transfer failure, or is None if the transfer
        itself completed.  The handler is called at most once.
        """
        if self._finished:
            return
        self._finished = True
        try:
            self._check(status, error)
        except HttpError as exc:
            self.handler.on_http_error(exc)
            return
        self.handler.on_http_response(self._response.decode("utf-8", errors="replace"))

    async def send(self, session: aiohttp.ClientSession) -> None:
        """Perform the request with *session* and report the outcome."""
        headers = {"User-Agent": self.user_agent}
        kwargs = {"headers": headers, "proxy": self.proxy}
        if self.body:
            kwargs["data"] = self.body
        try:
            async with session.request(self.method, self.url, **kwargs) as response:
                status = response.status
                if status >= 400:
                    self.done(status, f"The requested URL returned error: {status}")
                    return
                async for chunk in response.content.iter_chunked(BUFFER_SIZE):
                    if not self.feed(chunk):
                        self.done(status, "Failure writing output to destination")
                        return
        except (aiohttp.ClientError, OSError) as exc:
            self.done(0, str(exc) or type(exc).__name__)
            return
        self.done(status)