from typing import Protocol

from fastapi.responses import JSONResponse, PlainTextResponse, Response


Body = str | list[str]


class ResponseChannel(Protocol):
    def send(self, body: Body) -> None: ...


class BufferedResponse:
    """Collects the single body a handler sends and turns it into a FastAPI response."""

    def __init__(self):
        self._body: Body | None = None
        self._sent = False

    @property
    def sent(self) -> bool:
        return self._sent

    @property
    def body(self) -> Body | None:
        return self._body

    def send(self, body: Body) -> None:
        if self._sent:
            raise RuntimeError("Response body has already been sent.")
        self._body = body
        self._sent = True

    def to_response(self) -> Response:
        if not self._sent:
            raise RuntimeError("Handler finished without sending a response.")
        if isinstance(self._body, str):
            return PlainTextResponse(self._body)
        return JSONResponse(self._body)
