"""In-process stand-in for the database REST API"""

from dataclasses import dataclass, field

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse


@dataclass
class RecordedCall:
    method: str
    path: str
    query: str
    params: dict
    body: bytes


@dataclass
class FakeFirebase:
    """
    Every request is recorded in `calls`; responses are popped from
    `returns` in order, an empty JSON body with status 200 being sent
    once it is exhausted.
    """

    calls: list[RecordedCall] = field(default_factory=list)
    returns: list[Response] = field(default_factory=list)

    def __post_init__(self):
        self.app = FastAPI()
        self.app.add_api_route(
            "/{path:path}",
            self.handle,
            methods=["GET", "PUT", "PATCH", "POST", "DELETE"],
        )

    async def handle(self, path: str, request: Request) -> Response:
        self.calls.append(
            RecordedCall(
                method=request.method,
                path=request.url.path,
                query=request.url.query,
                params=dict(request.query_params),
                body=await request.body(),
            )
        )
        if self.returns:
            return self.returns.pop(0)
        return Response(status_code=200, media_type="application/json")

    def reply(
        self,
        content=None,
        status_code: int = 200,
        auth_debug: str | None = None,
    ) -> None:
        """
        Queues a JSON response.
        """
        headers = {"X-Firebase-Auth-Debug": auth_debug} if auth_debug else None
        self.returns.append(
            JSONResponse(content, status_code=status_code, headers=headers)
        )

    def reply_text(self, text: str, status_code: int = 200) -> None:
        """
        Queues a response with a raw body.
        """
        self.returns.append(
            Response(
                content=text,
                status_code=status_code,
                media_type="application/json",
            )
        )
