# orders_api/middleware/log_middleware.py

import json
import time
from dataclasses import dataclass, field
from starlette.types import ASGIApp, Message, Receive, Scope, Send


@dataclass
class RequestTrace:
    """Данные одного запроса для лога: строка запроса, время, статус, тело ответа."""
    method: str
    path: str
    started: float = field(default_factory=time.perf_counter)
    status: int | None = None
    chunks: list[bytes] = field(default_factory=list)

    @property
    def duration_ms(self) -> int:
        return int((time.perf_counter() - self.started) * 1000)

    @property
    def body(self) -> bytes:
        return b"".join(self.chunks)


# значения этих ключей в лог не попадают
SENSITIVE_KEYS = {"clientPassword", "client_password", "password", "token", "access_token"}
MASK = "***"


def mask_secrets(obj):
    """Рекурсивно заменяет значения секретных ключей на ***."""
    if isinstance(obj, dict):
        return {k: MASK if k in SENSITIVE_KEYS else mask_secrets(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [mask_secrets(x) for x in obj]
    return obj


def decode_body(body: bytes) -> str:
    """Тело запроса/ответа для лога. JSON выводится со скрытыми секретами."""
    if not body:
        return "Нет тела."
    text = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except ValueError:
        return text
    return json.dumps(mask_secrets(data), ensure_ascii=False)


async def buffer_request(receive: Receive) -> tuple[bytes, Receive]:
    """
    Читает тело запроса целиком и возвращает receive,
    который отдаст его приложению ещё раз.
    """
    chunks = []
    pending: list[Message] = []
    while True:
        message = await receive()
        if message["type"] != "http.request":
            pending.append(message)
            break
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            break
    body = b"".join(chunks)
    pending.insert(0, {"type": "http.request", "body": body, "more_body": False})

    async def replay() -> Message:
        if pending:
            return pending.pop(0)
        return await receive()

    return body, replay


class RequestLogMiddleware:
    """
    Логирует каждый HTTP-запрос и ответ:
    [Request] METHOD PATH + тело
    [Response] METHOD PATH - Status - Time - Size + тело
    """

    def __init__(self, app: ASGIApp, target: str = "http"):
        self.app = app
        self.target = target

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        log = getattr(scope["app"].state, "log", None) if "app" in scope else None
        if scope["type"] != "http" or log is None:
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        if scope.get("query_string"):
            path += "?" + scope["query_string"].decode("latin-1")
        trace = RequestTrace(method=scope["method"], path=path)

        body, receive = await buffer_request(receive)
        await log.log_info(self.target, f"[Request] {trace.method} {trace.path}", {"body": decode_body(body)})

        async def send_wrapper(message: Message):
            if message["type"] == "http.response.start":
                trace.status = message["status"]
            elif message["type"] == "http.response.body":
                trace.chunks.append(message.get("body", b""))
            await send(message)
            if message["type"] == "http.response.body" and not message.get("more_body", False):
                response_body = trace.body
                await log.log_info(
                    self.target,
                    f"[Response] {trace.method} {trace.path} - Status: {trace.status} "
                    f"- Time: {trace.duration_ms}ms - Size: {len(response_body)} bytes",
                    {"body": decode_body(response_body)},
                )

        await self.app(scope, receive, send_wrapper)
