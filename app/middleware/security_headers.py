"""Security headers middleware for the JSON API.

Responses never render HTML, so the content policy denies everything.
HSTS is only sent when enabled (deployments behind TLS). Raw ASGI; headers
already set by a route are left untouched.
"""

from typing import Callable

API_SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}
HSTS_HEADER = ("Strict-Transport-Security", "max-age=31536000; includeSubDomains")


def _encode_headers(hsts: bool) -> list[tuple[bytes, bytes]]:
    pairs = list(API_SECURITY_HEADERS.items())
    if hsts:
        pairs.append(HSTS_HEADER)
    return [(name.lower().encode(), value.encode()) for name, value in pairs]


def SecurityHeadersMiddleware(app: Callable, hsts: bool = False) -> Callable:
    """Append API security headers to every HTTP response."""
    extra_headers = _encode_headers(hsts)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                headers.extend(h for h in extra_headers if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
