import asyncio
import logging

import pytest

from storefront.middleware import RequestTimeoutMiddleware

SCOPE = {"type": "http", "method": "GET", "path": "/public/big.bin", "headers": []}


async def receive():
    return {"type": "http.request", "body": b"", "more_body": False}


def run(app, timeout):
    sent = []

    async def send(message):
        sent.append(message)

    middleware = RequestTimeoutMiddleware(app, timeout=timeout)
    asyncio.run(middleware(dict(SCOPE), receive, send))
    return sent


def test_slow_app_gets_gateway_timeout(caplog):
    async def slow_app(scope, receive, send):
        await asyncio.sleep(1)

    with caplog.at_level(logging.WARNING, logger="storefront.middleware.timeout"):
        sent = run(slow_app, timeout=0.05)

    assert sent[0]["type"] == "http.response.start"
    assert sent[0]["status"] == 504
    assert b"Gateway Timeout" in sent[1]["body"]
    assert "timed out" in caplog.text


def test_timeout_after_response_started_is_logged_and_raised(caplog):
    async def streaming_app(scope, receive, send):
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"partial", "more_body": True})
        await asyncio.sleep(1)

    with caplog.at_level(logging.WARNING, logger="storefront.middleware.timeout"):
        with pytest.raises(asyncio.TimeoutError):
            run(streaming_app, timeout=0.05)

    assert "response already started" in caplog.text
    assert "/public/big.bin" in caplog.text


def test_fast_app_is_untouched():
    async def fast_app(scope, receive, send):
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"ok"})

    sent = run(fast_app, timeout=1.0)

    assert [m.get("status") for m in sent] == [200, None]
    assert sent[1]["body"] == b"ok"
