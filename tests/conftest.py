import json

import pytest

from core.zhconvert import ResponseInfo, ZhConverter, ZhConvertConfig


class FakeTransport:
    """Records every request and replays a canned response or error."""

    def __init__(self, status=200, body=b'{"data":{"text":""}}', error=None):
        self.status = status
        self.body = body
        self.error = error
        self.calls = []

    async def request(self, method, url, data=None):
        self.calls.append((method, url, data))
        if self.error is not None:
            raise self.error
        return ResponseInfo(status=self.status, body=self.body)


def envelope(text):
    return json.dumps({"code": 0, "data": {"text": text}}, ensure_ascii=False).encode("utf-8")


@pytest.fixture
def make_client():
    def _make(**kwargs):
        transport = FakeTransport(**kwargs)
        config = ZhConvertConfig(base_url="https://zh.example")
        return ZhConverter(transport=transport, config=config), transport

    return _make
