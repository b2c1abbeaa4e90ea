import asyncio
import json

import aiohttp
import pytest

from conftest import envelope
from core.zhconvert import (
    CleanUpText,
    ConverterType,
    ConvertError,
    HttpCodeError,
    MalformedResponseError,
    ResponseInfo,
    UnknownResponseError,
    UserPreReplace,
    ZhConverter,
    parse_http_result,
)


def test_parse_http_result_returns_body_on_200() -> None:
    assert parse_http_result(ResponseInfo(200, b"raw")) == b"raw"


@pytest.mark.parametrize("info", [ResponseInfo(None, b"x"), ResponseInfo(200, None), ResponseInfo()])
def test_parse_http_result_missing_parts(info: ResponseInfo) -> None:
    with pytest.raises(UnknownResponseError):
        parse_http_result(info)


def test_parse_http_result_non_200_keeps_code() -> None:
    with pytest.raises(HttpCodeError) as exc_info:
        parse_http_result(ResponseInfo(503, b""))
    assert exc_info.value.code == 503
    assert isinstance(exc_info.value, ConvertError)


@pytest.mark.asyncio
async def test_convert_text_decodes_data_text(make_client) -> None:
    client, transport = make_client(body='{"data":{"text":"你好"}}'.encode("utf-8"))
    assert await client.convert_text("妳好", ConverterType.SIMPLIFIED) == "你好"
    method, url, data = transport.calls[0]
    assert method == "POST"
    assert url == "https://zh.example/convert"
    assert data == {"text": "妳好", "converter": "Simplified"}


@pytest.mark.asyncio
async def test_convert_sends_options(make_client) -> None:
    client, transport = make_client(body=envelope("x"))
    await client.convert(
        "软件",
        ConverterType.TAIWAN,
        replaces=[UserPreReplace({"A": "B"})],
        texts=[CleanUpText(True)],
    )
    _, _, data = transport.calls[0]
    assert data == {
        "text": "软件",
        "converter": "Taiwan",
        "userPreReplace": "A=B",
        "cleanUpText": True,
    }
    assert len(transport.calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("call", ["convert", "convert_text"])
async def test_http_404_fails_with_code(make_client, call: str) -> None:
    client, _ = make_client(status=404, body=b"not found")
    with pytest.raises(HttpCodeError) as exc_info:
        await getattr(client, call)("x", ConverterType.CHINA)
    assert exc_info.value.code == 404


@pytest.mark.asyncio
async def test_missing_data_text_is_malformed_but_convert_returns_raw(make_client) -> None:
    client, _ = make_client(body=b'{"foo":"bar"}')
    assert await client.convert("x", ConverterType.CHINA) == b'{"foo":"bar"}'
    with pytest.raises(MalformedResponseError):
        await client.convert_text("x", ConverterType.CHINA)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [b"not json", b"[1, 2]", b'{"data": "text"}', b'{"data": {"text": 3}}', b'{"data": {}}'],
)
async def test_malformed_envelopes(make_client, body: bytes) -> None:
    client, _ = make_client(body=body)
    with pytest.raises(MalformedResponseError):
        await client.convert_text("x", ConverterType.HONGKONG)


@pytest.mark.asyncio
@pytest.mark.parametrize("call", ["convert", "convert_text"])
async def test_transport_error_propagates_unchanged(make_client, call: str) -> None:
    error = aiohttp.ClientConnectionError("offline")
    client, _ = make_client(error=error)
    with pytest.raises(aiohttp.ClientConnectionError) as exc_info:
        await getattr(client, call)("x", ConverterType.CHINA)
    assert exc_info.value is error


@pytest.mark.asyncio
async def test_missing_status_is_unknown(make_client) -> None:
    client, _ = make_client(status=None)
    with pytest.raises(UnknownResponseError):
        await client.convert_text("x", ConverterType.CHINA)


@pytest.mark.asyncio
async def test_service_info_gets_raw_body(make_client) -> None:
    client, transport = make_client(body=b'{"data":{"version":"1.0"}}')
    assert await client.service_info() == b'{"data":{"version":"1.0"}}'
    assert transport.calls == [("GET", "https://zh.example/service-info", None)]
    assert await client.service_info_json() == {"version": "1.0"}


@pytest.mark.asyncio
async def test_service_info_json_requires_data_object(make_client) -> None:
    client, _ = make_client(body=b'{"msg":"ok"}')
    with pytest.raises(MalformedResponseError):
        await client.service_info_json()


@pytest.mark.asyncio
async def test_client_usable_after_failure(make_client) -> None:
    client, transport = make_client(status=500, body=b"")
    with pytest.raises(HttpCodeError):
        await client.convert_text("x", ConverterType.CHINA)
    transport.status = 200
    transport.body = envelope("ok")
    assert await client.convert_text("x", ConverterType.CHINA) == "ok"


class EchoTransport:
    """Answers each convert with '<converter>:<text>' after yielding to the loop."""

    async def request(self, method, url, data=None):
        await asyncio.sleep(0)
        text = f"{data['converter']}:{data['text']}"
        body = json.dumps({"data": {"text": text}}, ensure_ascii=False).encode("utf-8")
        return ResponseInfo(status=200, body=body)


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_mix() -> None:
    client = ZhConverter(transport=EchoTransport())
    results = await asyncio.gather(
        client.convert_text("软件", ConverterType.TAIWAN),
        client.convert_text("軟體", ConverterType.CHINA, replaces=[UserPreReplace({"a": "b"})]),
        client.convert_text("内存", ConverterType.HONGKONG),
    )
    assert results == ["Taiwan:软件", "China:軟體", "Hongkong:内存"]
