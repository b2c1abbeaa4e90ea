import aiohttp
import pytest
from aiohttp import web
from aiohttp import test_utils

from core.zhconvert import (
    AiohttpTransport,
    ConverterType,
    DiffEnable,
    HttpCodeError,
    ZhConverter,
    ZhConvertConfig,
    encode_form,
)


def test_encode_form_formats_native_values() -> None:
    form = encode_form({"text": "软件", "diffEnable": True, "cleanUpText": False, "diffContextLines": 3})
    assert form == {"text": "软件", "diffEnable": "true", "cleanUpText": "false", "diffContextLines": "3"}


def build_app() -> web.Application:
    async def convert(request: web.Request) -> web.Response:
        form = await request.post()
        return web.json_response(
            {
                "data": {
                    "text": f"{form['converter']}|{form['text']}|{form.get('diffEnable', '')}",
                    "agent": request.headers.get("User-Agent", ""),
                }
            }
        )

    async def service_info(request: web.Request) -> web.Response:
        return web.json_response({"data": {"method": request.method}})

    async def missing(request: web.Request) -> web.Response:
        return web.Response(status=404, text="nope")

    app = web.Application()
    app.router.add_post("/convert", convert)
    app.router.add_get("/service-info", service_info)
    app.router.add_post("/gone/convert", missing)
    return app


@pytest.mark.asyncio
async def test_client_round_trip_over_http() -> None:
    async with test_utils.TestServer(build_app()) as server:
        config = ZhConvertConfig(base_url=str(server.make_url("")), user_agent="test-agent/1")
        client = ZhConverter(config=config)
        text = await client.convert_text("软件", ConverterType.TAIWAN, differents=[DiffEnable(True)])
        assert text == "Taiwan|软件|true"
        assert await client.service_info_json() == {"method": "GET"}


@pytest.mark.asyncio
async def test_user_agent_header_is_sent() -> None:
    async with test_utils.TestServer(build_app()) as server:
        config = ZhConvertConfig(base_url=str(server.make_url("")), user_agent="test-agent/1")
        transport = AiohttpTransport(config)
        info = await transport.request("POST", str(server.make_url("/convert")), {"text": "a", "converter": "China"})
        assert info.status == 200
        assert b"test-agent/1" in info.body


@pytest.mark.asyncio
async def test_http_error_status_from_server() -> None:
    async with test_utils.TestServer(build_app()) as server:
        config = ZhConvertConfig(base_url=str(server.make_url("/gone")))
        client = ZhConverter(config=config)
        with pytest.raises(HttpCodeError) as exc_info:
            await client.convert("x", ConverterType.CHINA)
        assert exc_info.value.code == 404


@pytest.mark.asyncio
async def test_shared_session_is_left_open() -> None:
    async with test_utils.TestServer(build_app()) as server:
        async with aiohttp.ClientSession() as session:
            config = ZhConvertConfig(base_url=str(server.make_url("")))
            client = ZhConverter(transport=AiohttpTransport(config, session=session), config=config)
            await client.service_info()
            await client.service_info()
            assert not session.closed


@pytest.mark.asyncio
async def test_connection_failure_is_raised_as_client_error() -> None:
    config = ZhConvertConfig(base_url="http://127.0.0.1:1", timeout=5)
    client = ZhConverter(config=config)
    with pytest.raises(aiohttp.ClientConnectionError):
        await client.convert_text("x", ConverterType.CHINA)
