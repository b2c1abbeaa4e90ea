# -*- coding: utf-8 -*-
"""繁化姬 (zhconvert.org) 客户端 — 两岸三地用语转换

    client = ZhConverter()
    text = await client.convert_text("软件", ConverterType.TAIWAN)

客户端本身无可变状态，同一个实例可被多个协程并发使用。
每次调用只发一次请求，不重试；成功返回结果，失败抛出异常。
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional

from .config import CONVERT, SERVICE_INFO, ZhConvertConfig
from .errors import HttpCodeError, MalformedResponseError, UnknownResponseError
from .options import (
    ConverterType, DifferentType, JapaneseConversionStrategy, ReplaceType,
    TextType, build_parameters,
)
from .transport import AiohttpTransport, HttpTransport, ResponseInfo

logger = logging.getLogger(__name__)


def parse_http_result(info: ResponseInfo) -> bytes:
    """检查状态码与内容，返回原始响应体"""
    if info is None or info.status is None or info.body is None:
        raise UnknownResponseError()
    if info.status != 200:
        logger.warning("繁化姬返回 HTTP %s", info.status)
        raise HttpCodeError(info.status)
    return info.body


def _load_object(body: bytes) -> Dict[str, Any]:
    try:
        obj = json.loads(body)
    except (ValueError, TypeError) as e:
        raise MalformedResponseError(f"无法解析 JSON ({e})") from e
    if not isinstance(obj, dict):
        raise MalformedResponseError("顶层不是对象")
    return obj


def extract_text(body: bytes) -> str:
    """从 {"data": {"text": "..."}} 中取出转换结果"""
    data = _load_object(body).get('data')
    if not isinstance(data, dict):
        raise MalformedResponseError("缺少 data 对象")
    text = data.get('text')
    if not isinstance(text, str):
        raise MalformedResponseError("缺少 data.text 字符串")
    return text


class ZhConverter:

    def __init__(self, transport: Optional[HttpTransport] = None,
                 config: Optional[ZhConvertConfig] = None):
        self.config = config or ZhConvertConfig()
        self.transport = transport or AiohttpTransport(self.config)

    async def service_info(self) -> bytes:
        """GET /service-info，返回原始响应体"""
        info = await self.transport.request('GET', self.config.url(SERVICE_INFO))
        return parse_http_result(info)

    async def service_info_json(self) -> Dict[str, Any]:
        """service_info() 的解析版，返回 data 对象"""
        data = _load_object(await self.service_info()).get('data')
        if not isinstance(data, dict):
            raise MalformedResponseError("缺少 data 对象")
        return data

    async def convert(self, text: str, converter_type: ConverterType,
                      replaces: Optional[Iterable[ReplaceType]] = None,
                      differents: Optional[Iterable[DifferentType]] = None,
                      texts: Optional[Iterable[TextType]] = None,
                      strategies: Optional[Iterable[JapaneseConversionStrategy]] = None,
                      ) -> bytes:
        """POST /convert，返回完整的原始响应（含比对、诊断等信息）"""
        params = build_parameters(text, converter_type, replaces=replaces,
                                  differents=differents, texts=texts,
                                  strategies=strategies)
        logger.debug("convert: %s", sorted(params))
        info = await self.transport.request(
            'POST', self.config.url(CONVERT), params)
        return parse_http_result(info)

    async def convert_text(self, text: str, converter_type: ConverterType,
                           replaces: Optional[Iterable[ReplaceType]] = None,
                           differents: Optional[Iterable[DifferentType]] = None,
                           texts: Optional[Iterable[TextType]] = None,
                           strategies: Optional[Iterable[JapaneseConversionStrategy]] = None,
                           ) -> str:
        """转换并只返回 data.text"""
        body = await self.convert(text, converter_type, replaces=replaces,
                                  differents=differents, texts=texts,
                                  strategies=strategies)
        try:
            return extract_text(body)
        except MalformedResponseError as e:
            logger.warning("繁化姬响应格式异常: %s", e)
            raise
