# -*- coding: utf-8 -*-
"""HTTP 传输层 — 客户端只依赖 request(method, url, data) 这一个原语

默认实现基于 aiohttp；测试可注入任意满足 HttpTransport 的替身。
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

import aiohttp

from .config import ZhConvertConfig

logger = logging.getLogger(__name__)


@dataclass
class ResponseInfo:
    """一次 HTTP 调用的结果；status / body 可能缺失"""
    status: Optional[int] = None
    body: Optional[bytes] = None


class HttpTransport(Protocol):

    async def request(self, method: str, url: str,
                      data: Optional[Dict] = None) -> ResponseInfo:
        ...


def encode_form(data: Dict) -> Dict[str, str]:
    """把参数值转成表单字符串: True → 'true'，3 → '3'"""
    form = {}
    for key, value in data.items():
        if isinstance(value, bool):
            form[key] = 'true' if value else 'false'
        else:
            form[key] = str(value)
    return form


class AiohttpTransport:
    """aiohttp 实现。

    传入 session 时复用且不负责关闭；否则每次请求临时创建一个 ClientSession。
    """

    def __init__(self, config: Optional[ZhConvertConfig] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        self.config = config or ZhConvertConfig()
        self._session = session

    async def request(self, method: str, url: str,
                      data: Optional[Dict] = None) -> ResponseInfo:
        form = encode_form(data) if data is not None else None
        if self._session is not None:
            return await self._send(self._session, method, url, form)

        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await self._send(session, method, url, form)

    async def _send(self, session, method, url, form):
        logger.debug("%s %s", method, url)
        headers = {'User-Agent': self.config.user_agent}
        async with session.request(method, url, data=form,
                                   headers=headers) as resp:
            body = await resp.read()
            logger.debug("%s %s → %s (%d 字节)", method, url,
                         resp.status, len(body))
            return ResponseInfo(status=resp.status, body=body)
