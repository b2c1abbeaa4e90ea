# -*- coding: utf-8 -*-
"""繁化姬客户端的错误类型

传输层异常 (aiohttp.ClientError、asyncio.TimeoutError) 不在此列，原样向上抛出。
"""


class ConvertError(Exception):
    """转换失败的基类"""


class HttpCodeError(ConvertError):
    """HTTP 状态码不是 200"""

    def __init__(self, code: int):
        super().__init__(f"HTTP 状态码异常: {code}")
        self.code = code


class MalformedResponseError(ConvertError):
    """响应不是预期的 JSON 结构"""

    def __init__(self, detail: str = ''):
        msg = "响应 JSON 格式不符"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.detail = detail


class UnknownResponseError(ConvertError):
    """响应缺少状态码或内容"""

    def __init__(self, msg: str = "未知错误: 响应缺少状态码或内容"):
        super().__init__(msg)
