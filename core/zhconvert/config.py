# -*- coding: utf-8 -*-
"""客户端配置 — API 地址、超时、User-Agent"""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = 'https://api.zhconvert.org'
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = 'QtCoder-zhconvert/1.0'

# 端点路径
SERVICE_INFO = '/service-info'
CONVERT = '/convert'


@dataclass
class ZhConvertConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT     # 秒，整个请求的总超时
    user_agent: str = DEFAULT_USER_AGENT

    def url(self, endpoint: str) -> str:
        return self.base_url.rstrip('/') + endpoint

    @classmethod
    def from_env(cls, environ=None) -> 'ZhConvertConfig':
        """从环境变量读取: ZHCONVERT_BASE_URL / ZHCONVERT_TIMEOUT"""
        env = os.environ if environ is None else environ
        config = cls()

        base_url = env.get('ZHCONVERT_BASE_URL', '').strip()
        if base_url:
            config.base_url = base_url

        timeout = env.get('ZHCONVERT_TIMEOUT', '').strip()
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError:
                raise ValueError(
                    f"ZHCONVERT_TIMEOUT 不是有效数字: {timeout}") from None
            if config.timeout <= 0:
                raise ValueError(f"ZHCONVERT_TIMEOUT 必须大于 0: {timeout}")
        return config
