#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
机场签到配置

环境变量配置说明（适用于青龙面板）：
- USER_EMAIL       ：账号邮箱（账密模式必填，Cookie 模式仅用于显示）
- USER_PASSWORD    ：账号密码（账密模式必填）
- USER_TOKEN       ：已登录的 Token（Cookie 模式必填）
- USER_COOKIE      ：浏览器 Cookie（Cookie 模式必填）
- PUSHPLUS_TOKEN   ：PushPlus 推送 Token，可选
- AIRPORT_BASE_URL ：机场地址，默认 https://flzt.top
- AIRPORT_TIMEOUT  ：请求超时（秒），默认 10
"""

import os
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

PROFILE_PASSWORD = "password"
PROFILE_COOKIE = "cookie"

DEFAULT_BASE_URL = "https://flzt.top"
DEFAULT_TIMEOUT = 10

# 各模式必填的环境变量
REQUIRED_ENV = {
    PROFILE_PASSWORD: ("USER_EMAIL", "USER_PASSWORD"),
    PROFILE_COOKIE: ("USER_TOKEN", "USER_COOKIE"),
}


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class AirportConfig:
    """机场签到配置类"""
    profile: str
    email: str = ""
    password: str = ""
    token: str = ""
    cookie: str = ""
    pushplus_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT

    @property
    def account(self) -> str:
        """通知中显示的账号"""
        return self.email or "未知"

    @classmethod
    def from_env(cls, profile: str = PROFILE_PASSWORD,
                 environ: Optional[Mapping[str, str]] = None) -> 'AirportConfig':
        """从环境变量加载配置"""
        if environ is None:
            environ = os.environ
        if profile not in REQUIRED_ENV:
            raise ConfigurationError(f"未知的签到模式: {profile}")

        values: Dict[str, str] = {
            name: environ.get(name, "").strip()
            for name in ("USER_EMAIL", "USER_PASSWORD", "USER_TOKEN", "USER_COOKIE", "PUSHPLUS_TOKEN")
        }

        missing: List[str] = [name for name in REQUIRED_ENV[profile] if not values[name]]
        if missing:
            raise ConfigurationError("缺少环境变量: " + ", ".join(missing))

        base_url = environ.get("AIRPORT_BASE_URL", "").strip().rstrip("/") or DEFAULT_BASE_URL

        raw_timeout = environ.get("AIRPORT_TIMEOUT", "").strip()
        try:
            timeout = int(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"AIRPORT_TIMEOUT 必须是整数: {raw_timeout}")
        if timeout <= 0:
            raise ConfigurationError("AIRPORT_TIMEOUT 必须大于 0")

        config = cls(
            profile=profile,
            email=values["USER_EMAIL"],
            password=values["USER_PASSWORD"],
            token=values["USER_TOKEN"],
            cookie=values["USER_COOKIE"],
            pushplus_token=values["PUSHPLUS_TOKEN"],
            base_url=base_url,
            timeout=timeout,
        )
        logger.debug(f"配置加载完成: 模式={profile}, 地址={base_url}, 超时={timeout}s, "
                     f"推送={'已配置' if config.pushplus_token else '未配置'}")
        return config
