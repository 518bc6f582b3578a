#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
机场 API 客户端：登录获取 Token、执行签到
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

import requests

from airport_config import AirportConfig, PROFILE_COOKIE

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/144.0.0.0 Safari/537.36"
)

API_ENDPOINTS = {
    "login": "/api/v1/passport/auth/login",
    "checkin": "/api/v1/user/checkIn",
}

# 新旧两版接口的 Token 字段，按顺序取第一个存在的
TOKEN_FIELDS = ("auth_data", "token")

NON_JSON_MESSAGE = "非 JSON 响应"


class AuthenticationError(RuntimeError):
    pass


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _optional_number(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


@dataclass
class CheckInData:
    """签到奖励数据"""
    reward_mb: Optional[Union[int, float]] = None
    total_checkin_traffic: Optional[Union[int, float]] = None

    @classmethod
    def from_json(cls, payload: Any) -> 'CheckInData':
        if not isinstance(payload, dict):
            return cls()
        return cls(
            reward_mb=_optional_number(payload.get("reward_mb")),
            total_checkin_traffic=_optional_number(payload.get("total_checkin_traffic")),
        )


@dataclass
class ApiResult:
    """接口返回，所有字段都可能缺失"""
    status: Optional[str] = None
    message: Optional[str] = None
    data: Optional[CheckInData] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> 'ApiResult':
        data = payload.get("data")
        return cls(
            status=_optional_str(payload.get("status")),
            message=_optional_str(payload.get("message")),
            data=CheckInData.from_json(data) if data is not None else None,
            raw=payload,
        )


@dataclass
class CheckInResponse:
    http_ok: bool
    body: ApiResult


class AirportClient:
    """机场 API 客户端"""

    def __init__(self, config: AirportConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.urls = {
            endpoint: f"{config.base_url}{path}"
            for endpoint, path in API_ENDPOINTS.items()
        }
        self._session = session or requests.Session()

    def login(self, email: str, password: str) -> str:
        """账号密码登录，返回 Token"""
        logger.info(f"🔐 登录中: {email}...")
        response = self._session.post(
            self.urls["login"],
            headers={"Content-Type": "application/json", "User-Agent": USER_AGENT},
            json={"email": email, "password": password},
            timeout=self.config.timeout,
        )
        logger.debug(f"登录响应状态码: {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            logger.debug(f"登录响应内容: {response.text[:200]}")
            raise AuthenticationError(f"登录失败: {NON_JSON_MESSAGE}")
        if not isinstance(payload, dict):
            raise AuthenticationError(f"登录失败: {NON_JSON_MESSAGE}")

        token = self._extract_token(payload.get("data"))
        if not token:
            raise AuthenticationError(_optional_str(payload.get("message")) or "登录失败")

        logger.info("✅ 登录成功")
        return token

    @staticmethod
    def _extract_token(data: Any) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        for name in TOKEN_FIELDS:
            value = data.get(name)
            if value:
                return str(value)
        return None

    def _checkin_request(self, token: str) -> Tuple[Dict[str, str], Optional[Dict[str, int]]]:
        """按配置模式生成签到请求头和参数"""
        if self.config.profile != PROFILE_COOKIE:
            return {"authorization": token, "User-Agent": USER_AGENT}, None

        headers = {
            "accept": "application/json, text/plain, */*",
            "accept-language": "zh-CN,zh;q=0.9",
            "authorization": f"Bearer {token}",
            "content-type": "application/json",
            "priority": "u=1, i",
            "sec-ch-ua": "\"Google Chrome\";v=\"143\", \"Chromium\";v=\"143\", \"Not A(Brand\";v=\"24\"",
            "sec-ch-ua-mobile": "?0",
            "sec-ch-ua-platform": "\"Windows\"",
            "sec-fetch-dest": "empty",
            "sec-fetch-mode": "cors",
            "sec-fetch-site": "same-origin",
            "cookie": self.config.cookie,
            "Referer": f"{self.config.base_url}/dashboard",
            "User-Agent": USER_AGENT,
        }
        # 时间戳避免请求被缓存
        return headers, {"t": int(time.time() * 1000)}

    def check_in(self, token: str) -> CheckInResponse:
        """执行签到请求"""
        logger.info("🚀 执行签到...")
        headers, params = self._checkin_request(token)
        response = self._session.get(
            self.urls["checkin"],
            headers=headers,
            params=params,
            timeout=self.config.timeout,
        )
        logger.debug(f"签到响应状态码: {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            logger.debug(f"签到响应内容: {response.text[:200]}")
            payload = {"message": NON_JSON_MESSAGE}

        return CheckInResponse(http_ok=response.ok, body=ApiResult.from_json(payload))
