#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
签到结果处理：把接口返回转换为通知数据
"""

import json
import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from dataclasses import dataclass, field
from typing import List, Optional, Union

from airport_api import ApiResult

logger = logging.getLogger(__name__)

NOTIFY_SUCCESS = "success"
NOTIFY_INFO = "info"
NOTIFY_ERROR = "error"

SUCCESS_STATUS = "success"
ALREADY_CHECKED_IN = "already checked in"


class CheckInError(RuntimeError):
    pass


@dataclass
class NotifyItem:
    label: str
    value: str
    highlight: bool = False


@dataclass
class NotifyData:
    """通知数据"""
    type: str
    title: str
    items: List[NotifyItem] = field(default_factory=list)


def format_traffic(b: Union[int, float]) -> str:
    """字节数转换为 GB，保留两位小数（四舍五入）"""
    gb = (Decimal(b) / Decimal(1024 ** 3)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{gb} GB"


def format_reward(reward_mb: Optional[Union[int, float]]) -> str:
    """奖励流量原样显示，整数值去掉小数点"""
    reward = reward_mb or 0
    if isinstance(reward, float) and reward.is_integer():
        reward = int(reward)
    return f"{reward} MB"


def process_checkin_result(http_ok: bool, result: ApiResult, account: str,
                           now: Optional[datetime] = None) -> NotifyData:
    """
    处理签到结果

    Args:
        http_ok: HTTP 状态是否成功
        result: 签到接口返回
        account: 通知中显示的账号
        now: 当前时间，默认取本地时间

    Returns:
        通知数据

    Raises:
        CheckInError: 签到失败
    """
    # 签到成功
    if http_ok and result.status == SUCCESS_STATUS:
        data = result.data
        reward = format_reward(data.reward_mb if data else None)
        total = format_traffic((data.total_checkin_traffic if data else None) or 0)

        logger.info(f"✅ 签到成功: {reward}")
        return NotifyData(
            type=NOTIFY_SUCCESS,
            title="机场签到成功 🎉",
            items=[
                NotifyItem("获得流量", reward, highlight=True),
                NotifyItem("剩余总额", total),
                NotifyItem("账号", account),
                NotifyItem("状态", result.message or "Success"),
            ],
        )

    # 重复签到
    if result.message and ALREADY_CHECKED_IN in result.message:
        logger.info("⚠️ 今日已签到")
        now = now or datetime.now()
        return NotifyData(
            type=NOTIFY_INFO,
            title="机场今日已签 ✅",
            items=[
                NotifyItem("账号", account),
                NotifyItem("提示", result.message),
                NotifyItem("时间", now.strftime("%H:%M:%S")),
            ],
        )

    logger.error(f"❌ 签到失败: {json.dumps(result.raw, ensure_ascii=False)}")
    raise CheckInError(result.message or json.dumps(result.raw, ensure_ascii=False, separators=(",", ":")))
