#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PushPlus 通知：渲染 HTML 卡片并推送
"""

import html
import logging
from typing import Iterable, Optional, Tuple

import requests

from airport_result import NotifyItem, NOTIFY_SUCCESS, NOTIFY_INFO, NOTIFY_ERROR

logger = logging.getLogger(__name__)

PUSHPLUS_URL = "https://www.pushplus.plus/send"

# 卡片样式: 类型 -> (标题, 主色, 图标)
CARD_STYLES = {
    NOTIFY_SUCCESS: ("签到成功", "#52c41a", "🎉"),
    NOTIFY_INFO: ("今日已签", "#faad14", "📅"),
    NOTIFY_ERROR: ("运行失败", "#f5222d", "🚨"),
}


def render_card(card_type: str, items: Iterable[NotifyItem]) -> str:
    """渲染 HTML 卡片"""
    title, color, icon = CARD_STYLES.get(card_type, CARD_STYLES[NOTIFY_ERROR])

    rows = []
    for item in items:
        highlight = f" color: {color}; font-weight: bold; font-size: 16px;" if item.highlight else ""
        rows.append(
            '<div style="margin-bottom: 10px; font-size: 14px; color: #555; display: flex; align-items: center;">'
            f'<span style="width: 70px; color: #888;">{html.escape(item.label)}:</span>'
            f'<span style="font-weight: 500; color: #333;{highlight}">{html.escape(str(item.value))}</span>'
            '</div>'
        )

    return (
        '<div style="max-width: 400px; margin: 0 auto; font-family: -apple-system, sans-serif;">'
        f'<div style="background: linear-gradient(135deg, {color}, {color}dd); color: white; padding: 15px; '
        'border-radius: 12px 12px 0 0; font-weight: bold; font-size: 16px;">'
        f'{title} <span>{icon}</span>'
        '</div>'
        '<div style="background: #fff; border: 1px solid #eee; border-top: none; padding: 20px; '
        'border-radius: 0 0 12px 12px; box-shadow: 0 4px 12px rgba(0,0,0,0.05);">'
        f'{"".join(rows)}'
        '</div>'
        '</div>'
    )


class PushPlusNotifier:
    """PushPlus 推送，失败只记录日志"""

    def __init__(self, token: str, timeout: int = 10, session: Optional[requests.Session] = None):
        self.token = token
        self.timeout = timeout
        self._session = session or requests.Session()

    def send(self, title: str, content: str) -> Tuple[bool, str]:
        """发送推送，返回 (是否发送, 说明)"""
        if not self.token:
            logger.info("ℹ️ 未配置 PUSHPLUS_TOKEN，跳过推送")
            return False, "未配置 PUSHPLUS_TOKEN"

        try:
            response = self._session.post(
                PUSHPLUS_URL,
                headers={"Content-Type": "application/json"},
                json={
                    "token": self.token,
                    "title": title,
                    "content": content,
                    "template": "html",
                },
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ 推送失败: {e}")
            return False, f"推送失败: {e}"

        logger.debug(f"推送响应: {response.status_code} {response.text[:200]}")
        logger.info("✅ 推送已发送")
        return True, "推送已发送"
