#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cron: 30 8 * * *
new Env('机场签到');
# 说明：账号密码登录机场并每日签到，结果通过 PushPlus 推送

环境变量配置说明（适用于青龙面板）：
- USER_EMAIL       ：账号邮箱
- USER_PASSWORD    ：账号密码
- PUSHPLUS_TOKEN   ：PushPlus 推送 Token（可选，不填则不推送）
- AIRPORT_BASE_URL ：机场地址（可选），默认 https://flzt.top
- AIRPORT_TIMEOUT  ：请求超时秒数（可选），默认 10
- DEBUG            ：设为 1 输出调试日志
"""

import os
import sys
import logging
from datetime import datetime
from typing import Optional

from airport_api import AirportClient
from airport_config import AirportConfig, ConfigurationError, PROFILE_PASSWORD
from airport_result import NotifyItem, NOTIFY_ERROR, process_checkin_result
from pushplus_notify import PushPlusNotifier, render_card

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """配置日志"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    if os.environ.get('DEBUG') == '1':
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("调试模式已启用")


def run(config: AirportConfig, client: Optional[AirportClient] = None,
        notifier: Optional[PushPlusNotifier] = None) -> int:
    """
    执行签到流程：登录 -> 签到 -> 处理结果 -> 推送

    Returns:
        进程退出码，成功或今日已签为 0，失败为 1
    """
    client = client or AirportClient(config)
    notifier = notifier or PushPlusNotifier(config.pushplus_token, timeout=config.timeout)

    try:
        if config.profile == PROFILE_PASSWORD:
            token = client.login(config.email, config.password)
        else:
            token = config.token

        response = client.check_in(token)
        notify_data = process_checkin_result(response.http_ok, response.body, config.account)

        content = render_card(notify_data.type, notify_data.items)
        notifier.send(notify_data.title, content)
        return 0

    except Exception as e:
        logger.error(f"❌ 运行异常: {e}")
        content = render_card(NOTIFY_ERROR, [
            NotifyItem("错误信息", str(e), highlight=True),
            NotifyItem("账号", config.account),
        ])
        notifier.send("脚本运行失败 🚨", content)
        return 1


def main(profile: str = PROFILE_PASSWORD) -> int:
    """主函数"""
    setup_logging()
    logger.info(f"🚀 开始签到: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    try:
        config = AirportConfig.from_env(profile)
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return 1

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
