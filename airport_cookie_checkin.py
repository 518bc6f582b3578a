#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cron: 35 8 * * *
new Env('机场签到(Cookie)');
# 说明：使用浏览器中已登录的 Token 和 Cookie 直接签到，无需账号密码

环境变量配置说明（适用于青龙面板）：
- USER_TOKEN       ：authorization 中 Bearer 后面的 Token
- USER_COOKIE      ：浏览器请求中的完整 Cookie
- USER_EMAIL       ：账号邮箱（可选，仅用于通知显示）
- PUSHPLUS_TOKEN   ：PushPlus 推送 Token（可选）
- AIRPORT_BASE_URL ：机场地址（可选），默认 https://flzt.top
"""

import sys

from airport_checkin import main as checkin_main
from airport_config import PROFILE_COOKIE


def main() -> int:
    return checkin_main(PROFILE_COOKIE)


if __name__ == "__main__":
    sys.exit(main())
