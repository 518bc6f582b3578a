import requests

from airport_result import NotifyItem
from conftest import FakeResponse, FakeSession
from pushplus_notify import PUSHPLUS_URL, PushPlusNotifier, render_card


def test_render_success_card():
    content = render_card("success", [
        NotifyItem("获得流量", "500 MB", highlight=True),
        NotifyItem("账号", "me@example.com"),
    ])
    assert "签到成功" in content
    assert "🎉" in content
    assert "#52c41a" in content
    assert "获得流量:" in content
    assert "color: #52c41a; font-weight: bold; font-size: 16px;" in content
    assert "me@example.com" in content


def test_render_info_and_error_styles():
    info = render_card("info", [NotifyItem("提示", "already")])
    assert "今日已签" in info and "📅" in info and "#faad14" in info

    error = render_card("error", [NotifyItem("错误信息", "boom")])
    assert "运行失败" in error and "🚨" in error and "#f5222d" in error


def test_render_unknown_type_uses_error_style():
    content = render_card("bogus", [NotifyItem("错误信息", "boom")])
    assert "运行失败" in content and "🚨" in content and "#f5222d" in content


def test_render_only_highlights_flagged_item():
    content = render_card("info", [NotifyItem("账号", "a"), NotifyItem("提示", "b")])
    assert "color: #faad14; font-weight: bold" not in content


def test_render_escapes_values():
    content = render_card("error", [NotifyItem("错误信息", "<script>x</script>")])
    assert "<script>" not in content
    assert "&lt;script&gt;" in content


def test_send_without_token_makes_no_request():
    session = FakeSession()
    notifier = PushPlusNotifier("", session=session)

    sent, message = notifier.send("title", "<b>hi</b>")

    assert sent is False
    assert "PUSHPLUS_TOKEN" in message
    assert session.calls == []


def test_send_posts_html_template():
    session = FakeSession(FakeResponse({"code": 200}))
    notifier = PushPlusNotifier("push-token", timeout=5, session=session)

    sent, _ = notifier.send("机场签到成功 🎉", "<div>ok</div>")

    assert sent is True
    call = session.calls[0]
    assert call["url"] == PUSHPLUS_URL
    assert call["json"] == {
        "token": "push-token",
        "title": "机场签到成功 🎉",
        "content": "<div>ok</div>",
        "template": "html",
    }
    assert call["timeout"] == 5


def test_send_swallows_transport_errors():
    session = FakeSession(requests.exceptions.Timeout("slow"))
    notifier = PushPlusNotifier("push-token", session=session)

    sent, message = notifier.send("title", "content")

    assert sent is False
    assert "slow" in message


def test_default_session_is_created_once_and_reused(monkeypatch):
    created = []

    def make_session():
        session = FakeSession(FakeResponse({"code": 200}), FakeResponse({"code": 200}))
        created.append(session)
        return session

    monkeypatch.setattr("pushplus_notify.requests.Session", make_session)
    notifier = PushPlusNotifier("push-token")

    assert notifier.send("first", "a")[0] is True
    assert notifier.send("second", "b")[0] is True
    assert len(created) == 1
    assert [call["json"]["title"] for call in created[0].calls] == ["first", "second"]
