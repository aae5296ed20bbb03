"""Testes do TelegramNotifier com httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from app.infra.notifications import TelegramNotifier
from config.settings import TelegramSettings
from utils.errors import NotificationError

SETTINGS = TelegramSettings(bot_token="123:abc", chat_id="-100200")


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_posts_send_message_with_chat_and_text() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"ok": True})

    async with _client(handler) as client:
        await TelegramNotifier(SETTINGS, http_client=client).send("ignored", "نص الرسالة")

    assert str(captured[0].url) == "https://api.telegram.org/bot123:abc/sendMessage"
    assert json.loads(captured[0].content) == {"chat_id": "-100200", "text": "نص الرسالة"}


@pytest.mark.asyncio
async def test_non_2xx_raises_notification_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"ok": False, "description": "chat not found"})

    async with _client(handler) as client:
        with pytest.raises(NotificationError):
            await TelegramNotifier(SETTINGS, http_client=client).send("s", "t")


@pytest.mark.asyncio
async def test_network_error_raises_notification_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(NotificationError):
            await TelegramNotifier(SETTINGS, http_client=client).send("s", "t")


@pytest.mark.parametrize(
    "settings",
    [TelegramSettings(bot_token="123:abc"), TelegramSettings(chat_id="-100"), TelegramSettings()],
)
def test_disabled_without_token_and_chat(settings: TelegramSettings) -> None:
    assert TelegramNotifier(settings).enabled is False


@pytest.mark.asyncio
async def test_send_when_disabled_raises() -> None:
    with pytest.raises(NotificationError):
        await TelegramNotifier(TelegramSettings()).send("s", "t")
