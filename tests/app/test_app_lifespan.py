"""Testes do create_app: lifespan com monitor de sessão e modo debug."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator

import pytest

from app.app import create_app
from app.constants.whatsapp import SessionState
from app.protocols.models import SessionStatus
from config.settings import (
    get_base_settings,
    get_server_settings,
    get_whatsapp_web_settings,
)
from tests.fakes.fake_messaging_client import FakeMessagingClient, FakeSessionClient


@pytest.fixture(autouse=True)
def fast_session_poll(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("WHATSAPP_WEB_SESSION_POLL_SECONDS", "0.01")
    for getter in (get_base_settings, get_server_settings, get_whatsapp_web_settings):
        getter.cache_clear()
    yield
    for getter in (get_base_settings, get_server_settings, get_whatsapp_web_settings):
        getter.cache_clear()


@pytest.mark.asyncio
async def test_lifespan_starts_and_stops_session_monitor() -> None:
    session_client = FakeSessionClient(
        [
            SessionStatus(SessionState.AWAITING_PAIRING, qr="2@abc"),
            SessionStatus(SessionState.READY),
        ]
    )
    app = create_app(messaging_client=FakeMessagingClient(), session_client=session_client)

    async with app.router.lifespan_context(app):
        session = app.state.session
        assert session is not None
        for _ in range(200):
            if session.is_ready:
                break
            await asyncio.sleep(0.01)
        assert session.state is SessionState.READY

    assert session_client.initialize_calls == 1
    calls_after_shutdown = session_client.status_calls
    await asyncio.sleep(0.05)
    assert session_client.status_calls == calls_after_shutdown


@pytest.mark.asyncio
async def test_lifespan_without_session_client_skips_monitor() -> None:
    app = create_app(messaging_client=FakeMessagingClient())

    async with app.router.lifespan_context(app):
        assert app.state.session is None


@pytest.mark.asyncio
async def test_lifespan_respects_disabled_monitor(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WHATSAPP_WEB_SESSION_MONITOR", "false")
    get_whatsapp_web_settings.cache_clear()
    session_client = FakeSessionClient()
    app = create_app(messaging_client=FakeMessagingClient(), session_client=session_client)

    async with app.router.lifespan_context(app):
        assert app.state.session is None
        await asyncio.sleep(0.05)

    assert session_client.initialize_calls == 0


def test_debug_flag_reaches_fastapi(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    get_base_settings.cache_clear()

    assert create_app(messaging_client=FakeMessagingClient()).debug is True


def test_debug_disabled_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEBUG", raising=False)
    get_base_settings.cache_clear()

    assert create_app(messaging_client=FakeMessagingClient()).debug is False
