"""Testes para o listener de pareamento no terminal."""

from __future__ import annotations

import io

from app.constants.whatsapp import SessionState
from app.sessions.pairing import READY_TEXT, SCAN_PROMPT, TerminalPairingListener, render_qr


def test_render_qr_produces_multiline_ascii() -> None:
    rendered = render_qr("2@ABCDEF,123")
    lines = rendered.splitlines()
    assert len(lines) > 5
    assert rendered == render_qr("2@ABCDEF,123")


def test_listener_writes_prompt_and_qr() -> None:
    stream = io.StringIO()
    TerminalPairingListener(stream)(SessionState.AWAITING_PAIRING, "2@ABCDEF")

    output = stream.getvalue()
    assert output.startswith(SCAN_PROMPT)
    assert render_qr("2@ABCDEF") in output


def test_listener_writes_ready_text() -> None:
    stream = io.StringIO()
    TerminalPairingListener(stream)(SessionState.READY, None)
    assert stream.getvalue() == f"{READY_TEXT}\n"


def test_listener_ignores_uninitialized() -> None:
    stream = io.StringIO()
    TerminalPairingListener(stream)(SessionState.UNINITIALIZED, None)
    assert stream.getvalue() == ""
