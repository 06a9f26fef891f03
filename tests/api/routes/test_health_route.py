"""Testes do endpoint de health."""

from __future__ import annotations

import pytest

from api.routes.health.router import health_check


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "whatsapi"
    assert response.timestamp
