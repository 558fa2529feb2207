"""Tests for the application entry point wiring."""

import asyncio
from typing import Any

import pytest

from mvg_board import main as main_module
from mvg_board.adapters.config import AppConfig
from tests.fakes import FakeResponse, FakeSession, raw_record, wait_until


class FakeClientSession(FakeSession):
    """FakeSession usable as ``async with aiohttp.ClientSession()``."""

    async def __aenter__(self) -> "FakeClientSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


@pytest.mark.asyncio
async def test_main_refreshes_and_draws_board(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a reachable API, when running main, then departures are drawn on the board."""
    session = FakeClientSession(FakeResponse([raw_record(destination="Erding")]))
    monkeypatch.setattr(main_module.aiohttp, "ClientSession", lambda: session)
    config = AppConfig.for_testing(
        timezone="UTC", refresh_interval_seconds=0.01, clock_interval_seconds=0.01
    )
    output: list[str] = []

    def drawn() -> bool:
        output.append(capsys.readouterr().out)
        return "[Erding] 10:02 +2" in "".join(output)

    task = asyncio.create_task(main_module.main(config))
    try:
        await wait_until(drawn)
    finally:
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    url, kwargs = session.calls[0]
    assert url == config.api_url
    assert kwargs["params"]["globalId"] == "de:09184:2000"


def test_cli_main_exits_on_invalid_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an invalid setting, when starting, then the process exits with status 1."""
    monkeypatch.setenv("MVG_BOARD_LIMIT", "0")

    with pytest.raises(SystemExit) as exc_info:
        main_module.cli_main()

    assert exc_info.value.code == 1
