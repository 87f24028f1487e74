"""Tests for the startup announcement in ``run.py``."""

import asyncio
import logging
from types import SimpleNamespace

import run


class TestAnnounceWhenStarted:
    """Test that the listening message waits for the socket."""

    def test_logs_only_after_startup(self, caplog):
        server = SimpleNamespace(started=False, should_exit=False)

        async def scenario():
            announcer = asyncio.create_task(run.announce_when_started(server, 3000, poll_interval=0.01))
            await asyncio.sleep(0.05)
            assert not announcer.done()
            assert "listening" not in caplog.text
            server.started = True
            return await announcer

        with caplog.at_level(logging.INFO, logger=run.logger.name):
            assert asyncio.run(scenario()) is True
        assert "Your app is listening on port 3000" in caplog.text

    def test_silent_when_server_exits_before_binding(self, caplog):
        server = SimpleNamespace(started=False, should_exit=True)

        with caplog.at_level(logging.INFO, logger=run.logger.name):
            assert asyncio.run(run.announce_when_started(server, 3000, poll_interval=0.01)) is False
        assert "listening" not in caplog.text
