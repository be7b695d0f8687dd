import logging
from pathlib import Path

import pytest

from dfget_cli.core.context import new_context
from dfget_cli.utils.log import (
    CLIENT_LOGGER_NAME,
    SERVER_LOGGER_NAME,
    close_loggers,
    create_client_logger,
    create_server_logger,
)


@pytest.fixture
def loggers(fake_home):
    ctx = new_context()
    ctx.verbose = True
    client = create_client_logger(ctx)
    server = create_server_logger(ctx)
    yield ctx, client, server
    close_loggers(client, server)


class TestLoggers:
    def test_files_live_under_work_home(self, loggers):
        ctx, client, server = loggers
        client.info("hello from client")
        server.info("hello from server")
        close_loggers(client, server)

        log_dir = Path(ctx.work_home) / "logs"
        client_log = (log_dir / "dfclient.log").read_text(encoding="utf-8")
        server_log = (log_dir / "dfserver.log").read_text(encoding="utf-8")
        assert "hello from client" in client_log
        assert f"sign:{ctx.sign}" in client_log
        assert "hello from server" in server_log

    def test_names_and_level(self, loggers):
        _, client, server = loggers
        assert client.name == CLIENT_LOGGER_NAME
        assert server.name == SERVER_LOGGER_NAME
        assert client.level == logging.DEBUG

    def test_recreating_replaces_handlers(self, loggers):
        ctx, client, _ = loggers
        again = create_client_logger(ctx)
        assert again is client
        assert len(again.handlers) == 1
