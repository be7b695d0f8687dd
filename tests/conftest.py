import logging
import os

import pytest

from dfget_cli.core import context as context_module
from dfget_cli.core.context import new_context


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty, writable working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point the identity of the current user at a temporary home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(context_module, "current_identity", lambda: ("tester", home))
    return home


@pytest.fixture
def ctx(workdir):
    """A fresh run context with both logger handles attached."""
    context = new_context()
    context.client_logger = logging.getLogger("tests.client")
    context.server_logger = logging.getLogger("tests.server")
    return context


@pytest.fixture
def is_root():
    return hasattr(os, "geteuid") and os.geteuid() == 0
