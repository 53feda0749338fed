"""Pytest configuration"""

import pytest

from splitpad import logger
from splitpad.events import KeyEvent


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    """Keep the editor's log out of the working directory"""
    path = tmp_path / "splitpad.log"
    monkeypatch.setattr(logger, "LOG_FILE_PATH", str(path))
    return path


def _type_text(target, text):
    send = getattr(target, "dispatch", None) or target.update
    for ch in text:
        send(KeyEvent(ch))


@pytest.fixture
def type_text():
    """Send each character of a string as key events to anything with dispatch() or update()"""
    return _type_text
