"""Shared fixtures for the MusicJSON tests."""

from pathlib import Path

import pytest

MISC = Path(__file__).parent / "misc"


@pytest.fixture
def misc():
    return MISC


@pytest.fixture
def helloworld():
    return (MISC / "helloworld.xml").read_text(encoding="utf-8")


@pytest.fixture
def reve():
    return (MISC / "reve.xml").read_text(encoding="utf-8")


@pytest.fixture
def completion():
    """Records every call of an error-first callback."""
    calls = []

    def callback(err, result):
        calls.append((err, result))

    callback.calls = calls
    return callback
