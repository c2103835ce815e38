"""Shared fixtures."""

from __future__ import annotations

import pytest

from tests.samples import build_reply


@pytest.fixture
def bitcoin_reply() -> str:
    return build_reply()
