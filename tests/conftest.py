"""
tests/conftest.py — Shared Test Fixtures
=========================================
"""

from __future__ import annotations

from unittest.mock import MagicMock

import discord
import pytest


def make_http_error(
    cls: type[discord.HTTPException] = discord.HTTPException,
    status: int = 403,
    message: str = "Missing Permissions",
) -> discord.HTTPException:
    """Build a discord.py HTTP error without a real aiohttp response."""
    response = MagicMock()
    response.status = status
    response.reason = "Forbidden" if status == 403 else "Error"
    return cls(response, message)


@pytest.fixture
def http_error():
    """Factory fixture for discord.py HTTP errors."""
    return make_http_error
