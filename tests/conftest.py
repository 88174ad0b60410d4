"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from socialgraph.network import SocialNetwork  # noqa: E402
from socialgraph.sample import (  # noqa: E402
    SAMPLE_FRIENDSHIPS,
    SAMPLE_USERS,
    build_sample_network,
)


@pytest.fixture
def sample_network() -> SocialNetwork:
    """Eight-user reference network with two communities."""
    return build_sample_network()


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Reference network as a network file document."""
    return {
        "users": list(SAMPLE_USERS),
        "friendships": [list(pair) for pair in SAMPLE_FRIENDSHIPS],
    }


@pytest.fixture
def write_network(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a network document (or raw text) to a JSON file."""

    def _factory(document: dict[str, Any] | str, name: str = "network.json") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _factory
