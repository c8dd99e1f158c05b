"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.helpers import make_batted_pitch, make_pitch
from trackman_trajectory.domain.pitch import Pitch

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def called_strike() -> Pitch:
    return make_pitch()


@pytest.fixture
def batted_ball() -> Pitch:
    return make_batted_pitch()


@pytest.fixture
def restore_root_logger() -> Generator[None]:
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
