"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from fieldcopy import CopySettings


@dataclass
class FixturePoint:
    x: int = 0
    y: int = 0


@dataclass
class FixturePoint3D(FixturePoint):
    z: int = 0


@pytest.fixture
def settings():
    """Settings that keep the access override on and warnings off."""
    return CopySettings(force_access=True, warn_on_failure=False)


@pytest.fixture
def point_cls():
    return FixturePoint


@pytest.fixture
def point3d_cls():
    return FixturePoint3D
