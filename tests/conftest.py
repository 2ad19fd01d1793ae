"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Packages live under src/ and are imported by bare name.
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.utils import make_rng  # noqa: E402
from core.vector import Vector3  # noqa: E402


@pytest.fixture
def rng():
    """Provide a seeded random stream so sampled tests are reproducible."""
    return make_rng(1234)


def assert_vec_close(a: Vector3, b: Vector3, tol: float = 1e-9):
    assert abs(a.x - b.x) <= tol, (a, b)
    assert abs(a.y - b.y) <= tol, (a, b)
    assert abs(a.z - b.z) <= tol, (a, b)


def box_contains(outer, inner) -> bool:
    return all(outer.minimum[a] <= inner.minimum[a] and inner.maximum[a] <= outer.maximum[a]
               for a in range(3))
