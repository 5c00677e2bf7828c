# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from Color_naming.dictionary.schema import ColorDictionary, ColorNameSet
from Color_naming.naming.params import NamingParams


@pytest.fixture
def params() -> NamingParams:
    # explicit params so CN_* variables in the shell never leak into tests
    return NamingParams(nearest_count=5, default_threshold=None)


@pytest.fixture
def basic_dict() -> ColorDictionary:
    return ColorDictionary(
        locale="xx",
        source="test",
        basic=ColorNameSet.from_pairs(
            [
                ("black", [0.0, 0.0, 0.0]),
                ("white", [1.0, 0.0, 0.0]),
                ("red", [0.63, 0.23, 0.13]),
            ]
        ),
    )


@pytest.fixture
def tiered_dict() -> ColorDictionary:
    return ColorDictionary(
        locale="tt",
        source="tiered",
        basic=ColorNameSet.from_pairs(
            [
                ("black", [0.0, 0.0, 0.0]),
                ("white", [1.0, 0.0, 0.0]),
                ("red", [0.63, 0.23, 0.13]),
            ]
        ),
        extended=ColorNameSet.from_pairs(
            [
                ("crimson", [0.58, 0.25, 0.08]),
                ("navy", [0.27, -0.02, -0.19]),
            ]
        ),
        traditional=ColorNameSet.from_pairs(
            [
                ("scarlet", [0.62, 0.22, 0.12]),
            ]
        ),
    )
