from __future__ import annotations

import pytest

from Color_naming.naming import default
from Color_naming.naming import (
    list_color_names,
    lookup_color,
    name_color,
    nearest_colors,
    translate_color,
    use_locale,
)


@pytest.fixture(autouse=True)
def _fresh_default(monkeypatch):
    monkeypatch.delenv("CN_NAME_THRESHOLD", raising=False)
    monkeypatch.delenv("CN_NEAREST_COUNT", raising=False)
    default.reset_default_namer()
    yield
    default.reset_default_namer()


def test_module_helpers_share_one_namer(basic_dict):
    use_locale(basic_dict)

    assert name_color([0.62, 0.22, 0.12], "xx").name == "red"
    assert name_color([0.62, 0.22, 0.12], "xx", threshold=0.001) is None
    assert [c.name for c in nearest_colors([0.0, 0.0, 0.0], "xx", 2)] == ["black", "red"]
    assert lookup_color("White", "xx") == (1.0, 0.0, 0.0)
    assert len(list_color_names("xx")) == 3
    assert translate_color("black", "xx", "xx").distance == 0.0
    assert default.default_namer().locales() == ["xx"]


def test_reset_forgets_registrations(basic_dict):
    use_locale(basic_dict)
    default.reset_default_namer()
    assert name_color([0.0, 0.0, 0.0], "xx") is None
