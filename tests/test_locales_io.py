from __future__ import annotations

import json

import pytest

from Color_naming.dictionary.schema import Level
from Color_naming.io.data_schema import DataSchemaError
from Color_naming.io.locales import (
    available_locales,
    dictionary_from_mapping,
    load_dictionary,
    load_dictionary_csv,
    load_locale,
)


def test_bundled_locales_are_listed():
    locs = available_locales()
    assert {"en", "de", "fr", "es", "nl", "pt", "pl", "sv", "fi", "hi"} <= set(locs)
    assert len(locs) == 27
    assert locs == sorted(locs)


def test_load_bundled_locale():
    en = load_locale("en")
    assert en.locale == "en"
    assert en.source == "css+basic"
    assert en.basic.names[:3] == ("black", "white", "red")
    assert en.basic.colors.shape == (11, 3)
    assert en.traditional is None
    # memoised per path
    assert load_locale("en") is en


def test_missing_locale_raises():
    with pytest.raises(FileNotFoundError):
        load_locale("zz-missing")


def test_locale_dir_from_env(tmp_path, monkeypatch):
    (tmp_path / "qq.json").write_text(
        json.dumps({"locale": "qq", "source": "t", "basic": {"names": ["a"], "colors": [[0.5, 0, 0]]}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("CN_LOCALE_DATA_DIR", str(tmp_path))
    assert available_locales() == ["qq"]
    assert load_locale("qq").basic.names == ("a",)


def test_load_json_table(tmp_path):
    p = tmp_path / "ja.json"
    p.write_text(
        json.dumps(
            {
                "locale": "ja",
                "source": "wa-iro",
                "traditional": {"names": ["紅", "藍"], "colors": [[0.55, 0.2, 0.08], [0.35, -0.03, -0.12]]},
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    d = load_dictionary(p)
    assert d.present_levels() == (Level.TRADITIONAL,)
    assert d.traditional.names == ("紅", "藍")


@pytest.mark.parametrize(
    "obj",
    [
        [],
        {"source": "x"},
        {"locale": "x", "basic": {"names": ["a"]}},
        {"locale": "x", "basic": {"names": ["a", "b"], "colors": [[0, 0, 0]]}},
        {"locale": "x", "basic": {"names": ["a"], "colors": [[0, 0]]}},
    ],
)
def test_malformed_mapping_raises(obj):
    with pytest.raises(DataSchemaError):
        dictionary_from_mapping(obj)


def test_invalid_json_raises(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataSchemaError):
        load_dictionary(p)


def test_load_csv_table_keeps_row_order(tmp_path):
    p = tmp_path / "nl.csv"
    p.write_text(
        "level,name,l_ok,a_ok,b_ok\n"
        "basic,zwart,0,0,0\n"
        "extended,oker,0.7,0.03,0.14\n"
        "basic,wit,1,0,0\n"
        "Basic,rood,0.627955,0.224863,0.125846\n",
        encoding="utf-8",
    )
    d = load_dictionary_csv(p, locale="nl", source="csv")
    assert d.locale == "nl"
    assert d.basic.names == ("zwart", "wit", "rood")
    assert d.extended.names == ("oker",)
    assert d.basic.coordinate(2) == pytest.approx((0.627955, 0.224863, 0.125846))


def test_csv_schema_errors(tmp_path):
    p = tmp_path / "a.csv"
    p.write_text("level,name,l_ok,a_ok\nbasic,x,0,0\n", encoding="utf-8")
    with pytest.raises(DataSchemaError):
        load_dictionary_csv(p, locale="a")

    p.write_text("level,name,l_ok,a_ok,b_ok\nultra,x,0,0,0\n", encoding="utf-8")
    with pytest.raises(DataSchemaError):
        load_dictionary_csv(p, locale="a")

    p.write_text("level,name,l_ok,a_ok,b_ok\nbasic,x,0,zero,0\n", encoding="utf-8")
    with pytest.raises(DataSchemaError):
        load_dictionary_csv(p, locale="a")


@pytest.mark.parametrize("locale", ["nl", "pt", "pl", "sv", "fi", "hi", "ab", "so"])
def test_every_bundled_locale_loads_aligned(locale):
    d = load_locale(locale)
    assert d.locale == locale
    assert d.present_levels()
    for lv in d.present_levels():
        tier = d.tier(lv)
        assert len(tier) > 0
        assert tier.colors.shape == (len(tier.names), 3)
