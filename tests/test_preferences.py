import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from curve_engine import JsonPreferenceStore, Localizer, MemoryPreferenceStore, Mode  # noqa: E402
from curve_engine.preferences import get_language, get_theme, set_language, toggle_theme  # noqa: E402


def test_defaults() -> None:
    store = MemoryPreferenceStore()
    assert get_language(store) == "en"
    assert get_theme(store) == "light"


def test_toggle_theme() -> None:
    store = MemoryPreferenceStore()
    assert toggle_theme(store) == "dark"
    assert toggle_theme(store) == "light"


def test_json_store_round_trip(tmp_path) -> None:
    path = tmp_path / "sub" / "prefs.json"
    store = JsonPreferenceStore(str(path))
    set_language(store, "ru")
    toggle_theme(store)

    reopened = JsonPreferenceStore(str(path))
    assert get_language(reopened) == "ru"
    assert get_theme(reopened) == "dark"


def test_json_store_rejects_non_object(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonPreferenceStore(str(path))


def test_localizer_falls_back_to_english() -> None:
    assert Localizer("de").language == "en"
    assert Localizer("ru").mode_name(Mode.CUBIC) == "Кубическая"
    assert Localizer().result_button(True) == "Next level"
    assert Localizer().result_button(False) == "Try again"


def test_all_languages_have_same_keys() -> None:
    keys = [set(Localizer(lang).texts) for lang in Localizer.languages()]
    assert all(k == keys[0] for k in keys)
