"""
preferences.py - 사용자 설정 저장소 (테마, 언어)
게임 코어는 이 모듈을 사용하지 않는다 (CLI / 화면 쪽 전용)
"""

import json
import os
from typing import Dict, Optional, Protocol


LANGUAGE_KEY = "lang"
THEME_KEY = "theme"

DEFAULT_LANGUAGE = "en"
THEMES = ("light", "dark")


class PreferenceStore(Protocol):
    """키-값 설정 저장소"""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryPreferenceStore:
    """메모리 저장소 (테스트 / 일회성 실행용)"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data = dict(initial or {})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonPreferenceStore:
    """JSON 파일 저장소 (set 할 때마다 파일에 기록)"""

    def __init__(self, path: str):
        self.path = path
        self._data: Dict[str, str] = {}
        if os.path.exists(path):
            with open(path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"설정 파일 형식 오류: {path}")
            self._data = {str(k): str(v) for k, v in loaded.items()}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)


def get_language(store: PreferenceStore) -> str:
    return store.get(LANGUAGE_KEY) or DEFAULT_LANGUAGE


def set_language(store: PreferenceStore, lang: str):
    store.set(LANGUAGE_KEY, lang)


def get_theme(store: PreferenceStore) -> str:
    """'dark'로 저장된 경우만 dark, 나머지는 light"""
    return "dark" if store.get(THEME_KEY) == "dark" else "light"


def toggle_theme(store: PreferenceStore) -> str:
    """테마 전환 후 새 테마 반환"""
    new_theme = "light" if get_theme(store) == "dark" else "dark"
    store.set(THEME_KEY, new_theme)
    return new_theme
