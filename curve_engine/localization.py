"""
localization.py - 화면 문자열 (en / ru)
코어는 모드 / 성공 여부 같은 의미 값만 넘기고, 문장은 여기서 고른다
"""

from typing import Dict

from .models import Mode


TEXTS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Fit the curve through the points",
        "linear": "Linear",
        "quadratic": "Quadratic",
        "cubic": "Cubic",
        "check": "Check",
        "success": "Great! The curve passes through all points.",
        "fail": "Not quite. Keep adjusting the coefficients.",
        "next": "Next level",
        "retry": "Try again",
        "light": "Light",
        "dark": "Dark",
    },
    "ru": {
        "title": "Проведите кривую через точки",
        "linear": "Линейная",
        "quadratic": "Квадратичная",
        "cubic": "Кубическая",
        "check": "Проверить",
        "success": "Отлично! Кривая проходит через все точки.",
        "fail": "Почти. Продолжайте подбирать коэффициенты.",
        "next": "Следующий уровень",
        "retry": "Попробовать снова",
        "light": "Светлая",
        "dark": "Тёмная",
    },
}

FALLBACK_LANGUAGE = "en"


class Localizer:
    """언어 코드별 문자열 조회 (없는 언어는 en)"""

    def __init__(self, language: str = FALLBACK_LANGUAGE):
        self.language = language if language in TEXTS else FALLBACK_LANGUAGE

    @property
    def texts(self) -> Dict[str, str]:
        return TEXTS[self.language]

    def text(self, key: str) -> str:
        return self.texts.get(key, TEXTS[FALLBACK_LANGUAGE].get(key, key))

    def mode_name(self, mode: Mode) -> str:
        return self.text(mode.value)

    def result_message(self, succeeded: bool) -> str:
        return self.text("success" if succeeded else "fail")

    def result_button(self, succeeded: bool) -> str:
        return self.text("next" if succeeded else "retry")

    @staticmethod
    def languages():
        return list(TEXTS.keys())
