# -*- coding: utf-8 -*-
"""
Translation catalogs and the active UI language.

English is the reference catalog: a key missing from the active language
falls back to English, then to the key itself. Arabic switches the layout
to right-to-left.
"""

from typing import Dict, Set

from PyQt5.QtCore import Qt

from services.translations.ar import AR_TRANSLATIONS
from services.translations.en import EN_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)

REFERENCE_LANGUAGE = "en"
RTL_LANGUAGES = frozenset({"ar"})


class TranslationManager:
    """Holds the catalogs and the language currently shown."""

    def __init__(self, catalogs: Dict[str, Dict[str, str]], language: str = REFERENCE_LANGUAGE):
        self.catalogs = catalogs
        self.language = language if language in catalogs else REFERENCE_LANGUAGE
        self._reported: Set[str] = set()

    def set_language(self, language: str):
        if language not in self.catalogs:
            logger.warning(f"Unsupported language '{language}', using '{REFERENCE_LANGUAGE}'")
            language = REFERENCE_LANGUAGE
        if language != self.language:
            self.language = language
            logger.info(f"Language changed to: {language}")

    def lookup(self, key: str) -> str:
        text = self.catalogs[self.language].get(key)
        if text is None:
            text = self.catalogs[REFERENCE_LANGUAGE].get(key)
        if text is None:
            if key not in self._reported:
                self._reported.add(key)
                logger.debug(f"Missing translation key '{key}'")
            return key
        return text

    def tr(self, key: str, **params) -> str:
        text = self.lookup(key)
        if not params:
            return text
        try:
            return text.format(**params)
        except (KeyError, IndexError, ValueError):
            logger.debug(f"Could not format translation '{key}' with {params}")
            return text

    @property
    def rtl(self) -> bool:
        return self.language in RTL_LANGUAGES


def _initial_language() -> str:
    from app.config import Config
    return (Config.APP_LANGUAGE or REFERENCE_LANGUAGE).lower()


_translator = TranslationManager(
    {"en": EN_TRANSLATIONS, "ar": AR_TRANSLATIONS},
    _initial_language(),
)


def tr(key: str, **params) -> str:
    """Translate ``key`` into the active language, filling ``{placeholders}``."""
    return _translator.tr(key, **params)


def set_language(language: str):
    _translator.set_language(language)


def get_language() -> str:
    return _translator.language


def is_rtl() -> bool:
    return _translator.rtl


def get_layout_direction():
    return Qt.RightToLeft if _translator.rtl else Qt.LeftToRight


def get_text_alignment():
    return (Qt.AlignRight if _translator.rtl else Qt.AlignLeft) | Qt.AlignVCenter
