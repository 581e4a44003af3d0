# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for WorkTime.

This module provides translation functions and language management.
Supports English and German with automatic system locale detection.
"""

import locale
import logging
from typing import Callable, List, Optional
from PySide6.QtCore import QLocale

from app.i18n.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

# Supported languages
SUPPORTED_LANGUAGES = ["en", "de"]

# Current language (default to English)
_current_language = "en"

# Callbacks to notify when language changes
_language_changed_callbacks: List[Callable[[str], None]] = []


def detect_system_language() -> str:
    """
    Detect the system language and return a supported language code.

    Returns:
        'de' if German is detected, 'en' otherwise.
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        system_locale = None
    if system_locale and system_locale.lower().startswith('de'):
        return 'de'
    return 'en'


def resolve_language(lang: Optional[str]) -> str:
    """Map a preference value ('auto', 'de', 'en', None) to a supported code"""
    if not lang or lang == 'auto':
        return detect_system_language()
    return lang if lang in SUPPORTED_LANGUAGES else 'en'


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def set_language(lang: str) -> None:
    """
    Set the current UI language.

    Args:
        lang: Language code ('en', 'de' or 'auto')
    """
    global _current_language
    lang = resolve_language(lang)
    _current_language = lang

    # Update Qt Locale for dates and standard widgets
    if lang == 'de':
        QLocale.setDefault(QLocale(QLocale.German))
    else:
        QLocale.setDefault(QLocale(QLocale.English))

    # Notify all registered callbacks
    for callback in _language_changed_callbacks:
        try:
            callback(lang)
        except Exception:
            logger.exception("Language change callback failed")


def translate(lang: str, key: str, **kwargs) -> str:
    """
    Get the string for the given key in a specific language.

    Args:
        lang: Language code ('en' or 'de')
        key: Translation key (e.g., 'export.col_date')
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, or the key itself if not found.
    """
    translations = TRANSLATIONS.get(lang, TRANSLATIONS['en'])
    text = translations.get(key, key)

    # Apply format arguments if provided
    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            logger.warning("Could not format translation %r", key)

    return text


def tr(key: str, **kwargs) -> str:
    """Get the translated string for the given key in the current language."""
    return translate(_current_language, key, **kwargs)


def on_language_changed(callback: Callable[[str], None]) -> None:
    """
    Register a callback to be notified when language changes.

    Args:
        callback: Function that takes the new language code as argument.
    """
    if callback not in _language_changed_callbacks:
        _language_changed_callbacks.append(callback)


def remove_language_callback(callback: Callable[[str], None]) -> None:
    """Remove a previously registered language change callback."""
    if callback in _language_changed_callbacks:
        _language_changed_callbacks.remove(callback)


def get_available_languages() -> List[tuple]:
    """
    Get list of available languages for UI display.

    Returns:
        List of (code, display_name) tuples.
    """
    return [
        ('en', 'English'),
        ('de', 'Deutsch'),
    ]
