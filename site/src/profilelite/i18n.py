"""Localization lookup for theme strings.

Catalogs live in languages/{locale}.json inside the package and map the
English source string to its translation. Strings missing from a catalog, or
locales without a catalog, fall back to the English source.
"""

import json
import re
from pathlib import Path

DEFAULT_LOCALE = "en_US"
I18N_DIR = Path(__file__).parent / "languages"

_PLACEHOLDER = re.compile(r"%%|%(?:(\d+)\$)?s")
_CATALOG_CACHE: dict[tuple[str, str], dict[str, str]] = {}


def _load_catalog(i18n_dir: Path, locale: str) -> dict[str, str]:
    """Load {locale}.json lazily, cached per directory and locale."""
    key = (str(i18n_dir), locale)
    if key not in _CATALOG_CACHE:
        path = i18n_dir / f"{locale}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _CATALOG_CACHE[key] = json.load(f)
        else:
            _CATALOG_CACHE[key] = {}
    return _CATALOG_CACHE[key]


def reload_cache():
    """Drop every loaded catalog (useful while editing translations)."""
    _CATALOG_CACHE.clear()


class Translator:
    def __init__(self, locale: str = DEFAULT_LOCALE, i18n_dir: Path = I18N_DIR):
        self.locale = locale
        self.i18n_dir = i18n_dir

    def gettext(self, text: str) -> str:
        if self.locale == DEFAULT_LOCALE:
            return text
        catalog = _load_catalog(self.i18n_dir, self.locale)
        translated = catalog.get(text)
        return translated if translated else text

    def __repr__(self) -> str:
        return f"Translator(locale={self.locale!r})"


def sprintf(fmt: str, *args) -> str:
    """Fill %1$s-style positional and plain %s placeholders."""
    position = 0

    def replace(match):
        nonlocal position
        if match.group(0) == "%%":
            return "%"
        if match.group(1):
            return str(args[int(match.group(1)) - 1])
        value = args[position]
        position += 1
        return str(value)

    return _PLACEHOLDER.sub(replace, fmt)
