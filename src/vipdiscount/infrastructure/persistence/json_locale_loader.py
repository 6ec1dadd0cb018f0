"""Loads locale tables from ``<name>.json`` files."""

from __future__ import annotations

import json
from pathlib import Path

from vipdiscount.domain.exceptions import LocaleNotFoundError, ValidationError
from vipdiscount.domain.model.locale import LocaleTable

LOCALES_DIR = Path(__file__).resolve().parents[1] / "locales"
DEFAULT_LOCALE = "en.default"


def load_locale(name: str = DEFAULT_LOCALE, directory: Path = LOCALES_DIR) -> LocaleTable:
    file_path = directory / f"{name}.json"
    if not file_path.is_file():
        raise LocaleNotFoundError(f"Locale '{name}' not found in {directory}")

    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Locale file {file_path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValidationError(f"Locale file {file_path} must contain a JSON object")

    return LocaleTable(name=name, messages=raw)
