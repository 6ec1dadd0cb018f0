"""Locale table: translated strings keyed by name.

Templates use ``{{name}}`` placeholders, the same syntax the storefront
locale files use.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from vipdiscount.domain.exceptions import MissingTranslationError, ValidationError

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


@dataclass(frozen=True)
class LocaleTable:

    name: str
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, value in self.messages.items():
            if not isinstance(value, str):
                raise ValidationError(
                    f"Locale '{self.name}' entry '{key}' must be a string"
                )
        # Freeze a private copy so callers cannot mutate it later.
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def __contains__(self, key: str) -> bool:
        return key in self.messages

    def translate(self, key: str, **replacements: object) -> str:
        """Return the template for *key* with placeholders filled in.

        Placeholders with no matching replacement are left as-is.
        """
        try:
            template = self.messages[key]
        except KeyError:
            raise MissingTranslationError(
                f"Locale '{self.name}' has no translation for '{key}'"
            ) from None

        def _substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in replacements:
                return str(replacements[name])
            return match.group(0)

        return _PLACEHOLDER.sub(_substitute, template)
