"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from vipdiscount.domain.model.locale import LocaleTable
from vipdiscount.domain.service.vip_discount_rule import VipDiscountRule
from vipdiscount.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from vipdiscount.infrastructure.persistence.json_locale_loader import (
    DEFAULT_LOCALE,
    load_locale,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENV = "VIPDISCOUNT_DATA_DIR"
LOCALE_ENV = "VIPDISCOUNT_LOCALE"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def locale_table() -> LocaleTable:
    return load_locale(os.environ.get(LOCALE_ENV, DEFAULT_LOCALE))


def discount_rule() -> VipDiscountRule:
    return VipDiscountRule(locale=locale_table())


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir() / "customers.json")
