# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Settings and composition.

Settings come from ``CLOCKZONES_*`` environment variables and are
validated with Pydantic, so a bad value fails at startup rather than on
first use.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field

from clockzones.catalog import load_catalog
from clockzones.exceptions import StoreError
from clockzones.manager import TimezoneManager
from clockzones.stores import InMemoryStore, SQLiteStore, Store
from clockzones.ticker import ANALOG_INTERVAL, DIGITAL_INTERVAL


class StoreConfig(BaseModel):
    """Store configuration.

    Attributes:
        type: Store type ("memory" or "sqlite")
        path: Path to SQLite database file (for sqlite type)
    """

    type: Literal["memory", "sqlite"] = "memory"
    path: str = ""


class Settings(BaseModel):
    """Application settings.

    Attributes:
        store: Where saved timezones live
        catalog_path: Alternative catalog file; the bundled one when unset
        digital_interval: Seconds between digital clock refreshes
        analog_interval: Seconds between analog hand refreshes
    """

    store: StoreConfig = Field(default_factory=StoreConfig)
    catalog_path: str | None = None
    digital_interval: float = Field(default=DIGITAL_INTERVAL, gt=0)
    analog_interval: float = Field(default=ANALOG_INTERVAL, gt=0)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from environment variables.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    data: dict[str, object] = {
        "store": {
            "type": env.get("CLOCKZONES_STORE", "memory"),
            "path": env.get("CLOCKZONES_DB_PATH", ""),
        },
        "catalog_path": env.get("CLOCKZONES_CATALOG_PATH") or None,
    }
    if "CLOCKZONES_DIGITAL_INTERVAL" in env:
        data["digital_interval"] = env["CLOCKZONES_DIGITAL_INTERVAL"]
    if "CLOCKZONES_ANALOG_INTERVAL" in env:
        data["analog_interval"] = env["CLOCKZONES_ANALOG_INTERVAL"]

    return Settings.model_validate(data)


def create_store(config: StoreConfig) -> Store:
    """Create store from configuration.

    Args:
        config: Store configuration

    Returns:
        Store instance
    """
    if config.type == "sqlite":
        if not config.path:
            raise StoreError("configure", "SQLite store requires 'path' configuration")
        return SQLiteStore(config.path)
    return InMemoryStore()


def build_manager(settings: Settings | None = None) -> TimezoneManager:
    """Wire a manager from *settings*.  Call ``await manager.open()`` before use."""
    settings = settings or load_settings()
    return TimezoneManager(
        create_store(settings.store),
        catalog=load_catalog(settings.catalog_path),
    )
