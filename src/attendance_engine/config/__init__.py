from __future__ import annotations

import importlib
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ..core.enums import Branch


def get_settings_module() -> str:
    # APP_ENV selects the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


@dataclass(frozen=True)
class EngineSettings:
    log_level: str = "INFO"
    honor_configured_weights: bool = False
    default_branch: Branch = Branch.OFFICE


def load_settings(module_name: str | None = None) -> EngineSettings:
    """Load ``.env`` (if any) and read the selected settings module."""
    load_dotenv(override=False)
    settings = importlib.import_module(module_name or get_settings_module())
    return EngineSettings(
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        honor_configured_weights=bool(getattr(settings, "HONOR_CONFIGURED_WEIGHTS", False)),
        default_branch=Branch(getattr(settings, "DEFAULT_BRANCH", Branch.OFFICE.value)),
    )
