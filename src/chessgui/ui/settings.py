"""Application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from chessgui.ui.i18n import LANGUAGES

ENV_PREFIX = "CHESSGUI_"

PROMOTION_QUEEN = "queen"
PROMOTION_ASK = "ask"


@dataclass(frozen=True)
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True

    # Game
    promotion_choice: str = PROMOTION_QUEEN  # "queen" | "ask"
    save_directory: Path | None = None  # None = current directory

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overlaid with ``CHESSGUI_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        if language := env.get(f"{ENV_PREFIX}LANGUAGE"):
            if language not in LANGUAGES:
                raise ValueError(f"Invalid {ENV_PREFIX}LANGUAGE: {language!r}")
            settings = replace(settings, language=language)
        if log_level := env.get(f"{ENV_PREFIX}LOG_LEVEL"):
            settings = replace(settings, log_level=log_level.upper())
        if save_dir := env.get(f"{ENV_PREFIX}SAVE_DIR"):
            settings = replace(settings, save_directory=Path(save_dir).expanduser())
        if promotion := env.get(f"{ENV_PREFIX}PROMOTION"):
            promotion = promotion.lower()
            if promotion not in (PROMOTION_QUEEN, PROMOTION_ASK):
                raise ValueError(f"Invalid {ENV_PREFIX}PROMOTION: {promotion!r}")
            settings = replace(settings, promotion_choice=promotion)
        return settings
