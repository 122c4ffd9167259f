from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from asset_buster.resolver import VersionResolver
from asset_buster.rules import RuleSet, load_rules


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    root_dir: str = "."
    rules_file: Optional[str] = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            root_dir=os.getenv("ASSET_BUSTER_ROOT_DIR") or str(Path.cwd()),
            rules_file=os.getenv("ASSET_BUSTER_RULES_FILE") or None,
            debug=_flag(os.getenv("ASSET_BUSTER_DEBUG", "false")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def build_resolver(settings: Settings) -> VersionResolver:
    rules = load_rules(settings.rules_file) if settings.rules_file else RuleSet()
    return VersionResolver(rules, settings.root_dir, debug=settings.debug)
