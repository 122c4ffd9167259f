from __future__ import annotations

from functools import lru_cache

from asset_buster.api.errors import APIError
from asset_buster.config import Settings, build_resolver
from asset_buster.config import get_settings as _get_settings
from asset_buster.errors import InvalidRuleError, RuleFileError
from asset_buster.resolver import VersionResolver


def get_settings() -> Settings:
    return _get_settings()


@lru_cache
def get_resolver() -> VersionResolver:
    try:
        return build_resolver(get_settings())
    except (RuleFileError, InvalidRuleError) as exc:
        raise APIError(str(exc), status_code=500, code="rules_unavailable") from exc
