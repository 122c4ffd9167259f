from __future__ import annotations


class AssetBusterError(Exception):
    """Базовая ошибка cache busting слоя."""
    code: str = "ASSET_BUSTER_ERROR"
    # absorbed: резолвер гасит ошибку и отдаёт URL без изменений
    absorbed: bool = False

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code

class NoMatchingRule(AssetBusterError):
    code = "NO_MATCHING_RULE"
    absorbed = True

class MissingAssetFile(AssetBusterError):
    code = "MISSING_ASSET_FILE"
    absorbed = True

class StatFailure(AssetBusterError):
    code = "STAT_FAILURE"
    absorbed = True

class EmptyRule(AssetBusterError):
    code = "EMPTY_RULE"
    absorbed = True

class InvalidRuleError(AssetBusterError):
    code = "INVALID_RULE"

class RuleFileError(AssetBusterError):
    code = "RULE_FILE_ERROR"

class InvalidUrl(AssetBusterError):
    code = "INVALID_URL"
    absorbed = True
