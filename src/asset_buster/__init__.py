from asset_buster.errors import (
    AssetBusterError,
    EmptyRule,
    InvalidRuleError,
    InvalidUrl,
    MissingAssetFile,
    NoMatchingRule,
    RuleFileError,
    StatFailure,
)
from asset_buster.pipeline import AssetQueue, EnqueuedAsset
from asset_buster.query import add_query_arg, get_query_arg
from asset_buster.resolver import Resolution, VersionResolver
from asset_buster.rules import AssetRule, RuleSet, load_rules

__all__ = [
    "AssetBusterError",
    "AssetQueue",
    "AssetRule",
    "EmptyRule",
    "EnqueuedAsset",
    "InvalidRuleError",
    "InvalidUrl",
    "MissingAssetFile",
    "NoMatchingRule",
    "Resolution",
    "RuleFileError",
    "RuleSet",
    "StatFailure",
    "VersionResolver",
    "add_query_arg",
    "get_query_arg",
    "load_rules",
]
