from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from asset_buster.errors import InvalidRuleError, RuleFileError


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidRuleError(f"Boolean is not a valid rule value: {value!r}")
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class AssetRule:
    """
    Cache busting rule for a single asset handle.

    - version:   fixed value for the `ver` query parameter (static invalidation)
    - file_path: path relative to the asset root; `ver` becomes the file's
      last modification timestamp (dynamic invalidation)

    When both are given `version` wins.
    """

    handle: str
    version: Optional[str] = None
    file_path: Optional[str] = None

    @property
    def is_static(self) -> bool:
        return bool(self.version)

    @property
    def is_dynamic(self) -> bool:
        return not self.version and bool(self.file_path)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AssetRule":
        if not isinstance(data, Mapping):
            raise InvalidRuleError(f"Asset rule must be an object, got {type(data).__name__}")
        handle = data.get("handle")
        if not isinstance(handle, str) or not handle.strip():
            raise InvalidRuleError("Asset rule requires a non-empty 'handle'")
        version = data.get("version", data.get("ver"))
        file_path = data.get("file_path", data.get("path"))
        return cls(
            handle=handle.strip(),
            version=_optional_str(version),
            file_path=_optional_str(file_path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"handle": self.handle, "version": self.version, "file_path": self.file_path}


@dataclass(frozen=True)
class RuleSet:
    rules: Tuple[AssetRule, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # tuple() so that lists passed by callers can't be mutated later
        object.__setattr__(self, "rules", tuple(self.rules))

    def __iter__(self) -> Iterator[AssetRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def find(self, handle: str) -> Optional[AssetRule]:
        for rule in self.rules:
            if rule.handle == handle:
                return rule
        return None

    def handles(self) -> List[str]:
        return [rule.handle for rule in self.rules]

    @classmethod
    def from_mappings(cls, items: Iterable[Mapping[str, Any]]) -> "RuleSet":
        logger = logging.getLogger(__name__)
        rules: List[AssetRule] = []
        seen = set()
        for item in items:
            rule = AssetRule.from_mapping(item)
            if rule.handle in seen:
                logger.warning(
                    json.dumps(
                        {
                            "event": "asset_rule_duplicate",
                            "handle": rule.handle,
                            "message": "Duplicate handle, the first rule wins",
                        },
                        ensure_ascii=False,
                    )
                )
            seen.add(rule.handle)
            rules.append(rule)
        return cls(rules=tuple(rules))


def load_rules(path: str | Path) -> RuleSet:
    """
    Load a RuleSet from a JSON file.

    Accepted shapes:
      [{"handle": "...", "version": "..."}, ...]
      {"assets": [{"handle": "...", "path": "..."}, ...]}
    """
    file_path = Path(path)
    if not file_path.exists() or not file_path.is_file():
        raise RuleFileError(f"Rules file not found: {file_path}")
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise RuleFileError(f"Cannot read rules file {file_path}: {exc}") from exc

    if isinstance(data, Mapping):
        data = data.get("assets")
    if not isinstance(data, list):
        raise RuleFileError(f"Rules file {file_path} must hold a list of rules or an 'assets' list")
    return RuleSet.from_mappings(data)
