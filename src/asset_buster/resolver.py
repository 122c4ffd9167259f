from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Literal, Optional

from asset_buster.errors import (
    AssetBusterError,
    EmptyRule,
    InvalidUrl,
    MissingAssetFile,
    NoMatchingRule,
    StatFailure,
)
from asset_buster.query import add_query_arg
from asset_buster.rules import AssetRule, RuleSet


VERSION_PARAM = "ver"

Strategy = Literal["static", "dynamic", "unchanged"]
StatFn = Callable[[Path], Any]


@dataclass(frozen=True)
class Resolution:
    handle: str
    source_url: str
    url: str
    strategy: Strategy
    version: Optional[str] = None
    error: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.strategy != "unchanged"


class VersionResolver:
    """
    Sets the `ver` query parameter of asset URLs according to a RuleSet.

    Every failure (unknown handle, missing file, unreadable mtime) leaves the
    URL as it was; `resolve` never raises for them.
    """

    def __init__(
        self,
        rules: RuleSet,
        root_dir: str | Path,
        *,
        debug: bool = False,
        stat: StatFn = os.stat,
    ):
        self._rules = rules
        self._root_dir = Path(root_dir).expanduser().resolve()
        self._debug = debug
        self._stat = stat
        self._logger = logging.getLogger(__name__)

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def resolve(self, url: str, handle: str) -> str:
        return self.explain(url, handle).url

    def explain(self, url: str, handle: str) -> Resolution:
        try:
            rule = self._rules.find(handle)
            if rule is None:
                raise NoMatchingRule(f"No rule for handle '{handle}'")
            self._trace("Before", url)
            if rule.version:
                return self._finish(
                    Resolution(
                        handle=handle,
                        source_url=url,
                        url=self._with_version(url, rule.version),
                        strategy="static",
                        version=rule.version,
                    )
                )
            if rule.file_path:
                version = str(self._last_modified(rule))
                return self._finish(
                    Resolution(
                        handle=handle,
                        source_url=url,
                        url=self._with_version(url, version),
                        strategy="dynamic",
                        version=version,
                    )
                )
            raise EmptyRule(f"Rule for handle '{handle}' has neither version nor file path")
        except AssetBusterError as exc:
            if not exc.absorbed:
                raise
            return Resolution(
                handle=handle,
                source_url=url,
                url=url,
                strategy="unchanged",
                error=exc.code,
            )

    def asset_path(self, rule: AssetRule) -> Path:
        if not rule.file_path:
            raise EmptyRule(f"Rule for handle '{rule.handle}' has no file path")
        # keep absolute-looking paths under the root
        return self._root_dir / rule.file_path.lstrip("/\\")

    def _last_modified(self, rule: AssetRule) -> int:
        full_path = self.asset_path(rule)
        try:
            exists = full_path.exists()
        except OSError as exc:
            raise StatFailure(f"Cannot check {full_path}: {exc}") from exc
        if not exists:
            self._logger.warning(
                json.dumps(
                    {
                        "event": "asset_file_missing",
                        "handle": rule.handle,
                        "path": str(full_path),
                        "message": (
                            f"Cannot invalidate cache for '{rule.handle}' because "
                            f"the asset file does not exist here > {full_path}"
                        ),
                    },
                    ensure_ascii=False,
                )
            )
            raise MissingAssetFile(f"Asset file does not exist: {full_path}")

        try:
            mtime = int(self._stat(full_path).st_mtime)
        except (OSError, AttributeError, TypeError, ValueError) as exc:
            raise StatFailure(f"Cannot stat {full_path}: {exc}") from exc
        if not mtime:
            raise StatFailure(f"Empty modification time for {full_path}")
        return mtime

    def _with_version(self, url: str, version: str) -> str:
        try:
            return add_query_arg(url, VERSION_PARAM, version)
        except ValueError as exc:
            raise InvalidUrl(f"Cannot parse url {url!r}: {exc}") from exc

    def _finish(self, resolution: Resolution) -> Resolution:
        self._trace("After ", resolution.url)
        return resolution

    def _trace(self, label: str, url: str) -> None:
        if self._debug:
            self._logger.info("%s: %s: %s", type(self).__name__, label, url)
