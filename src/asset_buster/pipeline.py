from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Sequence, Set, Tuple

from asset_buster.resolver import VersionResolver


AssetKind = Literal["style", "script"]
KINDS: Tuple[AssetKind, ...] = ("style", "script")


@dataclass(frozen=True)
class EnqueuedAsset:
    handle: str
    src: str
    kind: AssetKind
    deps: Tuple[str, ...] = ()


class AssetQueue:
    """
    Collects stylesheets and scripts for a page and finalizes their URLs.

    `finalize_src` is the one place where an asset URL goes through the
    resolver before it is written into the page.
    """

    def __init__(self, resolver: VersionResolver):
        self._resolver = resolver
        self._assets: Dict[Tuple[AssetKind, str], EnqueuedAsset] = {}

    def enqueue_style(self, handle: str, src: str, deps: Sequence[str] = ()) -> EnqueuedAsset:
        return self._enqueue(EnqueuedAsset(handle=handle, src=src, kind="style", deps=tuple(deps)))

    def enqueue_script(self, handle: str, src: str, deps: Sequence[str] = ()) -> EnqueuedAsset:
        return self._enqueue(EnqueuedAsset(handle=handle, src=src, kind="script", deps=tuple(deps)))

    def _enqueue(self, asset: EnqueuedAsset) -> EnqueuedAsset:
        # first registration of a handle wins
        return self._assets.setdefault((asset.kind, asset.handle), asset)

    def __len__(self) -> int:
        return len(self._assets)

    def finalize_src(self, asset: EnqueuedAsset) -> str:
        return self._resolver.resolve(asset.src, asset.handle)

    def resolved(self, kind: Optional[AssetKind] = None) -> List[Tuple[EnqueuedAsset, str]]:
        kinds = KINDS if kind is None else (kind,)
        out: List[Tuple[EnqueuedAsset, str]] = []
        for k in kinds:
            for asset in self._ordered(k):
                out.append((asset, self.finalize_src(asset)))
        return out

    def render_tags(self, kind: Optional[AssetKind] = None) -> str:
        lines = []
        for asset, src in self.resolved(kind):
            handle = html.escape(asset.handle, quote=True)
            href = html.escape(src, quote=True)
            if asset.kind == "style":
                lines.append(f'<link rel="stylesheet" id="{handle}-css" href="{href}">')
            else:
                lines.append(f'<script id="{handle}-js" src="{href}"></script>')
        return "\n".join(lines)

    def _ordered(self, kind: AssetKind) -> List[EnqueuedAsset]:
        by_handle = {a.handle: a for (k, _), a in self._assets.items() if k == kind}
        ordered: List[EnqueuedAsset] = []
        done: Set[str] = set()
        visiting: Set[str] = set()

        def visit(asset: EnqueuedAsset) -> None:
            if asset.handle in done or asset.handle in visiting:
                return
            visiting.add(asset.handle)
            for dep in asset.deps:
                if dep in by_handle:
                    visit(by_handle[dep])
            visiting.discard(asset.handle)
            done.add(asset.handle)
            ordered.append(asset)

        for asset in by_handle.values():
            visit(asset)
        return ordered
