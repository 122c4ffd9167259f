from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request

from asset_buster.api.deps import get_resolver
from asset_buster.api.schemas import (
    ResolutionItem,
    ResolveRequest,
    ResolveResponse,
    RuleItem,
    RulesResponse,
)
from asset_buster.resolver import VersionResolver


router = APIRouter(prefix="/assets")


@router.post(
    "/resolve",
    response_model=ResolveResponse,
    summary="Set the ver query parameter on asset URLs",
)
async def resolve_assets(
    request: Request,
    payload: ResolveRequest,
    resolver: VersionResolver = Depends(get_resolver),
) -> ResolveResponse:
    logger = logging.getLogger(__name__)
    trace_id = getattr(request.state, "trace_id", None) or ""
    results = []
    for asset in payload.assets:
        res = resolver.explain(asset.url, asset.handle)
        results.append(
            ResolutionItem(
                handle=res.handle,
                source_url=res.source_url,
                url=res.url,
                strategy=res.strategy,
                version=res.version,
                error=res.error,
            )
        )
    logger.info(
        json.dumps(
            {
                "event": "assets_resolved",
                "trace_id": trace_id,
                "count": len(results),
                "changed": sum(1 for r in results if r.strategy != "unchanged"),
            },
            ensure_ascii=False,
        )
    )
    return ResolveResponse(results=results, trace_id=trace_id)


@router.get("/rules", response_model=RulesResponse, summary="List configured rules")
async def list_rules(resolver: VersionResolver = Depends(get_resolver)) -> RulesResponse:
    return RulesResponse(
        root_dir=str(resolver.root_dir),
        rules=[RuleItem(**rule.to_dict()) for rule in resolver.rules],
    )
