from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


Strategy = Literal["static", "dynamic", "unchanged"]


class HealthResponse(BaseModel):
    status: str = "ok"


class AssetRef(BaseModel):
    handle: str = Field(..., min_length=1, description="Handle the asset was enqueued with")
    url: str = Field(..., description="Asset source URL, may already carry query parameters")


class ResolveRequest(BaseModel):
    """
    Пакет ассетов для простановки `ver`.
    Порядок результатов совпадает с порядком `assets`.
    """

    assets: List[AssetRef] = Field(
        ...,
        min_length=1,
        description="Assets to resolve",
        examples=[[{"handle": "app-js", "url": "https://site/app.js?foo=bar"}]],
    )


class ResolutionItem(BaseModel):
    handle: str
    source_url: str
    url: str
    strategy: Strategy
    version: Optional[str] = None
    error: Optional[str] = Field(default=None, description="Code of the absorbed error, if any")


class ResolveResponse(BaseModel):
    results: List[ResolutionItem]
    trace_id: str


class RuleItem(BaseModel):
    handle: str
    version: Optional[str] = None
    file_path: Optional[str] = None


class RulesResponse(BaseModel):
    root_dir: str
    rules: List[RuleItem]
