from fastapi import APIRouter

from asset_buster.api.routers import assets_router, health_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(assets_router)
