from asset_buster.api.routers.assets import router as assets_router
from asset_buster.api.routers.health import router as health_router
