# =============================================================================
# app/routers/assets.py - Static Sprite Endpoints
# =============================================================================
# Lists the sprite directory at "/" and serves each file at "/<name>".
# This router is mounted last so its catch-all path never shadows the API.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from core.services.asset_service import AssetService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
def list_assets():
    """
    List available assets.

    Hidden files are skipped. Each listed name can be fetched at /<name>.
    """
    try:
        assets = AssetService.list_assets()
    except OSError as e:
        logger.error(f"Failed to list assets in {AssetService.assets_dir()}: {e}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Failed to list assets", "code": "ASSETS_UNAVAILABLE"},
        )

    return {
        "status": "ok",
        "assets": assets,
        "message": "Access files directly: /sprite-idle-01.png, etc.",
    }


@router.get("/{asset_name}")
def get_asset(asset_name: str):
    """Serve one asset file."""
    return FileResponse(AssetService.resolve_asset(asset_name))
