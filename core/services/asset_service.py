# =============================================================================
# core/services/asset_service.py - Static Asset Lookup
# =============================================================================
# Lists and resolves the sprite files served at the site root. Only plain,
# non-hidden files directly inside ASSETS_DIR are reachable.
# =============================================================================

from pathlib import Path

from app.config import settings
from app.exceptions import AssetNotFoundError


class AssetService:
    """Service for the static sprite directory."""

    @staticmethod
    def assets_dir() -> Path:
        return Path(settings.ASSETS_DIR).resolve()

    @staticmethod
    def list_assets() -> list[str]:
        """
        Names of all visible files in the assets directory, sorted.

        Raises:
            OSError: If the directory is missing or unreadable
        """
        directory = AssetService.assets_dir()
        return sorted(
            entry.name
            for entry in directory.iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        )

    @staticmethod
    def resolve_asset(name: str) -> Path:
        """
        Map a requested name to a file inside the assets directory.

        Raises:
            AssetNotFoundError: For hidden names, path tricks, directories
                and missing files
        """
        if not name or name.startswith(".") or "/" in name or "\\" in name:
            raise AssetNotFoundError(name)

        directory = AssetService.assets_dir()
        path = (directory / name).resolve()
        if path.parent != directory or not path.is_file():
            raise AssetNotFoundError(name)
        return path
