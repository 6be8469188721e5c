"""
Asset providers.

Sky-culture resources are addressed by ``asset://`` URLs, e.g.
``asset://skycultures/western/names.txt``. Providers return the raw bytes
or raise AssetNotFoundError.
"""

import logging
import os
from typing import Dict, Protocol

from .errors import AssetNotFoundError

logger = logging.getLogger(__name__)

ASSET_SCHEME = "asset://"


def skyculture_asset(culture: str, filename: str) -> str:
    return f"{ASSET_SCHEME}skycultures/{culture}/{filename}"


class AssetProvider(Protocol):
    def get_asset(self, path: str) -> bytes:
        ...


class FileAssetProvider:
    """Serves asset:// URLs from a directory on disk."""

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def resolve_path(self, path: str) -> str:
        """
        Map an asset URL to a file path under the root.

        Raises:
            AssetNotFoundError: If the URL escapes the root directory
        """
        rel = path[len(ASSET_SCHEME):] if path.startswith(ASSET_SCHEME) else path
        full_path = os.path.abspath(os.path.join(self.root, rel))
        if os.path.commonpath([self.root, full_path]) != self.root:
            raise AssetNotFoundError(path, "Asset paths must stay inside the asset root.")
        return full_path

    def get_asset(self, path: str) -> bytes:
        full_path = self.resolve_path(path)
        try:
            with open(full_path, "rb") as f:
                return f.read()
        except (IOError, OSError) as e:
            logger.error(f"Failed to read asset {path} from {full_path}: {e}")
            raise AssetNotFoundError(path) from e


class MemoryAssetProvider:
    """Serves assets from a dict, keyed by full asset URL."""

    def __init__(self, assets: Dict[str, bytes]):
        self.assets = dict(assets)

    def get_asset(self, path: str) -> bytes:
        if path not in self.assets:
            raise AssetNotFoundError(path)
        data = self.assets[path]
        return data.encode("utf-8") if isinstance(data, str) else data
