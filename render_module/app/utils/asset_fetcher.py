# 📁 render_module/utils/asset_fetcher.py
import httpx
from pathlib import Path
from typing import Optional

from ..config.settings import settings
from ..core.errors import FetchError
from ..models.media import MediaAsset, MediaKind
from ..utils.logging import logger

class AssetFetcher:
    """
    Downloads remote files (audio, logo images) into a request workspace.
    Unlike a cache, every call hits the network and any failure is fatal.
    """
    def __init__(self, timeout: float = settings.FETCH_TIMEOUT_SEC, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.async_client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": settings.USER_AGENT},
            follow_redirects=True,
        )

    async def fetch(self, url: str, dest: Path, kind: MediaKind) -> MediaAsset:
        """Streams `url` to `dest` and returns it as a MediaAsset of `kind`."""
        logger.info(f"Downloading file from {url} to {dest}")
        try:
            async with self.async_client.stream("GET", url) as response:
                response.raise_for_status()
                with open(dest, "wb") as f:
                    async for chunk in response.aiter_bytes():
                        f.write(chunk)
        except httpx.HTTPStatusError as e:
            dest.unlink(missing_ok=True)
            logger.error(f"HTTP error downloading {url}: {e.response.status_code}")
            raise FetchError(
                f"Download of {url} returned HTTP {e.response.status_code}",
                details=str(e),
            ) from e
        except httpx.RequestError as e:
            dest.unlink(missing_ok=True)
            logger.error(f"Network error downloading {url}: {e}")
            raise FetchError(f"Could not download {url}", details=str(e)) from e

        logger.info(f"Finished downloading to {dest}")
        return MediaAsset(path=dest, kind=kind)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.async_client.aclose()
