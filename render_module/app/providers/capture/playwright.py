# 📁 render_module/providers/capture/playwright.py
import re
from pathlib import Path
from typing import Tuple

from playwright.sync_api import sync_playwright, Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from .base import BaseCaptureProvider
from ...core.errors import CaptureError
from ...models.media import MediaAsset
from ...utils.logging import logger

# Walks the page down in viewport steps so lazy-loaded images start fetching,
# then returns to the top for the screenshot.
SCROLL_SCRIPT = """
async () => {
    const step = window.innerHeight;
    for (let y = 0; y < document.body.scrollHeight; y += step) {
        window.scrollTo(0, y);
        await new Promise(r => setTimeout(r, 100));
    }
    window.scrollTo(0, 0);
}
"""

def normalize_url(url: str) -> str:
    url = url.strip()
    if re.match(r"^https?://", url, re.IGNORECASE):
        return url
    return f"https://{url}"

class PlaywrightCaptureProvider(BaseCaptureProvider):
    """Headless Chromium screenshot of the first viewport of a page."""

    def __init__(
        self,
        user_agent: str,
        nav_timeout_ms: int = 120_000,
        fallback_timeout_ms: int = 30_000,
        settle_ms: int = 1_500,
        scroll: bool = True
    ):
        self.user_agent = user_agent
        self.nav_timeout_ms = nav_timeout_ms
        self.fallback_timeout_ms = fallback_timeout_ms
        self.settle_ms = settle_ms
        self.scroll = scroll

    def _navigate(self, page, url: str) -> None:
        try:
            logger.info(f"Going to website (domcontentloaded): {url}")
            page.goto(url, wait_until="domcontentloaded", timeout=self.nav_timeout_ms)
        except PlaywrightTimeoutError as e:
            logger.warning(f"goto timeout on domcontentloaded, retry with commit: {e}")
            page.goto(url, wait_until="commit", timeout=self.fallback_timeout_ms)

    def capture(self, url: str, viewport: Tuple[int, int], dest: Path) -> MediaAsset:
        target = normalize_url(url)
        width, height = viewport
        try:
            with sync_playwright() as p:
                logger.info("Launching Playwright Chromium...")
                browser = p.chromium.launch()
                try:
                    context = browser.new_context(
                        ignore_https_errors=True,
                        user_agent=self.user_agent,
                        viewport={"width": width, "height": height},
                    )
                    page = context.new_page()
                    page.set_default_navigation_timeout(self.nav_timeout_ms)
                    self._navigate(page, target)
                    if self.scroll:
                        page.evaluate(SCROLL_SCRIPT)
                    page.wait_for_timeout(self.settle_ms)
                    page.screenshot(path=str(dest), full_page=False)
                finally:
                    browser.close()
        except PlaywrightTimeoutError as e:
            raise CaptureError(f"Timed out loading {target}", details=str(e)) from e
        except PlaywrightError as e:
            raise CaptureError(f"Could not capture {target}", details=str(e)) from e

        logger.info(f"Screenshot saved to {dest}")
        return MediaAsset(path=dest, kind="image")
