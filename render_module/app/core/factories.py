# 📁 render_module/core/factories.py
from ..config.settings import settings
from ..providers.capture.base import BaseCaptureProvider

# --- Capture Provider Factory ---
def get_capture_provider() -> BaseCaptureProvider:
    """Factory to create and return a capture provider based on settings."""
    if settings.CAPTURE_PROVIDER == "playwright":
        from ..providers.capture.playwright import PlaywrightCaptureProvider
        return PlaywrightCaptureProvider(
            user_agent=settings.USER_AGENT,
            nav_timeout_ms=settings.CAPTURE_NAV_TIMEOUT_MS,
            fallback_timeout_ms=settings.CAPTURE_FALLBACK_TIMEOUT_MS,
            settle_ms=settings.CAPTURE_SETTLE_MS,
            scroll=settings.CAPTURE_SCROLL,
        )
    else:
        raise ValueError(f"Unsupported capture provider: {settings.CAPTURE_PROVIDER}")
