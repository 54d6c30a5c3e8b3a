# 📁 render_module/config/settings.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal
from dotenv import load_dotenv


env_file_path = Path(__file__).resolve().parent.parent.parent / ".env.app"

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- Core Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOG_DIR: Path = BASE_DIR / "logs"
    WORK_DIR: Path = BASE_DIR / "work"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE_MAX_BYTES: int = 5 * 1024 * 1024
    LOG_FILE_BACKUPS: int = 5

    # --- Compositing Engine ---
    FFMPEG_BIN: str = "ffmpeg"
    RENDER_TIMEOUT_SEC: float = 600.0
    MAX_CONCURRENT_RENDERS: int = os.cpu_count() or 1

    # --- Timeline ---
    INTRO_SEC: float = 1.5
    END_CARD_SEC: float = 4.0
    MIN_TOTAL_SEC: float = 5.0

    # --- Output ---
    VIDEO_WIDTH: int = 1920
    VIDEO_HEIGHT: int = 1080
    VIDEO_FPS: int = 30

    # --- Branding ---
    LOGO_WIDTH: int = 220
    LOGO_X: int = 48
    LOGO_Y: int = 40
    LOGO_SHADOW_OFFSET: int = 6
    LOGO_SHADOW_OPACITY: float = 0.45
    LOGO_SHADOW_BLUR: int = 8

    # --- Overlay Text ---
    BRAND_LINE1: str = "Your website, in motion"
    BRAND_LINE2: str = ""
    CTA_LINE1: str = "Visit us today"
    CTA_LINE2: str = ""
    FONT_FILE: Optional[Path] = None
    TITLE_FONT_SIZE: int = 72
    SUBTITLE_FONT_SIZE: int = 44
    FONT_COLOR: str = "white"
    END_CARD_DIM_OPACITY: float = 0.6

    # --- Site Capture ---
    CAPTURE_PROVIDER: Literal["playwright"] = "playwright"
    CAPTURE_NAV_TIMEOUT_MS: int = 120_000
    CAPTURE_FALLBACK_TIMEOUT_MS: int = 30_000
    CAPTURE_SETTLE_MS: int = 1_500
    CAPTURE_SCROLL: bool = True
    USER_AGENT: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X) AppleWebKit/537.36 (KHTML, like Gecko) Chrome Safari"

    # --- Asset Fetch ---
    FETCH_TIMEOUT_SEC: float = 30.0

    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
load_dotenv(env_file_path)

def create_directories():
    """Create necessary directories if they don't exist."""
    dirs = [
        settings.LOG_DIR,
        settings.WORK_DIR
    ]
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)

create_directories()
