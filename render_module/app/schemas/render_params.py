from pydantic import BaseModel, Field, field_validator
from typing import Optional

REQUIRED_FIELDS = ("website_url", "audio_url")

class RenderParams(BaseModel):
    website_url: Optional[str] = Field(None, description="Page to capture. A missing scheme defaults to https.")
    audio_url: Optional[str] = Field(None, description="Audio track played during the hero segment.")
    logo_url: Optional[str] = Field(None, description="Optional brand mark drawn in the top-left corner.")
    brand_line1: Optional[str] = Field(None, description="Intro title. Falls back to the configured default.")
    brand_line2: Optional[str] = Field(None, description="Intro subtitle.")
    cta_line1: Optional[str] = Field(None, description="End-card call to action.")
    cta_line2: Optional[str] = Field(None, description="End-card secondary line.")

    @field_validator('website_url', 'audio_url', 'logo_url', mode='after')
    @classmethod
    def blank_to_none(cls, v):
        if v is None:
            return v
        v = v.strip()
        return v or None

    def missing_fields(self) -> list:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    @classmethod
    def missing_from(cls, body) -> list:
        """Required fields absent or blank in a raw body that failed validation."""
        if not isinstance(body, dict):
            return list(REQUIRED_FIELDS)
        return [
            name for name in REQUIRED_FIELDS
            if not isinstance(body.get(name), str) or not body[name].strip()
        ]
