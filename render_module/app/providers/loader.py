from ..schemas.provider import Providers

from ..core.factories import get_capture_provider




providers = Providers(
    capture=get_capture_provider()
)
