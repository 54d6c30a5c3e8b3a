from pydantic import BaseModel, ConfigDict

from ..providers.capture.base import BaseCaptureProvider

class Providers(BaseModel):
    capture: BaseCaptureProvider
    model_config = ConfigDict(arbitrary_types_allowed=True)
