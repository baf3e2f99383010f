from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class GenerationParameters(BaseModel):
    """Named parameters passed to a generator's ``generate`` call."""
    model_config = ConfigDict(extra="allow")

    force: bool = Field(False, description="Overwrite existing files")

    def get_parameter(self, name: str, default: Any = None) -> Any:
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name, default)
