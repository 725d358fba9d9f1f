"""Base model for the Lenco SDK."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class LencoModel(BaseModel):
    """Shared config for Lenco models; unknown API fields are dropped unless a model allows them."""

    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict without unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)
