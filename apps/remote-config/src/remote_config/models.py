"""Pydantic models for remote config API payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class RemoteConfigAPIResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    # namespace values stay opaque; lookups only accept non-empty mappings
    configs: Optional[Dict[str, Any]] = None

    @field_validator("configs", mode="before")
    @classmethod
    def drop_non_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, Mapping) else None

    def namespace(self, name: str) -> Optional[Dict[str, Any]]:
        if not self.configs:
            return None
        value = self.configs.get(name)
        if isinstance(value, Mapping) and value:
            return dict(value)
        return None


@dataclass
class RemoteConfigMetric:
    fetch_time_api_success: Optional[int] = None
    fetch_time_api_fail: Optional[int] = None


__all__ = ["RemoteConfigAPIResponse", "RemoteConfigMetric"]
