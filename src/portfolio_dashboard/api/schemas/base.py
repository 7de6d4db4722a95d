"""Shared schema base classes."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase for the dashboard frontend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope: {success, data} or {success: false, error}."""

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
