from typing import Any
from pydantic import BaseModel, field_validator, model_validator
from .container_defs import *

class ContainerSnapshot(BaseModel):
    items: list[Any]
    size: int
    is_empty: bool

    @field_validator("items")
    @classmethod
    def validate_items(cls, v):
        if any(item is None for item in v):
            raise ValueError("reachable nodes must hold a value")
        return v

    @field_validator("size")
    @classmethod
    def validate_size(cls, v):
        if v < 0:
            raise ValueError("size must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_sanity(self):
        if self.size != len(self.items):
            raise ValueError("size must match number of items")

        if self.is_empty != (self.size == 0):
            raise ValueError("is_empty must be true only for size 0")

        return self

    def rendered(self) -> str:
        if self.is_empty:
            return EMPTY_RENDER

        parts = [str(item) for item in self.items]
        return RENDER_OPEN + RENDER_SEPARATOR.join(parts) + RENDER_CLOSE
