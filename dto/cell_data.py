from pydantic import BaseModel, field_validator
from typing import Any


def freeze_key(key: Any) -> Any:
    """JSON has no tuples; turn arrays back into (nested) tuples so keys stay hashable."""
    if isinstance(key, list):
        return tuple(freeze_key(k) for k in key)
    return key


class CellData(BaseModel):
    """A single recorded cell.  ``value`` may be ``None`` (a recorded null)."""
    header: Any
    identifier: Any
    value: Any = None

    @field_validator("header", "identifier")
    @classmethod
    def freeze_cell_key(cls, v: Any) -> Any:
        return freeze_key(v)
