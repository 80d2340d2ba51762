"""Shared schema bases"""

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel


class PartialUpdate(BaseModel):
    """
    PATCH body. Only fields the caller sent are applied; an explicit null
    clears a field only if it is listed in CLEARABLE (required columns
    ignore null).
    """
    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset()

    def changes(self) -> Dict[str, Any]:
        fields = self.model_dump(exclude_unset=True)
        return {
            name: value for name, value in fields.items()
            if value is not None or name in self.CLEARABLE
        }
