# src/taskmaster/model/employee.py

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# Stored next to the attributes in the same JSON object.
RESERVED_ATTRIBUTE_KEYS = frozenset({"id", "name"})


@dataclass(frozen=True, slots=True)
class Employee:
    """
    An employee tasks can be assigned to.

    Only `id` matters to the model. `name` and `attributes` (phone, email, ...)
    are carried through persistence unchanged.
    """

    id: int
    name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Employee name is required")
        reserved = RESERVED_ATTRIBUTE_KEYS.intersection(self.attributes)
        if reserved:
            raise ValueError(f"Employee attributes cannot use reserved keys: {sorted(reserved)}")
        # Deep copy so a caller holding the original dict cannot reach into the record.
        frozen = MappingProxyType(copy.deepcopy(dict(self.attributes)))
        object.__setattr__(self, "attributes", frozen)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return (
            self.id == other.id
            and self.name == other.name
            and dict(self.attributes) == dict(other.attributes)
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name))
