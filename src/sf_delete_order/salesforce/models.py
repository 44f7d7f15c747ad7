"""SObject metadata models.

An :class:`SObject` is one record-type definition; its :class:`LookupField`
entries are the typed, constrained references to other SObjects by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Sequence

PLATFORM_EVENT_SUFFIX = "__e"


class LookupType(StrEnum):
    """Relationship field types. Values match the metadata ``<type>`` text."""

    LOOKUP = "Lookup"
    MASTER_DETAIL = "MasterDetail"


class DeleteConstraint(StrEnum):
    """What the platform does to a referencing record when its target is deleted."""

    SET_NULL = "SetNull"
    RESTRICT = "Restrict"  # target cannot be deleted while referenced
    CASCADE = "Cascade"


@dataclass(frozen=True)
class LookupField:
    """Relationship field on an SObject."""

    full_name: str
    target_sobject: str
    lookup_type: LookupType
    delete_constraint: DeleteConstraint

    def to_dict(self) -> dict[str, Any]:
        return {
            "full_name": self.full_name,
            "target_sobject": self.target_sobject,
            "lookup_type": str(self.lookup_type),
            "delete_constraint": str(self.delete_constraint),
        }


@dataclass(frozen=True)
class SObject:
    """SObject definition with its relationship fields in declaration order."""

    name: str
    lookup_fields: tuple[LookupField, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("SObject name cannot be empty")
        # Accept any sequence, store as tuple so the object stays hashable
        object.__setattr__(self, "lookup_fields", tuple(self.lookup_fields))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "lookup_fields": [f.to_dict() for f in self.lookup_fields],
        }


def is_sobject(
    object_name: str,
    exclude_suffixes: Sequence[str] = (PLATFORM_EVENT_SUFFIX,),
) -> bool:
    """Return False for platform events, which hold no deletable records.

    ``exclude_suffixes`` widens the check to other non-deletable kinds such as
    big objects (``__b``).
    """
    return not any(object_name.endswith(suffix) for suffix in exclude_suffixes)


__all__ = [
    "PLATFORM_EVENT_SUFFIX",
    "LookupType",
    "DeleteConstraint",
    "LookupField",
    "SObject",
    "is_sobject",
]
