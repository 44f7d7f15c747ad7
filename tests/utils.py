"""Builders shared by the sf-delete-order test suite."""

from __future__ import annotations

from pathlib import Path

from sf_delete_order.salesforce.models import (
    DeleteConstraint,
    LookupField,
    LookupType,
    SObject,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

METADATA_NS = "http://soap.sforce.com/2006/04/metadata"


def restrict(target: str, full_name: str | None = None) -> LookupField:
    return LookupField(
        full_name=full_name or f"Restrict_{target}__c",
        target_sobject=target,
        lookup_type=LookupType.LOOKUP,
        delete_constraint=DeleteConstraint.RESTRICT,
    )


def lookup(
    target: str,
    constraint: DeleteConstraint,
    lookup_type: LookupType = LookupType.LOOKUP,
) -> LookupField:
    return LookupField(
        full_name=f"{constraint}_{target}__c",
        target_sobject=target,
        lookup_type=lookup_type,
        delete_constraint=constraint,
    )


def sobject(name: str, *fields: LookupField) -> SObject:
    return SObject(name=name, lookup_fields=fields)


def object_xml(*fields: dict[str, str], namespace: bool = True) -> str:
    """Build a CustomObject document from field element dicts."""
    body = ""
    for field in fields:
        inner = "".join(f"<{tag}>{text}</{tag}>" for tag, text in field.items())
        body += f"    <fields>{inner}</fields>\n"
    xmlns = f' xmlns="{METADATA_NS}"' if namespace else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<CustomObject{xmlns}>\n{body}</CustomObject>\n"
    )


def assert_respects_edges(order: list[int], edges: list[tuple[int, int]]) -> None:
    position = {vertex: i for i, vertex in enumerate(order)}
    for source, target in edges:
        assert position[source] < position[target], f"{source} -> {target} violated in {order}"
