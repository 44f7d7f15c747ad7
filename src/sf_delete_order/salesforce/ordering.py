"""Delete order for a set of SObjects.

A lookup field ``A.f -> B`` with ``deleteConstraint`` Restrict means the
platform refuses to delete a ``B`` record while an ``A`` record still points
at it, so every ``A`` has to go first. Each such field becomes the graph edge
``A -> B`` and the topological order of the graph is a safe delete order.

SetNull and Cascade lookups are resolved by the platform itself and add no
edge. MasterDetail fields add no edge either.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sf_delete_order.core.graph import DirectedGraph
from sf_delete_order.exceptions import UnknownTargetError

from .models import DeleteConstraint, LookupField, LookupType, SObject

logger = logging.getLogger(__name__)


def requires_ordering(field: LookupField) -> bool:
    """Return True when ``field`` forces its owner to be deleted before its target."""
    if field.lookup_type is LookupType.MASTER_DETAIL:
        # TODO: confirm whether master-detail children must be ordered before
        # their parent for bulk deletes; the platform cascades them today.
        return False
    return (
        field.lookup_type is LookupType.LOOKUP
        and field.delete_constraint is DeleteConstraint.RESTRICT
    )


def map_name_to_index(sobjects: Sequence[SObject]) -> dict[str, int]:
    """Map each SObject name to its position in ``sobjects``.

    Names are expected to be unique. When they are not, the last SObject
    with a given name wins.
    """
    index_by_name: dict[str, int] = {}
    for index, sobject in enumerate(sobjects):
        if sobject.name in index_by_name:
            logger.debug(
                "Duplicate SObject name %s at %d shadows index %d",
                sobject.name, index, index_by_name[sobject.name],
            )
        index_by_name[sobject.name] = index
    return index_by_name


def to_graph(sobjects: Sequence[SObject]) -> DirectedGraph:
    """Build the Restrict dependency graph, one vertex per input position.

    Raises:
        UnknownTargetError: If an ordering field targets an SObject that is
            not part of ``sobjects``.
    """
    index_by_name = map_name_to_index(sobjects)

    graph = DirectedGraph(len(sobjects))
    for index, sobject in enumerate(sobjects):
        edges: list[int] = []
        for field in sobject.lookup_fields:
            if not requires_ordering(field):
                continue
            target = index_by_name.get(field.target_sobject)
            if target is None:
                raise UnknownTargetError(sobject, field)
            edges.append(target)
        graph.add_edges(index, edges)

    logger.debug("Built delete dependency graph: %r", graph)
    return graph


def delete_order(sobjects: Sequence[SObject]) -> list[SObject] | None:
    """Return ``sobjects`` reordered so they can be deleted front to back.

    The returned list holds the same objects that were passed in. The input
    sequence is not modified.

    Returns:
        The delete order, or ``None`` if the Restrict lookups form a cycle.

    Raises:
        UnknownTargetError: If a Restrict lookup targets an unknown SObject.
    """
    sorted_indices = to_graph(sobjects).topological_sort()
    if sorted_indices is None:
        return None
    return [sobjects[index] for index in sorted_indices]


__all__ = ["requires_ordering", "map_name_to_index", "to_graph", "delete_order"]
