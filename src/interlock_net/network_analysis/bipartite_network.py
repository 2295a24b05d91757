"""Build the actor-entity bipartite network from affiliation records.

Every record counts toward the degree of both of its endpoints, including
exact duplicates: an actor listed twice for the same entity holds two seats.
Affiliation sets and edges, on the other hand, collapse duplicates (the edge
weight keeps the multiplicity).
"""

import logging
from collections import Counter
from collections.abc import Iterable

from .network import AffiliationRecord, BipartiteGraph, NetworkEdge, NodeId, NodeKind

logger = logging.getLogger(__name__)

Record = AffiliationRecord | tuple[str, str]


def build_bipartite_network(records: Iterable[Record]) -> BipartiteGraph:
    """Build the bipartite network in a single pass over the records.

    Args:
        records: (actor, entity) pairs, either ``AffiliationRecord`` objects or
            plain 2-tuples. Both fields are expected to be non-empty trimmed
            strings; nothing is rejected here.

    Returns:
        BipartiteGraph with insertion-ordered node names, degree counters,
        affiliation sets and weighted actor-entity edges.
    """
    counts: Counter[tuple[str, str]] = Counter()
    actor_degree: Counter[str] = Counter()
    entity_degree: Counter[str] = Counter()
    # dict keys double as insertion-ordered sets
    actor_sets: dict[str, dict[str, None]] = {}
    entity_sets: dict[str, dict[str, None]] = {}

    for record in records:
        actor, entity = _unpack(record)
        counts[(actor, entity)] += 1
        actor_degree[actor] += 1
        entity_degree[entity] += 1
        actor_sets.setdefault(actor, {})[entity] = None
        entity_sets.setdefault(entity, {})[actor] = None

    edges = tuple(
        NetworkEdge(
            source=NodeId(NodeKind.ACTOR, actor),
            target=NodeId(NodeKind.ENTITY, entity),
            weight=weight,
        )
        for (actor, entity), weight in counts.items()
    )

    graph = BipartiteGraph(
        actors=tuple(actor_sets),
        entities=tuple(entity_sets),
        actor_degree=dict(actor_degree),
        entity_degree=dict(entity_degree),
        actor_affiliations={name: tuple(aff) for name, aff in actor_sets.items()},
        entity_affiliations={name: tuple(aff) for name, aff in entity_sets.items()},
        edges=edges,
    )

    logger.debug(
        f"Bipartite network built with {len(graph.actors)} actors, "
        f"{len(graph.entities)} entities and {graph.num_edges} distinct affiliations "
        f"({graph.num_records} records)."
    )
    return graph


def _unpack(record: Record) -> tuple[str, str]:
    if isinstance(record, AffiliationRecord):
        return record.actor, record.entity
    actor, entity = record
    return actor, entity
