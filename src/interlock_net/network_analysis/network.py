"""Domain models for affiliation networks."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

import networkx as nx


class NodeKind(str, Enum):
    """The two sides of the bipartite affiliation graph."""

    ACTOR = "actor"
    ENTITY = "entity"


def freeze_mappings(obj: object, *names: str) -> None:
    """Replace the named mapping fields of a frozen dataclass with read-only copies."""
    for name in names:
        object.__setattr__(obj, name, MappingProxyType(dict(getattr(obj, name))))


@dataclass(frozen=True, order=True)
class NodeId:
    """Identifies a node by kind and name.

    The kind is part of the identity, so an actor and an entity that happen
    to share a literal name are distinct nodes.
    """

    kind: NodeKind
    name: str

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.name}"


@dataclass(frozen=True)
class AffiliationRecord:
    """One (actor, entity) affiliation, e.g. a director sitting on a board."""

    actor: str
    entity: str


@dataclass(frozen=True)
class NetworkNode:
    """Represents a node in the bipartite network."""

    node_id: NodeId
    degree: int = 0

    @property
    def kind(self) -> NodeKind:
        return self.node_id.kind

    @property
    def name(self) -> str:
        return self.node_id.name


@dataclass(frozen=True)
class NetworkEdge:
    """Represents an actor-entity edge; weight counts duplicate records."""

    source: NodeId
    target: NodeId
    weight: int = 1


@dataclass(frozen=True)
class BipartiteGraph:
    """Actor-entity bipartite network.

    Name tuples keep first-seen order. Affiliation tuples hold the distinct
    opposite-kind names a node connects to, also in first-seen order, while
    degrees count every record including exact duplicates.
    """

    actors: tuple[str, ...] = ()
    entities: tuple[str, ...] = ()
    actor_degree: Mapping[str, int] = field(default_factory=dict)
    entity_degree: Mapping[str, int] = field(default_factory=dict)
    actor_affiliations: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    entity_affiliations: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    edges: tuple[NetworkEdge, ...] = ()

    def __post_init__(self) -> None:
        freeze_mappings(
            self, "actor_degree", "entity_degree", "actor_affiliations", "entity_affiliations"
        )

    def names(self, kind: NodeKind) -> tuple[str, ...]:
        """Return the node names of one kind."""
        return self.actors if kind is NodeKind.ACTOR else self.entities

    def degrees(self, kind: NodeKind) -> Mapping[str, int]:
        """Return the per-node record counts of one kind."""
        return self.actor_degree if kind is NodeKind.ACTOR else self.entity_degree

    def affiliations(self, kind: NodeKind) -> Mapping[str, tuple[str, ...]]:
        """Return the per-node affiliation sets of one kind."""
        return self.actor_affiliations if kind is NodeKind.ACTOR else self.entity_affiliations

    @property
    def nodes(self) -> list[NetworkNode]:
        """Actor nodes followed by entity nodes."""
        return [
            NetworkNode(node_id=NodeId(kind, name), degree=self.degrees(kind)[name])
            for kind in NodeKind
            for name in self.names(kind)
        ]

    @property
    def num_nodes(self) -> int:
        """Total number of nodes."""
        return len(self.actors) + len(self.entities)

    @property
    def num_edges(self) -> int:
        """Number of distinct actor-entity pairs."""
        return len(self.edges)

    @property
    def num_records(self) -> int:
        """Number of affiliation records, duplicates included."""
        return sum(edge.weight for edge in self.edges)


@dataclass(frozen=True)
class ProjectionEdge:
    """Same-kind edge annotated with the intermediaries both ends share."""

    source: str
    target: str
    shared: tuple[str, ...]

    @property
    def weight(self) -> int:
        return len(self.shared)


@dataclass(frozen=True)
class Projection:
    """Monopartite projection of the bipartite network onto one node kind."""

    kind: NodeKind
    nodes: tuple[str, ...] = ()
    edges: tuple[ProjectionEdge, ...] = ()
    adjacency: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        freeze_mappings(self, "adjacency")

    @property
    def num_nodes(self) -> int:
        """Total number of nodes."""
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        """Total number of edges."""
        return len(self.edges)

    def to_networkx(self) -> nx.Graph:
        """Build a NetworkX graph with ``weight`` and ``shared`` edge attributes."""
        G = nx.Graph(kind=self.kind.value)
        G.add_nodes_from(self.nodes)
        for edge in self.edges:
            G.add_edge(edge.source, edge.target, weight=edge.weight, shared=list(edge.shared))
        return G
