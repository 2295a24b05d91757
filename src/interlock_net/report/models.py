"""Data classes for the network analysis report."""

from dataclasses import asdict, dataclass, field
from typing import Any

from ..config import DEFAULT_CLIQUE_THRESHOLD
from ..network_analysis.centrality import Centralization, CentralityResult, RankedNode
from ..network_analysis.cliques import Clique, CliqueResult, Connector
from ..network_analysis.network import BipartiteGraph, Projection


@dataclass(frozen=True)
class ReportSummary:
    """Headline counts of the network.

    Attributes:
        total_actors: Distinct actors.
        total_entities: Distinct entities.
        total_affiliations: Affiliation records, duplicates included.
        actor_edges: Edges in the actor projection.
        entity_edges: Edges in the entity projection.
        avg_affiliations_per_actor: Mean actor degree, 2 decimals.
        actors_with_multiple_affiliations: Actors with degree > 1.
        entity_pairs_with_overlap: Entity pairs sharing at least one actor.
        actor_cliques: Number of reported actor cliques.
        largest_actor_clique: Size of the largest reported clique.
        cross_clique_connectors: Number of reported connectors.
    """

    total_actors: int = 0
    total_entities: int = 0
    total_affiliations: int = 0
    actor_edges: int = 0
    entity_edges: int = 0
    avg_affiliations_per_actor: float = 0.0
    actors_with_multiple_affiliations: int = 0
    entity_pairs_with_overlap: int = 0
    actor_cliques: int = 0
    largest_actor_clique: int = 0
    cross_clique_connectors: int = 0


@dataclass(frozen=True)
class MultiAffiliation:
    """Actor holding more than one affiliation."""

    name: str
    affiliations: int


@dataclass(frozen=True)
class EntityOverlap:
    """Pair of entities sharing actors."""

    a: str
    b: str
    via: tuple[str, ...]

    @property
    def shared(self) -> int:
        return len(self.via)

    @property
    def pair(self) -> str:
        return f"{self.a} ↔ {self.b}"


@dataclass(frozen=True)
class CentralitySummary:
    """Top-ranked nodes per measure plus graph centralization."""

    degree: tuple[RankedNode, ...] = ()
    closeness: tuple[RankedNode, ...] = ()
    betweenness: tuple[RankedNode, ...] = ()
    centralization: Centralization = field(default_factory=Centralization)


@dataclass(frozen=True)
class CliqueSummary:
    """Reported actor cliques and their connectors."""

    cliques: tuple[Clique, ...] = ()
    connectors: tuple[Connector, ...] = ()
    threshold: int = DEFAULT_CLIQUE_THRESHOLD


@dataclass(frozen=True)
class NetworkReport:
    """Everything the presentation and export layers show about a network."""

    summary: ReportSummary = field(default_factory=ReportSummary)
    multi_affiliation_actors: tuple[MultiAffiliation, ...] = ()
    entity_overlaps: tuple[EntityOverlap, ...] = ()
    actor_centrality: CentralitySummary = field(default_factory=CentralitySummary)
    entity_centrality: CentralitySummary = field(default_factory=CentralitySummary)
    cliques: CliqueSummary = field(default_factory=CliqueSummary)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view of the report."""
        return {
            "summary": asdict(self.summary),
            "multi_affiliation_actors": [asdict(m) for m in self.multi_affiliation_actors],
            "entity_overlaps": [
                {"a": o.a, "b": o.b, "shared": o.shared, "via": list(o.via)}
                for o in self.entity_overlaps
            ],
            "centrality": {
                "actors": _centrality_dict(self.actor_centrality),
                "entities": _centrality_dict(self.entity_centrality),
            },
            "cliques": {
                "threshold": self.cliques.threshold,
                "actor_cliques": [
                    {"members": list(c), "size": len(c)} for c in self.cliques.cliques
                ],
                "cross_clique_connectors": [asdict(c) for c in self.cliques.connectors],
            },
        }


@dataclass(frozen=True)
class NetworkAnalysis:
    """Report together with the graphs and full results it was built from."""

    graph: BipartiteGraph
    actor_projection: Projection
    entity_projection: Projection
    actor_centrality: CentralityResult
    entity_centrality: CentralityResult
    cliques: CliqueResult
    report: NetworkReport


def _centrality_dict(summary: CentralitySummary) -> dict[str, Any]:
    def rows(items: tuple[RankedNode, ...]) -> list[dict[str, Any]]:
        return [
            {k: v for k, v in asdict(item).items() if v is not None or k != "connections"}
            for item in items
        ]

    return {
        "degree": rows(summary.degree),
        "closeness": rows(summary.closeness),
        "betweenness": rows(summary.betweenness),
        "centralization": asdict(summary.centralization),
    }
