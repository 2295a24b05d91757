"""Combine the network analyses into a single report.

``analyze`` is the entry point: it rebuilds every structure from the record
list on each call and keeps no state between calls, so callers that re-run
it on every input change decide themselves whether to cache.
"""

import logging
from collections.abc import Iterable

from ..config import DEFAULT_CLIQUE_THRESHOLD, TOP_CENTRALITY_N, AnalysisConfig
from ..network_analysis.bipartite_network import build_bipartite_network
from ..network_analysis.centrality import CentralityResult, compute_centrality, rank_centrality
from ..network_analysis.cliques import CliqueResult, find_cliques, find_cross_clique_connectors
from ..network_analysis.network import BipartiteGraph, Projection
from ..network_analysis.projection import project_actors, project_entities
from ..utils.validation import validate_records
from .models import (
    CentralitySummary,
    CliqueSummary,
    EntityOverlap,
    MultiAffiliation,
    NetworkAnalysis,
    NetworkReport,
    ReportSummary,
)

logger = logging.getLogger(__name__)


def analyze(
    records: Iterable[object], clique_threshold: int = DEFAULT_CLIQUE_THRESHOLD
) -> NetworkReport:
    """Analyze affiliation records and return the report.

    Args:
        records: (actor, entity) pairs of non-empty trimmed strings
        clique_threshold: Minimum clique size. Defaults to 3.

    Raises:
        ValueError: If a record or the threshold is invalid
    """
    return analyze_network(records, clique_threshold).report


def analyze_network(
    records: Iterable[object], clique_threshold: int = DEFAULT_CLIQUE_THRESHOLD
) -> NetworkAnalysis:
    """Like analyze() but also return the graphs and full centrality tables."""
    config = AnalysisConfig(clique_threshold=clique_threshold)
    graph = build_bipartite_network(validate_records(records))

    actor_projection = project_actors(graph)
    entity_projection = project_entities(graph)

    # the two projections are independent and only read the bipartite graph
    actor_centrality = compute_centrality(actor_projection.adjacency)
    entity_centrality = compute_centrality(entity_projection.adjacency)
    cliques = find_cliques(actor_projection.adjacency, config.clique_threshold)

    report = build_report(
        graph,
        actor_projection,
        entity_projection,
        actor_centrality,
        entity_centrality,
        cliques,
    )
    logger.info(
        f"Analyzed {report.summary.total_actors} actors and "
        f"{report.summary.total_entities} entities: {report.summary.actor_edges} actor links, "
        f"{report.summary.entity_edges} entity links, {report.summary.actor_cliques} cliques "
        f"(threshold {cliques.threshold})."
    )
    return NetworkAnalysis(
        graph=graph,
        actor_projection=actor_projection,
        entity_projection=entity_projection,
        actor_centrality=actor_centrality,
        entity_centrality=entity_centrality,
        cliques=cliques,
        report=report,
    )


def build_report(  # noqa: PLR0913
    graph: BipartiteGraph,
    actor_projection: Projection,
    entity_projection: Projection,
    actor_centrality: CentralityResult,
    entity_centrality: CentralityResult,
    cliques: CliqueResult,
) -> NetworkReport:
    """Aggregate already computed results; nothing is recomputed or mutated."""
    multi = sorted(
        (
            MultiAffiliation(name=name, affiliations=graph.actor_degree[name])
            for name in graph.actors
            if graph.actor_degree[name] > 1
        ),
        key=lambda m: -m.affiliations,
    )
    overlaps = sorted(
        (EntityOverlap(a=e.source, b=e.target, via=e.shared) for e in entity_projection.edges),
        key=lambda o: -o.shared,
    )
    connectors = find_cross_clique_connectors(cliques.cliques)

    actor_degrees = [graph.actor_degree[name] for name in graph.actors]
    avg_affiliations = sum(actor_degrees) / len(actor_degrees) if actor_degrees else 0.0

    summary = ReportSummary(
        total_actors=len(graph.actors),
        total_entities=len(graph.entities),
        total_affiliations=sum(graph.entity_degree.values()),
        actor_edges=actor_projection.num_edges,
        entity_edges=entity_projection.num_edges,
        avg_affiliations_per_actor=round(avg_affiliations, 2),
        actors_with_multiple_affiliations=len(multi),
        entity_pairs_with_overlap=len(overlaps),
        actor_cliques=len(cliques.cliques),
        largest_actor_clique=cliques.largest,
        cross_clique_connectors=len(connectors),
    )

    return NetworkReport(
        summary=summary,
        multi_affiliation_actors=tuple(multi),
        entity_overlaps=tuple(overlaps),
        actor_centrality=summarize_centrality(actor_centrality),
        entity_centrality=summarize_centrality(entity_centrality),
        cliques=CliqueSummary(
            cliques=cliques.cliques,
            connectors=tuple(connectors),
            threshold=cliques.threshold,
        ),
    )


def summarize_centrality(
    result: CentralityResult, limit: int = TOP_CENTRALITY_N
) -> CentralitySummary:
    """Top ``limit`` nodes per measure; the degree list carries raw counts."""
    return CentralitySummary(
        degree=tuple(rank_centrality(result.degree, result.degree_raw, limit)),
        closeness=tuple(rank_centrality(result.closeness, limit=limit)),
        betweenness=tuple(rank_centrality(result.betweenness, limit=limit)),
        centralization=result.centralization,
    )
