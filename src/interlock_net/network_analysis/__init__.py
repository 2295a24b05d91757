from .bipartite_network import build_bipartite_network
from .centrality import compute_centrality, compute_centralization, rank_centrality
from .cliques import find_cliques, find_cross_clique_connectors
from .network import AffiliationRecord, BipartiteGraph, NodeId, NodeKind, Projection
from .projection import build_projection, project_actors, project_entities

__all__ = [
    "AffiliationRecord",
    "BipartiteGraph",
    "NodeId",
    "NodeKind",
    "Projection",
    "build_bipartite_network",
    "build_projection",
    "compute_centrality",
    "compute_centralization",
    "find_cliques",
    "find_cross_clique_connectors",
    "project_actors",
    "project_entities",
    "rank_centrality",
]
