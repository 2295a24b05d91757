"""Centrality measures for monopartite affiliation networks.

All measures are normalized to [0, 1] and stay defined on degenerate graphs
(empty, single node, fully disconnected): a node that cannot be measured
scores 0.0 instead of NaN.

Closeness uses the reach-weighted form ``(r / (n - 1)) * (r / sum(d))`` where
``r`` is the number of nodes reachable from the source. On a connected graph
this is the classic closeness; on a disconnected graph it discounts nodes
that only see a small component.

Betweenness follows Brandes (2001), "A faster algorithm for betweenness
centrality", halved for undirected graphs and divided by the number of
node pairs not involving the node, ``(n - 1)(n - 2) / 2``.
"""

import logging
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

import pandas as pd

from .network import freeze_mappings

logger = logging.getLogger(__name__)

# node -> neighbors, as produced by build_projection()
Adjacency = Mapping[str, Sequence[str]]

MEASURES = ("degree", "closeness", "betweenness")


@dataclass(frozen=True)
class Centralization:
    """Graph-level centralization per measure (1.0 = dominated by one hub)."""

    degree: float = 0.0
    closeness: float = 0.0
    betweenness: float = 0.0


@dataclass(frozen=True)
class RankedNode:
    """One row of a top-N centrality ranking.

    Attributes:
        name: Node name.
        score: Normalized centrality score.
        connections: Raw neighbor count (degree rankings only).
    """

    name: str
    score: float
    connections: int | None = None


@dataclass(frozen=True)
class CentralityResult:
    """Per-node centrality scores of one monopartite network."""

    nodes: tuple[str, ...] = ()
    degree: Mapping[str, float] = field(default_factory=dict)
    degree_raw: Mapping[str, int] = field(default_factory=dict)
    closeness: Mapping[str, float] = field(default_factory=dict)
    betweenness: Mapping[str, float] = field(default_factory=dict)
    centralization: Centralization = field(default_factory=Centralization)

    def __post_init__(self) -> None:
        freeze_mappings(self, "degree", "degree_raw", "closeness", "betweenness")

    def scores(self, measure: str) -> Mapping[str, float]:
        """Return the per-node scores for ``measure``."""
        if measure not in MEASURES:
            raise ValueError(f"Unknown centrality measure: {measure!r}")
        return getattr(self, measure)

    def to_frame(self) -> pd.DataFrame:
        """One row per node with raw degree and the three normalized scores."""
        return pd.DataFrame(
            {
                "name": list(self.nodes),
                "degree_raw": [self.degree_raw[n] for n in self.nodes],
                "degree": [self.degree[n] for n in self.nodes],
                "closeness": [self.closeness[n] for n in self.nodes],
                "betweenness": [self.betweenness[n] for n in self.nodes],
            },
            columns=["name", "degree_raw", "degree", "closeness", "betweenness"],
        )


def compute_centrality(adjacency: Adjacency) -> CentralityResult:
    """Compute degree, closeness and betweenness centrality for every node.

    Args:
        adjacency: Symmetric node -> neighbors mapping. Iteration order of the
            mapping and of each neighbor sequence fixes the traversal order,
            which keeps floating point sums reproducible.

    Returns:
        CentralityResult with per-node scores and graph centralization
    """
    nodes = tuple(adjacency)
    if not nodes:
        return CentralityResult()

    degree_raw, degree = degree_centrality(adjacency)
    closeness = closeness_centrality(adjacency)
    betweenness = betweenness_centrality(adjacency)

    centralization = Centralization(
        degree=compute_centralization(list(degree.values())),
        closeness=compute_centralization(list(closeness.values())),
        betweenness=compute_centralization(list(betweenness.values())),
    )
    logger.debug(f"Centrality computed for {len(nodes)} nodes: {centralization}")

    return CentralityResult(
        nodes=nodes,
        degree=degree,
        degree_raw=degree_raw,
        closeness=closeness,
        betweenness=betweenness,
        centralization=centralization,
    )


def degree_centrality(adjacency: Adjacency) -> tuple[dict[str, int], dict[str, float]]:
    """Return (raw neighbor counts, counts divided by n - 1)."""
    n = len(adjacency)
    raw = {node: len(neighbors) for node, neighbors in adjacency.items()}
    normalized = {node: count / (n - 1) if n > 1 else 0.0 for node, count in raw.items()}
    return raw, normalized


def closeness_centrality(adjacency: Adjacency) -> dict[str, float]:
    """Reach-weighted closeness from one BFS per source node."""
    n = len(adjacency)
    closeness: dict[str, float] = {}
    for source in adjacency:
        distances = _bfs_distances(adjacency, source)
        reached = [d for node, d in distances.items() if node != source and d > 0]
        if not reached:
            closeness[source] = 0.0
            continue
        reach_ratio = len(reached) / (n - 1)
        efficiency = len(reached) / sum(reached)
        closeness[source] = reach_ratio * efficiency
    return closeness


def betweenness_centrality(adjacency: Adjacency) -> dict[str, float]:
    """Normalized shortest-path betweenness (Brandes accumulation)."""
    n = len(adjacency)
    totals = dict.fromkeys(adjacency, 0.0)

    for source in adjacency:
        order, predecessors, sigma = _shortest_path_dag(adjacency, source)
        delta = dict.fromkeys(order, 0.0)
        # BFS order reversed visits nodes by non-increasing distance
        for w in reversed(order):
            coefficient = 1.0 + delta[w]
            for v in predecessors[w]:
                delta[v] += sigma[v] / sigma[w] * coefficient
            if w != source:
                totals[w] += delta[w]

    pairs = (n - 1) * (n - 2) / 2 if n > 2 else 0
    # each unordered pair was counted from both endpoints
    return {
        node: min(1.0, total / 2 / pairs) if pairs > 0 else 0.0 for node, total in totals.items()
    }


def compute_centralization(values: Sequence[float]) -> float:
    """Freeman-style centralization ``(max - mean) / max`` rounded to 4 places.

    Returns 0.0 for an empty sequence or when no node scores above zero.
    """
    if not values:
        return 0.0
    peak = max(values)
    if peak <= 0:
        return 0.0
    mean = sum(values) / len(values)
    return max(0.0, round((peak - mean) / peak, 4))


def rank_centrality(
    scores: Mapping[str, float],
    raw: Mapping[str, int] | None = None,
    limit: int = 3,
) -> list[RankedNode]:
    """Top ``limit`` nodes by score, ties broken by name.

    Args:
        scores: Node -> normalized score
        raw: Optional node -> raw neighbor count, attached as ``connections``
        limit: Number of nodes to keep

    Returns:
        List of RankedNode, highest score first
    """
    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return [
        RankedNode(
            name=name,
            score=score,
            connections=raw.get(name, 0) if raw is not None else None,
        )
        for name, score in ranked[:limit]
    ]


def _bfs_distances(adjacency: Adjacency, source: str) -> dict[str, int]:
    """Hop distances from ``source`` to every node it can reach."""
    distances = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for neighbor in adjacency.get(current, ()):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)
    return distances


def _shortest_path_dag(
    adjacency: Adjacency, source: str
) -> tuple[list[str], dict[str, list[str]], dict[str, float]]:
    """BFS that also counts shortest paths (sigma) and records predecessors.

    Returns:
        Tuple of (visit order, predecessors, sigma) over the nodes reachable
        from ``source``.
    """
    order: list[str] = []
    predecessors: dict[str, list[str]] = {source: []}
    sigma: dict[str, float] = {source: 1.0}
    distance = {source: 0}
    queue = deque([source])

    while queue:
        v = queue.popleft()
        order.append(v)
        for w in adjacency.get(v, ()):
            if w not in distance:
                distance[w] = distance[v] + 1
                sigma[w] = 0.0
                predecessors[w] = []
                queue.append(w)
            if distance[w] == distance[v] + 1:
                sigma[w] += sigma[v]
                predecessors[w].append(v)

    return order, predecessors, sigma
