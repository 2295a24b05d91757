"""Maximal clique enumeration on the actor network.

A clique is a group of actors who are all pairwise interlocked. Cliques are
enumerated with Bron-Kerbosch using the Tomita pivot rule. When nothing
reaches the requested size the search is repeated once for pairs, so the
report shows tightly linked pairs rather than nothing.
"""

import logging
from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ..config import DEFAULT_CLIQUE_THRESHOLD, FALLBACK_CLIQUE_THRESHOLD, MAX_CONNECTORS

logger = logging.getLogger(__name__)

Clique = tuple[str, ...]

CLIQUE_SORT_SEPARATOR = "|"


@dataclass(frozen=True)
class CliqueResult:
    """Cliques found and the size threshold that produced them."""

    cliques: tuple[Clique, ...] = ()
    threshold: int = DEFAULT_CLIQUE_THRESHOLD

    @property
    def largest(self) -> int:
        """Size of the largest clique (0 when none were found)."""
        return max((len(c) for c in self.cliques), default=0)


@dataclass(frozen=True)
class Connector:
    """Actor belonging to more than one reported clique."""

    name: str
    count: int


def find_cliques(
    adjacency: Mapping[str, Sequence[str]],
    min_size: int = DEFAULT_CLIQUE_THRESHOLD,
) -> CliqueResult:
    """Enumerate maximal cliques of at least ``min_size`` members.

    If none are found and ``min_size`` is above the fallback size, the search
    runs once more at the fallback size; ``CliqueResult.threshold`` tells
    which size was used.

    Args:
        adjacency: Symmetric node -> neighbors mapping
        min_size: Minimum clique size to report

    Returns:
        CliqueResult with cliques sorted by size (largest first), ties broken
        by their joined member names
    """
    cliques = _enumerate(adjacency, min_size)
    threshold = min_size
    if not cliques and min_size > FALLBACK_CLIQUE_THRESHOLD:
        logger.info(
            f"No cliques of size >= {min_size}; retrying at size {FALLBACK_CLIQUE_THRESHOLD}."
        )
        threshold = FALLBACK_CLIQUE_THRESHOLD
        cliques = _enumerate(adjacency, threshold)

    cliques.sort(key=lambda c: (-len(c), CLIQUE_SORT_SEPARATOR.join(c), c))
    logger.debug(f"Found {len(cliques)} cliques at threshold {threshold}.")
    return CliqueResult(cliques=tuple(cliques), threshold=threshold)


def find_cross_clique_connectors(
    cliques: Sequence[Clique], limit: int = MAX_CONNECTORS
) -> list[Connector]:
    """Actors that sit in more than one clique, most cliques first.

    Each clique counts at most once per actor. Ties are broken by name and
    the list is cut at ``limit`` entries.
    """
    counts: Counter[str] = Counter()
    for clique in cliques:
        counts.update(set(clique))

    connectors = [Connector(name=name, count=count) for name, count in counts.items() if count > 1]
    connectors.sort(key=lambda c: (-c.count, c.name))
    return connectors[:limit]


def _enumerate(adjacency: Mapping[str, Sequence[str]], threshold: int) -> list[Clique]:
    """Run Bron-Kerbosch from scratch and collect cliques of ``threshold``+ members."""
    neighbors = {node: frozenset(adj) for node, adj in adjacency.items()}
    results: list[Clique] = []
    seen: set[Clique] = set()

    def expand(r: tuple[str, ...], p: dict[str, None], x: dict[str, None]) -> None:
        # p and x are owned by this call; callers always pass fresh copies
        if not p and not x:
            if len(r) >= threshold:
                clique = tuple(sorted(r))
                if clique not in seen:
                    seen.add(clique)
                    results.append(clique)
            return

        pivot = next(iter(p), None)
        if pivot is None:
            pivot = next(iter(x))
        pivot_neighbors = neighbors.get(pivot, frozenset())

        for v in [u for u in p if u not in pivot_neighbors]:
            v_neighbors = neighbors.get(v, frozenset())
            expand(
                r + (v,),
                {u: None for u in p if u in v_neighbors},
                {u: None for u in x if u in v_neighbors},
            )
            del p[v]
            x[v] = None

    expand((), dict.fromkeys(sorted(adjacency)), {})
    return results
