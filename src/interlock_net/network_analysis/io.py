"""Utilities for reading affiliation lists and writing network tables to CSV."""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

import networkx as nx

from .centrality import CentralityResult
from .network import AffiliationRecord, NetworkEdge, NetworkNode, Projection

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
SHARED_SEPARATOR = " | "


def parse_affiliations(text: str) -> list[AffiliationRecord]:
    """Parse ``Actor,Entity`` lines into affiliation records.

    Blank lines and lines starting with ``#`` are skipped. Each line is split
    at its first comma, so entity names may themselves contain commas. Lines
    without a comma or with an empty field are rejected.

    Args:
        text: Raw edge-list text

    Returns:
        Records in input order, duplicates kept
    """
    records: list[AffiliationRecord] = []
    rejected = 0
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        actor, sep, entity = line.partition(",")
        actor, entity = actor.strip(), entity.strip()
        if not sep or not actor or not entity:
            rejected += 1
            logger.debug(f"Rejected line {line_no}: {raw!r}")
            continue
        records.append(AffiliationRecord(actor=actor, entity=entity))

    if rejected:
        logger.warning(f"Skipped {rejected} malformed line(s); kept {len(records)} records.")
    return records


def read_affiliations(path: Path) -> list[AffiliationRecord]:
    """Read an ``Actor,Entity`` edge-list file."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        logger.error(f"Error reading file: {e}")
        raise FileNotFoundError(f"Could not read affiliation file: {path}") from e
    records = parse_affiliations(text)
    logger.info(f"Read {len(records)} affiliation records from {path}")
    return records


def write_nodes(path: Path, nodes: list[NetworkNode]) -> None:
    """Write bipartite nodes to CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(["node_id", "kind", "name", "degree"])
        for node in nodes:
            w.writerow([str(node.node_id), node.kind.value, node.name, node.degree])


def write_edges(path: Path, edges: Iterable[NetworkEdge]) -> None:
    """Write bipartite actor-entity edges to CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(["source", "target", "weight"])
        for edge in edges:
            w.writerow([str(edge.source), str(edge.target), edge.weight])


def write_projection_edges(path: Path, projection: Projection) -> None:
    """Write projection edges with their shared intermediaries to CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(["source", "target", "weight", "shared"])
        for edge in projection.edges:
            w.writerow([edge.source, edge.target, edge.weight, SHARED_SEPARATOR.join(edge.shared)])


def write_centrality_table(path: Path, result: CentralityResult) -> None:
    """Write per-node centrality scores to CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df = result.to_frame()
    df.to_csv(path, index=False)


def write_graphml(path: Path, projection: Projection) -> None:
    """Write a projection as GraphML.

    GraphML has no list type, so shared intermediaries are joined into one
    string attribute.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    G = projection.to_networkx()
    for _u, _v, data in G.edges(data=True):
        data["shared"] = SHARED_SEPARATOR.join(data["shared"])
    nx.write_graphml(G, path)
