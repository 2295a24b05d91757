"""Write the network report as sectioned CSV or JSON."""

import csv
import json
import logging
from pathlib import Path

from .models import CentralitySummary, NetworkReport

logger = logging.getLogger(__name__)

MEMBER_SEPARATOR = " | "


def _score(value: float) -> str:
    return f"{value:.3f}"


def write_report_csv(path: Path, report: NetworkReport) -> None:
    """Write the report as one CSV with blank-line separated sections."""
    path.parent.mkdir(parents=True, exist_ok=True)
    summary = report.summary
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(["Section", "Field", "Value"])
        for label, value in [
            ("Total Entities", summary.total_entities),
            ("Total Actors", summary.total_actors),
            ("Total Affiliations", summary.total_affiliations),
            ("Avg Affiliations/Actor", summary.avg_affiliations_per_actor),
            ("Actors with >1 affiliation", summary.actors_with_multiple_affiliations),
            ("Entity pairs with overlap", summary.entity_pairs_with_overlap),
            ("Actor cliques identified", summary.actor_cliques),
            ("Largest actor clique", summary.largest_actor_clique),
            ("Cross-clique connectors", summary.cross_clique_connectors),
        ]:
            w.writerow(["Summary", label, value])
        for title, centrality in [
            ("Actor", report.actor_centrality),
            ("Entity", report.entity_centrality),
        ]:
            c = centrality.centralization
            w.writerow(["Summary", f"{title} centralization (degree)", _score(c.degree)])
            w.writerow(["Summary", f"{title} centralization (closeness)", _score(c.closeness)])
            w.writerow(
                ["Summary", f"{title} centralization (betweenness)", _score(c.betweenness)]
            )

        w.writerow([])
        w.writerow(["Actors with Multiple Affiliations", "Actor", "Affiliations"])
        for m in report.multi_affiliation_actors:
            w.writerow(["Actor", m.name, m.affiliations])

        w.writerow([])
        w.writerow(["Entity Overlaps", "Entity Pair", "Shared Actors", "Via"])
        for o in report.entity_overlaps:
            w.writerow(["Overlap", o.pair, o.shared, MEMBER_SEPARATOR.join(o.via)])

        _write_centrality_rows(w, "Actor Centrality", report.actor_centrality)
        _write_centrality_rows(w, "Entity Centrality", report.entity_centrality)

        w.writerow([])
        w.writerow(["Actor Cliques", "Size", "Members"])
        for clique in report.cliques.cliques:
            w.writerow(["Clique", len(clique), MEMBER_SEPARATOR.join(clique)])

        w.writerow([])
        w.writerow(["Cross-Clique Connectors", "Name", "Cliques Participated"])
        for connector in report.cliques.connectors:
            w.writerow(["Connector", connector.name, connector.count])

    logger.info(f"Report written to {path}")


def _write_centrality_rows(w, title: str, summary: CentralitySummary) -> None:
    w.writerow([])
    w.writerow([title, "Measure", "Name", "Score", "Details"])
    for label, items in [
        ("Degree", summary.degree),
        ("Closeness", summary.closeness),
        ("Betweenness", summary.betweenness),
    ]:
        for item in items:
            detail = f"Connections: {item.connections}" if item.connections is not None else ""
            w.writerow([title, label, item.name, _score(item.score), detail])


def write_report_json(path: Path, report: NetworkReport) -> None:
    """Write the report as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info(f"Report written to {path}")
