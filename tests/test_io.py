"""
Tests for edge-list ingestion and table/report writers.

Run: pytest tests/test_io.py -v
"""

import csv
import json
import logging

import networkx as nx
import pandas as pd
import pytest

from interlock_net import AffiliationRecord, analyze_network
from interlock_net.network_analysis.io import (
    parse_affiliations,
    read_affiliations,
    write_centrality_table,
    write_edges,
    write_graphml,
    write_nodes,
    write_projection_edges,
)
from interlock_net.report import write_report_csv, write_report_json

# ── Fixtures ─────────────────────────────────────────────────────────────────

TEXT = """\
# Director,Company
Jane Dela Cruz,Apex Mining

  L. Garcia , Apex Mining
no comma here
,Orphan Co
Jane Dela Cruz,Acme, Inc.
   # indented comment
Jane Dela Cruz,Apex Mining
"""


def _rows(path) -> list[list[str]]:
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


# ── parse_affiliations() ─────────────────────────────────────────────────────


class TestParseAffiliations:
    def test_records(self):
        assert parse_affiliations(TEXT) == [
            AffiliationRecord("Jane Dela Cruz", "Apex Mining"),
            AffiliationRecord("L. Garcia", "Apex Mining"),
            AffiliationRecord("Jane Dela Cruz", "Acme, Inc."),
            AffiliationRecord("Jane Dela Cruz", "Apex Mining"),
        ]

    def test_empty_text(self):
        assert parse_affiliations("") == []

    def test_rejected_lines_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            parse_affiliations(TEXT)
        assert "Skipped 2 malformed line(s)" in caplog.text

    def test_crlf_line_endings(self):
        assert parse_affiliations("A,X\r\nB,Y\r\n") == [
            AffiliationRecord("A", "X"),
            AffiliationRecord("B", "Y"),
        ]


class TestReadAffiliations:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "edges.csv"
        path.write_text(TEXT, encoding="utf-8")
        assert len(read_affiliations(path)) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_affiliations(tmp_path / "missing.csv")


# ── Network writers ──────────────────────────────────────────────────────────


class TestNetworkWriters:
    def _analysis(self):
        return analyze_network([("A", "X"), ("B", "X"), ("A", "X"), ("A", "Y")])

    def test_write_nodes(self, tmp_path):
        path = tmp_path / "nested" / "nodes.csv"
        write_nodes(path, self._analysis().graph.nodes)
        assert _rows(path) == [
            ["node_id", "kind", "name", "degree"],
            ["actor:A", "actor", "A", "3"],
            ["actor:B", "actor", "B", "1"],
            ["entity:X", "entity", "X", "3"],
            ["entity:Y", "entity", "Y", "1"],
        ]

    def test_write_edges(self, tmp_path):
        path = tmp_path / "edges.csv"
        write_edges(path, self._analysis().graph.edges)
        assert _rows(path) == [
            ["source", "target", "weight"],
            ["actor:A", "entity:X", "2"],
            ["actor:B", "entity:X", "1"],
            ["actor:A", "entity:Y", "1"],
        ]

    def test_write_projection_edges(self, tmp_path):
        path = tmp_path / "entity_edges.csv"
        write_projection_edges(path, self._analysis().entity_projection)
        assert _rows(path) == [["source", "target", "weight", "shared"], ["X", "Y", "1", "A"]]

    def test_write_centrality_table(self, tmp_path):
        path = tmp_path / "centrality.csv"
        write_centrality_table(path, self._analysis().actor_centrality)
        df = pd.read_csv(path)
        assert list(df["name"]) == ["A", "B"]
        assert list(df["degree"]) == [1.0, 1.0]

    def test_write_graphml(self, tmp_path):
        path = tmp_path / "actors.graphml"
        write_graphml(path, self._analysis().actor_projection)
        G = nx.read_graphml(path)
        assert set(G.nodes) == {"A", "B"}
        assert G.edges["A", "B"]["shared"] == "X"


# ── Report writers ───────────────────────────────────────────────────────────


class TestReportWriters:
    def _report(self):
        return analyze_network([("A", "X"), ("B", "X"), ("C", "X"), ("A", "Y")]).report

    def test_report_csv_sections(self, tmp_path):
        path = tmp_path / "report.csv"
        write_report_csv(path, self._report())
        rows = _rows(path)
        assert rows[0] == ["Section", "Field", "Value"]
        assert ["Summary", "Total Actors", "3"] in rows
        assert ["Summary", "Actor centralization (betweenness)", "0.000"] in rows
        assert ["Actor", "A", "2"] in rows
        assert ["Overlap", "X ↔ Y", "1", "A"] in rows
        assert ["Actor Centrality", "Degree", "A", "1.000", "Connections: 2"] in rows
        assert ["Clique", "3", "A | B | C"] in rows
        assert ["Cross-Clique Connectors", "Name", "Cliques Participated"] in rows

    def test_report_json(self, tmp_path):
        path = tmp_path / "out" / "report.json"
        report = self._report()
        write_report_json(path, report)
        with path.open(encoding="utf-8") as f:
            assert json.load(f) == report.to_dict()
