"""
Tests for the bipartite network in interlock_net/network_analysis/bipartite_network.py.

Covers node ordering, degree counting with duplicate records, affiliation sets
and kind-tagged node identity.

Run: pytest tests/test_bipartite_network.py -v
"""

import pytest

from interlock_net.network_analysis import (
    AffiliationRecord,
    NodeId,
    NodeKind,
    build_bipartite_network,
)
from interlock_net.network_analysis.network import NetworkEdge

# ── build_bipartite_network() ───────────────────────────────────────────────


class TestBuildBipartiteNetwork:
    def test_empty(self):
        graph = build_bipartite_network([])
        assert graph.actors == ()
        assert graph.entities == ()
        assert graph.num_nodes == 0
        assert graph.num_edges == 0
        assert graph.num_records == 0

    def test_insertion_order_preserved(self):
        graph = build_bipartite_network([("Zoe", "Beta"), ("Adam", "Alpha"), ("Zoe", "Alpha")])
        assert graph.actors == ("Zoe", "Adam")
        assert graph.entities == ("Beta", "Alpha")

    def test_accepts_records_and_tuples(self):
        graph = build_bipartite_network([AffiliationRecord("A", "X"), ("B", "X")])
        assert graph.actors == ("A", "B")
        assert graph.entity_affiliations["X"] == ("A", "B")

    def test_degree_counts_every_record(self):
        graph = build_bipartite_network([("A", "X"), ("A", "Y"), ("B", "X")])
        assert graph.actor_degree == {"A": 2, "B": 1}
        assert graph.entity_degree == {"X": 2, "Y": 1}

    def test_affiliation_sets(self):
        graph = build_bipartite_network([("A", "X"), ("A", "Y"), ("B", "X")])
        assert graph.actor_affiliations == {"A": ("X", "Y"), "B": ("X",)}
        assert graph.entity_affiliations == {"X": ("A", "B"), "Y": ("A",)}


class TestDuplicateRecords:
    """Duplicates add degree but never duplicate set entries or edges."""

    def _graph(self):
        return build_bipartite_network([("A", "X"), ("A", "X"), ("B", "X")])

    def test_duplicate_increases_degree(self):
        graph = self._graph()
        assert graph.actor_degree["A"] == 2
        assert graph.entity_degree["X"] == 3

    def test_affiliation_set_collapses_duplicates(self):
        graph = self._graph()
        assert graph.actor_affiliations["A"] == ("X",)
        assert graph.entity_affiliations["X"] == ("A", "B")

    def test_edge_weight_keeps_multiplicity(self):
        graph = self._graph()
        assert graph.edges == (
            NetworkEdge(NodeId(NodeKind.ACTOR, "A"), NodeId(NodeKind.ENTITY, "X"), 2),
            NetworkEdge(NodeId(NodeKind.ACTOR, "B"), NodeId(NodeKind.ENTITY, "X"), 1),
        )
        assert graph.num_edges == 2
        assert graph.num_records == 3


class TestNodeIdentity:
    def test_same_name_different_kind(self):
        graph = build_bipartite_network([("Acme", "Acme")])
        assert graph.actors == ("Acme",)
        assert graph.entities == ("Acme",)
        ids = [node.node_id for node in graph.nodes]
        assert ids == [NodeId(NodeKind.ACTOR, "Acme"), NodeId(NodeKind.ENTITY, "Acme")]
        assert ids[0] != ids[1]

    def test_node_id_string_form(self):
        assert str(NodeId(NodeKind.ACTOR, "Jane")) == "actor:Jane"
        assert str(NodeId(NodeKind.ENTITY, "Acme")) == "entity:Acme"

    def test_nodes_carry_degree(self):
        graph = build_bipartite_network([("A", "X"), ("A", "Y")])
        degrees = {str(node.node_id): node.degree for node in graph.nodes}
        assert degrees == {"actor:A": 2, "entity:X": 1, "entity:Y": 1}


class TestReadOnlyGraph:
    def test_degrees_reject_assignment(self):
        graph = build_bipartite_network([("A", "X"), ("B", "X")])
        with pytest.raises(TypeError):
            graph.actor_degree["A"] = 99
        with pytest.raises(TypeError):
            graph.entity_degree["X"] = 0
        assert graph.actor_degree["A"] == 1

    def test_affiliations_reject_assignment(self):
        graph = build_bipartite_network([("A", "X")])
        with pytest.raises(TypeError):
            graph.actor_affiliations["A"] = ()
        with pytest.raises(TypeError):
            del graph.entity_affiliations["X"]

    def test_default_graph_is_read_only(self):
        with pytest.raises(TypeError):
            build_bipartite_network([]).actor_degree["A"] = 1
