"""
End-to-end test of InterlockPipeline on the bundled sample dataset.

Run: pytest tests/test_pipeline.py -v
"""

from pathlib import Path

from interlock_net.config import AnalysisConfig
from interlock_net.pipeline import InterlockPipeline

SAMPLE_CSV = Path(__file__).parents[1] / "datasets" / "sample" / "affiliations.csv"

EXPECTED_OUTPUTS = [
    "01_networks/bipartite_nodes.csv",
    "01_networks/bipartite_edges.csv",
    "01_networks/actor_edges.csv",
    "01_networks/entity_edges.csv",
    "01_networks/actor_network.graphml",
    "01_networks/entity_network.graphml",
    "02_centrality/actor_centrality.csv",
    "02_centrality/entity_centrality.csv",
    "03_report/report.csv",
    "03_report/report.json",
]


class TestInterlockPipeline:
    def test_writes_all_outputs(self, tmp_path):
        pipeline = InterlockPipeline(SAMPLE_CSV, tmp_path)
        analysis = pipeline.run()
        for relative in EXPECTED_OUTPUTS:
            assert (tmp_path / relative).is_file(), relative
        assert analysis.report.summary.total_actors == 16

    def test_timings_recorded(self, tmp_path, capsys):
        pipeline = InterlockPipeline(SAMPLE_CSV, tmp_path)
        pipeline.run()
        assert list(pipeline.timings) == [
            "Ingestion",
            "Network Analysis",
            "Network Export",
            "Report Export",
        ]
        assert "Total Computation" in capsys.readouterr().out

    def test_config_threshold_used(self, tmp_path):
        pipeline = InterlockPipeline(SAMPLE_CSV, tmp_path, AnalysisConfig(clique_threshold=4))
        analysis = pipeline.run()
        assert all(len(c) >= 4 for c in analysis.report.cliques.cliques)

    def test_timing_table(self, tmp_path):
        pipeline = InterlockPipeline(SAMPLE_CSV, tmp_path)
        pipeline.timings = {"Ingestion": 0.001, "Network Analysis": 0.003}
        lines = pipeline.timing_table()
        assert lines[0].split() == ["Step", "|", "Time", "(ms)", "|", "Share"]
        assert lines[2].split() == ["Ingestion", "|", "1.000", "|", "25.0%"]
        assert lines[3].split() == ["Network", "Analysis", "|", "3.000", "|", "75.0%"]
        assert lines[-1].split() == ["Total", "Computation", "|", "4.000", "|", "100.0%"]
