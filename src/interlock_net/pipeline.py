import logging
import time
from pathlib import Path

from interlock_net.config import AnalysisConfig
from interlock_net.network_analysis.io import (
    read_affiliations,
    write_centrality_table,
    write_edges,
    write_graphml,
    write_nodes,
    write_projection_edges,
)
from interlock_net.network_analysis.network import AffiliationRecord
from interlock_net.report import (
    NetworkAnalysis,
    analyze_network,
    write_report_csv,
    write_report_json,
)

logger = logging.getLogger(__name__)


class InterlockPipeline:
    """
    Orchestrates the affiliation network analysis from an edge-list file.
    """

    def __init__(
        self,
        input_csv: Path,
        output_dir: Path,
        config: AnalysisConfig | None = None,
    ) -> None:
        self.input_csv = Path(input_csv)
        self.output_dir = Path(output_dir)
        self.config = config or AnalysisConfig()

        # Define directory structure
        self.dirs = {
            "networks": self.output_dir / "01_networks",
            "centrality": self.output_dir / "02_centrality",
            "report": self.output_dir / "03_report",
        }
        self.timings: dict[str, float] = {}

    def run(self) -> NetworkAnalysis:
        """Execute the full pipeline."""
        logger.info(f"Starting interlock pipeline on {self.input_csv}")
        start_time = time.perf_counter()

        records = self._step_1_ingest()
        analysis = self._step_2_analysis(records)
        self._step_3_network_export(analysis)
        self._step_4_report_export(analysis)

        total_elapsed = time.perf_counter() - start_time
        logger.info(f"Pipeline completed in {total_elapsed:.2f} seconds")
        self._print_timings()
        return analysis

    def timing_table(self) -> list[str]:
        """Per-step wall time and its share of the total, one line per step."""
        total = sum(self.timings.values())
        rule = "-" * 48
        lines = [f"{'Step':<20} | {'Time (ms)':>10} | {'Share':>8}", rule]
        for step, seconds in self.timings.items():
            share = seconds / total if total > 0 else 0.0
            lines.append(f"{step:<20} | {seconds * 1000:>10.3f} | {share:>8.1%}")
        lines += [rule, f"{'Total Computation':<20} | {total * 1000:>10.3f} | {1.0:>8.1%}"]
        return lines

    def _print_timings(self) -> None:
        """Print table of computation times."""
        print("\n".join(["", *self.timing_table(), ""]))

    def _step_1_ingest(self) -> list[AffiliationRecord]:
        """Read the affiliation edge list."""
        start = time.perf_counter()
        records = read_affiliations(self.input_csv)
        self.timings["Ingestion"] = time.perf_counter() - start
        return records

    def _step_2_analysis(self, records: list[AffiliationRecord]) -> NetworkAnalysis:
        """Build the networks and run centrality and clique analysis."""
        start = time.perf_counter()
        analysis = analyze_network(records, self.config.clique_threshold)
        self.timings["Network Analysis"] = time.perf_counter() - start
        return analysis

    def _step_3_network_export(self, analysis: NetworkAnalysis) -> None:
        """Write node, edge and centrality tables plus GraphML projections."""
        start = time.perf_counter()
        networks = self.dirs["networks"]
        write_nodes(networks / "bipartite_nodes.csv", analysis.graph.nodes)
        write_edges(networks / "bipartite_edges.csv", analysis.graph.edges)
        for name, projection in [
            ("actor", analysis.actor_projection),
            ("entity", analysis.entity_projection),
        ]:
            write_projection_edges(networks / f"{name}_edges.csv", projection)
            write_graphml(networks / f"{name}_network.graphml", projection)

        centrality = self.dirs["centrality"]
        write_centrality_table(centrality / "actor_centrality.csv", analysis.actor_centrality)
        write_centrality_table(centrality / "entity_centrality.csv", analysis.entity_centrality)
        self.timings["Network Export"] = time.perf_counter() - start

        logger.info(f"Network tables written to {networks} and {centrality}")

    def _step_4_report_export(self, analysis: NetworkAnalysis) -> None:
        """Write the report as CSV and JSON."""
        start = time.perf_counter()
        write_report_csv(self.dirs["report"] / "report.csv", analysis.report)
        write_report_json(self.dirs["report"] / "report.json", analysis.report)
        self.timings["Report Export"] = time.perf_counter() - start
