import logging
from pathlib import Path

import dotenv

from interlock_net.config import AnalysisConfig
from interlock_net.network_analysis.io import read_affiliations
from interlock_net.report import analyze, write_report_csv, write_report_json

dotenv.load_dotenv()


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root = Path(__file__).parents[1] / "datasets/sample"
    print(f"Using data root directory: {root}")

    report_dir = root / "output" / "03_report"

    # Step 2: Centrality, cliques and summary report
    config = AnalysisConfig.from_env()
    report = analyze(read_affiliations(root / "affiliations.csv"), config.clique_threshold)

    write_report_csv(report_dir / "report.csv", report)
    write_report_json(report_dir / "report.json", report)


if __name__ == "__main__":
    main()
