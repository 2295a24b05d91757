import argparse
import logging
import sys
from pathlib import Path

import dotenv

from interlock_net.config import AnalysisConfig
from interlock_net.pipeline import InterlockPipeline

dotenv.load_dotenv()


def main():
    # Default root path
    default_root = Path(__file__).parents[1] / "datasets/sample"

    parser = argparse.ArgumentParser(description="Run interlocking affiliation network analysis.")
    parser.add_argument(
        "input_csv",
        nargs="?",
        type=Path,
        default=default_root / "affiliations.csv",
        help=f"Actor,Entity edge list (default: {default_root / 'affiliations.csv'})",
    )
    parser.add_argument(
        "--output_dir",
        type=Path,
        default=None,
        help="Output directory (default: <input dir>/output)",
    )
    parser.add_argument(
        "--clique_threshold",
        type=int,
        default=None,
        help="Minimum clique size (default: $INTERLOCK_CLIQUE_THRESHOLD or 3)",
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(__name__)

    try:
        if args.clique_threshold is not None:
            config = AnalysisConfig(clique_threshold=args.clique_threshold)
        else:
            config = AnalysisConfig.from_env()
        pipeline = InterlockPipeline(
            input_csv=args.input_csv,
            output_dir=args.output_dir or args.input_csv.parent / "output",
            config=config,
        )
        pipeline.run()
    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
