"""Command-line entry point for the job board recommendation backend."""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import settings
from src.logging_config import setup_logging
from src.persistence.database import get_session, init_db
from src.recommendations.exceptions import RecommendationError
from src.recommendations.service import RecommendationService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Job board recommendation backend")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create database tables")

    recommend_parser = subparsers.add_parser(
        "recommend", help="Print job recommendations for a user as JSON"
    )
    recommend_parser.add_argument("firebase_uid", help="Firebase UID of the job seeker")
    recommend_parser.add_argument(
        "--hide-score",
        action="store_true",
        help="Drop the internal score from each job",
    )
    return parser


def run_recommend(firebase_uid: str, hide_score: bool = False) -> dict:
    """Fetch recommendations for a user and wrap them like the jobs API."""
    with get_session() as session:
        jobs = RecommendationService(session, settings).get_recommendations(firebase_uid)

    if hide_score:
        for job in jobs:
            job.pop("score", None)
    return {"jobs": jobs}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(
        settings.log_level,
        settings.log_file,
        logger_levels={"src.matching": settings.matching_log_level},
    )

    if args.command == "init-db":
        init_db()
        return 0

    try:
        payload = run_recommend(args.firebase_uid, hide_score=args.hide_score)
    except RecommendationError as e:
        logger.error("Failed to fetch recommendations: %s", e)
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
