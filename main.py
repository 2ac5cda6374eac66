import sys
import json
import uuid
import logging
import argparse

from sqlalchemy import create_engine

from core.config_loader import AppConfig, load_config
from core.recommender import RecommendationRanker
from database.database import create_session_factory, init_db
from database.uow import recommendation_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def rank_company(company_id: str, config: AppConfig):
    """Rank applicants for all open internships of a company and return JSON-ready dicts."""
    session_factory = create_session_factory(create_engine(config.database.url))

    with recommendation_uow(session_factory) as repo:
        ranker = RecommendationRanker(repo=repo, config=config.recommendation)
        results = ranker.rank_all_open_internships(uuid.UUID(company_id))
        return [r.to_dict() for r in results]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="InternMatch applicant recommendations")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create database tables")

    rank_parser = subparsers.add_parser("rank", help="Rank applicants for a company's open internships")
    rank_parser.add_argument("company_id", help="Company UUID")

    args = parser.parse_args(argv)
    config = load_config(args.config)

    if args.command == "init-db":
        init_db(create_engine(config.database.url))
        logger.info("Database tables created")
        return 0

    try:
        uuid.UUID(args.company_id)
    except ValueError:
        logger.error(f"Invalid company id: {args.company_id}")
        return 2

    recommendations = rank_company(args.company_id, config)
    if not recommendations:
        logger.info("No open internships found")
    print(json.dumps(recommendations, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
