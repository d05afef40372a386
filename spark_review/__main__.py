# run the review notes chapter by chapter
## python -m spark_review                 => every chapter in order
## python -m spark_review select sql      => only those
## python -m spark_review --list
import argparse
import importlib
import logging
import sys

from spark_review._log import setup_logging
from spark_review.session import ENVIRONMENTS, run_job

logger = logging.getLogger("spark_review")

TOPICS = {
    "runtime": "spark_review.runtime",
    "create": "spark_review.dataframes.creating",
    "select": "spark_review.dataframes.columns",
    "filter": "spark_review.dataframes.filtering",
    "aggregate": "spark_review.dataframes.aggregation",
    "statistics": "spark_review.dataframes.statistics",
    "combine": "spark_review.dataframes.combining",
    "sample": "spark_review.dataframes.sampling",
    "missing": "spark_review.dataframes.missing",
    "dataset": "spark_review.dataframes.dataset",
    "sql": "spark_review.sql.queries",
    "catalog": "spark_review.sql.catalog",
    "read": "spark_review.sources.reading",
    "write": "spark_review.sources.writing",
    "pandas": "spark_review.pandas_interop",
    "viz": "spark_review.visualization",
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="spark_review", description="Spark SQL / DataFrame API review notes")
    parser.add_argument("topics", nargs="*", help="chapters to run, all of them by default")
    parser.add_argument("--list", action="store_true", help="list the chapters and exit")
    parser.add_argument("--env", choices=sorted(ENVIRONMENTS), default=None, help="session environment")
    parser.add_argument("--log-level", default="info")
    return parser.parse_args(argv)


def run_topics(spark, topics):
    for topic in topics:
        print(f"-------------------------------------------- {topic} --------------------")
        module = importlib.import_module(TOPICS[topic])
        module.demo(spark)


def main(argv=None):
    args = parse_args(argv)
    if args.list:
        for topic, module in TOPICS.items():
            print(f"{topic:<12}{module}")
        return 0

    unknown = [topic for topic in args.topics if topic not in TOPICS]
    if unknown:
        print(f"unknown topic(s): {', '.join(unknown)}, see --list", file=sys.stderr)
        return 2

    setup_logging(args.log_level)
    topics = args.topics or list(TOPICS)
    logger.info("running %d chapter(s)", len(topics))
    run_job(lambda spark: run_topics(spark, topics), "review-spark-sql", env=args.env)
    return 0


if __name__ == "__main__":
    sys.exit(main())
