"""
Pytest configuration for the review notes tests

One local session (SPARK_ENV=test => local[1], one shuffle partition) is shared by all the tests,
with its warehouse in a temporary directory so managed tables don't land in the repository.
"""

import pytest

from spark_review.session import create_session


@pytest.fixture(scope="session")
def spark(tmp_path_factory):
    """Session-scoped SparkSession for all tests"""
    warehouse = tmp_path_factory.mktemp("warehouse")
    session = create_session(
        app_name="review-spark-sql-tests",
        env="test",
        spark_sql_warehouse_dir=str(warehouse),
    )
    yield session
    session.stop()


@pytest.fixture
def people(spark):
    return spark.createDataFrame(
        [("John", 21, "Paris"), ("Jane", 35, "Paris"), ("Mary", 35, None), ("Mary", 35, None)],
        "name STRING, age INT, city STRING",
    )


@pytest.fixture
def sales(spark):
    return spark.createDataFrame(
        [("NY", 2023, 10), ("NY", 2024, 12), ("LA", 2023, 7), ("LA", 2024, 7)],
        "city STRING, year INT, amount INT",
    )


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "sql: mark test as using the sql interface"
    )
    config.addinivalue_line(
        "markers", "io: mark test as reading or writing files"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
