"""
Tests for the runtime chapter: narrow / wide transformations, plans, caching, partitions
"""

import pytest
from py4j.protocol import Py4JJavaError
from pyspark.errors import PySparkException

from spark_review.runtime import (
    cached_count,
    coalesced,
    explain_plan,
    partition_count,
    repartitioned,
    squares,
    sum_of_squares_by_modulo,
)


class TestTransformations:

    def test_squares(self, spark):
        rows = squares(spark, 5).collect()
        assert [row["square"] for row in rows] == [0, 1, 4, 9, 16]

    def test_sum_of_squares_by_modulo(self, spark):
        result = sum_of_squares_by_modulo(spark, 1_000)
        assert result.columns == ["id_modulo_10", "sum_square"]

        totals = {row["id_modulo_10"]: row["sum_square"] for row in result.collect()}
        assert len(totals) == 10
        assert totals[0] == 32835000
        assert totals[1] == 32934100
        assert totals[2] == 33033400

    def test_custom_modulo(self, spark):
        result = sum_of_squares_by_modulo(spark, 10, modulo=2)
        assert result.columns == ["id_modulo_2", "sum_square"]
        totals = {row["id_modulo_2"]: row["sum_square"] for row in result.collect()}
        assert totals == {0: 0 + 4 + 16 + 36 + 64, 1: 1 + 9 + 25 + 49 + 81}


class TestQueryPlan:

    def test_formatted_plan_shows_the_shuffle(self, spark):
        plan = explain_plan(sum_of_squares_by_modulo(spark, 100))
        assert "== Physical Plan ==" in plan
        assert "Exchange" in plan

    def test_extended_plan(self, spark):
        plan = explain_plan(squares(spark, 10), mode="extended")
        assert "== Parsed Logical Plan ==" in plan
        assert "== Optimized Logical Plan ==" in plan

    def test_unknown_mode(self, spark):
        with pytest.raises(ValueError, match="explain mode"):
            explain_plan(squares(spark, 10), mode="verbose")


class TestCachingAndPartitions:

    def test_cached_count_unpersists(self, spark):
        df = squares(spark, 10)
        assert cached_count(df) == 10
        assert not df.is_cached

    def test_cached_count_unpersists_when_the_action_fails(self, spark):
        previous = spark.conf.get("spark.sql.ansi.enabled")
        spark.conf.set("spark.sql.ansi.enabled", "true")
        try:
            df = spark.createDataFrame([("abc",)], "value STRING").selectExpr("CAST(value AS INT) AS value")
            with pytest.raises((PySparkException, Py4JJavaError)):
                cached_count(df)
            assert not df.is_cached
        finally:
            spark.conf.set("spark.sql.ansi.enabled", previous)

    def test_repartition_and_coalesce(self, spark):
        df = repartitioned(spark.range(0, 100), 4)
        assert partition_count(df) == 4
        assert partition_count(coalesced(df, 2)) == 2

    def test_coalesce_cannot_increase(self, spark):
        df = repartitioned(spark.range(0, 100), 2)
        assert partition_count(coalesced(df, 8)) == 2
