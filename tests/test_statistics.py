"""
Tests for descriptive statistics and the skewness / kurtosis definitions
"""

import math

import pytest

from spark_review.dataframes.statistics import (
    central_moment,
    correlation,
    covariance,
    describe_columns,
    distribution_shape,
    kurtosis,
    quantiles,
    sample_adjusted,
    skewness,
    spark_skewness_kurtosis,
    summary_statistics,
)

AGES = [18, 22, 25, 40, 50]
RIGHT_SKEWED = [1, 1, 1, 1, 2, 2, 3, 10]


def values_frame(spark, values, name="value"):
    return spark.createDataFrame([(float(value),) for value in values], f"{name} DOUBLE")


class TestDescribe:

    def test_describe(self, spark):
        result = describe_columns(values_frame(spark, AGES, "age"), "age")
        stats = {row["summary"]: row["age"] for row in result.collect()}
        assert stats["count"] == "5"
        assert float(stats["mean"]) == 31.0
        assert float(stats["stddev"]) == pytest.approx(math.sqrt(182))

    def test_summary_selected_statistics(self, spark):
        result = summary_statistics(values_frame(spark, AGES, "age"), "min", "50%", "max")
        stats = {row["summary"]: float(row["age"]) for row in result.collect()}
        assert stats == {"min": 18.0, "50%": 25.0, "max": 50.0}


class TestDefinitions:

    def test_central_moment(self):
        assert central_moment([1, 2, 3], 1) == 0
        assert central_moment([1, 2, 3], 2) == pytest.approx(2 / 3)

    def test_symmetric_values(self):
        assert skewness([1, 2, 3]) == pytest.approx(0.0)
        assert kurtosis([1, 2, 3]) == pytest.approx(-1.5)

    def test_right_skewed_values(self):
        assert skewness(RIGHT_SKEWED) > 0
        assert kurtosis(RIGHT_SKEWED) > 0

    @pytest.mark.parametrize("values", [[4, 4, 4], [0.1, 0.1, 0.1], [0.7] * 10])
    def test_constant_values(self, values):
        assert math.isnan(skewness(values))
        assert math.isnan(kurtosis(values))

    def test_generator_input(self):
        assert skewness(value for value in [1, 2, 10]) == pytest.approx(skewness([1, 2, 10]))
        assert kurtosis(value for value in [1, 2, 10]) == pytest.approx(kurtosis([1, 2, 10]))

    def test_empty_values(self):
        with pytest.raises(ValueError):
            skewness([])

    def test_pandas_applies_sample_correction(self):
        pandas_skew, pandas_kurt = sample_adjusted(RIGHT_SKEWED)
        assert pandas_skew != pytest.approx(skewness(RIGHT_SKEWED))
        assert pandas_kurt != pytest.approx(kurtosis(RIGHT_SKEWED))


class TestSparkAgreesWithDefinitions:

    @pytest.mark.parametrize("values", [AGES, RIGHT_SKEWED, [1, 2, 3]])
    def test_population_estimators(self, spark, values):
        skew, kurt = spark_skewness_kurtosis(values_frame(spark, values), "value")
        assert skew == pytest.approx(skewness(values), abs=1e-9)
        assert kurt == pytest.approx(kurtosis(values), abs=1e-9)

    @pytest.mark.parametrize("values", [[4, 4, 4], [0.1, 0.1, 0.1]])
    def test_constant_column_is_null(self, spark, values):
        assert spark_skewness_kurtosis(values_frame(spark, values), "value") == (None, None)
        assert math.isnan(skewness(values))
        with pytest.raises(ValueError):
            distribution_shape(skewness(values), kurtosis(values))


class TestShape:

    def test_labels(self):
        assert distribution_shape(0.1, 0.2) == ("symmetric", "mesokurtic")
        assert distribution_shape(1.3, 2.0) == ("right-skewed", "leptokurtic")
        assert distribution_shape(-0.9, -1.2) == ("left-skewed", "platykurtic")

    def test_right_skewed_sample(self, spark):
        skew, kurt = spark_skewness_kurtosis(values_frame(spark, RIGHT_SKEWED), "value")
        assert distribution_shape(skew, kurt)[0] == "right-skewed"

    def test_undefined_shape(self):
        with pytest.raises(ValueError):
            distribution_shape(None, None)
        with pytest.raises(ValueError):
            distribution_shape(math.nan, 0.0)


class TestStatFunctions:

    def test_correlation_and_covariance(self, spark):
        df = spark.createDataFrame([(1.0, 2.0), (2.0, 4.0), (3.0, 6.0)], "x DOUBLE, y DOUBLE")
        assert correlation(df, "x", "y") == pytest.approx(1.0)
        assert covariance(df, "x", "y") == pytest.approx(2.0)

    def test_exact_quantiles(self, spark):
        df = values_frame(spark, [1, 2, 3, 4, 5])
        assert quantiles(df, "value") == [2.0, 3.0, 4.0]
