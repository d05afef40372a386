"""
Tests for the conversions between spark, pandas and the pandas api on spark
"""

import pandas as pd
import pyspark.pandas as ps
import pytest

from spark_review.pandas_interop import (
    INDEX_TYPES,
    default_index_type,
    from_pandas,
    pandas_on_spark_to_spark,
    set_default_index_type,
    sql_on_pandas,
    to_pandas,
    to_pandas_on_spark,
    value_counts,
)


@pytest.fixture
def listings(spark):
    pdf = pd.DataFrame({"property_type": ["house", "flat", "flat", "room"], "beds": [3, 1, 2, 1]})
    return from_pandas(spark, pdf)


class TestConversions:

    def test_from_pandas(self, listings):
        assert listings.columns == ["property_type", "beds"]
        assert listings.count() == 4

    def test_to_pandas(self, listings):
        pdf = to_pandas(listings)
        assert isinstance(pdf, pd.DataFrame)
        assert list(pdf.columns) == ["property_type", "beds"]
        assert len(to_pandas(listings, limit=2)) == 2

    def test_pandas_on_spark_round_trip(self, listings):
        psdf = to_pandas_on_spark(listings)
        assert isinstance(psdf, ps.DataFrame)
        assert psdf["beds"].sum() == 7
        assert pandas_on_spark_to_spark(psdf).columns == ["property_type", "beds"]

    def test_index_column_is_kept(self, listings):
        psdf = to_pandas_on_spark(listings, index_col="property_type")
        assert pandas_on_spark_to_spark(psdf, index_col="property_type").columns == ["property_type", "beds"]


class TestPandasApi:

    def test_value_counts(self, listings):
        assert value_counts(listings, "property_type") == {"flat": 2, "house": 1, "room": 1}

    def test_sql_on_pandas(self, listings):
        psdf = to_pandas_on_spark(listings)
        result = sql_on_pandas("SELECT DISTINCT property_type FROM {psdf}", psdf=psdf)
        assert sorted(result.to_pandas()["property_type"]) == ["flat", "house", "room"]

    def test_default_index_type(self):
        previous = default_index_type()
        try:
            for kind in INDEX_TYPES:
                set_default_index_type(kind)
                assert default_index_type() == kind
        finally:
            set_default_index_type(previous)

    def test_unknown_index_type(self):
        with pytest.raises(ValueError, match="index type"):
            set_default_index_type("random")
