"""
Tests for the DataFrame vs Dataset chapter: rows, records, analysis and runtime errors
"""

from dataclasses import dataclass
from typing import NamedTuple

import pytest
from pyspark.errors import AnalysisException
from pyspark.sql.types import LongType, StringType, StructField, StructType

from spark_review.dataframes.dataset import (
    analysis_error_for_missing_column,
    row_to_record,
    rows_as_dicts,
    runtime_error_is_lazy,
    to_schema,
    typed_records,
)


class Person(NamedTuple):
    name: str
    age: int


@dataclass
class PersonRecord:
    name: str
    age: int


@pytest.fixture
def frame(spark):
    return spark.createDataFrame([("John", 21), ("Jane", 22)], "name STRING, age INT")


class TestRows:

    def test_rows_as_dicts(self, frame):
        assert rows_as_dicts(frame) == [{"name": "John", "age": 21}, {"name": "Jane", "age": 22}]

    def test_typed_records(self, frame):
        assert typed_records(frame, Person) == [Person("John", 21), Person("Jane", 22)]

    def test_dataclass_record(self, frame):
        assert row_to_record(frame.first(), PersonRecord) == PersonRecord("John", 21)

    def test_record_mismatch_is_a_python_error(self, spark):
        df = spark.createDataFrame([("John", 21, "Paris")], "name STRING, age INT, city STRING")
        with pytest.raises(TypeError):
            typed_records(df, Person)


class TestErrors:

    def test_missing_column_message(self, frame):
        message = analysis_error_for_missing_column(frame, "nmae")
        assert message is not None
        assert "nmae" in message

    def test_existing_column_resolves(self, frame):
        assert analysis_error_for_missing_column(frame, "name") is None

    def test_runtime_error_only_at_action(self, spark):
        previous = spark.conf.get("spark.sql.ansi.enabled")
        assert runtime_error_is_lazy(spark)
        assert spark.conf.get("spark.sql.ansi.enabled") == previous


class TestToSchema:

    def test_reorder_and_upcast(self, frame):
        schema = StructType([StructField("age", LongType()), StructField("name", StringType())])
        result = to_schema(frame, schema)
        assert result.dtypes == [("age", "bigint"), ("name", "string")]
        assert result.first()["age"] == 21

    def test_missing_column(self, frame):
        schema = StructType([StructField("city", StringType())])
        with pytest.raises(AnalysisException):
            to_schema(frame, schema)
