# DataFrame vs Dataset
## Dataset[T] is the typed API of scala / java
### the compiler knows T (a case class), ds.map(p => p.age + 1) is checked at compile time
### objects are stored in tungsten binary format and converted with Encoders
## DataFrame is just Dataset[Row] => untyped rows, columns resolved by name at analysis time
## python (and R) are dynamically typed, so pyspark only has the DataFrame
### no compile time: a typo in a column name or a wrong type is reported when the plan is analyzed
### i.e. when the transformation is defined (pyspark analyzes eagerly), not when the script is parsed
## both go through the same catalyst optimizer, so the performance of DataFrame operations is the same
"""
                    SQL            DataFrame          Dataset
syntax errors       runtime        compile time       compile time
analysis errors     runtime        runtime            compile time
"""

# runtime errors are lazy
## some errors only depend on the data, e.g. casting "abc" to int with ansi mode on
## defining the DataFrame succeeds, the error comes when an action runs the job
import logging

from py4j.protocol import Py4JJavaError
from pyspark.errors import AnalysisException, PySparkException
from pyspark.sql.types import LongType, StringType, StructField, StructType

logger = logging.getLogger(__name__)


def rows_as_dicts(df):
    return [row.asDict(recursive=True) for row in df.collect()]


## a Row can be turned into our own record type (NamedTuple, dataclass ...)
## this is the closest thing to Dataset[T] in python, the checks happen in python after the collect
def row_to_record(row, record_type):
    return record_type(**row.asDict())


def typed_records(df, record_type):
    return [row_to_record(row, record_type) for row in df.collect()]


def analysis_error_for_missing_column(df, name):
    try:
        df.select(name)
    except AnalysisException as error:
        return str(error)
    return None


"""
[UNRESOLVED_COLUMN.WITH_SUGGESTION] A column or function parameter with name `nmae` cannot be resolved.
Did you mean one of the following? [`name`, `age`].
"""


def runtime_error_is_lazy(spark):
    """Return True when a bad cast is accepted at definition time and only fails at the action."""
    previous = spark.conf.get("spark.sql.ansi.enabled")
    spark.conf.set("spark.sql.ansi.enabled", "true")
    try:
        df = spark.createDataFrame([("abc",)], "value STRING").selectExpr("CAST(value AS INT) AS number")
        try:
            df.collect()
        except (PySparkException, Py4JJavaError) as error:
            logger.debug("action failed with %s", type(error).__name__)
            return True
        return False
    finally:
        spark.conf.set("spark.sql.ansi.enabled", previous)


# schema reconciliation
## df.to(schema) (spark 3.4) takes a StructType, reorders the columns by name and up-casts them to the given types
## a column missing from the DataFrame or a narrowing cast => AnalysisException, extra columns are dropped
def to_schema(df, schema):
    return df.to(schema)


def demo(spark):
    from typing import NamedTuple

    class Person(NamedTuple):
        name: str
        age: int

    df = spark.createDataFrame([("John", 21), ("Jane", 22)], "name STRING, age INT")
    print(typed_records(df, Person))
    print(analysis_error_for_missing_column(df, "nmae"))
    print("bad cast fails only at the action:", runtime_error_is_lazy(spark))
    to_schema(df, StructType([StructField("age", LongType()), StructField("name", StringType())])).printSchema()


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "dataframe_vs_dataset")
