# pandas api on spark
## pandas is the industry standard for data analysis but it only works on a single machine
## all the data must fit in the memory of that machine
## spark addresses this limitation by scaling across many machines, but the spark api is different from pandas
## pyspark.pandas (formerly koalas, spark 3.2) => pandas-like syntax on top of spark DataFrames
## certain edge functionality of pandas might not work on spark but most of it will
"""
import pyspark.pandas as ps
psdf = ps.read_csv("listings.csv")
psdf["property_type"].value_counts().head()
"""

# converting between the three
## spark df        -> pandas          spark_df.toPandas()        collects EVERYTHING to the driver (small data only)
## pandas          -> spark df        spark.createDataFrame(pdf)
## spark df        -> pandas on spark spark_df.pandas_api()      (to_pandas_on_spark() is deprecated)
## pandas on spark -> spark df        psdf.to_spark()
## with spark.sql.execution.arrow.pyspark.enabled=true the conversions go through arrow (columnar, much faster)
import logging

import pandas as pd
import pyspark.pandas as ps

logger = logging.getLogger(__name__)

# pandas api on spark Index
## pandas has an index for each of the rows, spark is distributed so there is no natural row order
## when a spark df becomes a pandas-on-spark df, a default index is attached, configured by compute.default_index_type
## sequence => 0, 1, 2 ... with a window function without partition => whole data on one node, avoid on large data
## distributed-sequence (the default in recent versions) => 0, 1, 2 ... computed with group-by / group-map in a distributed manner
## distributed => monotonically_increasing_id, not consecutive (1, 2, 8589934592 ...) but the cheapest
INDEX_TYPES = ("sequence", "distributed-sequence", "distributed")


def set_default_index_type(kind):
    if kind not in INDEX_TYPES:
        raise ValueError(f"unknown index type {kind!r}, expected one of {INDEX_TYPES}")
    ps.set_option("compute.default_index_type", kind)


def default_index_type():
    return ps.get_option("compute.default_index_type")


def to_pandas(df, limit=None):
    if limit is not None:
        df = df.limit(limit)
    return df.toPandas()


def from_pandas(spark, pdf):
    return spark.createDataFrame(pdf)


def to_pandas_on_spark(df, index_col=None):
    return df.pandas_api(index_col=index_col)


def pandas_on_spark_to_spark(psdf, index_col=None):
    return psdf.to_spark(index_col=index_col)


## count per value, most frequent first
## spark:            df.groupBy("x").count().orderBy("count", ascending=False)
## pandas on spark:  psdf["x"].value_counts()
def value_counts(df, column):
    counts = to_pandas_on_spark(df)[column].value_counts()
    return {key: int(value) for key, value in counts.to_pandas().items()}


## pandas on spark keeps sql too, the DataFrames are referenced with {} in the query
def sql_on_pandas(query, **frames):
    return ps.sql(query, **frames)


def demo(spark):
    pdf = pd.DataFrame({"property_type": ["house", "flat", "flat", "room"], "beds": [3, 1, 2, 1]})
    spark_df = from_pandas(spark, pdf)
    spark_df.groupby("property_type").count().orderBy("count", ascending=False).show()
    print(value_counts(spark_df, "property_type"))
    psdf = to_pandas_on_spark(spark_df)
    print(psdf.describe().to_string())
    print(sql_on_pandas("SELECT DISTINCT property_type FROM {psdf}", psdf=psdf).to_string())
    logger.info("default index type %s", default_index_type())


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "pandas_api_on_spark")
