# apache spark runtime architecture

# what is apache spark ?
## apache spark is an open-source, distributed, unified analytics engine for large-scale data processing
## native support for SQL, streaming data, machine learning and graph processing through one API
## it works with cloud storage (S3, ADLS, GCS), local files and databases

# spark components
"""
+-----------------------+ +----------------------+ +------------+ +------------+ +-------------+
|  Python Scala/Java    | |    Python Scala/Java | |   SQL      | |  R         | |  Scala/Java |
|  Structured Streaming | |   MLlib              | |  Spark SQL | | SparkR API | |  GraphX     |
+-----------------------+ +----------------------+ +------------+ +------------+ +-------------+
         ||                    ||                      ||            ||              ||
         \/                    \/                      \/            \/              ||
+---------------------------------------------------------------------------+        ||
|  Python Scala/java                        Dataframe API                   |        ||
+---------------------------------------------------------------------------+        ||
                                                                                     \/
+--------------------------------------------------------------------------------------------+
| Spark Core (RDD API)                                                                       |
+--------------------------------------------------------------------------------------------+
"""

# driver and executors
## the driver runs our python program, builds the plan and schedules tasks
## executors run the tasks, one task per partition, and keep cached partitions in memory
## in local mode driver and executor live in the same JVM (local[*] => one worker thread per core)

# lazy evaluation
## transformations (select, withColumn, groupBy ...) only build a logical plan
## nothing runs until an action (show, count, collect, write ...)
## spark builds a logical plan -> physical plan -> DAG and executes it in stages separated by shuffle boundaries
## Unresolved Logical Plan ==> Analyzed Logical Plan ==> Optimized Logical Plan ==> Physical plan
## Analysis  ================> Logical Optimizations ==> Physical Optimizations ==> Code Generation
import contextlib
import io
import logging

from pyspark.sql.functions import col, sum

from spark_review.session import run_job

logger = logging.getLogger(__name__)

EXPLAIN_MODES = ("simple", "extended", "codegen", "cost", "formatted")


# dummy calculation using spark
## range() creates a dataframe with column id and values from 0 to n - 1
## withColumn is a map-like operation applied per partition => narrow transformation
def squares(spark, n):
    return spark.range(0, n).withColumn("square", col("id") * col("id"))


"""
+---+------+
| id|square|
+---+------+
|  0|     0|
|  1|     1|
|  2|     4|
"""


## beware groupBy is a wide transformation => shuffle
## spark must redistribute rows so all records with the same id % 10 end up on the same partition
## the aggregation happens after the shuffle i.e. in a separate reduce stage
def sum_of_squares_by_modulo(spark, n, modulo=10):
    grouped_data = squares(spark, n).groupBy((col("id") % modulo).alias(f"id_modulo_{modulo}"))  ## GroupedData
    return grouped_data.agg(sum("square").alias("sum_square"))


"""
+------------+----------+
|id_modulo_10|sum_square|
+------------+----------+
|           0|  32835000|
|           1|  32934100|
|           2|  33033400|

without using the alias on the grouping key the column is called (id % 10)
"""


# query plan
## the plan is available BEFORE running the job
## explain() prints it, explain(True) or mode="extended" prints the four plans
## mode="formatted" splits the physical plan in an overview and the node details
def explain_plan(df, mode="formatted"):
    if mode not in EXPLAIN_MODES:
        raise ValueError(f"unknown explain mode {mode!r}, expected one of {EXPLAIN_MODES}")
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        df.explain(mode=mode)
    return buffer.getvalue()


"""
== Physical Plan ==
AdaptiveSparkPlan (6)
+- HashAggregate (5)
   +- Exchange (4)                      <== the shuffle boundary
      +- HashAggregate (3)              <== partial aggregation before the shuffle
         +- Project (2)
            +- Range (1)
"""


# caching
## cache registers a storage dependency but doesnt trigger execution yet
## the first action computes and caches, the next ones only read from the cache
## DataFrame.cache() is persist(MEMORY_AND_DISK) (MEMORY_AND_DISK_DESER from spark 3.4)
## unpersist() when done, cached data is visible in the storage tab of the web ui (http://localhost:4040)
def cached_count(df):
    df.cache()
    try:
        count = df.count()
        logger.info("cached %d rows with storage level %s", count, df.storageLevel)
    finally:
        df.unpersist()
    return count


# partitions
## a partition is the unit of parallelism: one task per partition per stage
## repartition(n) => full shuffle, round robin (or by columns), can increase or decrease
## coalesce(n) => merges partitions without shuffle, can only decrease
def partition_count(df):
    return df.rdd.getNumPartitions()


def repartitioned(df, n, *columns):
    return df.repartition(n, *columns)


def coalesced(df, n):
    return df.coalesce(n)


# step by step of what spark does in the example
## Job 0 has 2 stages
#### Stage 0 : map (range, withColumn, partial aggregation)
#### Stage 1 : reduce (final aggregation after the exchange)
## Job 1 has 0 or 1 stage
#### only reads from cache
def demo(spark):
    result = sum_of_squares_by_modulo(spark, 1_000)
    print(explain_plan(result))
    print("cached rows", cached_count(result))
    result.orderBy("id_modulo_10").show()
    print("partitions after range", partition_count(squares(spark, 1_000)))


if __name__ == "__main__":
    run_job(demo, "apache_spark_runtime")
