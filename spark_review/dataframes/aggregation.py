# aggregation
## aggregate functions take multiple input rows and return one value: count, sum, avg, min, max ...
## groupBy() returns a GroupedData (not a DataFrame), agg() turns it back into a DataFrame
## groupBy is a wide transformation => shuffle, spark first aggregates per partition (partial aggregation)
"""
df.groupBy("city").count()
df.groupBy("city").agg(avg("age").alias("avg_age"), max("age").alias("max_age"))
df.agg(sum("age"))                    # no grouping => one row
"""
## the column produced without alias is named after the expression e.g. avg(age)
import logging

from pyspark.sql import Window
from pyspark.sql import functions as F

logger = logging.getLogger(__name__)

AGGREGATE_FUNCTIONS = {
    "count": F.count,
    "sum": F.sum,
    "avg": F.avg,
    "mean": F.mean,
    "min": F.min,
    "max": F.max,
    "count_distinct": F.countDistinct,
    "first": F.first,
    "collect_list": F.collect_list,
    "collect_set": F.collect_set,
    "stddev": F.stddev,
    "variance": F.variance,
    "skewness": F.skewness,
    "kurtosis": F.kurtosis,
}


def count_by(df, column):
    return df.groupBy(column).count()


def _aggregate(function_name, column):
    if function_name not in AGGREGATE_FUNCTIONS:
        raise ValueError(
            f"unknown aggregate function {function_name!r}, expected one of {sorted(AGGREGATE_FUNCTIONS)}"
        )
    return AGGREGATE_FUNCTIONS[function_name](column)


def aggregate_by(df, group_columns, **named_aggregations):
    """Group by ``group_columns`` and compute ``alias=(function_name, column)`` aggregations."""
    if isinstance(group_columns, str):
        group_columns = [group_columns]
    expressions = [_aggregate(function_name, column).alias(alias)
                   for alias, (function_name, column) in named_aggregations.items()]
    if not expressions:
        raise ValueError("at least one aggregation is required")
    return df.groupBy(*group_columns).agg(*expressions)


def summary_by(df, group_column, value_column):
    return df.groupBy(group_column).agg(
        F.count(value_column).alias("count"),
        F.sum(value_column).alias("sum"),
        F.round(F.avg(value_column), 2).alias("avg"),
        F.min(value_column).alias("min"),
        F.max(value_column).alias("max"),
        F.countDistinct(value_column).alias("distinct"),
    )


## count("*") counts rows, count(column) skips the nulls
def global_aggregate(df, value_column):
    return df.agg(
        F.count(F.lit(1)).alias("rows"),
        F.count(value_column).alias("non_null"),
        F.sum(value_column).alias("sum"),
        F.avg(value_column).alias("avg"),
    ).first()


# pivot
## turns the distinct values of a column into columns
## giving the values avoids an extra job to compute them
"""
+----+----+----+
|city|2023|2024|
+----+----+----+
|  NY|  10|  12|
"""
def pivot_table(df, index, pivot, value, agg="sum", values=None):
    grouped = df.groupBy(index)
    pivoted = grouped.pivot(pivot, values) if values is not None else grouped.pivot(pivot)
    return pivoted.agg(_aggregate(agg, value))


# rollup and cube
## rollup(a, b) => groups (a, b), (a), () => subtotals and grand total
## cube(a, b)   => all combinations (a, b), (a), (b), ()
## the rolled up columns are null in the subtotal rows, grouping() tells them apart from real nulls
def rollup_totals(df, group_columns, value_column):
    return df.rollup(*group_columns).agg(F.sum(value_column).alias("total"))


def cube_totals(df, group_columns, value_column):
    return df.cube(*group_columns).agg(F.sum(value_column).alias("total"))


# window functions
## compute a value per row over a group of related rows, without collapsing the rows like groupBy does
## Window.partitionBy(...).orderBy(...) + rowsBetween / rangeBetween for the frame
## ranking: row_number, rank (gaps), dense_rank (no gaps); analytic: lag, lead; aggregates: sum, avg ...
## without partitionBy all data moves to a single partition (WARN WindowExec: No Partition Defined)
def rank_within(df, partition_column, order_column):
    window = Window.partitionBy(partition_column).orderBy(F.col(order_column).desc())
    return df.withColumn("rank", F.rank().over(window)).withColumn("dense_rank", F.dense_rank().over(window))


def running_total(df, partition_column, order_column, value_column):
    window = (Window.partitionBy(partition_column)
              .orderBy(order_column)
              .rowsBetween(Window.unboundedPreceding, Window.currentRow))
    return df.withColumn("running_total", F.sum(value_column).over(window))


def demo(spark):
    sales = spark.createDataFrame(
        [("NY", 2023, 10), ("NY", 2024, 12), ("LA", 2023, 7), ("LA", 2024, 7)],
        "city STRING, year INT, amount INT",
    )
    summary_by(sales, "city", "amount").show()
    pivot_table(sales, "city", "year", "amount").show()
    rollup_totals(sales, ["city", "year"], "amount").orderBy("city", "year").show()
    rank_within(sales, "year", "amount").show()
    logger.info("global aggregate %s", global_aggregate(sales, "amount"))


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "aggregation")
