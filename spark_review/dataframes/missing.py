# missing values
## null in spark, NaN is a different thing (a floating point value, only in float / double columns)
## df.na gives DataFrameNaFunctions: drop(), fill(), replace()
## same as df.dropna(), df.fillna(), df.replace()

## na.drop(how="any") => drop the row if any column is null
## na.drop(how="all") => only if all of them are null
## na.drop(thresh=2) => keep the rows having at least 2 non null values (overrides how)
## subset restricts the check to some columns
"""
df.na.drop(subset=["age"])
"""
from pyspark.sql import functions as F

DROP_MODES = ("any", "all")


def drop_nulls(df, how="any", thresh=None, subset=None):
    if how not in DROP_MODES:
        raise ValueError(f"unknown mode {how!r}, expected one of {DROP_MODES}")
    return df.na.drop(how=how, thresh=thresh, subset=subset)


## fill(value) only touches the columns whose type matches the value
### fill(0) => numeric columns, fill("Missing") => string columns
## fill({"age": 0, "city": "unknown"}) => a value per column
def fill_nulls(df, value, subset=None):
    if isinstance(value, dict):
        return df.na.fill(value)
    return df.na.fill(value, subset=subset)


def replace_values(df, mapping, subset=None):
    return df.na.replace(mapping, subset=subset)


## coalesce(a, b, c) => first non null value
def coalesce_columns(df, output, *columns):
    return df.withColumn(output, F.coalesce(*[F.col(column) for column in columns]))


def null_counts(df):
    row = df.select([F.count(F.when(F.col(column).isNull(), 1)).alias(column) for column in df.columns]).first()
    return row.asDict()


def demo(spark):
    df = spark.createDataFrame(
        [("John", 21, "Paris"), ("Jane", None, None), (None, None, None)],
        "name STRING, age INT, city STRING",
    )
    print(null_counts(df))
    drop_nulls(df, how="all").show()
    fill_nulls(df, {"age": 0, "city": "unknown"}).show()
    coalesce_columns(df, "label", "city", "name").show()


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "missing_values")
