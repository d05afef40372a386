# filtering
## filter() and where() are the same transformation (where is an alias for sql people)
## the condition is a boolean Column or a sql string
"""
df.filter(col("age") > 30)
df.where("age > 30")
"""
## combining conditions, same bitwise operators as pandas
## python and => &
## python or  => |
## python not => ~
## parenthesis are mandatory since & and | bind tighter than the comparisons
"""
df.filter((col("age") > 30) & (col("city") == "Paris"))
"""
## python's `and` / `or` on Columns raise ValueError: Cannot convert column into bool
from pyspark.sql.functions import col

NULL_ORDERINGS = ("first", "last")


def filter_by_condition(df, condition):
    return df.filter(condition)


def where(df, condition):
    return df.where(condition)


## isin takes a list of values (sql IN)
def filter_in(df, column, values):
    return df.filter(col(column).isin(list(values)))


## between is inclusive on both sides
def filter_between(df, column, lower, upper):
    return df.filter(col(column).between(lower, upper))


## like => sql wildcards % and _, rlike => java regex
def filter_like(df, column, pattern):
    return df.filter(col(column).like(pattern))


# nulls in conditions
## comparison with null gives null and a null condition drops the row
## so col("x") != "a" does NOT keep the rows where x is null
## use isNull() / isNotNull() or the null safe equality eqNullSafe (<=> in sql)
def filter_not_null(df, column):
    return df.filter(col(column).isNotNull())


def filter_null(df, column):
    return df.filter(col(column).isNull())


# duplicates
## distinct() => on all columns
## dropDuplicates(subset) => on some columns, keeps an arbitrary row of each group
def distinct_rows(df):
    return df.distinct()


def drop_duplicates(df, subset=None):
    if subset:
        return df.dropDuplicates(list(subset))
    return df.dropDuplicates()


# sorting
## orderBy() and sort() are the same, ascending is the default
## nulls come first in ascending order and last in descending order
## asc_nulls_last(), desc_nulls_first() ... to change that
## a global sort is a wide transformation (range partitioning), sortWithinPartitions() is not
def order_by(df, *columns, ascending=True, nulls=None):
    if nulls is not None and nulls not in NULL_ORDERINGS:
        raise ValueError(f"unknown null ordering {nulls!r}, expected one of {NULL_ORDERINGS}")
    direction = "asc" if ascending else "desc"
    orderings = []
    for name in columns:
        method = f"{direction}_nulls_{nulls}" if nulls else direction
        orderings.append(getattr(col(name), method)())
    return df.orderBy(*orderings)


def top_n(df, column, n):
    return df.orderBy(col(column).desc()).limit(n)


## offset() came with spark 3.4, only deterministic after an orderBy
def paginate(df, order_column, offset, limit):
    return df.orderBy(order_column).offset(offset).limit(limit)


def demo(spark):
    df = spark.createDataFrame(
        [("John", 21, "Paris"), ("Jane", 35, "Paris"), ("Mary", 35, None), ("Mary", 35, None)],
        "name STRING, age INT, city STRING",
    )
    filter_by_condition(df, (col("age") > 30) & (col("city") == "Paris")).show()
    """
    +----+---+-----+
    |name|age| city|
    +----+---+-----+
    |Jane| 35|Paris|
    +----+---+-----+
    """
    filter_null(df, "city").show()
    drop_duplicates(df, ["name"]).show()
    order_by(df, "city", nulls="last").show()


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "filtering")
