# union
## union() (and its old alias unionAll()) appends the rows of another DataFrame
## columns are matched by POSITION, not by name, and duplicates are kept (sql UNION ALL)
## the types are widened when possible, a different number of columns => AnalysisException
"""
a = [("John", 21)]          name, age
b = [(22, "Jane")]          age, name
a.union(b)                  => name column now holds "22" ... silently wrong
a.unionByName(b)            => matched by name, correct
"""
## unionByName(allowMissingColumns=True) (spark 3.1) fills the columns missing on one side with null
## sql UNION (distinct) => union().distinct()
from functools import reduce

JOIN_TYPES = ("inner", "left", "right", "full", "left_semi", "left_anti", "cross")


def union_by_position(a, b):
    return a.union(b)


def union_by_name(a, b, allow_missing=False):
    return a.unionByName(b, allowMissingColumns=allow_missing)


def union_distinct(a, b):
    return a.union(b).distinct()


def union_all(*dfs, allow_missing=False):
    if not dfs:
        raise ValueError("union_all needs at least one DataFrame")
    return reduce(lambda left, right: union_by_name(left, right, allow_missing), dfs)


# joins
## df.join(other, on, how)
## on => column name, list of names (the key column appears only once) or a boolean Column expression
## how => inner (default), left, right, full (outer), left_semi, left_anti, cross
### left_semi => rows of the left side having a match, only left columns (sql EXISTS)
### left_anti => rows of the left side without match (sql NOT EXISTS)
## broadcast(small_df) hints a broadcast hash join, no shuffle of the big side
## joining on an expression keeps both key columns, select them through df["key"] to avoid ambiguity
def join_frames(left, right, on, how="inner"):
    if how not in JOIN_TYPES:
        raise ValueError(f"unknown join type {how!r}, expected one of {JOIN_TYPES}")
    if how == "cross":
        return left.crossJoin(right)
    return left.join(right, on=on, how=how)


# set operations
## intersect() => rows in both, distinct (sql INTERSECT)
## subtract()  => rows of a not in b, distinct (sql EXCEPT)
## exceptAll() => same but keeps the duplicates (sql EXCEPT ALL)
def intersect_rows(a, b):
    return a.intersect(b)


def subtract_rows(a, b):
    return a.subtract(b)


def except_all(a, b):
    return a.exceptAll(b)


def demo(spark):
    a = spark.createDataFrame([("John", 21), ("Jane", 22)], "name STRING, age INT")
    b = spark.createDataFrame([(22, "Jane"), (35, "Mary")], "age INT, name STRING")
    union_by_name(a, b).show()
    """
    +----+---+
    |name|age|
    +----+---+
    |John| 21|
    |Jane| 22|
    |Jane| 22|
    |Mary| 35|
    +----+---+
    """
    cities = spark.createDataFrame([("John", "Paris"), ("Mary", "Lyon")], "name STRING, city STRING")
    join_frames(a, cities, "name", "left").show()
    join_frames(a, cities, "name", "left_anti").show()


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "combining")
