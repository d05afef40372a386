# selecting columns
## select() is a transformation, returns a new DataFrame with only the given columns / expressions
## columns can be referenced by
### name                     df.select("name")
### col() / column()         df.select(col("name"))           => pyspark.sql.Column, unevaluated expression
### attribute / item         df.name, df["name"]              => bound to this df (useful to disambiguate joins)
### sql expression           df.selectExpr("age + 1 AS next") or expr("age + 1")
## column names are case insensitive by default (spark.sql.caseSensitive=false)
from pyspark.sql.functions import col, expr

# Common Column methods
## alias()  cast()  isNull() isNotNull()  isin()  between()  like() rlike()  startswith() endswith()
## when().otherwise()  asc() desc()  + - * / % on numeric columns, & | ~ on boolean columns


def select_by_name(df, *names):
    return df.select(*names)


def select_by_column(df, *names):
    return df.select(*[col(name) for name in names])


## selectExpr takes sql snippets, handy for arithmetic and casts
"""
df.selectExpr("name", "age + 1 AS age_next_year", "CAST(age AS STRING) AS age_str")
"""
def select_expressions(df, *expressions):
    return df.selectExpr(*expressions)


# withColumn
## adds a column or replaces it if the name already exists
## calling withColumn in a loop creates a big plan, prefer select or withColumns (spark 3.3) for many columns
def with_computed_column(df, name, expression):
    if isinstance(expression, str):
        expression = expr(expression)
    return df.withColumn(name, expression)


def rename_column(df, existing, new):
    return df.withColumnRenamed(existing, new)


def drop_columns(df, *names):
    return df.drop(*names)


## cast accepts a DataType or its sql name ("int", "double", "date" ...)
## a value that cannot be cast becomes null (when spark.sql.ansi.enabled is false, the default before spark 4)
def cast_column(df, name, data_type):
    return df.withColumn(name, col(name).cast(data_type))


def column_names(df):
    return df.columns


def has_column(df, name, case_sensitive=False):
    if case_sensitive:
        return name in df.columns
    return name.lower() in (column.lower() for column in df.columns)


# watch out, silent no-ops
## drop() of a column that does not exist does nothing, no error
## withColumnRenamed() of a column that does not exist does nothing either
## a typo in the column name => the column is silently kept
"""
df.drop("nmae").columns               # ['name', 'age']   no error
df.withColumnRenamed("nmae", "x")     # unchanged
df.select("nmae")                     # AnalysisException: [UNRESOLVED_COLUMN.WITH_SUGGESTION] ...
"""
## select() on the other hand fails at analysis time (when the transformation is defined, not at the action)
def drop_is_silent(df, name):
    return drop_columns(df, name).columns == df.columns


def rename_is_silent(df, existing):
    return rename_column(df, existing, f"{existing}_renamed").columns == df.columns


def demo(spark):
    df = spark.createDataFrame([("John", 21), ("Jane", 22)], "name STRING, age INT")
    select_by_column(df, "name").show()
    select_expressions(df, "name", "age + 1 AS age_next_year").show()
    """
    +----+-------------+
    |name|age_next_year|
    +----+-------------+
    |John|           22|
    |Jane|           23|
    +----+-------------+
    """
    with_computed_column(df, "is_adult", col("age") >= 18).show()
    print("drop of a missing column is silent:", drop_is_silent(df, "nmae"))


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "selecting_columns")
