# SparkSQL
## sql interface on top of the same engine as the DataFrame api
## spark.sql(query) returns a DataFrame, so sql and DataFrame code can be mixed freely
## both produce the same logical plan => same optimization, same performance

# DataFrame registration
## temporary view => createOrReplaceTempView(name)
### session scoped, disappears with the SparkSession, invisible from spark.newSession()
## global temporary view => createOrReplaceGlobalTempView(name)
### application scoped (shared by all the sessions of the SparkContext)
### lives in the system database global_temp => SELECT * FROM global_temp.name
## a view is only a named plan, no data is copied or cached
"""
df.createOrReplaceTempView("people")
spark.sql("SELECT name FROM people WHERE age > 21")
df.createOrReplaceGlobalTempView("people")
spark.sql("SELECT name FROM global_temp.people")
"""
import logging

logger = logging.getLogger(__name__)

GLOBAL_TEMP_DATABASE = "global_temp"


def register_view(df, name, global_view=False):
    if global_view:
        df.createOrReplaceGlobalTempView(name)
        qualified = f"{GLOBAL_TEMP_DATABASE}.{name}"
    else:
        df.createOrReplaceTempView(name)
        qualified = name
    logger.debug("registered view %s", qualified)
    return qualified


# sql query execution
## named parameters (spark 3.4): spark.sql("... WHERE age > :age", args={"age": 21})
### values are bound as literals, no string formatting => no sql injection
## keyword arguments format the query (spark 3.3): spark.sql("SELECT * FROM {df}", df=df)
### a DataFrame passed that way is registered as a temporary view for the query
def run_sql(spark, query, args=None, **kwargs):
    if args:
        return spark.sql(query, args=args, **kwargs)
    return spark.sql(query, **kwargs)


## the DataFrame version of a simple query and its sql equivalent
"""
df.select("name", "age").where("age > 21")
SELECT name, age FROM people WHERE age > 21
"""
def sql_equivalent_of_select(spark, view, columns, predicate=None):
    query = f"SELECT {', '.join(columns)} FROM {view}"
    if predicate:
        query += f" WHERE {predicate}"
    return spark.sql(query)


## dropTempView / dropGlobalTempView return False when there was no such view
def drop_view(spark, name, global_view=False):
    if global_view:
        return spark.catalog.dropGlobalTempView(name)
    return spark.catalog.dropTempView(name)


def demo(spark):
    df = spark.createDataFrame([("John", 21), ("Jane", 22)], "name STRING, age INT")
    register_view(df, "people")
    run_sql(spark, "SELECT name FROM people WHERE age > :age", args={"age": 21}).show()
    """
    +----+
    |name|
    +----+
    |Jane|
    +----+
    """
    view = register_view(df, "people", global_view=True)
    spark.newSession().sql(f"SELECT count(*) AS people FROM {view}").show()
    drop_view(spark, "people")
    drop_view(spark, "people", global_view=True)


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "spark_sql")
