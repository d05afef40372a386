# Primer on SQL Metastores
# metadata management for spark sql
## a metastore is responsible for
#### defining table schemas and locations
#### defining table partitions
#### storing properties and information for objects including tables, views, functions
## without hive support spark uses an in-memory catalog, gone when the application stops
## enableHiveSupport() => persistent hive metastore (derby metastore_db folder in local mode)
## Unity Catalog is the centralized metadata service of Databricks (catalog.schema.table)

# spark.catalog
## listDatabases(), listTables(db), listColumns(table), tableExists(name) (spark 3.3)
## currentDatabase(), setCurrentDatabase(db), dropTempView(name), cacheTable(name), clearCache()
## temporary views show up in listTables() with isTemporary=True

# managed vs external tables
## managed => spark owns data and metadata, files under spark.sql.warehouse.dir, DROP TABLE deletes the files
## external => created with a path (df.write.option("path", ...).saveAsTable), DROP TABLE keeps the files
import logging

logger = logging.getLogger(__name__)

SAVE_MODES = ("append", "overwrite", "ignore", "error", "errorifexists")


def list_tables(spark, database=None):
    return sorted(table.name for table in spark.catalog.listTables(database))


def list_columns(spark, table):
    return [(column.name, column.dataType) for column in spark.catalog.listColumns(table)]


def table_exists(spark, name):
    return spark.catalog.tableExists(name)


def current_database(spark):
    return spark.catalog.currentDatabase()


## df.write.saveAsTable("db.table") => managed table in parquet by default
def save_as_table(df, name, mode="errorifexists"):
    if mode not in SAVE_MODES:
        raise ValueError(f"unknown save mode {mode!r}, expected one of {SAVE_MODES}")
    logger.info("saving table %s (mode %s)", name, mode)
    df.write.mode(mode).saveAsTable(name)


def drop_table(spark, name):
    spark.sql(f"DROP TABLE IF EXISTS {name}")


def demo(spark):
    df = spark.createDataFrame([("John", 21), ("Jane", 22)], "name STRING, age INT")
    save_as_table(df, "people", mode="overwrite")
    df.createOrReplaceTempView("people_view")
    print(current_database(spark), list_tables(spark))
    print(list_columns(spark, "people"))
    spark.read.table("people").show()
    drop_table(spark, "people")
    print("people exists:", table_exists(spark, "people"))


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "catalog")
