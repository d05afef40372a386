# DataFrameReader (spark.read)
## supports multiple formats, built in: csv, json, parquet, orc, text, (avro with the spark-avro package)
## provides schema inference
"""
spark.read.format("format").option("key", "value").load("path")
spark.read.csv("path")
spark.read.json("path")
spark.read.parquet("path")
spark.read.orc("path")
spark.read.table("catalog.table")
"""
## the path can be a file, a directory (all the files inside) or a glob ("data/2024-*.csv")
## partition directories key=value are turned into columns (partition discovery)

# csv
## header=True => first line holds the column names, otherwise _c0, _c1 ...
## inferSchema=True => extra pass over the data to guess the types, otherwise everything is a string
## multiLine=True + escape='"' for quoted values spanning several lines
## giving the schema (StructType or DDL string) avoids the inference pass, recommended in production

# json
## one json object per line (json lines) by default, multiLine=True for a single document / array
## the schema is always inferred unless given (types of all the records are merged)

# parquet and orc
## columnar, compressed, self describing (the schema is in the file footer)
## column pruning and predicate pushdown => only the needed columns / row groups are read

# corrupt records (csv and json)
## mode PERMISSIVE (default) => bad fields become null, the raw line goes to columnNameOfCorruptRecord if in the schema
## mode DROPMALFORMED => bad lines are dropped
## mode FAILFAST => exception at the first bad line
import logging

logger = logging.getLogger(__name__)

FORMATS = ("csv", "json", "parquet", "orc", "text")
PARSE_MODES = ("PERMISSIVE", "DROPMALFORMED", "FAILFAST")


def _check_mode(mode):
    if mode is not None and mode.upper() not in PARSE_MODES:
        raise ValueError(f"unknown parse mode {mode!r}, expected one of {PARSE_MODES}")


def read_csv(spark, path, schema=None, header=True, infer_schema=True, mode=None, **options):
    _check_mode(mode)
    reader = spark.read.option("header", header)
    if schema is not None:
        reader = reader.schema(schema)
    else:
        reader = reader.option("inferSchema", infer_schema)
    if mode is not None:
        reader = reader.option("mode", mode.upper())
    logger.debug("reading csv %s", path)
    return reader.options(**options).csv(str(path))


def read_json(spark, path, schema=None, multiline=False, mode=None, **options):
    _check_mode(mode)
    reader = spark.read.option("multiLine", multiline)
    if schema is not None:
        reader = reader.schema(schema)
    if mode is not None:
        reader = reader.option("mode", mode.upper())
    logger.debug("reading json %s", path)
    return reader.options(**options).json(str(path))


def read_parquet(spark, *paths):
    return spark.read.parquet(*[str(path) for path in paths])


def read_orc(spark, path):
    return spark.read.orc(str(path))


## the generic form, format(...).options(...).load(path)
def read_format(spark, fmt, path, schema=None, **options):
    if fmt not in FORMATS:
        raise ValueError(f"unknown format {fmt!r}, expected one of {FORMATS}")
    reader = spark.read.format(fmt)
    if schema is not None:
        reader = reader.schema(schema)
    return reader.options(**options).load(str(path))


def demo(spark):
    import tempfile
    from pathlib import Path

    with tempfile.TemporaryDirectory() as directory:
        path = Path(directory) / "people.csv"
        path.write_text("name,age\nJohn,21\nJane,abc\n")
        read_csv(spark, path).printSchema()
        """
        root
         |-- name: string (nullable = true)
         |-- age: string (nullable = true)      <== "abc" makes the whole column a string
        """
        read_csv(spark, path, schema="name STRING, age INT").show()
        read_csv(spark, path, schema="name STRING, age INT", mode="DROPMALFORMED").show()


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "reading")
