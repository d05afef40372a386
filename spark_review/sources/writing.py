# DataFrameWriter (df.write)
## flexible output format and partitioning
## supports various save modes
"""
df.write.format("format").mode("mode").option("key", "value").save("path")
df.write.csv("path")
df.write.json("path")
df.write.parquet("path")
df.write.orc("path")
df.write.saveAsTable("catalog.table")
"""
## the path is a DIRECTORY, one part-xxxxx file per partition plus a _SUCCESS marker
## coalesce(1) before writing gives a single file (everything goes through one task, small data only)

# save modes
## errorifexists / error (default) => fails if the path exists
## append => adds new files next to the existing ones
## overwrite => deletes the existing data first
## ignore => does nothing if the path exists

# partitionBy
## one sub directory per value: path/year=2024/month=1/part-....parquet
## readers skip whole directories when filtering on the partition columns (partition pruning)
## the partition columns are removed from the data files, they come back from the directory names
## avoid high cardinality columns => many small files
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FORMATS = ("csv", "json", "parquet", "orc", "text")
SAVE_MODES = ("append", "overwrite", "ignore", "error", "errorifexists")


def write_frame(df, path, fmt="parquet", mode="errorifexists", partition_by=None, **options):
    if fmt not in FORMATS:
        raise ValueError(f"unknown format {fmt!r}, expected one of {FORMATS}")
    if mode not in SAVE_MODES:
        raise ValueError(f"unknown save mode {mode!r}, expected one of {SAVE_MODES}")
    writer = df.write.format(fmt).mode(mode).options(**options)
    if partition_by:
        if isinstance(partition_by, str):
            partition_by = [partition_by]
        writer = writer.partitionBy(*partition_by)
    logger.info("writing %s to %s (mode %s)", fmt, path, mode)
    writer.save(str(path))
    return str(path)


## csv needs header=True to write the column names
def write_single_file(df, path, fmt="csv", mode="overwrite", **options):
    return write_frame(df.coalesce(1), path, fmt=fmt, mode=mode, **options)


def data_files(path):
    return sorted(str(file) for file in Path(path).rglob("part-*"))


def list_partitions(path):
    root = Path(path)
    return sorted(
        str(directory.relative_to(root))
        for directory in root.rglob("*=*")
        if directory.is_dir()
    )


def round_trip(spark, df, path, fmt="parquet", **options):
    write_frame(df, path, fmt=fmt, mode="overwrite", **options)
    reader = spark.read.format(fmt).options(**options)
    if fmt == "csv":
        reader = reader.schema(df.schema)
    return reader.load(str(path))


def demo(spark):
    import tempfile

    sales = spark.createDataFrame(
        [("NY", 2023, 10), ("NY", 2024, 12), ("LA", 2024, 7)],
        "city STRING, year INT, amount INT",
    )
    with tempfile.TemporaryDirectory() as directory:
        target = Path(directory) / "sales"
        write_frame(sales, target, partition_by=["year", "city"], mode="overwrite")
        print(list_partitions(target))
        """
        ['year=2023', 'year=2023/city=NY', 'year=2024', 'year=2024/city=LA', 'year=2024/city=NY']
        """
        spark.read.parquet(str(target)).where("year = 2024").show()
        write_single_file(sales, Path(directory) / "sales_csv", header=True)
        print(data_files(Path(directory) / "sales_csv"))


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "writing")
