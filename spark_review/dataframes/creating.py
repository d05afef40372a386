# what is a DataFrame?
## structured data processing in apache spark
## DataFrames are distributed collections of records, all with the same pre-defined structure (schema)
## DataFrames track their schema and provide native support for the common SQL functions and relational operators (JOINs etc)
## DataFrames are evaluated as DAGs, using lazy evaluation and providing lineage and fault tolerance
## DataFrames are immutable, every transformation returns a new DataFrame

# creating DataFrames
## from python data with spark.createDataFrame (list of tuples, dicts, Rows, pandas DataFrame)
## from files JSON, CSV, Parquet, ORC, Text (see spark_review.sources.reading)
## from a table or view in the catalog (spark.table / spark.read.table)
## from spark.range(start, end) => single LongType column called id
import contextlib
import io
import re

from pyspark.sql import Row
from pyspark.sql.types import ArrayType, IntegerType, MapType, StringType, StructField, StructType

PEOPLE = [("John", 21), ("Jane", 22)]


## without a schema the column types are inferred from the python values
## only names given => int becomes LongType (bigint), str becomes StringType
def from_rows(spark, rows, columns):
    return spark.createDataFrame(rows, list(columns))


# DataFrame Schema
## every DataFrame has a schema, structure and data types of all columns
## can be inferred from data or explicitly specified (more efficient, no extra pass over the data)
## self describing formats like Parquet and ORC carry the schema in the files
"""
from pyspark.sql.types import *
schema = StructType([StructField("name", StringType(), True), StructField("age", IntegerType(), True)])
df = spark.createDataFrame([("John", 21), ("Jane", 22)], schema)
df.printSchema()
"""
PEOPLE_SCHEMA = StructType([
    StructField("name", StringType(), True),
    StructField("age", IntegerType(), True),
])


def with_struct_schema(spark, rows=PEOPLE):
    return spark.createDataFrame(rows, PEOPLE_SCHEMA)


# DDL Schemas
## an alternative to StructType definitions, more readable
## NOT NULL is accepted in the DDL string
"""
ddl_schema = "name STRING NOT NULL, age INT, city STRING"
df = spark.read.csv("path", schema=ddl_schema)
"""
def with_ddl_schema(spark, rows=PEOPLE, ddl="name STRING, age INT"):
    return spark.createDataFrame(rows, ddl)


## the other way around, a schema rendered as a DDL string that spark.createDataFrame / read.schema accept back
## simpleString() => struct<name:string,age:int>, lowercase and without NOT NULL
## names that are not plain identifiers need backquotes (`zip code`), a backquote inside a name is doubled
def _quote(name):
    if re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", name):
        return name
    return "`" + name.replace("`", "``") + "`"


def _type_ddl(data_type):
    if isinstance(data_type, StructType):
        return "STRUCT<" + ", ".join(_field_ddl(field, ": ") for field in data_type.fields) + ">"
    if isinstance(data_type, ArrayType):
        return f"ARRAY<{_type_ddl(data_type.elementType)}>"
    if isinstance(data_type, MapType):
        return f"MAP<{_type_ddl(data_type.keyType)}, {_type_ddl(data_type.valueType)}>"
    return data_type.simpleString().upper()


def _field_ddl(field, separator=" "):
    ddl = f"{_quote(field.name)}{separator}{_type_ddl(field.dataType)}"
    return ddl if field.nullable else ddl + " NOT NULL"


def schema_as_ddl(df):
    return ", ".join(_field_ddl(field) for field in df.schema.fields)


## dicts => keys become column names, sorted alphabetically when the schema is inferred
## Row(**kwargs) keeps the order the fields were given in (since spark 3.0)
def from_dicts(spark, records):
    return spark.createDataFrame(records)


## Row objects carry their field names
## Row(name="John", age=21).name == "John", row["age"] == 21, row.asDict()
def from_row_objects(spark, rows):
    return spark.createDataFrame([row if isinstance(row, Row) else Row(**row) for row in rows])


# use printSchema() method to print out the DataFrame schema
"""
root
 |-- name: string (nullable = true)
 |-- age: integer (nullable = true)
"""
def schema_tree(df):
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        df.printSchema()
    return buffer.getvalue()


# DataFrame Data Types
# primitive data types
"""
pyspark.sql.types                          SQL               Python base equivalents
----------------------------------------------------------------------------------------
ByteType                                   TINYINT            int
ShortType                                  SMALLINT           int
IntegerType                                INT                int
LongType                                   BIGINT             int
FloatType                                  FLOAT              float
DoubleType                                 DOUBLE             float
DecimalType                                DECIMAL            decimal.Decimal (not float, keeps the precision)
BooleanType                                BOOLEAN            bool
StringType                                 STRING             str
BinaryType                                 BINARY             bytes (spark returns bytes objects, not bytearray)
DateType                                   DATE               datetime.date
TimestampType                              TIMESTAMP          datetime.datetime
NullType                                   VOID               None
StructType                                 STRUCT             Row (or dict, tuple, namedtuple when creating)
ArrayType                                  ARRAY              list or tuple
MapType                                    MAP                dict
"""
PYTHON_TYPE_MAPPING = {
    "ByteType": ("TINYINT", "int"),
    "ShortType": ("SMALLINT", "int"),
    "IntegerType": ("INT", "int"),
    "LongType": ("BIGINT", "int"),
    "FloatType": ("FLOAT", "float"),
    "DoubleType": ("DOUBLE", "float"),
    "DecimalType": ("DECIMAL", "decimal.Decimal"),
    "BooleanType": ("BOOLEAN", "bool"),
    "StringType": ("STRING", "str"),
    "BinaryType": ("BINARY", "bytes"),
    "DateType": ("DATE", "datetime.date"),
    "TimestampType": ("TIMESTAMP", "datetime.datetime"),
    "NullType": ("VOID", "None"),
    "StructType": ("STRUCT", "Row"),
    "ArrayType": ("ARRAY", "list"),
    "MapType": ("MAP", "dict"),
}

## type hierarchy in spark
"""
DataType
├── AtomicType
│   ├── NumericType
│   │   ├── IntegralType (ByteType, ShortType, IntegerType, LongType)
│   │   ├── FractionalType (FloatType, DoubleType, DecimalType)
│   ├── StringType, BooleanType, BinaryType
│   ├── DateType, TimestampType
├── ArrayType
├── MapType
└── StructType
"""


def demo(spark):
    df = with_struct_schema(spark)
    df.show()
    print(schema_tree(df))
    print(schema_as_ddl(with_ddl_schema(spark)))
    from_dicts(spark, [{"name": "Mary", "age": 35}]).printSchema()


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "creating_dataframes")
