# DataFrameReader (spark.read) and DataFrameWriter (df.write)
