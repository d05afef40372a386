# the sql interface: temp views, spark.sql, the catalog
