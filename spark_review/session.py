# entry point SparkSession for a spark application
## encapsulate all the different contexts, sql context, spark context, streaming context (from spark 2.0)
## before that the contexts are separate
## the builder is a singleton factory: getOrCreate() returns the active session if there is one
### config set on the builder of an already running session only applies to the sql conf, not to the SparkContext

# environment based session
## same code, different cluster settings depending on SPARK_ENV
## dev  => local[*], small driver, few shuffle partitions
## test => local[1], one shuffle partition, no web ui (fast and deterministic)
## prod => master is given by spark-submit (--master yarn / k8s ...), adaptive query execution on
import logging
import os

from pyspark.sql import SparkSession

logger = logging.getLogger(__name__)

ENVIRONMENTS = {
    "dev": {
        "master": "local[*]",
        "conf": {
            "spark.driver.memory": "2g",
            "spark.sql.shuffle.partitions": "10",
        },
    },
    "test": {
        "master": "local[1]",
        "conf": {
            "spark.sql.shuffle.partitions": "1",
            "spark.ui.enabled": "false",
            "spark.ui.showConsoleProgress": "false",
        },
    },
    "prod": {
        "master": None,
        "conf": {
            "spark.sql.adaptive.enabled": "true",
            "spark.sql.adaptive.coalescePartitions.enabled": "true",
        },
    },
}


def _conf_key(key):
    # spark_sql_shuffle_partitions => spark.sql.shuffle.partitions
    if "." in key:
        return key
    return key.replace("_", ".")


def create_session(app_name=None, env=None, **extra_conf):
    """Create (or get) a session configured for the given environment.

    ``env`` defaults to ``SPARK_ENV`` then ``dev``. Extra config can be passed
    as keyword arguments, underscores standing for dots.
    """
    env = env or os.environ.get("SPARK_ENV", "dev")
    if env not in ENVIRONMENTS:
        raise ValueError(f"unknown environment {env!r}, expected one of {sorted(ENVIRONMENTS)}")
    settings = ENVIRONMENTS[env]
    app_name = app_name or os.environ.get("SPARK_APP_NAME") or f"review-spark-sql-{env}"

    logger.info("creating session %s for environment %s", app_name, env)
    builder = SparkSession.builder.appName(app_name)
    if settings["master"]:
        builder = builder.master(settings["master"])
    for key, value in settings["conf"].items():
        builder = builder.config(key, value)
    for key, value in extra_conf.items():
        builder = builder.config(_conf_key(key), str(value))

    spark = builder.getOrCreate()
    spark.sparkContext.setLogLevel(os.environ.get("SPARK_LOG_LEVEL", "WARN"))
    return spark


# create a new SparkSession from the existing session
## same SparkContext so same application id
## but its own sql conf, temp views and registered functions
def new_session(spark):
    sibling = spark.newSession()
    logger.debug("new session sharing application %s", spark.sparkContext.applicationId)
    return sibling


def session_info(spark):
    sc = spark.sparkContext
    return {
        "version": spark.version,
        "application_id": sc.applicationId,
        "master": sc.master,
        "app_name": sc.appName,
        "shuffle_partitions": int(spark.conf.get("spark.sql.shuffle.partitions")),
    }


# always stop the session when done
## stopping releases the executors, and the next getOrCreate() starts a fresh SparkContext
def stop_session(spark):
    application_id = spark.sparkContext.applicationId
    spark.stop()
    logger.info("session %s stopped", application_id)


def run_job(job, app_name=None, env=None):
    """Run ``job(spark)`` in a fresh session and always stop it afterwards."""
    spark = create_session(app_name=app_name, env=env)
    try:
        return job(spark)
    finally:
        stop_session(spark)
