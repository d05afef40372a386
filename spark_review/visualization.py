# data visualization
## spark does not plot, the aggregated (small) result goes to the driver as pandas and is plotted there
## databricks provides display() with a plot button, outside of it we use matplotlib / seaborn
## never toPandas() the raw big data, sample or aggregate first

# histogram
## bins define how the data is grouped into intervals (the number of vertical bars)
## the kde line (kernel density estimate) smooths the histogram and shows the shape of the distribution
## a long tail on the right => positive skewness, a sharp peak with fat tails => positive (excess) kurtosis
## the figure is built with matplotlib.figure.Figure, not pyplot, so no backend is selected and no window is opened
## the caller keeps whatever backend its process uses
import logging

import seaborn as sns
from matplotlib.figure import Figure

from spark_review.dataframes.statistics import spark_skewness_kurtosis

logger = logging.getLogger(__name__)


def plot_distribution(df, column, path, bins=20, sample_fraction=None, seed=42):
    skew, kurt = spark_skewness_kurtosis(df, column)
    if sample_fraction is not None:
        df = df.sample(fraction=sample_fraction, seed=seed)
    values = df.select(column).dropna().toPandas()

    fig = Figure(figsize=(8, 5))
    ax = fig.subplots()
    sns.histplot(data=values, x=column, bins=bins, kde=skew is not None and len(values) > 1, ax=ax)
    if skew is None:
        ax.set_title(f"{column} (constant)")
    else:
        ax.set_title(f"{column} skewness={skew:.2f} kurtosis={kurt:.2f}")
    fig.savefig(str(path))
    logger.info("distribution of %s saved to %s", column, path)
    return str(path)


def demo(spark):
    import tempfile
    from pathlib import Path

    from pyspark.sql.functions import exp, randn

    df = spark.range(0, 5_000).select(exp(randn(seed=7)).alias("lognormal"))
    with tempfile.TemporaryDirectory() as directory:
        print(plot_distribution(df, "lognormal", Path(directory) / "lognormal.png", bins=50))


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "data_viz")
