# descriptive statistics
## describe() => count, mean, stddev, min, max for numeric and string columns
## summary() => same plus percentiles 25% 50% 75% by default, or the statistics we ask for
## both return a DataFrame of strings (one column per input column plus the "summary" column)
"""
+-------+------------------+
|summary|               age|
+-------+------------------+
|  count|                 5|
|   mean|              31.0|
| stddev|13.490737563232042|
|    min|                18|
|    max|                50|
+-------+------------------+
"""
## stddev is the sample standard deviation (n - 1), stddev_pop the population one
import math

import pandas as pd
from pyspark.sql import functions as F

SYMMETRY_THRESHOLD = 0.5
TAILEDNESS_THRESHOLD = 0.5


def describe_columns(df, *columns):
    return df.describe(*columns)


def summary_statistics(df, *statistics):
    return df.summary(*statistics)


# skewness and kurtosis
## both describe the shape of a distribution from its central moments
## m_k = mean((x - mean(x)) ** k)   (population moments, divided by n)

## skewness = asymmetry of the distribution around its mean
### g1 = m3 / m2 ** (3/2)
### g1 = 0 => symmetric, g1 > 0 => right skewed (long tail on the right, mean > median)
### g1 < 0 => left skewed (long tail on the left, mean < median)

## kurtosis = how heavy the tails are compared to a normal distribution
### spark returns the EXCESS kurtosis g2 = m4 / m2 ** 2 - 3, so a normal distribution gives 0
### g2 > 0 => leptokurtic (heavy tails, outliers), g2 < 0 => platykurtic (light tails, e.g. uniform is -1.2)

## spark's skewness() and kurtosis() are the population (biased) estimators above
## pandas Series.skew() and Series.kurt() apply the small sample correction, so they give other numbers
## on a constant column the variance is 0 and spark returns null
## the mean of a constant float column is not always exactly the value (0.1 * 3 / 3), so m2 can come out as 1e-34
## a constant column is detected from min == max, not from m2 == 0
def central_moment(values, k):
    values = list(values)
    if not values:
        raise ValueError("central moments of an empty sequence are undefined")
    mean = math.fsum(values) / len(values)
    return math.fsum((value - mean) ** k for value in values) / len(values)


def _is_constant(values):
    if not values:
        raise ValueError("central moments of an empty sequence are undefined")
    return min(values) == max(values)


def skewness(values):
    values = list(values)
    if _is_constant(values):
        return math.nan
    m2 = central_moment(values, 2)
    return central_moment(values, 3) / m2 ** 1.5


def kurtosis(values):
    values = list(values)
    if _is_constant(values):
        return math.nan
    m2 = central_moment(values, 2)
    return central_moment(values, 4) / m2 ** 2 - 3


def sample_adjusted(values):
    series = pd.Series(list(values), dtype="float64")
    return series.skew(), series.kurt()


def spark_skewness_kurtosis(df, column):
    row = df.agg(F.skewness(column).alias("skewness"), F.kurtosis(column).alias("kurtosis")).first()
    return row["skewness"], row["kurtosis"]


def distribution_shape(skew, kurt):
    if skew is None or kurt is None or math.isnan(skew) or math.isnan(kurt):
        raise ValueError("the shape of a constant column is undefined")
    if abs(skew) < SYMMETRY_THRESHOLD:
        symmetry = "symmetric"
    elif skew > 0:
        symmetry = "right-skewed"
    else:
        symmetry = "left-skewed"
    if abs(kurt) < TAILEDNESS_THRESHOLD:
        tailedness = "mesokurtic"
    elif kurt > 0:
        tailedness = "leptokurtic"
    else:
        tailedness = "platykurtic"
    return symmetry, tailedness


# other statistics through df.stat (DataFrameStatFunctions)
## corr (pearson only), cov (sample covariance), crosstab, freqItems, approxQuantile
## approxQuantile(col, probabilities, relativeError) => relativeError 0 gives the exact quantiles (expensive)
def correlation(df, a, b):
    return df.stat.corr(a, b)


def covariance(df, a, b):
    return df.stat.cov(a, b)


def quantiles(df, column, probabilities=(0.25, 0.5, 0.75), relative_error=0.0):
    return df.approxQuantile(column, list(probabilities), relative_error)


def demo(spark):
    ages = [18, 22, 25, 40, 50]
    df = spark.createDataFrame([(age,) for age in ages], "age INT")
    describe_columns(df, "age").show()
    summary_statistics(df, "min", "50%", "max").show()
    skew, kurt = spark_skewness_kurtosis(df, "age")
    print("spark     ", skew, kurt)
    print("definition", skewness(ages), kurtosis(ages))
    print("pandas    ", *sample_adjusted(ages))
    print(distribution_shape(skew, kurt))


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "statistics")
