# sampling
## sample(withReplacement, fraction, seed) is a transformation
## fraction is the PROBABILITY for each row to be picked, not an exact share of the rows
### sample(fraction=0.1) on 1000 rows gives around 100 rows, not exactly 100
### without replacement => bernoulli sampling, fraction must be in [0, 1]
### with replacement => poisson sampling, fraction is the expected number of times a row is picked (can be > 1)
## same seed + same partitioning => same sample
## for an exact number of rows use limit() (first rows, not random) or orderBy(rand()).limit(n) (full sort)
"""
df.sample(fraction=0.5, seed=42)
df.sample(withReplacement=True, fraction=2.0, seed=42)
"""

def sample_fraction(df, fraction, seed=None, with_replacement=False):
    if fraction < 0 or (not with_replacement and fraction > 1):
        raise ValueError(f"fraction {fraction} must be in [0, 1] when sampling without replacement")
    return df.sample(withReplacement=with_replacement, fraction=fraction, seed=seed)


# randomSplit
## splits one DataFrame in several disjoint ones (train / test)
## weights are normalized if they don't sum to 1 => [2, 1, 1] is the same as [0.5, 0.25, 0.25]
## cache the input first, otherwise each split re-evaluates it and the splits might overlap
def split_frame(df, weights, seed=None):
    return df.randomSplit(list(weights), seed)


# stratified sampling
## sampleBy(col, fractions, seed) => a fraction per value of the column
## the values missing from the fractions dict are treated as 0 (never picked)
def stratified_sample(df, column, fractions, seed=None):
    return df.sampleBy(column, fractions, seed)


## take(n) / head(n) are actions returning a list of Rows to the driver
## limit(n) is a transformation returning a DataFrame
def take_first(df, n):
    return df.take(n)


def limit_rows(df, n):
    return df.limit(n)


def demo(spark):
    df = spark.range(0, 1_000)
    print("sampled rows", sample_fraction(df, 0.1, seed=42).count())
    train, test = split_frame(df, [0.8, 0.2], seed=42)
    print("train / test", train.count(), test.count())
    labelled = df.selectExpr("id", "CAST(id % 2 AS INT) AS parity")
    stratified_sample(labelled, "parity", {0: 0.1, 1: 0.5}, seed=42).groupBy("parity").count().show()
    print(take_first(df, 3))


if __name__ == "__main__":
    from spark_review.session import run_job

    run_job(demo, "sampling")
