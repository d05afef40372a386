# dataframe api chapters: creating, selecting, filtering, aggregating, combining, sampling
