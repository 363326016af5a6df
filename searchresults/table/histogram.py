"""Fixed-width histograms of numeric score columns."""

import logging

import numpy as np
import pandas as pd

from searchresults.config import get_default_config
from searchresults.constants.keys import ConfigKeys
from searchresults.validation.schemas import score_schema

logger = logging.getLogger()


def sturges_bin_count(n_values: int) -> int:
    """Number of histogram bins according to the rule of Sturges, `round(1 + log2(n))`.

    Rounds half away from zero.
    """
    return int(np.floor(1.0 + np.log2(n_values) + 0.5))


def column_histogram(values) -> tuple[np.ndarray, np.ndarray]:
    """Histogram of numeric values with equally wide bins between minimum and maximum.

    A value is counted in the first bin whose upper edge is greater than or equal to the value,
    values on an inner edge are therefore counted in the lower of the two adjacent bins and the maximum in the last bin.

    Parameters
    ----------

    values : array-like
        Finite numeric values.

    Returns
    -------

    edges : np.ndarray
        `n_bins + 1` ascending bin edges, the first edge is the minimum and the last edge is the maximum.

    counts : np.ndarray
        `n_bins` counts summing up to the number of values.
        If all values are equal, all of them are counted in the first bin.

    """
    values = np.asarray(values, dtype=np.float64)

    if len(values) == 0:
        return np.array([], dtype=np.float64), np.array([], dtype=np.int64)

    if not np.all(np.isfinite(values)):
        raise ValueError(
            f"Histogram values must be finite, found {np.sum(~np.isfinite(values))} non-finite values"
        )

    n_bins = sturges_bin_count(len(values))
    minimum = values.min()
    maximum = values.max()

    if minimum == maximum:
        edges = np.full(n_bins + 1, minimum)
        counts = np.zeros(n_bins, dtype=np.int64)
        counts[0] = len(values)
        return edges, counts

    bin_width = (maximum - minimum) / n_bins
    edges = minimum + np.arange(n_bins + 1) * bin_width
    # accumulated rounding errors must not push the maximum out of the last bin
    edges[-1] = maximum

    bin_idx = np.searchsorted(edges[1:], values, side="left")
    counts = np.bincount(bin_idx, minlength=n_bins).astype(np.int64)

    return edges, counts


def score_histogram(
    psm_df: pd.DataFrame | None, score_column: str | None = None
) -> tuple[np.ndarray, np.ndarray] | None:
    """Histogram of the search engine score of a PSM table, bin number is calculated using the rule of Sturges.

    Parameters
    ----------

    psm_df : pd.DataFrame or None
        PSM table, None if no PSMs were found.

    score_column : str, default None
        Numeric column to summarize. If None, the `histogram.score_column` value of the default config is used (xcorr).

    Returns
    -------

    tuple of np.ndarray or None
        Bin edges and counts as returned by `column_histogram`, None if the PSM table is absent.

    Raises
    ------

    MissingColumnError
        If a present PSM table lacks the score column.

    ColumnTypeError
        If the score column is not numeric.

    NullValueError
        If the score column contains null values.

    """
    if psm_df is None:
        return None

    if score_column is None:
        score_column = get_default_config()[ConfigKeys.HISTOGRAM][
            ConfigKeys.SCORE_COLUMN
        ]

    score_schema(score_column).validate(psm_df)

    edges, counts = column_histogram(psm_df[score_column].to_numpy(dtype=np.float64))
    logger.debug(
        f"Built histogram of '{score_column}' with {len(counts)} bins from {len(psm_df)} PSMs"
    )
    return edges, counts
