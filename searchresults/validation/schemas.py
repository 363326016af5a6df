import numpy as np

from searchresults.constants.keys import PsmCols
from searchresults.validation.base import Required, Schema


def score_schema(score_column: str = PsmCols.XCORR) -> Schema:
    """Schema of a PSM table a score histogram can be built from.

    The score column has to be numeric and free of nulls.
    """
    return Schema(
        "psm_score",
        [
            Required(score_column, np.number, nullable=False),
        ],
    )
