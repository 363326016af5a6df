from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import pandas as pd

from searchresults.exceptions import PeakShapeError
from searchresults.table.histogram import score_histogram
from searchresults.table.rows import RowIterator, iter_rows

MAX_CHARGE = np.iinfo(np.uint8).max


def _tables_equal(left: pd.DataFrame | None, right: pd.DataFrame | None) -> bool:
    """Absent tables only equal absent tables, present tables are compared by labels, dtypes and values."""
    if left is None or right is None:
        return left is None and right is None
    return left.equals(right)


@dataclass(frozen=True, eq=False)
class Identification:
    """PSMs and goodness of fit for one charge state / precursor hypothesis of a spectrum.

    An absent table (None) means that no candidates were found for the hypothesis,
    which is different from a present table without rows.

    Parameters
    ----------

    goodnesses : pd.DataFrame or None
        Goodness of fit table.

    psms : pd.DataFrame or None
        Peptide-spectrum matches, containing at least the numeric score column (xcorr).

    precursor : float
        Precursor mass of the hypothesis.

    charge : int
        Charge state of the hypothesis, 0 to 255.

    """

    goodnesses: pd.DataFrame | None
    psms: pd.DataFrame | None
    precursor: float
    charge: int

    def __post_init__(self):
        if not 0 <= self.charge <= MAX_CHARGE:
            raise ValueError(
                f"Charge must be between 0 and {MAX_CHARGE}, got {self.charge}"
            )

    def __eq__(self, other):
        if not isinstance(other, Identification):
            return NotImplemented
        return (
            self.precursor == other.precursor
            and self.charge == other.charge
            and _tables_equal(self.goodnesses, other.goodnesses)
            and _tables_equal(self.psms, other.psms)
        )

    def iter_psm_rows(
        self, strict_column_lengths: bool | None = None
    ) -> RowIterator | None:
        """Iterate the rows of the PSM table, None if there are no PSMs."""
        return iter_rows(self.psms, strict_column_lengths=strict_column_lengths)

    def iter_goodness_rows(
        self, strict_column_lengths: bool | None = None
    ) -> RowIterator | None:
        """Iterate the rows of the goodness of fit table, None if there are no goodnesses."""
        return iter_rows(self.goodnesses, strict_column_lengths=strict_column_lengths)

    def get_score_histogram(
        self, score_column: str | None = None
    ) -> tuple[np.ndarray, np.ndarray] | None:
        """Histogram of the original search engine score (xcorr, for Comet).

        Bin number is calculated using the rule of Sturges, see `score_histogram`.
        None if there are no PSMs.
        """
        return score_histogram(self.psms, score_column=score_column)


@dataclass(frozen=True)
class Spectrum:
    """A spectrum, its peaks and the identifications for each considered precursor / charge state.

    `mz` and `intensity` are parallel, the i-th values of both form one peak.
    """

    search_uuid: str
    ms_run_name: str
    spectrum_id: str
    mz: tuple[float, ...] = ()
    intensity: tuple[float, ...] = ()
    identifications: tuple[Identification, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "mz", tuple(float(mz) for mz in self.mz))
        object.__setattr__(
            self, "intensity", tuple(float(intensity) for intensity in self.intensity)
        )
        object.__setattr__(self, "identifications", tuple(self.identifications))

        if len(self.mz) != len(self.intensity):
            raise PeakShapeError(self.spectrum_id, len(self.mz), len(self.intensity))

    @classmethod
    def empty(cls) -> "Spectrum":
        return cls(search_uuid="", ms_run_name="", spectrum_id="")

    def peaks(self) -> Iterator[tuple[float, float]]:
        """Iterate the (mz, intensity) pairs of the spectrum."""
        return zip(self.mz, self.intensity)

    def get_identification(self, charge: int) -> Identification | None:
        """First identification for the given charge state, None if the charge state was not considered."""
        for identification in self.identifications:
            if identification.charge == charge:
                return identification
        return None
