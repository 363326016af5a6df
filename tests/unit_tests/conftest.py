import numpy as np
import pandas as pd
import pytest

from searchresults.config import reset_default_config


def mock_psm_df(n_psm: int = 10, seed: int = 42) -> pd.DataFrame:
    """Create a mock PSM table as it's delivered for one identification

    Parameters
    ----------

    n_psm : int
        Number of PSMs to generate

    seed : int
        Seed of the random number generator

    Returns
    -------

    psm_df : pd.DataFrame
        A mock PSM table with a numeric `xcorr` column
    """
    rng = np.random.default_rng(seed)

    amino_acids = list("ACDEFGHIKLMNPQRSTVWY")
    sequences = ["".join(rng.choice(amino_acids, size=8)) for _ in range(n_psm)]

    return pd.DataFrame(
        {
            "sequence": sequences,
            "xcorr": rng.random(n_psm) * 5,
            "is_decoy": rng.random(n_psm) > 0.5,
            "mass_diff": rng.normal(0, 0.01, size=n_psm),
            "rank": np.arange(1, n_psm + 1, dtype=np.int64),
        }
    )


def mock_goodness_df(n_rows: int = 3) -> pd.DataFrame:
    """Create a mock goodness of fit table"""
    return pd.DataFrame(
        {
            "distribution": [f"dist_{i}" for i in range(n_rows)],
            "kolmogorov_smirnov": np.linspace(0.1, 0.9, n_rows),
            "anderson_darling": np.linspace(1.0, 2.0, n_rows),
        }
    )


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default config as found in default.yaml."""
    reset_default_config()
    yield
    reset_default_config()
