import dataclasses

import numpy as np
import pandas as pd
import pytest
from conftest import mock_goodness_df, mock_psm_df

from searchresults.exceptions import PeakShapeError
from searchresults.models import Identification, MsRun, Search, Spectrum
from searchresults.table.rows import RowIterator


def test_search():
    # when
    search = Search("5a1c", ["run_1", "run_2"])

    # then
    assert search.search_uuid == "5a1c"
    assert search.ms_run_names == ("run_1", "run_2")
    assert search.has_ms_run("run_2")
    assert not search.has_ms_run("run_3")


def test_search_empty():
    # when
    search = Search.empty()

    # then
    assert search.search_uuid == ""
    assert search.ms_run_names == ()
    assert search.is_empty()
    assert not Search("5a1c", ["run_1"]).is_empty()


def test_search_without_uuid_raises():
    with pytest.raises(ValueError):
        Search("", ["run_1"])


def test_ms_run():
    # when
    ms_run = MsRun("5a1c", "run_1", ["scan=1", "scan=2"])

    # then
    assert ms_run.search_uuid == "5a1c"
    assert ms_run.ms_run_name == "run_1"
    assert ms_run.spectra_ids == ("scan=1", "scan=2")
    assert ms_run.has_spectrum("scan=1")
    assert MsRun.empty() == MsRun("", "", [])


def test_records_are_immutable():
    # given
    search = Search("5a1c", ["run_1"])

    # when / then
    with pytest.raises(dataclasses.FrozenInstanceError):
        search.search_uuid = "other"


def test_spectrum():
    # when
    spectrum = Spectrum(
        "5a1c",
        "run_1",
        "scan=1",
        mz=np.array([100.1, 200.2]),
        intensity=[10, 20],
    )

    # then
    assert spectrum.mz == (100.1, 200.2)
    assert spectrum.intensity == (10.0, 20.0)
    assert list(spectrum.peaks()) == [(100.1, 10.0), (200.2, 20.0)]
    assert spectrum.identifications == ()


def test_spectrum_peak_shape_mismatch_raises():
    # when / then
    with pytest.raises(PeakShapeError):
        Spectrum("5a1c", "run_1", "scan=1", mz=[100.1, 200.2], intensity=[10])


def test_spectrum_empty():
    # when
    spectrum = Spectrum.empty()

    # then
    assert spectrum.spectrum_id == ""
    assert list(spectrum.peaks()) == []


def test_spectrum_get_identification():
    # given
    identification_2 = Identification(None, None, 500.0, 2)
    identification_3 = Identification(None, mock_psm_df(3), 333.7, 3)
    spectrum = Spectrum(
        "5a1c",
        "run_1",
        "scan=1",
        identifications=[identification_2, identification_3],
    )

    # when / then
    assert spectrum.get_identification(3) is identification_3
    assert spectrum.get_identification(2) is identification_2
    assert spectrum.get_identification(4) is None


def test_identification_absent_tables():
    # given
    identification = Identification(None, None, 1000.5, 2)

    # when / then
    assert identification.iter_psm_rows() is None
    assert identification.iter_goodness_rows() is None
    assert identification.get_score_histogram() is None


def test_identification_present_but_empty_tables():
    # given
    empty_psm_df = mock_psm_df(0)
    identification = Identification(mock_goodness_df(0), empty_psm_df, 1000.5, 2)

    # when
    psm_rows = identification.iter_psm_rows()
    goodness_rows = identification.iter_goodness_rows()

    # then
    assert isinstance(psm_rows, RowIterator)
    assert list(psm_rows) == []
    assert list(goodness_rows) == []


def test_identification_iter_rows():
    # given
    psm_df = mock_psm_df(5)
    goodness_df = mock_goodness_df(3)
    identification = Identification(goodness_df, psm_df, 1000.5, 2)

    # when
    psm_rows = list(identification.iter_psm_rows())
    goodness_rows = list(identification.iter_goodness_rows())

    # then
    assert [row["sequence"] for row in psm_rows] == psm_df["sequence"].tolist()
    assert [row["distribution"] for row in goodness_rows] == [
        "dist_0",
        "dist_1",
        "dist_2",
    ]


def test_identification_score_histogram():
    # given
    psm_df = pd.DataFrame({"xcorr": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]})
    identification = Identification(None, psm_df, 1000.5, 2)

    # when
    edges, counts = identification.get_score_histogram()

    # then
    assert np.allclose(edges, [1.0, 2.5, 4.0, 5.5, 7.0])
    assert counts.tolist() == [2, 2, 1, 2]


def test_identification_equality():
    # given
    psm_df = mock_psm_df(4)

    # when
    identification = Identification(None, psm_df, 1000.5, 2)

    # then
    assert identification == Identification(None, psm_df.copy(), 1000.5, 2)
    assert identification != Identification(None, psm_df, 1000.5, 3)
    assert identification != Identification(None, None, 1000.5, 2)
    assert identification != Identification(None, psm_df.iloc[:2], 1000.5, 2)
    assert Identification(None, mock_psm_df(0), 1.0, 1) != Identification(
        None, None, 1.0, 1
    )


@pytest.mark.parametrize("charge", [-1, 256])
def test_identification_invalid_charge_raises(charge):
    with pytest.raises(ValueError):
        Identification(None, None, 1000.5, charge)
