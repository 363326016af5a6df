"""Conversion of result records from and to plain dicts and json.

Records are converted field by field. Tables are encoded as `None` if absent, otherwise as
`{"format": ..., "data": ...}` where `data` is base64 encoded parquet, which restores labels, index, dtypes
and values exactly.
"""

import base64
import json
import logging
from io import BytesIO

import pandas as pd

from searchresults.config import get_default_config
from searchresults.constants.keys import ConfigKeys, RecordKeys, TableFormats
from searchresults.models import Identification, MsRun, Record, Search, Spectrum

logger = logging.getLogger()


def encode_table(df: pd.DataFrame | None, table_format: str | None = None) -> dict | None:
    """Encode an optional table.

    Parameters
    ----------

    df : pd.DataFrame or None
        Table to encode.

    table_format : str, default None
        One of `TableFormats`. If None, the `serialization.table_format` value of the default config is used.

    Returns
    -------

    dict or None
        Encoded table, None if the table is absent.

    """
    if df is None:
        return None

    if table_format is None:
        table_format = get_default_config()[ConfigKeys.SERIALIZATION][
            ConfigKeys.TABLE_FORMAT
        ]

    if table_format == TableFormats.PARQUET:
        buffer = BytesIO()
        df.to_parquet(buffer)
        data = base64.b64encode(buffer.getvalue()).decode("ascii")

    else:
        raise ValueError(
            f"Provided unknown table format: {table_format}, supported formats: {TableFormats.get_values()}"
        )

    return {RecordKeys.TABLE_FORMAT: table_format, RecordKeys.TABLE_DATA: data}


def decode_table(encoded: dict | None) -> pd.DataFrame | None:
    """Decode a table encoded by `encode_table`, None if the table is absent."""
    if encoded is None:
        return None

    table_format = encoded[RecordKeys.TABLE_FORMAT]
    data = encoded[RecordKeys.TABLE_DATA]

    if table_format == TableFormats.PARQUET:
        return pd.read_parquet(BytesIO(base64.b64decode(data)))

    else:
        raise ValueError(
            f"Provided unknown table format: {table_format}, supported formats: {TableFormats.get_values()}"
        )


def to_dict(record: Record, table_format: str | None = None) -> dict:
    """Convert a record into a dict of plain python types.

    Parameters
    ----------

    record : Search, MsRun, Spectrum or Identification
        Record to convert.

    table_format : str, default None
        Encoding of the tables of identifications, see `encode_table`.

    Returns
    -------

    dict
        One entry per record field.

    """
    if isinstance(record, Search):
        return {
            RecordKeys.SEARCH_UUID: record.search_uuid,
            RecordKeys.MS_RUN_NAMES: list(record.ms_run_names),
        }

    if isinstance(record, MsRun):
        return {
            RecordKeys.SEARCH_UUID: record.search_uuid,
            RecordKeys.MS_RUN_NAME: record.ms_run_name,
            RecordKeys.SPECTRA_IDS: list(record.spectra_ids),
        }

    if isinstance(record, Spectrum):
        return {
            RecordKeys.SEARCH_UUID: record.search_uuid,
            RecordKeys.MS_RUN_NAME: record.ms_run_name,
            RecordKeys.SPECTRUM_ID: record.spectrum_id,
            RecordKeys.MZ: list(record.mz),
            RecordKeys.INTENSITY: list(record.intensity),
            RecordKeys.IDENTIFICATIONS: [
                to_dict(identification, table_format)
                for identification in record.identifications
            ],
        }

    if isinstance(record, Identification):
        return {
            RecordKeys.GOODNESSES: encode_table(record.goodnesses, table_format),
            RecordKeys.PSMS: encode_table(record.psms, table_format),
            RecordKeys.PRECURSOR: float(record.precursor),
            RecordKeys.CHARGE: int(record.charge),
        }

    raise TypeError(f"Can't convert object of type {type(record).__name__}")


def from_dict(record_type: type, data: dict) -> Record:
    """Create a record of the given type from a dict created by `to_dict`."""
    if record_type is Search:
        return Search(
            search_uuid=data[RecordKeys.SEARCH_UUID],
            ms_run_names=data[RecordKeys.MS_RUN_NAMES],
        )

    if record_type is MsRun:
        return MsRun(
            search_uuid=data[RecordKeys.SEARCH_UUID],
            ms_run_name=data[RecordKeys.MS_RUN_NAME],
            spectra_ids=data[RecordKeys.SPECTRA_IDS],
        )

    if record_type is Spectrum:
        return Spectrum(
            search_uuid=data[RecordKeys.SEARCH_UUID],
            ms_run_name=data[RecordKeys.MS_RUN_NAME],
            spectrum_id=data[RecordKeys.SPECTRUM_ID],
            mz=data[RecordKeys.MZ],
            intensity=data[RecordKeys.INTENSITY],
            identifications=[
                from_dict(Identification, identification)
                for identification in data[RecordKeys.IDENTIFICATIONS]
            ],
        )

    if record_type is Identification:
        return Identification(
            goodnesses=decode_table(data[RecordKeys.GOODNESSES]),
            psms=decode_table(data[RecordKeys.PSMS]),
            precursor=data[RecordKeys.PRECURSOR],
            charge=data[RecordKeys.CHARGE],
        )

    raise TypeError(f"Can't create object of type {record_type.__name__}")


def to_json(record: Record, table_format: str | None = None) -> str:
    """Serialize a record to a json string, see `to_dict`."""
    logger.debug(f"Serializing {type(record).__name__} to json")
    return json.dumps(to_dict(record, table_format))


def from_json(record_type: type, text: str) -> Record:
    """Deserialize a record of the given type from a json string created by `to_json`."""
    return from_dict(record_type, json.loads(text))
