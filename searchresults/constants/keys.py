class ConstantsClass(type):
    """A metaclass for classes that should only contain string constants."""

    def __setattr__(self, name, value):
        raise TypeError("Constants class cannot be modified")

    def get_values(cls):
        """Get all user-defined string values of the class."""
        return [
            value
            for key, value in cls.__dict__.items()
            if not key.startswith("__") and isinstance(value, str)
        ]


class ConfigKeys(metaclass=ConstantsClass):
    """String constants for accessing the config."""

    GENERAL = "general"
    LOG_LEVEL = "log_level"

    ROWS = "rows"
    STRICT_COLUMN_LENGTHS = "strict_column_lengths"

    HISTOGRAM = "histogram"
    SCORE_COLUMN = "score_column"

    SERIALIZATION = "serialization"
    TABLE_FORMAT = "table_format"


class PsmCols(metaclass=ConstantsClass):
    """String constants for accessing columns of a PSM table."""

    XCORR = "xcorr"


class TableFormats(metaclass=ConstantsClass):
    """String constants for the encodings of tables in serialized records."""

    PARQUET = "parquet"


class RecordKeys(metaclass=ConstantsClass):
    """String constants for the field names of serialized records."""

    SEARCH_UUID = "search_uuid"
    MS_RUN_NAMES = "ms_run_names"
    MS_RUN_NAME = "ms_run_name"
    SPECTRA_IDS = "spectra_ids"
    SPECTRUM_ID = "spectrum_id"
    MZ = "mz"
    INTENSITY = "intensity"
    IDENTIFICATIONS = "identifications"
    GOODNESSES = "goodnesses"
    PSMS = "psms"
    PRECURSOR = "precursor"
    CHARGE = "charge"

    TABLE_FORMAT = "format"
    TABLE_DATA = "data"
