"""Module containing custom exceptions."""


class CustomError(Exception):
    """Custom searchresults error class."""

    _error_code = ""
    _msg = ""
    _detail_msg = ""
    _user_msg = ""

    @property
    def error_code(self):
        return self._error_code

    @property
    def msg(self):
        return self._msg

    @property
    def detail_msg(self):
        return self._detail_msg

    def __init__(self, msg: str = ""):
        self._user_msg = msg

        super().__init__(self._msg)

    def __str__(self):
        return (
            f"{self._error_code}: {self._msg}\n'{self._user_msg}'\n{self._detail_msg}"
        )


class BusinessError(CustomError):
    """Custom error class for 'business' errors.

    A 'business' error is an error that is caused by data handed over by the producer of the search results
    (missing columns, malformed tables, ...) and not by a malfunction in searchresults.
    """


class MissingColumnError(BusinessError):
    """Raise when a table lacks a column required by a schema, e.g. the score column of a PSM table."""

    _error_code = "MISSING_COLUMN"

    _msg = "Required column is not present in the table."

    def __init__(self, column: str, available_columns: list[str], schema_name: str):
        super().__init__(column)
        self._detail_msg = (
            f"Validation of {schema_name} failed: expected column '{column}', "
            f"available columns: {available_columns}"
        )


class ColumnTypeError(BusinessError):
    """Raise when a column does not hold values of the type required by a schema."""

    _error_code = "COLUMN_TYPE_MISMATCH"

    _msg = "Column does not hold values of the required type."

    def __init__(self, column: str, dtype: str, expected_type: str):
        super().__init__(column)
        self._detail_msg = (
            f"Column '{column}' has dtype '{dtype}', expected '{expected_type}'."
        )


class NullValueError(BusinessError):
    """Raise when a column which must not contain nulls does, e.g. the score column of a PSM table."""

    _error_code = "NULL_VALUES"

    _msg = "Column contains null values."

    def __init__(self, column: str, null_count: int):
        super().__init__(column)
        self._detail_msg = f"Column '{column}' contains {null_count} null values."


class ColumnLengthMismatchError(BusinessError):
    """Raise when the columns of a table differ in length and strict row iteration was requested."""

    _error_code = "COLUMN_LENGTH_MISMATCH"

    _msg = "Columns of the table differ in length."

    def __init__(self, column_lengths: dict[str, int]):
        super().__init__(str(column_lengths))
        self._detail_msg = (
            f"Column lengths: {column_lengths}. "
            f"Rows can only be assembled from columns of equal length."
        )


class DuplicateColumnError(BusinessError):
    """Raise when a table holds several columns with the same name, rows could not be accessed by name."""

    _error_code = "DUPLICATE_COLUMN"

    _msg = "Column names of the table are not unique."

    def __init__(self, duplicate_columns: list):
        super().__init__(str(duplicate_columns))
        self._detail_msg = f"Duplicate columns: {duplicate_columns}"


class PeakShapeError(BusinessError):
    """Raise when the m/z and intensity arrays of a spectrum differ in length."""

    _error_code = "PEAK_SHAPE_MISMATCH"

    _msg = "m/z and intensity arrays of the spectrum differ in length."

    def __init__(self, spectrum_id: str, n_mz: int, n_intensity: int):
        super().__init__(spectrum_id)
        self._detail_msg = f"Spectrum '{spectrum_id}': {n_mz} m/z values, {n_intensity} intensities."


class UnknownColumnError(CustomError, KeyError):
    """Raise when a row is accessed by a column name that is not part of the table."""

    _error_code = "UNKNOWN_COLUMN"

    _msg = "Column is not part of the row."

    def __init__(self, column: str, available_columns: list[str]):
        super().__init__(column)
        self._detail_msg = f"Available columns: {available_columns}"


class ConfigError(BusinessError):
    """Raise when something is wrong with the provided configuration."""

    _error_code = "CONFIG_ERROR"

    _msg = "Malformed or invalid configuration."
    _key = ""
    _config_name = ""
    _detail_msg = ""

    def __init__(
        self,
        key: str = "",
        value: str = "",
        config_name: str = "",
        detail_msg: str = "",
    ):
        self._key = key
        self._value = value
        self._config_name = config_name
        self._detail_msg = detail_msg


class KeyAddedConfigError(ConfigError):
    """Raise when a key should be added to a config."""

    def __init__(self, key: str, value: str, config_name: str):
        super().__init__(key, value, config_name)
        self._detail_msg = (
            f"Defining new keys is not allowed when updating a config: "
            f"key='{self._key}', value='{self._value}', config_name='{self._config_name}'"
        )


class TypeMismatchConfigError(ConfigError):
    """Raise when the type of a value does not match the default type."""

    def __init__(self, key: str, value: str, config_name: str, extra_msg: str):
        super().__init__(key, value, config_name)
        self._detail_msg = (
            f"Types of values must match default config: "
            f"key='{self._key}', value='{self._value}', config_name='{self._config_name}', types='{extra_msg}'"
        )
