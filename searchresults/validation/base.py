import logging

import numpy as np
import pandas as pd

from searchresults.exceptions import (
    ColumnTypeError,
    MissingColumnError,
    NullValueError,
)

logger = logging.getLogger()


class Property:
    """Column property base class"""

    def __init__(self, name, type, nullable=True):
        """Base class for all properties

        Parameters
        ----------
        name: str
            Name of the property

        type: type
            Numpy type or abstract numpy type (e.g. `np.number`) the column dtype must be a subtype of

        nullable: bool
            Whether the column may contain null values

        """
        self.name = name
        self.type = type
        self.nullable = nullable

    def _is_of_type(self, dtype) -> bool:
        if isinstance(dtype, np.dtype):
            return np.issubdtype(dtype, self.type)
        # pandas extension dtypes (e.g. Float64, Int64) expose their numpy counterpart
        numpy_dtype = getattr(dtype, "numpy_dtype", None)
        return numpy_dtype is not None and np.issubdtype(numpy_dtype, self.type)

    def check(self, df: pd.DataFrame) -> None:
        """Checks dtype and nulls of the column, the column must be present in the dataframe.

        The dataframe is never modified.

        Raises
        ------
        ColumnTypeError
            If the column dtype is not a subtype of the property type.

        NullValueError
            If the column contains nulls and the property is not nullable.

        """
        column = df[self.name]

        if not self._is_of_type(column.dtype):
            raise ColumnTypeError(self.name, str(column.dtype), self.type.__name__)

        if not self.nullable:
            null_count = int(column.isna().sum())
            if null_count > 0:
                raise NullValueError(self.name, null_count)


class Required(Property):
    """Required property"""

    def __call__(self, df, schema_name):
        """Checks the property, raises if it is not present in the dataframe

        Parameters
        ----------
        df: pd.DataFrame
            Dataframe to validate

        schema_name: str
            Name of the schema, used for error messages

        """
        if self.name not in df.columns:
            raise MissingColumnError(self.name, list(df.columns), schema_name)
        self.check(df)


class Schema:
    def __init__(self, name, properties):
        """Schema for validating dataframes

        Parameters
        ----------
        name: str
            Name of the schema

        properties: list
            List of Property objects

        """
        self.name = name
        self.schema = properties
        for property in self.schema:
            if not isinstance(property, Property):
                raise ValueError("Schema must contain only Property objects")

    def validate(self, df: pd.DataFrame) -> None:
        """Validates the dataframe.

        Parameters
        ----------
        df: pd.DataFrame
            Dataframe to validate

        Raises
        ------
        MissingColumnError
            If a required column is missing.

        ColumnTypeError
            If a column does not have the required type.

        NullValueError
            If a non-nullable column contains nulls.

        """
        for property in self.schema:
            property(df, self.name)

        logger.debug(f"Validation of {self.name} passed")
