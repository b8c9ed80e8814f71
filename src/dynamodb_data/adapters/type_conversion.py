"""
Application value -> generic value conversion.

This module turns the values an application hands over into the closed generic
value model the encoder understands (None, bool, int, float, Decimal, str,
bytes, list, dict). It covers:

1. NumPy scalars, arrays and datetime64 values
2. Pandas missing values, timestamps, series and frames
3. Standard library dates/times, UUIDs, enums, dataclasses, tuples and sets

Sets become ``SetIntent`` lists so the encoder writes them as wire sets.

Usage:
    value = TypeConverter.convert_value(record)
    attribute = encode(value)
"""
import dataclasses
import datetime
import enum
import logging
import math
import uuid
from decimal import Decimal
from typing import Any

import numpy as np
import pandas as pd
from dynamodb_data.exceptions import UnsupportedType
from dynamodb_data.types import SetIntent, Value, field_path

logger = logging.getLogger(__name__)

SCALAR_TYPES = (bool, int, float, Decimal, str, bytes)
NUMPY_FLOAT_TYPES = (np.floating,)


def _convert_numpy_value(val: Any, nan_as_null: bool = False) -> Any:
    """Convert NumPy scalar to Python type.

    >>> _convert_numpy_value(np.int32(42))
    42
    >>> _convert_numpy_value(np.float64('nan'), nan_as_null=True) is None
    True
    """
    if isinstance(val, np.datetime64):
        if np.isnat(val):
            return None
        return pd.Timestamp(val).isoformat()
    if isinstance(val, NUMPY_FLOAT_TYPES) and np.isnan(val) and nan_as_null:
        return None
    if isinstance(val, np.bool_):
        return bool(val)
    return val.item()


def _sorted_members(value: set | frozenset) -> list:
    """Order set members deterministically where they are comparable.
    """
    try:
        return sorted(value)
    except TypeError:
        logger.debug(f'Set members of mixed types kept in iteration order: {value!r}')
        return list(value)


class TypeConverter:
    """Conversion of application values into generic values.
    """

    @staticmethod
    def convert_value(value: Any, nan_as_null: bool = False,
                      path: str | None = None) -> Value:
        """Convert an application value to a generic value tree.

        Args:
            value: Any supported Python value
            nan_as_null: Convert float NaN to None instead of leaving it for the
                encoder to reject
            path: Field path used in error messages

        Returns
            Generic value tree
        """
        if value is None:
            return None

        # NumPy float64 and str_ subclass the builtins
        if isinstance(value, np.generic):
            return TypeConverter.convert_value(
                _convert_numpy_value(value, nan_as_null), nan_as_null, path)

        if isinstance(value, float) and math.isnan(value) and nan_as_null:
            return None

        if isinstance(value, SCALAR_TYPES) and not isinstance(value, enum.Enum):
            return value

        if isinstance(value, bytearray | memoryview):
            return bytes(value)

        # NaT subclasses datetime
        if value is pd.NaT or value is pd.NA:
            return None

        if isinstance(value, datetime.datetime | datetime.date | datetime.time):
            return value.isoformat()

        if isinstance(value, uuid.UUID):
            return str(value)

        if isinstance(value, enum.Enum):
            return TypeConverter.convert_value(value.value, nan_as_null, path)

        if isinstance(value, np.ndarray):
            logger.debug(f'Converting ndarray of shape {value.shape}')
            return TypeConverter.convert_value(value.tolist(), nan_as_null, path)

        if isinstance(value, pd.DataFrame):
            logger.debug(f'Converting DataFrame with {len(value)} rows')
            return TypeConverter.convert_value(value.to_dict(orient='records'), nan_as_null, path)

        if isinstance(value, pd.Series):
            return TypeConverter.convert_value(value.tolist(), nan_as_null, path)

        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

        if isinstance(value, dict):
            return {k: TypeConverter.convert_value(v, nan_as_null, field_path(path, str(k)))
                    for k, v in value.items()}

        if isinstance(value, set | frozenset):
            return SetIntent(TypeConverter.convert_value(v, nan_as_null, field_path(path, i))
                             for i, v in enumerate(_sorted_members(value)))

        if isinstance(value, list | tuple):
            converted = [TypeConverter.convert_value(v, nan_as_null, field_path(path, i))
                         for i, v in enumerate(value)]
            return SetIntent(converted) if isinstance(value, SetIntent) else converted

        raise UnsupportedType(f'Cannot convert value of type {type(value).__name__}', path)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
