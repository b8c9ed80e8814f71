"""
Test values fixtures for conversion tests.

This module provides fixture functions that generate test data for conversion
tests, ensuring consistent test values across different test modules.
"""
import decimal

import pytest


@pytest.fixture(scope='module')
def value_dict():
    """Return a dictionary of generic test values for all major kinds"""
    return {
        # Integers
        'int_value': 42,
        'zero': 0,
        'big_int': 9223372036854775807,  # Max int64
        'small_int': -32768,  # Min int16
        'huge_int': 10 ** 37,

        # Boolean
        'bool_true': True,
        'bool_false': False,

        # Floating point
        'float_value': 3.141592653589793,
        'tiny_float': 1e-100,
        'round_float': 2.0,
        'decimal_value': decimal.Decimal('123456.789123'),

        # String types
        'char_value': 'X',
        'varchar_value': 'Variable length string',
        'unicode_value': 'naïve café ☕',
        'empty_string': '',

        # Binary data
        'binary_value': b'\x01\x02\x03\x04\x05',

        # NULL values
        'null_value': None,

        # Nested structures
        'list_value': [1, 'two', 3.0, None, [True]],
        'empty_list': [],
        'map_value': {'name': 'user name', 'counter': 0, 'tags': ['a', '']},
        'empty_map': {},
    }


@pytest.fixture
def account_item():
    """Wire item as returned by GetItem for the account record"""
    return {
        'id': {'S': 'test'},
        'note': {'S': '\x00'},
        'ts': {'S': 'today'},
        'counter': {'N': '0'},
    }
