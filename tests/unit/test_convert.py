"""
Tests for the public conversion functions.
"""
import dataclasses
import datetime
import decimal
import math
import uuid

import numpy as np
import pytest
from dynamodb_data import Attribute, BridgeOptions, from_attribute_value
from dynamodb_data import from_fields, to_attribute_value, to_fields
from dynamodb_data.exceptions import NumberOutOfRange, UnexpectedTag
from dynamodb_data.exceptions import UnsupportedKey, UnsupportedType

from libb import attrdict


@dataclasses.dataclass
class Account:
    id: str
    note: str
    ts: str
    counter: int


@dataclasses.dataclass
class Event:
    id: uuid.UUID
    at: datetime.datetime
    tags: set[str]


class TestToAttributeValue:
    """Test single value writing"""

    def test_hello_world(self):
        assert to_attribute_value('Hello World') == {'S': 'Hello World'}

    def test_zero(self):
        assert to_attribute_value(0) == {'N': '0'}

    def test_empty_string(self):
        assert to_attribute_value('') == {'S': '\x00'}

    def test_set_intent(self):
        assert to_attribute_value(['a', 'b'], as_set=True) == {'SS': ['a', 'b']}
        assert to_attribute_value(['a', 'b']) == {'L': [{'S': 'a'}, {'S': 'b'}]}

    def test_python_set(self):
        assert to_attribute_value({3, 1, 2}) == {'NS': ['1', '2', '3']}

    def test_empty_python_set(self):
        assert to_attribute_value(set()) == {'L': []}

    def test_uuid(self):
        value = uuid.UUID('12345678-1234-5678-1234-567812345678')
        assert to_attribute_value(value) == {'S': '12345678-1234-5678-1234-567812345678'}

    def test_numpy(self):
        assert to_attribute_value(np.array([1.5, 2.0])) == {'L': [{'N': '1.5'}, {'N': '2.0'}]}

    def test_nan(self):
        with pytest.raises(NumberOutOfRange):
            to_attribute_value(math.nan)
        assert to_attribute_value(math.nan, nan_as_null=True) == {'NULL': True}
        options = BridgeOptions(nan_as_null=True)
        assert to_attribute_value([np.float64('nan')], options=options) == {'L': [{'NULL': True}]}


class TestFromAttributeValue:
    """Test single value reading"""

    def test_round_trip(self):
        assert from_attribute_value(to_attribute_value('Hello World')) == 'Hello World'

    def test_accepts_attribute(self):
        assert from_attribute_value(Attribute.number('7')) == 7

    def test_target_type(self):
        assert from_attribute_value({'N': '3'}, cls=float) == 3.0
        assert from_attribute_value({'S': '2023-05-15'}, cls=datetime.date) == datetime.date(2023, 5, 15)

    def test_use_decimal(self):
        assert from_attribute_value({'N': '0.1'}, use_decimal=True) == decimal.Decimal('0.1')

    def test_binary_as_text(self):
        assert from_attribute_value({'B': b'abc'}) == b'abc'
        assert from_attribute_value({'B': b'abc'}, binary_as_text=True) == 'abc'
        assert from_attribute_value({'BS': [b'a']}, binary_as_text=True) == ['a']

    def test_malformed(self):
        with pytest.raises(UnexpectedTag):
            from_attribute_value({'Z': 1})


class TestFields:
    """Test item writing and reading"""

    def test_to_fields_mapping(self):
        assert to_fields({'red': 1, 'green': 2, 'blue': 3}) == {
            'red': {'N': '1'},
            'green': {'N': '2'},
            'blue': {'N': '3'},
            }

    def test_to_fields_dataclass(self):
        account = Account(id='test', note='', ts='today', counter=0)
        assert to_fields(account) == {
            'id': {'S': 'test'},
            'note': {'S': '\x00'},
            'ts': {'S': 'today'},
            'counter': {'N': '0'},
            }

    def test_to_fields_requires_mapping(self):
        with pytest.raises(UnsupportedType):
            to_fields([1, 2])
        with pytest.raises(UnsupportedType):
            to_fields('text')

    def test_to_fields_rejects_non_string_key(self):
        with pytest.raises(UnsupportedKey):
            to_fields({1: 'a'})

    def test_from_fields_record(self, account_item):
        record = from_fields(account_item)
        assert isinstance(record, attrdict)
        assert record == {'id': 'test', 'note': '', 'ts': 'today', 'counter': 0}
        assert record.note == ''

    def test_from_fields_dataclass(self, account_item):
        account = from_fields(account_item, cls=Account)
        assert account == Account(id='test', note='', ts='today', counter=0)

    def test_from_fields_dataclass_round_trip(self):
        event = Event(id=uuid.UUID('12345678-1234-5678-1234-567812345678'),
                      at=datetime.datetime(2023, 5, 15, 14, 30, 45),
                      tags={'b', 'a'})
        item = to_fields(event)
        assert item['tags'] == {'SS': ['a', 'b']}
        assert from_fields(item, cls=Event) == event

    def test_from_fields_shape_mismatch(self, account_item):
        del account_item['counter']
        with pytest.raises(UnexpectedTag):
            from_fields(account_item, cls=Account)

    def test_from_fields_requires_mapping(self):
        with pytest.raises(UnexpectedTag):
            from_fields([{'S': 'x'}])


if __name__ == '__main__':
    __import__('pytest').main([__file__])
