"""
Tests for the literal field and name builders.
"""
import uuid

import pytest
from dynamodb_data import BridgeOptions, builders, fields, names, to_attribute_value
from dynamodb_data import to_fields
from dynamodb_data.exceptions import NumberOutOfRange, UnsupportedKey


def test_fields_keywords():
    assert fields(name='user name', counter=0) == {
        'name': {'S': 'user name'},
        'counter': {'N': '0'},
        }


def test_fields_pairs_for_reserved_and_placeholder_names():
    item = fields(('id', 'test'), (':name', 'user name'), some_other_field=0)
    assert item == {
        'id': {'S': 'test'},
        ':name': {'S': 'user name'},
        'some_other_field': {'N': '0'},
        }


def test_fields_matches_encoder():
    """Builder output is identical to encoding each value"""
    key = uuid.uuid4()
    values = {'id': key, 'note': '', 'tags': {'x'}, 'nested': {'a': [1, None]}}
    assert fields(**values) == to_fields(values)
    assert fields(id=key)['id'] == to_attribute_value(key)


def test_fields_calls_encoder_once_per_value(mocker):
    """The builder delegates every value to the encoder"""
    spy = mocker.spy(builders, 'encode_value')
    fields(id='test', counter=0, note='')
    assert spy.call_count == 3
    assert [c.kwargs['path'] for c in spy.call_args_list] == ['id', 'counter', 'note']


def test_fields_empty_string():
    assert fields(note='') == {'note': {'S': '\x00'}}


def test_fields_key_mapping():
    """Key mappings for point lookups use the same builder"""
    assert fields(id='test') == {'id': {'S': 'test'}}


def test_fields_non_string_name():
    with pytest.raises(UnsupportedKey):
        fields((1, 'a'))


def test_fields_options_apply_to_every_value():
    options = BridgeOptions(nan_as_null=True)
    assert fields(score=float('nan'), options=options) == {'score': {'NULL': True}}
    values = {'score': float('nan'), 'name': 'x'}
    assert fields(**values, options=options) == to_fields(values, options=options)


def test_fields_default_options_reject_nan():
    with pytest.raises(NumberOutOfRange):
        fields(score=float('nan'))


def test_fields_field_named_options_as_pair():
    assert fields(('options', 'x')) == {'options': {'S': 'x'}}


def test_fields_duplicate_name():
    with pytest.raises(UnsupportedKey) as exc_info:
        fields(('a', 1), a=2)
    assert exc_info.value.path == 'a'
    with pytest.raises(UnsupportedKey):
        names(('#a', 'x'), ('#a', 'y'))


def test_fields_error_reports_field():
    with pytest.raises(NumberOutOfRange) as exc_info:
        fields(score=float('inf'))
    assert exc_info.value.path == 'score'


def test_names():
    assert names((':id', 'id'), ('#name', 'name')) == {':id': 'id', '#name': 'name'}
    assert names(alias='name') == {'alias': 'name'}
    with pytest.raises(UnsupportedKey):
        names((None, 'id'))


if __name__ == '__main__':
    __import__('pytest').main([__file__])
