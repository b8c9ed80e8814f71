"""
Conversion between Python values and DynamoDB-style tagged attributes.

Values are written as wire dicts (``{'S': ...}``, ``{'N': ...}``, ...) and
read back into generic values, attrdict records or dataclasses:

- to_attribute_value / from_attribute_value: a single value
- to_fields / from_fields: a whole item (mapping of field name to attribute)
- fields / names: literal builders for items, keys and expression names
- encode / decode: the core, working on Attribute trees

Empty strings are written as a one-character NUL string and read back as ``''``.
"""
__version__ = '0.1.0'

from dynamodb_data.adapters import EMPTY_STRING_SENTINEL, Decoder, Encoder
from dynamodb_data.adapters import decode, encode, from_wire, to_wire
from dynamodb_data.convert import from_attribute_value, from_fields
from dynamodb_data.convert import to_attribute_value, to_fields
from dynamodb_data.exceptions import BridgeError, DecodeError, EncodeError
from dynamodb_data.exceptions import NumberOutOfRange, NumberParse
from dynamodb_data.exceptions import UnexpectedTag, UnsupportedKey
from dynamodb_data.exceptions import UnsupportedType
from dynamodb_data.builders import fields, names
from dynamodb_data.options import BridgeOptions
from dynamodb_data.types import Attribute, SetIntent, Tag

__all__ = [
    'to_attribute_value',
    'from_attribute_value',
    'to_fields',
    'from_fields',
    'fields',
    'names',
    'encode',
    'decode',
    'to_wire',
    'from_wire',
    'Encoder',
    'Decoder',
    'EMPTY_STRING_SENTINEL',
    'BridgeOptions',
    'Attribute',
    'SetIntent',
    'Tag',
    'BridgeError',
    'EncodeError',
    'DecodeError',
    'NumberOutOfRange',
    'NumberParse',
    'UnexpectedTag',
    'UnsupportedKey',
    'UnsupportedType',
]
