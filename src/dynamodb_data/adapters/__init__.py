"""
Conversion adapters package.

This package provides the following components:

- empty_string: Sentinel handling for the empty string, shared by both directions
- numbers: Decimal text rendering and parsing, shared by both directions
- encoder: Generic value -> attribute conversion
- decoder: Attribute -> generic value conversion
- wire: Attribute <-> low-level wire dict conversion
- type_conversion: Application value -> generic value conversion (NumPy, Pandas, ...)
- structure: Generic value -> typed target conversion (dataclasses, ...)

Conversion principles:
1. Encoder and decoder agree on every edge case through the shared modules
2. Neither direction keeps state between calls
3. Errors are raised to the caller, never logged or recovered
"""
from dynamodb_data.adapters.decoder import Decoder, decode
from dynamodb_data.adapters.empty_string import EMPTY_STRING_SENTINEL
from dynamodb_data.adapters.encoder import Encoder, encode
from dynamodb_data.adapters.type_conversion import TypeConverter
from dynamodb_data.adapters.wire import from_wire, to_wire
