"""
Conversion between application values and wire attributes.

Writing goes application value -> generic value (TypeConverter) -> attribute
(Encoder) -> wire dict. Reading goes wire dict -> attribute -> generic value
(Decoder) -> optional typed target. Each call builds fresh trees and either
returns a complete result or raises; no partial tree is returned.
"""
import logging
from typing import Any

from dynamodb_data.adapters.encoder import Encoder
from dynamodb_data.adapters.structure import to_record, to_structure
from dynamodb_data.adapters.type_conversion import TypeConverter
from dynamodb_data.adapters.wire import WireValue, fields_from_wire
from dynamodb_data.adapters.wire import fields_to_wire, from_wire, to_wire
from dynamodb_data.exceptions import UnsupportedType
from dynamodb_data.options import BridgeOptions, resolve_options
from dynamodb_data.types import Attribute, Tag

from libb import attrdict

logger = logging.getLogger(__name__)

_encoder = Encoder()


def encode_value(value: Any, as_set: bool = False, options: BridgeOptions | None = None,
                 path: str | None = None) -> Attribute:
    """Convert an application value to an attribute tree.
    """
    options = options or BridgeOptions()
    generic = TypeConverter.convert_value(value, options.nan_as_null, path)
    return _encoder.encode(generic, as_set=as_set, path=path)


def to_attribute_value(value: Any, as_set: bool = False,
                       options: BridgeOptions | dict[str, Any] | str | None = None,
                       config: Any | None = None, **kw: Any) -> WireValue:
    """Convert any supported value to a wire attribute dict.

    Args:
        value: Application value
        as_set: Write a sequence as a wire set where possible
        options: BridgeOptions, dict, or setting name in ``config``
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        Wire dict such as ``{'S': 'Hello World'}``

    >>> to_attribute_value('Hello World')
    {'S': 'Hello World'}
    >>> to_attribute_value(['a', 'b'], as_set=True)
    {'SS': ['a', 'b']}
    """
    options = resolve_options(options, config, **kw)
    return to_wire(encode_value(value, as_set, options))


def from_attribute_value(value: WireValue | Attribute, cls: Any = None,
                         options: BridgeOptions | dict[str, Any] | str | None = None,
                         config: Any | None = None, **kw: Any) -> Any:
    """Convert a wire attribute dict (or Attribute) back to a value.

    Args:
        value: Wire dict or Attribute
        cls: Optional target type (dataclass, scalar type or annotation)
        options: BridgeOptions, dict, or setting name in ``config``
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        Generic value, or an instance of ``cls``

    >>> from_attribute_value({'S': 'Hello World'})
    'Hello World'
    >>> from_attribute_value({'N': '3'}, cls=float)
    3.0
    """
    options = resolve_options(options, config, **kw)
    generic = options.decoder().decode(from_wire(value))
    if cls is None:
        return generic
    return to_structure(generic, cls)


def to_fields(value: Any, options: BridgeOptions | dict[str, Any] | str | None = None,
              config: Any | None = None, **kw: Any) -> dict[str, WireValue]:
    """Convert a mapping-like value to an item of wire attribute dicts.

    The value must convert to a mapping (dict, dataclass, ...).

    >>> to_fields({'red': 1, 'green': 2})
    {'red': {'N': '1'}, 'green': {'N': '2'}}
    """
    options = resolve_options(options, config, **kw)
    attribute = encode_value(value, options=options)
    if attribute.tag != Tag.M:
        raise UnsupportedType(
            f'Expected a value that converts to a mapping, got {type(value).__name__}')
    logger.debug(f'Encoded item with {len(attribute.value)} fields')
    return fields_to_wire(attribute.value)


def from_fields(item: dict[str, WireValue], cls: Any = None,
                options: BridgeOptions | dict[str, Any] | str | None = None,
                config: Any | None = None, **kw: Any) -> attrdict | Any:
    """Convert an item of wire attribute dicts back to a record.

    Args:
        item: Mapping of field name to wire dict (or Attribute)
        cls: Optional target type, typically a dataclass

    Returns
        attrdict record, or an instance of ``cls``

    >>> from_fields({'red': {'N': '1'}}).red
    1
    """
    options = resolve_options(options, config, **kw)
    attributes = fields_from_wire(item)
    generic = options.decoder().decode(Attribute.map(attributes))
    if cls is None:
        return to_record(generic)
    return to_structure(generic, cls)
