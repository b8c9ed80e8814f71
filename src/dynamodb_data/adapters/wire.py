"""
Attribute <-> low-level wire dict conversion.

The store's JSON protocol (and boto3's low-level client) represent an attribute
as a dict with exactly one type key::

    {'S': 'user name'}
    {'N': '0'}
    {'NULL': True}
    {'M': {'counter': {'N': '0'}}}

Reading also accepts ``boto3.dynamodb.types.Binary`` wrappers for binary
payloads, as returned by the resource layer.
"""
from typing import Any

from boto3.dynamodb.types import Binary
from dynamodb_data.exceptions import UnexpectedTag
from dynamodb_data.types import Attribute, Tag, field_path

WireValue = dict[str, Any]


def to_wire(attribute: Attribute) -> WireValue:
    """Convert an attribute tree to its wire dict.

    >>> to_wire(Attribute.number('0'))
    {'N': '0'}
    >>> to_wire(Attribute.list([Attribute.null()]))
    {'L': [{'NULL': True}]}
    """
    tag = attribute.tag
    if tag == Tag.M:
        payload = {k: to_wire(v) for k, v in attribute.value.items()}
    elif tag == Tag.L:
        payload = [to_wire(v) for v in attribute.value]
    elif tag.is_set:
        payload = list(attribute.value)
    else:
        payload = attribute.value
    return {tag.value: payload}


def fields_to_wire(fields: dict[str, Attribute]) -> dict[str, WireValue]:
    """Convert a mapping of attributes (an item or key) to wire dicts.
    """
    return {k: to_wire(v) for k, v in fields.items()}


def from_wire(value: WireValue | Attribute, path: str | None = None) -> Attribute:
    """Convert a wire dict to an attribute tree.

    An ``Attribute`` passes through unchanged.

    >>> from_wire({'S': 'abc'})
    Attribute(tag=<Tag.S: 'S'>, value='abc')
    """
    if isinstance(value, Attribute):
        return value
    if not isinstance(value, dict) or len(value) != 1:
        raise UnexpectedTag(f'Expected a single-key attribute dict, got {value!r}', path)
    (key, payload), = value.items()
    try:
        tag = Tag(key)
    except ValueError:
        raise UnexpectedTag(f'Unknown attribute tag {key!r}', path) from None

    if tag == Tag.M:
        if not isinstance(payload, dict):
            raise UnexpectedTag(f'M payload is not a mapping: {payload!r}', path)
        return Attribute.map({k: from_wire(v, field_path(path, k)) for k, v in payload.items()})
    if tag == Tag.L:
        if not isinstance(payload, list | tuple):
            raise UnexpectedTag(f'L payload is not a list: {payload!r}', path)
        return Attribute.list([from_wire(v, field_path(path, i)) for i, v in enumerate(payload)])
    if tag.is_set:
        if not isinstance(payload, list | tuple | set | frozenset):
            raise UnexpectedTag(f'{tag} payload is not a list: {payload!r}', path)
        if tag == Tag.BS:
            return Attribute.binary_set([_binary(v, tag, path) for v in payload])
        return Attribute(tag, tuple(payload))
    if tag == Tag.B:
        return Attribute.binary(_binary(payload, tag, path))
    if tag == Tag.NULL:
        if payload is not True:
            raise UnexpectedTag(f'NULL payload must be True, got {payload!r}', path)
        return Attribute.null()
    return Attribute(tag, payload)


def fields_from_wire(item: dict[str, WireValue], path: str | None = None) -> dict[str, Attribute]:
    """Convert a mapping of wire dicts (an item or key) to attributes.
    """
    if not isinstance(item, dict):
        raise UnexpectedTag(f'Expected a mapping of attributes, got {type(item).__name__}', path)
    return {k: from_wire(v, field_path(path, k)) for k, v in item.items()}


def _binary(payload: Any, tag: Tag, path: str | None) -> bytes:
    if isinstance(payload, Binary):
        return payload.value
    if isinstance(payload, bytes | bytearray | memoryview):
        return bytes(payload)
    raise UnexpectedTag(f'{tag} payload {payload!r} is not bytes', path)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
