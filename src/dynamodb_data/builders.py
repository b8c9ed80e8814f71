"""
Literal builders for item, key and expression-name mappings.

``fields`` encodes every value through the public encoder, so a mapping built
here is identical to one built by ``to_fields`` with the same options::

    item = fields(('id', str(uuid.uuid4())), name='user name', counter=0)
    key = fields(id='test')
    client.put_item(TableName='scratch', Item=item)

Keys that are not valid Python identifiers (reserved words, ``:name``
placeholders) go in as ``(key, value)`` pairs, as does a field literally
named ``options``. A name given twice raises UnsupportedKey.
"""
from typing import Any

from dynamodb_data.adapters.wire import WireValue, to_wire
from dynamodb_data.convert import encode_value
from dynamodb_data.exceptions import UnsupportedKey
from dynamodb_data.options import BridgeOptions, resolve_options


def _pairs(pairs: tuple, kw: dict) -> list[tuple[str, Any]]:
    items = [*pairs, *kw.items()]
    seen = set()
    for key, _ in items:
        if not isinstance(key, str):
            raise UnsupportedKey(f'Field name {key!r} of type {type(key).__name__} is not a string')
        if key in seen:
            raise UnsupportedKey(f'Field name {key!r} given more than once', key)
        seen.add(key)
    return items


def fields(*pairs: tuple[str, Any], options: BridgeOptions | dict[str, Any] | None = None,
           **kw: Any) -> dict[str, WireValue]:
    """Build an item or key mapping, encoding each value.

    Args:
        pairs: ``(name, value)`` tuples
        options: BridgeOptions or dict of options applied to every value
        **kw: Field names and values

    >>> fields(('name', 'user name'), counter=0)
    {'name': {'S': 'user name'}, 'counter': {'N': '0'}}
    >>> fields(note='')
    {'note': {'S': '\\x00'}}
    >>> fields(score=float('nan'), options=BridgeOptions(nan_as_null=True))
    {'score': {'NULL': True}}
    """
    options = resolve_options(options)
    return {key: to_wire(encode_value(value, options=options, path=key))
            for key, value in _pairs(pairs, kw)}


def names(*pairs: tuple[str, str], **kw: str) -> dict[str, str]:
    """Build an expression attribute names mapping.

    >>> names(('#name', 'name'))
    {'#name': 'name'}
    """
    return {key: str(value) for key, value in _pairs(pairs, kw)}


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
