"""
Data model shared by the encoder and decoder.

This module provides:
- Value: the generic value tree consumed by encoding and produced by decoding
- SetIntent: a sequence marker requesting a wire set instead of a list
- Tag: the ten wire type tags
- Attribute: one node of the tagged attribute tree
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, TypeAlias

Value: TypeAlias = (
    None | bool | int | float | Decimal | str | bytes
    | list['Value'] | dict[str, 'Value']
)


class SetIntent(list):
    """List whose members should be written as a wire set.

    >>> SetIntent(['a', 'b'])
    SetIntent(['a', 'b'])
    >>> SetIntent(['a']) == ['a']
    True
    """

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list.__repr__(self)})'


class Tag(str, Enum):
    """Wire type tags of the remote store.
    """
    S = 'S'
    N = 'N'
    B = 'B'
    BOOL = 'BOOL'
    NULL = 'NULL'
    M = 'M'
    L = 'L'
    SS = 'SS'
    NS = 'NS'
    BS = 'BS'

    def __str__(self) -> str:
        return self.value

    @property
    def is_set(self) -> bool:
        return self in {Tag.SS, Tag.NS, Tag.BS}


def field_path(parent: str | None, key: str | int) -> str:
    """Extend a dotted field path with a mapping key or sequence index.

    >>> field_path(None, 'a')
    'a'
    >>> field_path('a', 'b')
    'a.b'
    >>> field_path('a.b', 2)
    'a.b[2]'
    """
    if isinstance(key, int):
        return f'{parent or ""}[{key}]'
    if parent is None:
        return key
    return f'{parent}.{key}'


def _members(value, tag: Tag) -> tuple:
    """Collect list or set members, refusing strings and bytes.

    >>> _members(['a', 'b'], Tag.SS)
    ('a', 'b')
    """
    if isinstance(value, str | bytes | bytearray | memoryview | dict):
        raise TypeError(f'{tag} members must be a sequence, not {type(value).__name__}')
    return tuple(value)


@dataclass(frozen=True)
class Attribute:
    """Tagged attribute node.

    Payload by tag:

    - ``S``: non-empty ``str``
    - ``N``: decimal text ``str``
    - ``B``: ``bytes``
    - ``BOOL``: ``bool``
    - ``NULL``: ``True``
    - ``M``: ``dict[str, Attribute]``
    - ``L``: ``tuple[Attribute, ...]``
    - ``SS``/``NS``/``BS``: non-empty ``tuple`` of distinct ``str``/``str``/``bytes``

    >>> Attribute.number('0')
    Attribute(tag=<Tag.N: 'N'>, value='0')
    >>> Attribute.null().value
    True
    """
    tag: Tag
    value: Any

    @classmethod
    def string(cls, value: str) -> 'Attribute':
        return cls(Tag.S, value)

    @classmethod
    def number(cls, text: str) -> 'Attribute':
        return cls(Tag.N, text)

    @classmethod
    def binary(cls, value: bytes) -> 'Attribute':
        return cls(Tag.B, bytes(value))

    @classmethod
    def boolean(cls, value: bool) -> 'Attribute':
        return cls(Tag.BOOL, value)

    @classmethod
    def null(cls) -> 'Attribute':
        return cls(Tag.NULL, True)

    @classmethod
    def map(cls, value: dict[str, 'Attribute']) -> 'Attribute':
        return cls(Tag.M, dict(value))

    @classmethod
    def list(cls, value) -> 'Attribute':
        return cls(Tag.L, _members(value, Tag.L))

    @classmethod
    def string_set(cls, value) -> 'Attribute':
        return cls(Tag.SS, _members(value, Tag.SS))

    @classmethod
    def number_set(cls, value) -> 'Attribute':
        return cls(Tag.NS, _members(value, Tag.NS))

    @classmethod
    def binary_set(cls, value) -> 'Attribute':
        return cls(Tag.BS, tuple(bytes(v) for v in _members(value, Tag.BS)))


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
