"""
Generic value -> tagged attribute conversion.

The encoder walks a generic value tree and builds a fresh attribute tree. It
holds no state; the only shared input is the fixed empty-string sentinel.

Set intent is never inferred from content. A sequence becomes a wire set only
when it is a ``SetIntent`` node or when ``as_set=True`` is passed for the top
level value, and then only when it is non-empty and all of one kind.
"""
from decimal import Decimal

from dynamodb_data.adapters.empty_string import encode_string, encode_text
from dynamodb_data.adapters.numbers import format_number, is_number
from dynamodb_data.exceptions import UnsupportedKey, UnsupportedType
from dynamodb_data.types import Attribute, SetIntent, Value, field_path

BINARY_TYPES = (bytes, bytearray, memoryview)


class Encoder:
    """Stateless generic value encoder.
    """

    def encode(self, value: Value, as_set: bool = False,
               path: str | None = None) -> Attribute:
        """Encode one generic value.

        Args:
            value: Generic value tree
            as_set: Write a top-level sequence as a wire set where possible
            path: Field path used in error messages

        Returns
            Attribute tree
        """
        if value is None:
            return Attribute.null()
        if isinstance(value, bool):
            return Attribute.boolean(value)
        if is_number(value):
            return Attribute.number(format_number(value, path))
        if isinstance(value, str):
            return encode_string(value)
        if isinstance(value, BINARY_TYPES):
            return Attribute.binary(bytes(value))
        if isinstance(value, list | tuple):
            return self.encode_sequence(value, as_set or isinstance(value, SetIntent), path)
        if isinstance(value, dict):
            return self.encode_mapping(value, path)
        raise UnsupportedType(f'Cannot encode value of type {type(value).__name__}', path)

    def encode_sequence(self, values, as_set: bool = False,
                        path: str | None = None) -> Attribute:
        """Encode a sequence as a wire set or a list.

        Empty and mixed-kind sequences always become lists.
        """
        if as_set and values:
            attribute = self._encode_set(values, path)
            if attribute is not None:
                return attribute
        return Attribute.list([self.encode(item, path=field_path(path, i))
                               for i, item in enumerate(values)])

    def encode_mapping(self, mapping: dict, path: str | None = None) -> Attribute:
        """Encode a mapping, rejecting non-string keys.
        """
        encoded: dict[str, Attribute] = {}
        for key, item in mapping.items():
            if not isinstance(key, str):
                raise UnsupportedKey(
                    f'Mapping key {key!r} of type {type(key).__name__} is not a string', path)
            encoded[key] = self.encode(item, path=field_path(path, key))
        return Attribute.map(encoded)

    def _encode_set(self, values, path: str | None) -> Attribute | None:
        """Encode homogeneous members as a wire set, or None if mixed.
        """
        if all(isinstance(v, str) for v in values):
            return Attribute.string_set(_unique(encode_text(v) for v in values))
        if all(is_number(v) for v in values):
            texts = [format_number(v, field_path(path, i)) for i, v in enumerate(values)]
            return Attribute.number_set(_unique_numbers(texts))
        if all(isinstance(v, BINARY_TYPES) for v in values):
            return Attribute.binary_set(_unique(bytes(v) for v in values))
        return None


def _unique(items) -> list:
    """Drop duplicates keeping first occurrence.

    >>> _unique(['a', 'b', 'a'])
    ['a', 'b']
    """
    return list(dict.fromkeys(items))


def _unique_numbers(texts) -> list[str]:
    """Drop numerically equal duplicates keeping first occurrence.

    >>> _unique_numbers(['1', '2', '1.0'])
    ['1', '2']
    """
    seen: dict[Decimal, str] = {}
    for text in texts:
        seen.setdefault(Decimal(text), text)
    return list(seen.values())


_encoder = Encoder()


def encode(value: Value, as_set: bool = False) -> Attribute:
    """Encode a generic value to an attribute.

    >>> encode(0)
    Attribute(tag=<Tag.N: 'N'>, value='0')
    >>> encode(['a', 'b'], as_set=True).tag
    <Tag.SS: 'SS'>
    >>> encode([], as_set=True)
    Attribute(tag=<Tag.L: 'L'>, value=())
    """
    return _encoder.encode(value, as_set=as_set)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
