"""
Tagged attribute -> generic value conversion.

The inverse of the encoder. Numbers come back as ``int`` when their text has
no fractional or exponent part and as ``float`` (or ``Decimal``) otherwise.
The decoder never substitutes defaults: malformed numbers, unknown tags and
payloads that do not fit their tag raise.
"""
from dynamodb_data.adapters.empty_string import decode_text, is_empty_string
from dynamodb_data.adapters.numbers import parse_number
from dynamodb_data.exceptions import DecodeError, UnexpectedTag
from dynamodb_data.types import Attribute, Tag, Value, field_path


class Decoder:
    """Attribute decoder.

    Args:
        binary_as_text: Decode binary payloads as UTF-8 text instead of bytes
        use_decimal: Decode fractional numbers as Decimal instead of float
    """

    def __init__(self, binary_as_text: bool = False, use_decimal: bool = False) -> None:
        self.binary_as_text = binary_as_text
        self.use_decimal = use_decimal

    def decode(self, attribute: Attribute, expect: Tag | tuple[Tag, ...] | None = None,
               path: str | None = None) -> Value:
        """Decode one attribute tree.

        Args:
            attribute: Attribute tree
            expect: Tag or tags the attribute must carry
            path: Field path used in error messages

        Returns
            Generic value tree
        """
        if not isinstance(attribute, Attribute):
            raise UnexpectedTag(
                f'Expected an attribute, got {type(attribute).__name__}', path)
        tag = attribute.tag
        if expect is not None:
            expected = (expect,) if isinstance(expect, Tag) else tuple(expect)
            if tag not in expected:
                names = ', '.join(t.value for t in expected)
                raise UnexpectedTag(f'Expected {names} attribute, got {tag}', path)

        value = attribute.value
        match tag:
            case Tag.NULL:
                return None
            case Tag.BOOL:
                if not isinstance(value, bool):
                    raise UnexpectedTag(f'BOOL payload {value!r} is not a boolean', path)
                return value
            case Tag.N:
                return parse_number(value, self.use_decimal, path)
            case Tag.S:
                if is_empty_string(attribute):
                    return ''
                return self._text(value, tag, path)
            case Tag.B:
                return self._binary(value, path)
            case Tag.SS:
                return [decode_text(self._text(v, tag, field_path(path, i)))
                        for i, v in self._items(value, tag, path)]
            case Tag.NS:
                return [parse_number(v, self.use_decimal, field_path(path, i))
                        for i, v in self._items(value, tag, path)]
            case Tag.BS:
                return [self._binary(v, field_path(path, i))
                        for i, v in self._items(value, tag, path)]
            case Tag.L:
                return [self.decode(v, path=field_path(path, i))
                        for i, v in self._items(value, tag, path)]
            case Tag.M:
                return {k: self.decode(v, path=field_path(path, k))
                        for k, v in self._items(value, tag, path)}
        raise UnexpectedTag(f'Unknown attribute tag {tag!r}', path)

    def _items(self, value, tag: Tag, path: str | None) -> list[tuple]:
        """Pair container members with their path keys, checking the payload kind.
        """
        if tag == Tag.M:
            if not isinstance(value, dict):
                raise UnexpectedTag(f'M payload {value!r} is not a mapping', path)
            for k in value:
                if not isinstance(k, str):
                    raise UnexpectedTag(f'M payload key {k!r} is not a string', path)
            return list(value.items())
        if not isinstance(value, tuple | list):
            raise UnexpectedTag(f'{tag} payload {value!r} is not a sequence', path)
        return list(enumerate(value))

    def _text(self, value, tag: Tag, path: str | None) -> str:
        if not isinstance(value, str):
            raise UnexpectedTag(f'{tag} payload {value!r} is not a string', path)
        return value

    def _binary(self, value, path: str | None) -> bytes | str:
        if not isinstance(value, bytes | bytearray | memoryview):
            raise UnexpectedTag(f'Binary payload {value!r} is not bytes', path)
        value = bytes(value)
        if not self.binary_as_text:
            return value
        try:
            return value.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise DecodeError(f'Binary payload is not UTF-8 text: {exc}', path) from exc


_decoder = Decoder()


def decode(attribute: Attribute, expect: Tag | tuple[Tag, ...] | None = None) -> Value:
    """Decode an attribute to a generic value.

    >>> decode(Attribute.number('0'))
    0
    >>> decode(Attribute.string('\\x00'))
    ''
    >>> decode(Attribute.null()) is None
    True
    """
    return _decoder.decode(attribute, expect=expect)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
