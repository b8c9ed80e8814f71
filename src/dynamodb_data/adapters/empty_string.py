"""
Empty string handling shared by encoding and decoding.

The store rejects zero-length strings and its NULL carries no type, so an
empty string is written as a string attribute holding a single NUL character.
Reading inverts this. A non-empty string consisting of exactly that one
character cannot be told apart from an encoded empty string; such a value reads
back as ``''``.
"""
from dynamodb_data.types import Attribute

EMPTY_STRING_SENTINEL = '\x00'


def encode_text(value: str) -> str:
    """Return the wire payload for a string.

    >>> encode_text('')
    '\\x00'
    >>> encode_text('abc')
    'abc'
    """
    return value or EMPTY_STRING_SENTINEL


def decode_text(text: str) -> str:
    """Return the string a wire payload stands for.

    >>> decode_text('\\x00')
    ''
    >>> decode_text('a\\x00')
    'a\\x00'
    """
    if text == EMPTY_STRING_SENTINEL:
        return ''
    return text


def encode_string(value: str) -> Attribute:
    """Encode a string, substituting the sentinel for the empty string.
    """
    return Attribute.string(encode_text(value))


def is_empty_string(attribute: Attribute) -> bool:
    """Check if an attribute is the encoded form of the empty string.
    """
    return attribute == Attribute.string(EMPTY_STRING_SENTINEL)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
