"""
Conversion exception classes.
"""


class BridgeError(Exception):
    """Base class for all conversion errors.

    :param message: Human readable description.
    :param path: Dotted path of the offending field, if known.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        if path:
            message = f'{message} (at {path})'
        super().__init__(message)


class EncodeError(BridgeError):
    """Error converting a generic value to an attribute.
    """


class NumberOutOfRange(EncodeError):
    """Number cannot be represented in the store's numeric precision/range.
    """


class UnsupportedKey(EncodeError):
    """Mapping key is not a string.
    """


class UnsupportedType(EncodeError):
    """Value kind outside the generic value model.
    """


class DecodeError(BridgeError):
    """Error converting an attribute to a generic value.
    """


class NumberParse(DecodeError):
    """Malformed decimal text in a number attribute.
    """


class UnexpectedTag(DecodeError):
    """Attribute tag or structure does not match the expected shape.
    """
