"""
Generic value -> typed target conversion.

Decoded records are plain generic values. When the caller declares a target
shape, these helpers build it from the decoded value using the target's type
annotations, raising UnexpectedTag on any mismatch instead of guessing.

Supported targets: dataclasses, ``str``, ``int``, ``float``, ``bool``,
``bytes``, ``Decimal``, ``UUID``, ``Enum`` subclasses, ``datetime``, ``date``,
``list[X]``, ``set[X]``, ``tuple[X, ...]``, ``tuple[X, Y]``, ``dict[str, X]``,
``X | None`` and ``Any``. A ``date`` target takes date-only text.
"""
import dataclasses
import datetime
import enum
import types
import typing
import uuid
from decimal import Decimal
from typing import Any, Union

import dateutil.parser
from dynamodb_data.exceptions import UnexpectedTag
from dynamodb_data.types import Value, field_path

from libb import attrdict

NoneType = type(None)


def _type_name(tp: Any) -> str:
    return getattr(tp, '__name__', None) or str(tp)


def _mismatch(value: Any, tp: Any, path: str | None) -> UnexpectedTag:
    return UnexpectedTag(
        f'Expected {_type_name(tp)}, got {type(value).__name__} {value!r}', path)


def to_record(value: Value, path: str | None = None) -> attrdict:
    """Wrap a decoded mapping as an attrdict record.

    >>> to_record({'name': 'user name'}).name
    'user name'
    """
    if not isinstance(value, dict):
        raise _mismatch(value, dict, path)
    return attrdict(value)


def _to_union(value: Value, tp: Any, path: str | None) -> Any:
    args = typing.get_args(tp)
    if value is None and NoneType in args:
        return None
    error = None
    for arg in args:
        if arg is NoneType:
            continue
        try:
            return to_structure(value, arg, path)
        except UnexpectedTag as exc:
            error = exc
    raise error or _mismatch(value, tp, path)


def _to_dataclass(value: Value, cls: type, path: str | None) -> Any:
    if not isinstance(value, dict):
        raise _mismatch(value, cls, path)
    hints = typing.get_type_hints(cls)
    kwargs = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        child = field_path(path, f.name)
        if f.name not in value:
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise UnexpectedTag(f'Missing field {f.name!r} for {cls.__name__}', child)
            continue
        kwargs[f.name] = to_structure(value[f.name], hints.get(f.name, Any), child)
    return cls(**kwargs)


def _to_collection(value: Value, tp: Any, origin: type, path: str | None) -> Any:
    args = typing.get_args(tp)
    if origin is dict:
        if not isinstance(value, dict):
            raise _mismatch(value, tp, path)
        item_type = args[1] if len(args) == 2 else Any
        return {k: to_structure(v, item_type, field_path(path, k)) for k, v in value.items()}
    if not isinstance(value, list):
        raise _mismatch(value, tp, path)
    if origin is tuple and args and args[-1] is not Ellipsis:
        if len(value) != len(args):
            raise UnexpectedTag(
                f'Expected {len(args)} items for {tp}, got {len(value)}', path)
        return tuple(to_structure(v, t, field_path(path, i))
                     for i, (v, t) in enumerate(zip(value, args)))
    item_type = args[0] if args else Any
    items = [to_structure(v, item_type, field_path(path, i)) for i, v in enumerate(value)]
    if origin is list:
        return items
    return origin(items)


def _to_scalar(value: Value, tp: type, path: str | None) -> Any:
    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif tp is float:
        if isinstance(value, int | float | Decimal) and not isinstance(value, bool):
            return float(value)
    elif tp is Decimal:
        if isinstance(value, int | float | Decimal) and not isinstance(value, bool):
            return Decimal(str(value))
    elif tp is str:
        if isinstance(value, str):
            return value
    elif tp is bytes:
        if isinstance(value, bytes):
            return value
        if isinstance(value, str):
            return value.encode('utf-8')
    elif tp is datetime.datetime:
        if isinstance(value, str):
            try:
                return dateutil.parser.isoparse(value)
            except ValueError as exc:
                raise UnexpectedTag(f'Invalid ISO-8601 text {value!r}: {exc}', path) from exc
    elif tp is datetime.date:
        if isinstance(value, str):
            try:
                return dateutil.parser.isoparser().parse_isodate(value)
            except ValueError as exc:
                raise UnexpectedTag(f'Invalid ISO-8601 date {value!r}: {exc}', path) from exc
    elif tp is uuid.UUID:
        if isinstance(value, str):
            try:
                return uuid.UUID(value)
            except ValueError as exc:
                raise UnexpectedTag(f'Invalid UUID text {value!r}', path) from exc
    elif isinstance(tp, type) and issubclass(tp, enum.Enum):
        try:
            return tp(value)
        except (ValueError, TypeError) as exc:
            raise UnexpectedTag(f'{value!r} is not a valid {tp.__name__}', path) from exc
    elif isinstance(tp, type) and isinstance(value, tp):
        return value
    raise _mismatch(value, tp, path)


def to_structure(value: Value, tp: Any, path: str | None = None) -> Any:
    """Build a typed target from a decoded generic value.

    Args:
        value: Decoded generic value tree
        tp: Target type or type annotation
        path: Field path used in error messages

    Returns
        Instance of the target type

    >>> to_structure([1, 2], list[int])
    [1, 2]
    >>> to_structure('2023-05-15', datetime.date)
    datetime.date(2023, 5, 15)
    >>> to_structure(None, int | None) is None
    True
    """
    if tp is Any or tp is object:
        return value
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return _to_union(value, tp, path)
    if value is None:
        raise _mismatch(value, tp, path)
    if origin in {list, set, frozenset, tuple, dict}:
        return _to_collection(value, tp, origin, path)
    if dataclasses.is_dataclass(tp) and isinstance(tp, type):
        return _to_dataclass(value, tp, path)
    if tp is attrdict:
        return to_record(value, path)
    if tp is dict or tp is list:
        return _to_collection(value, tp, tp, path)
    return _to_scalar(value, tp, path)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
