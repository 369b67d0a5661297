"""Config value contract and conversion to and from plain data.

A config value is an instance of a caller-defined dataclass. Codecs only deal
with plain data (dicts, lists, strings, numbers, booleans and None), so values
are flattened with to_data() before serialization and rebuilt with from_data()
after deserialization. Rebuilding checks every field against the dataclass
annotations, so a file with a wrong type fails instead of producing a
half-valid config.
"""

import dataclasses
import logging
import types
from enum import Enum
from typing import (
    Any,
    Literal,
    Protocol,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
    runtime_checkable,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NONE_TYPE = type(None)


@runtime_checkable
class DefaultConstructible(Protocol):
    """Protocol for config types that build their own default instance.

    Types without a ``default()`` method must be constructible with no
    arguments, i.e. every dataclass field has a default.
    """

    @classmethod
    def default(cls) -> Any:
        """Return the value written on first run."""
        ...


def default_instance(config_type: type[T]) -> T:
    """Build the default value for a config type.

    Args:
        config_type: Dataclass type of the config

    Returns:
        ``config_type.default()`` if the type defines it, otherwise
        ``config_type()``

    Raises:
        TypeError: If config_type is not a dataclass type or cannot be
            constructed without arguments
    """
    _require_dataclass_type(config_type)
    # A field named "default" shows up as a non-callable class attribute
    if isinstance(config_type, DefaultConstructible) and callable(config_type.default):
        return config_type.default()
    return config_type()


def to_data(value: Any, keep_none: bool = True) -> Any:
    """Flatten a config value into plain data.

    Dataclasses become dicts (init fields only), enums their values and
    tuples lists.

    Args:
        value: Value to flatten
        keep_none: False for formats without null. None-valued optional
            fields are then left out (from_data restores them as None) and
            any other None is an error rather than a silently lost value.

    Raises:
        TypeError: If the value contains something with no plain-data form
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        hints = get_type_hints(type(value))
        fields: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            if not f.init:
                continue
            item = getattr(value, f.name)
            if item is None and not keep_none:
                if not _is_optional(hints.get(f.name, Any)):
                    raise TypeError(
                        f"field '{f.name}' is None but not declared optional"
                    )
                continue
            fields[f.name] = to_data(item, keep_none)
        return fields
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"mapping keys must be strings, got {key!r}")
            if item is None and not keep_none:
                raise TypeError(f"null value for key '{key}' has no representation")
            result[key] = to_data(item, keep_none)
        return result
    if isinstance(value, (list, tuple)):
        if not keep_none and any(item is None for item in value):
            raise TypeError("null array items have no representation")
        return [to_data(item, keep_none) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"cannot serialize value of type {type(value).__name__}")


def from_data(config_type: type[T], data: Any) -> T:
    """Rebuild a config value from plain data.

    Fields absent from ``data`` keep their dataclass default, except optional
    (``X | None``) fields, which become None. Keys with no matching field are
    ignored.

    Args:
        config_type: Dataclass type to build
        data: Decoded document (normally a dict)

    Returns:
        Instance of config_type

    Raises:
        ValueError: If a required field is missing, a value has the wrong
            type, or the dataclass rejects the values in ``__post_init__``
    """
    _require_dataclass_type(config_type)
    return _build_dataclass(config_type, data, config_type.__name__)


def _require_dataclass_type(config_type: Any) -> None:
    if not (isinstance(config_type, type) and dataclasses.is_dataclass(config_type)):
        raise TypeError(f"config type must be a dataclass, got {config_type!r}")


def _build_dataclass(cls: type[T], data: Any, where: str) -> T:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected a table, got {_describe(data)}")

    hints = get_type_hints(cls)
    fields = [f for f in dataclasses.fields(cls) if f.init]
    kwargs: dict[str, Any] = {}

    for f in fields:
        field_type = hints.get(f.name, Any)
        if f.name not in data:
            # Formats without null omit None fields, so an absent optional
            # field means None even when the field has another default
            if _is_optional(field_type):
                kwargs[f.name] = None
                continue
            has_default = (
                f.default is not dataclasses.MISSING
                or f.default_factory is not dataclasses.MISSING
            )
            if has_default:
                continue
            if _accepts_none(field_type):
                kwargs[f.name] = None
                continue
            raise ValueError(f"{where}: missing field '{f.name}'")
        kwargs[f.name] = _convert(field_type, data[f.name], f"{where}.{f.name}")

    unknown = set(data) - {f.name for f in fields}
    if unknown:
        logger.debug("Ignoring unknown keys in %s: %s", where, sorted(unknown))

    try:
        return cls(**kwargs)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{where}: {e}") from e


def _convert(tp: Any, value: Any, where: str) -> Any:
    if tp is Any or tp is object:
        return value

    origin = get_origin(tp)

    if origin is Literal:
        choices = get_args(tp)
        for choice in choices:
            if value == choice and type(value) is type(choice):
                return value
        raise ValueError(f"{where}: expected one of {list(choices)!r}, got {value!r}")

    if origin is Union or origin is types.UnionType:
        return _convert_union(tp, value, where)

    if tp is None or tp is _NONE_TYPE:
        if value is None:
            return None
        raise ValueError(f"{where}: expected null, got {_describe(value)}")

    if origin is list or tp is list:
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"{where}: expected an array, got {_describe(value)}")
        (item_type,) = get_args(tp) or (Any,)
        return [_convert(item_type, item, f"{where}[{i}]") for i, item in enumerate(value)]

    if origin is tuple or tp is tuple:
        return _convert_tuple(tp, value, where)

    if origin is dict or tp is dict:
        if not isinstance(value, dict):
            raise ValueError(f"{where}: expected a table, got {_describe(value)}")
        _, item_type = get_args(tp) or (str, Any)
        return {
            str(key): _convert(item_type, item, f"{where}.{key}")
            for key, item in value.items()
        }

    if not isinstance(tp, type):
        # Unsupported typing construct; keep the decoded value as is.
        return value

    if dataclasses.is_dataclass(tp):
        return _build_dataclass(tp, value, where)

    if issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError as e:
            allowed = [member.value for member in tp]
            raise ValueError(f"{where}: expected one of {allowed!r}, got {value!r}") from e

    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif isinstance(value, tp):
        return value

    raise ValueError(f"{where}: expected {tp.__name__}, got {_describe(value)}")


def _convert_union(tp: Any, value: Any, where: str) -> Any:
    members = get_args(tp)
    if value is None:
        if _NONE_TYPE in members:
            return None
        raise ValueError(f"{where}: value cannot be null")

    for member in members:
        if member is _NONE_TYPE:
            continue
        try:
            return _convert(member, value, where)
        except ValueError:
            continue
    names = " | ".join(getattr(m, "__name__", repr(m)) for m in members)
    raise ValueError(f"{where}: expected {names}, got {_describe(value)}")


def _convert_tuple(tp: Any, value: Any, where: str) -> tuple[Any, ...]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{where}: expected an array, got {_describe(value)}")
    args = get_args(tp)
    if not args:
        return tuple(value)
    if len(args) == 2 and args[1] is Ellipsis:
        return tuple(
            _convert(args[0], item, f"{where}[{i}]") for i, item in enumerate(value)
        )
    if len(args) != len(value):
        raise ValueError(f"{where}: expected {len(args)} items, got {len(value)}")
    return tuple(
        _convert(item_type, item, f"{where}[{i}]")
        for i, (item_type, item) in enumerate(zip(args, value))
    )


def _accepts_none(tp: Any) -> bool:
    if tp is Any or tp is None or tp is _NONE_TYPE:
        return True
    return _is_optional(tp)


def _is_optional(tp: Any) -> bool:
    origin = get_origin(tp)
    return (origin is Union or origin is types.UnionType) and _NONE_TYPE in get_args(tp)


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "a table"
    if isinstance(value, (list, tuple)):
        return "an array"
    return f"{type(value).__name__} {value!r}"
