from __future__ import annotations

import dataclasses
import logging
import types
import typing as t
from dataclasses import fields, is_dataclass

from ..errors import ConfigError

_LOG = logging.getLogger(__name__)

_T = t.TypeVar("_T")


def build_typed(cls: type[_T], data: t.Any, *, path: tuple[str, ...] = ()) -> _T:
    """
    Build a typed object of dataclass `cls` from raw YAML data,
    recursively coercing nested structures according to type hints.
    """
    try:
        return t.cast(_T, _coerce_to_class(cls, data, path))
    except ConfigError:
        raise
    except Exception as e:
        raise ConfigError(f"failed to build {getattr(cls, '__name__', str(cls))}: {e}", path) from e


def _coerce_to_class(cls: type, data: t.Any, path: tuple[str, ...]):
    if is_dataclass(cls):
        if not isinstance(data, dict):
            raise ConfigError(f"expected mapping for {cls.__name__}, got {type(data).__name__}", path)
        # strict check for extra keys
        allowed = {f.name for f in fields(cls)}
        extras = set(data.keys()) - allowed
        if extras:
            raise ConfigError(f"unexpected keys: {sorted(map(str, extras))!r}", path)

        hints = t.get_type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            if not f.init:
                continue
            f_path = (*path, f.name)
            if f.name in data:
                kwargs[f.name] = coerce(data[f.name], hints.get(f.name, t.Any), f_path)
            elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:  # type: ignore[misc]
                raise ConfigError("required field missing", f_path)
        _LOG.debug("Built %s at %s", cls.__name__, ".".join(path) or "$")
        return cls(**kwargs)  # type: ignore[misc]

    if isinstance(data, cls):
        return data
    raise ConfigError(f"cannot coerce {type(data).__name__} → {getattr(cls, '__name__', str(cls))}", path)


def coerce(value: t.Any, hint: t.Any, path: tuple[str, ...]) -> t.Any:
    """Recursive normalization according to the type hint."""
    origin = t.get_origin(hint)
    args = t.get_args(hint)

    if hint is t.Any:
        return value

    # Optional[T] / Union[...] (typing.Union and X | Y)
    if origin is t.Union or origin is types.UnionType:
        if value is None and type(None) in args:
            return None
        errors: list[str] = []
        for option in args:
            if option is type(None):
                continue
            try:
                return coerce(value, option, path)
            except ConfigError as e:
                errors.append(str(e))
        if not errors:
            raise ConfigError("union alternatives exhausted", path)
        # each branch message already carries the path
        raise ConfigError(" | ".join(errors))

    if origin is t.Literal:
        if value not in args:
            raise ConfigError(f"expected one of {args!r}, got {value!r}", path)
        return value

    # Primitives. YAML already gives the right types, a str is never cast from a list.
    if hint in (str, int, float, bool):
        if isinstance(value, bool) and hint is not bool:
            raise ConfigError(f"expected {hint.__name__}, got bool", path)
        if isinstance(value, hint):
            return value
        if hint is float and isinstance(value, int):
            return float(value)
        raise ConfigError(f"expected {hint.__name__}, got {type(value).__name__}", path)

    if origin is dict:
        k_t, v_t = args or (t.Any, t.Any)
        if not isinstance(value, dict):
            raise ConfigError(f"expected mapping, got {type(value).__name__}", path)
        out = {}
        for k, v in value.items():
            kk = coerce(k, k_t, (*path, "<key>"))
            out[kk] = coerce(v, v_t, (*path, str(kk)))
        return out

    if origin is list:
        (elem_t,) = args or (t.Any,)
        if not isinstance(value, list):
            raise ConfigError(f"expected list, got {type(value).__name__}", path)
        return [coerce(v, elem_t, (*path, str(i))) for i, v in enumerate(value)]

    if origin is tuple:
        if not isinstance(value, (list, tuple)):
            raise ConfigError(f"expected list, got {type(value).__name__}", path)
        # Tuple[T, ...] or Tuple[T1, T2, ...]
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(coerce(v, args[0], (*path, str(i))) for i, v in enumerate(value))
        if args:
            if len(args) != len(value):
                raise ConfigError(f"expected {len(args)} items, got {len(value)}", path)
            return tuple(coerce(v, at, (*path, str(i))) for i, (v, at) in enumerate(zip(value, args)))
        return tuple(value)

    if isinstance(hint, type):
        return _coerce_to_class(hint, value, path)

    return value


__all__ = ["build_typed", "coerce"]
