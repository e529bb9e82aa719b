"""
Litargs utilities (small helpers shared by the registry, matcher and front-end).

Overview
- UnsetType / Unset
  • Singleton sentinel for "argument not provided" (None stays a legitimate value).
  • Falsey, printable as "Unset", and sealed against subclassing.

- coalesce(value, default=None)
  • Materialize Unset into a concrete default; every other value passes through.

- rename(callable, name) / @rename("name")
  • Give generated callables (handlers, properties) a stable __name__/__qualname__.

- mirror("attr")
  • Read-only property over a private "_attr" field; containers come back as
    immutable snapshots (tuple / MappingProxyType).

- pluralize(word, count)
  • Pick the singular or plural spelling of a counted noun for parse messages
    ("1 argument", "3 arguments").

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce("", "fallback")
    ''
    >>> pluralize("argument", 2)
    '2 arguments'
"""
import builtins
import functools
from collections.abc import Sequence, Mapping
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Sentinel type representing a parameter that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but Unset is distinct from None and "".
    - Printable: repr(Unset) -> "Unset".
    - Singleton: UnsetType() always yields the same instance.
    - Sealed: subclassing raises TypeError.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions with the sentinel (e.g., isinstance(x, str | Unset)).
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return `default` when `object` is the Unset sentinel, otherwise `object`.

    Falsey values (None, 0, "", ()) are preserved: only Unset is replaced.
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set __name__/__qualname__ on a callable, or return a decorator that will.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name)           -> decorator

    Raises
    - TypeError on a non-callable target, a non-string name, or a wrong arity.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    """
    Shallow immutable snapshot of a container value.

    - tuple (including named tuples) → returned as-is
    - Sequence (non-string) → tuple
    - Mapping → MappingProxyType over a copy
    - anything else → returned as-is
    """
    if isinstance(object, tuple):
        return object
    elif isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(object)
    elif isinstance(object, Mapping):
        return MappingProxyType(dict(object))
    return object


def mirror(name, /):
    """
    Define a read-only property over the private backing field "_{name}".

    The getter returns an immutable snapshot for containers, so registry state
    (option maps, label lists) cannot be mutated through the public surface.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


@functools.cache
def pluralize(word, count, /):
    """
    Return "<count> <word>" with a plural "s" unless count is exactly one.

    Only regular nouns are used in litargs messages ("argument", "value",
    "option"), so no irregular forms are handled.

    Examples
    - pluralize("argument", 1) -> "1 argument"
    - pluralize("argument", 0) -> "0 arguments"
    """
    if not isinstance(word, str):
        raise TypeError("pluralize() first argument must be a string")
    if not isinstance(count, int):
        raise TypeError("pluralize() second argument must be an integer")
    return "%d %s%s" % (count, word, "" if count == 1 else "s")


Unset = UnsetType()
"""
Sentinel for "not provided".

Use Unset as a parameter default when None (or "") is a meaningful value, and
materialize it with coalesce(value, default) where a concrete value is needed.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "pluralize",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
