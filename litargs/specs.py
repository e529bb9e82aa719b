r"""
Litargs command and option specifications.

Overview
- Description: (detail, args) pair; `args` is the optional ordered list of
  argument labels shown in help, whose length must match the declared arity.
- Signature: the plain data shared by commands and options (name, arity,
  description). Both specs embed one by composition.
- CommandSpec: a named verb with a fixed positional arity, its own options and
  a handler. Renders its help block (and its options').
- OptionSpec: a named modifier owned by one command. Arity 0 makes it a boolean
  flag, spelled with the long marker ("--name"); otherwise "-name".

Introspection & representation
- SpecType metaclass provides a stable __repr__/__rich_repr__ and exposes the
  fields listed in __introspectable__ as read-only properties (see utils.mirror).

Validation (sanitized on construction)
- name: non-empty string, no whitespace, must not start with the marker "-".
- argument_count: non-negative integer (bool rejected).
- description: Description | mapping with "detail"/"args" | str | Unset.
- labels: when given, len(args) == argument_count.
Shape errors raise TypeError; conflicts with the command-line grammar raise
DefinitionError.

Example
    >>> option = OptionSpec("cp", 0, "copy instead of moving")
    >>> option.actual_name
    '--cp'
"""
import functools
import operator
import re
from collections import namedtuple
from collections.abc import Iterable, Mapping

from rich.text import Text

from .faults import DefinitionError
from .utils import *

MARKER = "-"

Description = namedtuple("Description", ("detail", "args"), defaults=("", None))
Description.__doc__ = """
Human text for a command or option.

- detail: one-line description shown in help.
- args: tuple of argument labels, or None when no labels were given.
"""

Signature = namedtuple("Signature", ("name", "argument_count", "description"))
Signature.__doc__ = """
Shared identity of a command or option: name, fixed arity, and description.
"""


class SpecType(type):
    """
    Metaclass for command/option specs.

    - __typename__ is derived from the class name ("CommandSpec" → "command-spec")
      and used as the prefix of every validation message.
    - Every name in __introspectable__ becomes a read-only property over "_name".
    - __repr__/__rich_repr__ list the __displayable__ fields (or __introspectable__).
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_name(cls, name, /):
    if not isinstance(name, str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not name:
        raise DefinitionError(f"{cls.__typename__} 'name' cannot be empty")
    elif re.search(r"\s", name):
        raise DefinitionError(f"{cls.__typename__} 'name' cannot contain whitespace, got {name!r}")
    elif name.startswith(MARKER):
        raise DefinitionError(f"{cls.__typename__} 'name' cannot start with {MARKER!r}, got {name!r}")
    return name


def _sanitize_argument_count(cls, argument_count, /):
    if isinstance(argument_count, bool) or not isinstance(argument_count, int):
        raise TypeError(f"{cls.__typename__} 'argument_count' must be an integer")
    elif argument_count < 0:
        raise DefinitionError(f"{cls.__typename__} 'argument_count' must be non-negative")
    return argument_count


def describe(cls, description, argument_count, /):
    """
    Normalize a user-provided description into a Description.

    Accepted shapes
    - Unset → Description("", None)
    - str → Description(detail, None)
    - Mapping with "detail" and optional "args" keys
    - Description

    Raises
    - TypeError on any other shape or non-string labels/detail.
    - DefinitionError when labels are given and their count differs from the arity.
    """
    if description is Unset:
        return Description()
    if isinstance(description, str):
        return Description(description)
    if isinstance(description, Mapping) and not isinstance(description, Description):
        unknown = set(description) - {"detail", "args"}
        if unknown:
            raise TypeError(f"{cls.__typename__} 'description' has unknown keys: {', '.join(sorted(map(str, unknown)))}")
        description = Description(description.get("detail", ""), description.get("args"))
    if not isinstance(description, Description):
        raise TypeError(f"{cls.__typename__} 'description' must be a string, a mapping or a description")

    detail, args = description
    if not isinstance(detail, str):
        raise TypeError(f"{cls.__typename__} 'description' detail must be a string")

    if args is not None:
        if isinstance(args, str) or not isinstance(args, Iterable):
            raise TypeError(f"{cls.__typename__} 'description' args must be an iterable of strings")
        args = tuple(args)
        if not all(isinstance(label, str) for label in args):
            raise TypeError(f"{cls.__typename__} 'description' args must be an iterable of strings")
        if len(args) != argument_count:
            raise DefinitionError(
                f"{cls.__typename__} declares {pluralize('argument', argument_count)} "
                f"but describes {pluralize('label', len(args))}"
            )
    return Description(detail, args)


def _labels(description, /):
    # "[a, b]" when labels exist; a lone tab keeps the help columns aligned otherwise
    return "[%s]" % ", ".join(description.args) if description.args is not None else "\t"


def _noop(args, options, /):
    return None


class _Spec(metaclass=SpecType):
    """
    Common accessors over the embedded Signature.
    """
    __introspectable__ = ("signature",)

    @property
    def name(self):
        return self._signature.name

    @property
    def argument_count(self):
        return self._signature.argument_count

    @property
    def description(self):
        return self._signature.description


class OptionSpec(_Spec):
    """
    A named modifier scoped to one command.

    `actual_name` is the spelling expected on the command line: "-name" when the
    option consumes values, "--name" when it is a flag (arity 0).
    """
    __introspectable__ = ("signature",)
    __displayable__ = ("name", "argument_count", "description")

    def __init__(self, name, argument_count, description=Unset, /):
        cls = type(self)
        name = _sanitize_name(cls, name)
        argument_count = _sanitize_argument_count(cls, argument_count)
        self._signature = Signature(name, argument_count, describe(cls, description, argument_count))

    @property
    def flag(self):
        return self.argument_count == 0

    @property
    def actual_name(self):
        return MARKER * (1 if self.argument_count else 2) + self.name

    def help(self, styler=lambda style: ""):
        """
        Render "<actual_name>\\t[labels]\\tdetail" as a styled Text line.
        """
        return Text.assemble(
            (self.actual_name, styler("flag-name" if self.flag else "option-name")),
            "\t",
            (_labels(self.description), styler("labels")),
            "\t",
            (self.description.detail, styler("detail")),
        )


class CommandSpec(_Spec):
    """
    A named top-level verb with a fixed positional arity, options and a handler.

    Options are kept in registration order; the registry is the only writer
    (see Registry.register_option) and stops accepting options once closed.
    """
    __introspectable__ = ("signature", "options", "handler")
    __displayable__ = ("name", "argument_count", "description", "options")

    def __init__(self, name, argument_count, description=Unset, handler=Unset, /):
        cls = type(self)
        name = _sanitize_name(cls, name)
        argument_count = _sanitize_argument_count(cls, argument_count)
        if handler is not Unset and not callable(handler):
            raise TypeError(f"{cls.__typename__} 'handler' must be callable")
        self._signature = Signature(name, argument_count, describe(cls, description, argument_count))
        self._options = {}
        self._handler = coalesce(handler, _noop)

    def _push_option(self, option, /):
        if not isinstance(option, OptionSpec):
            raise TypeError(f"{type(self).__typename__} options must be option specs")
        if option.name in self._options:
            raise DefinitionError(f"redefinition of option {option.actual_name!r} on command {self.name!r}")
        self._options[option.name] = option

    def option(self, name, /):
        """Return the option registered under `name`, or None."""
        return self._options.get(name)

    def handle(self, args, options, /):
        """Invoke the handler with (positional list, options mapping)."""
        return self._handler(args, options)

    def help(self, styler=lambda style: "", aliases=()):
        """
        Render this command's help block.

        Layout
            name[, alias...]\\t[labels]\\tdetail
            \\tOptions:
            \\t<option line>
        The options section is omitted when the command has no options.
        """
        names = Text(", ").join(Text(name, styler("command-name")) for name in (self.name, *aliases))
        block = Text.assemble(
            names,
            "\t",
            (_labels(self.description), styler("labels")),
            "\t",
            (self.description.detail, styler("detail")),
        )
        if self._options:
            block.append("\n\t").append("Options:", styler("options-label"))
            for option in self._options.values():
                block.append("\n\t").append(option.help(styler))
        return block


__all__ = (
    "MARKER",
    "Description",
    "Signature",
    "CommandSpec",
    "OptionSpec",
    "describe",
)
