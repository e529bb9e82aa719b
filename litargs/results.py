"""
Litargs result model: the immutable hand-off between the matcher and dispatch.

- ParsePiece(name, args)
  • command piece: args is a tuple of strings, padded with "" up to the arity.
  • option piece: args is a tuple of strings, True for a present flag, or
    False for an unknown option.
- ErrorPiece(kind, detail, target, code)
  • kind: ErrorKind (ReferenceError / ArgumentError / DuplicateError).
  • detail: human message; target: offending token ("" when nothing was given).
  • code: stable FaultCode.
- ParseResult(command, option, errors)
  • command: ParsePiece or None when the command could not be resolved.
  • option: tuple of option pieces in token order (occurrences, not unique names).
  • errors: tuple of ErrorPiece; `valid` is true iff it is empty.
"""
from collections import namedtuple

from rich.text import Text

from .faults import ErrorKind, FaultCode


class ParsePiece(namedtuple("ParsePiece", ("name", "args"))):
    """A (name, args) pair produced for the command or for one option occurrence."""

    __slots__ = ()


class ErrorPiece(namedtuple("ErrorPiece", ("kind", "detail", "target", "code"), defaults=("", None))):
    """
    One structural problem found while parsing.

    Pieces are values: they are collected into ParseResult.errors and never raised.
    """

    __slots__ = ()

    def __new__(cls, kind, detail, target="", code=None):
        if not isinstance(code, FaultCode | None):
            raise TypeError("error piece 'code' must be a fault code")
        return super().__new__(cls, ErrorKind(kind), detail, target, code)

    def __str__(self):
        return f"{self.kind}: {self.detail}"

    def render(self, styler=lambda style: ""):
        """
        Styled "<Kind>: <detail>" line (the code is appended in brackets when set).
        """
        line = Text.assemble((str(self.kind), styler("error-kind")), ": ", (self.detail, styler("error-detail")))
        if self.code is not None:
            line.append(" ").append(f"[{self.code.normalize()}]", styler("error-code"))
        return line


class ParseResult(namedtuple("ParseResult", ("command", "option", "errors"), defaults=(None, (), ()))):
    """
    Structured output of one parse() call.

    The tuple fields are immutable; `valid` and `options()` are derived views.
    """

    __slots__ = ()

    def __new__(cls, command=None, option=(), errors=()):
        if command is not None and not isinstance(command, ParsePiece):
            raise TypeError("parse result 'command' must be a parse piece or None")
        return super().__new__(cls, command, tuple(option), tuple(errors))

    @property
    def valid(self):
        """True iff the parse produced no errors."""
        return not self.errors

    @property
    def args(self):
        """Positional values of the command piece (empty when unresolved)."""
        return self.command.args if self.command is not None else ()

    def options(self):
        """
        Fold option pieces into {name: args}; later pieces overwrite earlier ones.
        """
        return {piece.name: piece.args for piece in self.option}

    def errors_of(self, kind, /):
        """Errors of one kind, in the order they were recorded."""
        return tuple(error for error in self.errors if error.kind == ErrorKind(kind))


__all__ = (
    "ParsePiece",
    "ErrorPiece",
    "ParseResult",
)
