"""
Litargs faults (definition errors, parse error kinds, and warnings).

Scope
- DefinitionError: registration-time misuse (duplicate names, reserved marker
  prefix, arity/label mismatch, missing focus, closed registration). Raised
  immediately; these are programmer mistakes, not user input.
- ErrorKind: the three parse error kinds collected into a ParseResult instead of
  being raised (ReferenceError, ArgumentError, DuplicateError).
- FaultCode: canonical, stable numeric identifiers for every parse error and
  warning, so help output and logs stay searchable.
- LitargsWarning / NotParsedWarning: soft notices emitted through warnings.warn.

Integration
- The registry raises DefinitionError / TypeError while commands are declared.
- The matcher never raises for user input; it records ErrorPiece(kind, ...) values
  tagged with the FaultCode of the specific situation.
"""
from enum import IntEnum, StrEnum


class FaultCode(IntEnum):
    """
    canonical fault codes used across litargs (stable identifiers).

    grouping
    - routing (1110x)
      • NOTHING_SPECIFIED, UNKNOWN_COMMAND
    - options (1111x)
      • UNKNOWN_OPTION, DUPLICATED_OPTION
    - positionals (1112x)
      • TOO_MANY_ARGUMENTS
    - warnings (12xxx)
      • NOT_PARSED

    normalize() lets the host remap codes to custom labels through a
    __codes__ mapping in __main__ while the numeric ids stay stable.
    """
    # --- routing errors (11xxx) ---
    NOTHING_SPECIFIED           = 11100
    UNKNOWN_COMMAND             = 11101

    # --- option errors (11xxx) ---
    UNKNOWN_OPTION              = 11112
    DUPLICATED_OPTION           = 11115

    # --- positional errors (11xxx) ---
    TOO_MANY_ARGUMENTS          = 11121

    # --- warnings (12xxx) ---
    NOT_PARSED                  = 12101

    def normalize(self):
        """
        return a host-normalized string for this code.

        when __main__ exposes no __codes__ mapping (or no entry for this code),
        the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ErrorKind(StrEnum):
    """
    kinds of parse errors collected into a ParseResult.

    - REFERENCE: an unknown command or option name was referenced.
    - ARGUMENT: more positional arguments than the command declares.
    - DUPLICATE: the same known option appeared more than once in one input.

    values compare equal to their display names ("ReferenceError", ...).
    """
    REFERENCE = "ReferenceError"
    ARGUMENT = "ArgumentError"
    DUPLICATE = "DuplicateError"


class DefinitionError(ValueError):
    """
    Registration-time misuse of the command/option/alias API.

    Raised before the registry is mutated, so a failed registration leaves
    every existing command, option and alias untouched.
    """


class LitargsWarning(Warning):
    """Base class for litargs soft notices."""

    code = None


class NotParsedWarning(LitargsWarning):
    """execute() was called before any parse(); help is rendered instead."""

    code = FaultCode.NOT_PARSED


__all__ = (
    "FaultCode",
    "ErrorKind",
    "DefinitionError",
    "LitargsWarning",
    "NotParsedWarning",
)
