"""
Litargs matcher: associate tokens with command and option slots.

Algorithm
1. resolve the command name against the registry (exact, case-sensitive).
   unresolved → a single ReferenceError and no pieces.
2. partition the tokens into runs: every marker token opens a run; value
   tokens before the first marker form the leading (positional) run.
3. walk the marker runs in order:
   • unknown option   → ReferenceError and piece (name, False); its values are dropped.
   • repeated option  → DuplicateError; the occurrence still yields its own piece.
   • flag (arity 0)   → piece (name, True); values after the flag are orphans and
                        join the positional pool, after the leading run.
   • arity M          → piece (name, first M values padded with ""); surplus
                        values of the run are unused and raise nothing.
4. positional pool → the first N values padded with ""; more than N values
   raise one ArgumentError (the surplus is dropped from the piece).

Parsing never raises on user input: every problem becomes an ErrorPiece.
"""
from .faults import ErrorKind, FaultCode
from .results import ParsePiece, ErrorPiece, ParseResult
from .specs import MARKER
from .utils import pluralize


def partition(tokens, /):
    """
    Split tokens into (leading, runs).

    - leading: tuple of value texts before the first marker.
    - runs: tuple of (marker_text, values) for each marker, in token order.
    """
    leading = []
    runs = []
    for token in tokens:
        if token.marker:
            runs.append((token.text, []))
        elif runs:
            runs[-1][1].append(token.text)
        else:
            leading.append(token.text)
    return tuple(leading), tuple((marker, tuple(values)) for marker, values in runs)


def unmark(text, /):
    """Strip the long ("--") or short ("-") marker prefix from an option token."""
    if text.startswith(MARKER * 2):
        return text[2:]
    if text.startswith(MARKER):
        return text[1:]
    return text


def pad(values, count, /):
    """Exactly `count` values: truncated, or right-padded with "" placeholders."""
    values = tuple(values[:count])
    return values + ("",) * (count - len(values))


def _unresolved(name, /):
    if not name:
        return ErrorPiece(ErrorKind.REFERENCE, "nothing specified", "", FaultCode.NOTHING_SPECIFIED)
    return ErrorPiece(ErrorKind.REFERENCE, "no defined command %r" % name, name, FaultCode.UNKNOWN_COMMAND)


def match(registry, name, tokens, /):
    """
    Build the ParseResult for command candidate `name` and its `tokens`.

    The command piece is named after the resolved command's primary name, so an
    alias and its command produce identical results.
    """
    command = registry.lookup(name)
    if command is None:
        return ParseResult(errors=(_unresolved(name),))

    leading, runs = partition(tokens)
    positional = list(leading)
    options = []
    errors = []
    seen = set()

    for marker, values in runs:
        option = command.option(candidate := unmark(marker))

        if option is None:
            errors.append(ErrorPiece(
                ErrorKind.REFERENCE,
                "no defined %s option %r" % (command.name, marker),
                marker,
                FaultCode.UNKNOWN_OPTION,
            ))
            options.append(ParsePiece(candidate, False))
            continue

        if option.name in seen:
            errors.append(ErrorPiece(
                ErrorKind.DUPLICATE,
                "duplicate %s option %r" % (command.name, marker),
                marker,
                FaultCode.DUPLICATED_OPTION,
            ))
        seen.add(option.name)

        if option.flag:
            # a flag never consumes values; they fall back to the positional pool
            positional.extend(values)
            options.append(ParsePiece(option.name, True))
        else:
            options.append(ParsePiece(option.name, pad(values, option.argument_count)))

    if len(positional) > command.argument_count:
        errors.insert(0, ErrorPiece(
            ErrorKind.ARGUMENT,
            "too many arguments for command %r, expected %s, have %s" % (
                command.name,
                pluralize("argument", command.argument_count),
                pluralize("argument", len(positional)),
            ),
            command.name,
            FaultCode.TOO_MANY_ARGUMENTS,
        ))

    return ParseResult(ParsePiece(command.name, pad(positional, command.argument_count)), options, errors)


__all__ = (
    "partition",
    "unmark",
    "pad",
    "match",
)
