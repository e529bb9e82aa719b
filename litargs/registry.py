"""
Litargs registry: the command table behind a parser instance.

Model
- Commands live in a list indexed by an integer handle.
- Every name (primary or alias) maps to a handle, so an alias is an explicit
  second lookup name for the very same CommandSpec, never a copy.
- The focus is the handle of the most recently registered user command; options
  and aliases always apply to it. The built-in `help` command occupies handle 0
  and never receives focus.
- Registration is a phase: close() seals the registry, and every later
  register_* call raises DefinitionError.

All checks run before any mutation, so a failed registration leaves the
registry exactly as it was.
"""
from .faults import DefinitionError
from .specs import CommandSpec, OptionSpec, MARKER
from .utils import *

HELP = "help"


class Registry:
    """
    Named commands, their aliases, and the implicit registration focus.

    The constructor installs the built-in `help` pseudo-command (arity 0) bound
    to `helper`, which the front-end uses to render help.
    """

    def __init__(self, helper=Unset):
        self._table = []
        self._names = {}
        self._focus = None
        self._closed = False
        self._install(CommandSpec(HELP, 0, "show this help message", helper))

    @property
    def closed(self):
        return self._closed

    @property
    def focus(self):
        """The focused CommandSpec, or None before the first user command."""
        return self._table[self._focus] if self._focus is not None else None

    def _guard(self, action, /):
        if self._closed:
            raise DefinitionError(f"cannot {action}: registration is closed once parsing has started")

    def _claim(self, name, /):
        if name in self._names:
            raise DefinitionError(f"redefinition of command {name!r}")

    def _install(self, command, /):
        self._table.append(command)
        self._names[command.name] = handle = len(self._table) - 1
        return handle

    def register_command(self, name, argument_count, description=Unset, handler=Unset):
        """
        Add a command and move the focus to it.

        Raises
        - DefinitionError: closed registry, name already taken (command or alias),
          marker-prefixed name, or arity/label mismatch.
        - TypeError: malformed name, arity, description or handler.
        """
        self._guard("register command %r" % (name,))
        command = CommandSpec(name, argument_count, description, handler)
        self._claim(command.name)
        self._focus = self._install(command)
        return command

    def register_option(self, name, argument_count, description=Unset):
        """
        Add an option to the focused command.

        Raises
        - DefinitionError: closed registry, no focused user command, option name
          already taken on that command, marker-prefixed name, arity/label mismatch.
        - TypeError: malformed name, arity or description.
        """
        self._guard("register option %r" % (name,))
        if self._focus is None:
            raise DefinitionError(f"no command is specified for option {name!r}")
        option = OptionSpec(name, argument_count, description)
        self.focus._push_option(option)  # NOQA: registry is the only writer of options
        return option

    def register_alias(self, name):
        """
        Bind `name` to the focused command's handle.

        Raises
        - DefinitionError: closed registry, no focused user command, name already
          taken, marker-prefixed or malformed name.
        - TypeError: non-string name.
        """
        self._guard("register alias %r" % (name,))
        if not isinstance(name, str):
            raise TypeError("alias name must be a string")
        elif not name or name != name.strip() or len(name.split()) != 1:
            raise DefinitionError(f"alias name must be a non-empty word, got {name!r}")
        elif name.startswith(MARKER):
            raise DefinitionError(f"alias name cannot start with {MARKER!r}, got {name!r}")
        if self._focus is None:
            raise DefinitionError(f"no command is specified for alias {name!r}")
        self._claim(name)
        self._names[name] = self._focus
        return self.focus

    def close(self):
        """End the registration phase (idempotent)."""
        self._closed = True

    def lookup(self, name, /):
        """Exact, case-sensitive lookup by name or alias; None when absent."""
        try:
            return self._table[self._names[name]]
        except KeyError:
            return None

    def aliases(self, command, /):
        """Alternative names bound to `command`, in registration order."""
        return tuple(name for name, handle in self._names.items()
                     if self._table[handle] is command and name != command.name)

    def commands(self):
        """Unique commands in registration order (aliases are not repeated)."""
        return tuple(self._table)

    def __contains__(self, name):
        return name in self._names

    def __len__(self):
        return len(self._table)


__all__ = (
    "HELP",
    "Registry",
)
