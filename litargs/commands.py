"""
Litargs front-end: declare commands, parse an argument line, dispatch.

What this module provides
- Litargs: a parser instance owning its own registry (with the built-in `help`
  command) and the result of its last parse. Independent instances never share
  state.
  • command()/option()/alias(): fluent registration (each returns the instance).
  • parse(raw): tokenize + match; stores and returns an immutable ParseResult.
  • execute(): call the resolved handler, or render help when the last parse
    is missing or has errors (never raises for user input).
  • render()/help(): build/print the help text with rich.

Quick start
    from litargs import Litargs

    cli = Litargs(colorful=True)
    cli.command("move", 2, {"args": ["source", "destination"], "detail": "Move a file"},
                lambda args, options: print(args, options))
    cli.alias("m").option("cp", 0, {"detail": "copy"})
    cli.parse("move a.txt b.txt --cp")
    cli.execute()  # ['a.txt', 'b.txt'] {'cp': True}

Help layout (plain text; tabs separate columns)
    name[, alias]\t[arg1, arg2]\tdetail
    \tOptions:
    \t-name\t[arg]\tdetail

    Errors:
    \tReferenceError: no defined command 'x' [11101]

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- Define __prog__ in __main__ to change the program title of the fancy panel.
"""
import os.path
import sys
import warnings
from collections import defaultdict

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .faults import NotParsedWarning
from .matcher import match
from .registry import Registry
from .tokens import tokenize
from .utils import *


class Litargs:
    """
    Declarative command-line parser and dispatcher.

    Runtime flags (keyword-only, default False)
    - colorful: style help output with the palette.
    - fancy: wrap help output in a rich Panel titled with the program name.
    - stderr: print help to stderr; when Unset, stderr is used only if the
      last parse produced errors.

    Lifecycle
    - Registration phase: command()/option()/alias() calls. option() and alias()
      always apply to the most recently registered command.
    - The first parse() closes registration; later registrations raise
      DefinitionError.
    """

    def __init__(self, *, colorful=Unset, fancy=Unset, stderr=Unset):
        for name, flag in (("colorful", colorful), ("fancy", fancy), ("stderr", stderr)):
            if not isinstance(flag, bool | Unset):
                raise TypeError(f"litargs {name!r} must be a boolean")
        self._colorful = coalesce(colorful, False)
        self._fancy = coalesce(fancy, False)
        self._stderr = stderr
        self._registry = Registry(rename(lambda args, options: self.help(), "help"))
        self._result = Unset

    colorful = mirror("colorful")
    fancy = mirror("fancy")
    registry = mirror("registry")

    @property
    def result(self):
        """The last ParseResult, or None before the first parse()."""
        return coalesce(self._result)

    @property
    def valid(self):
        """True iff a parse happened and it produced no errors."""
        return self._result is not Unset and self._result.valid

    def __rich_repr__(self):
        yield "commands", tuple(command.name for command in self._registry.commands())
        yield "colorful", self._colorful
        yield "fancy", self._fancy
        yield "result", self.result

    def __repr__(self):
        return "litargs(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    # ── Registration ─────────────────────────────────────────────────────────

    def command(self, name, argument_count, description=Unset, handler=Unset, /):
        """
        Register a command and focus it.

        Parameters
        - name: str, unique, must not start with "-".
        - argument_count: int >= 0, fixed positional arity.
        - description: str | {"detail": str, "args": [labels]} | Description.
        - handler: callable(args: list[str], options: dict[str, tuple | bool]).

        Returns
        - self (chainable).
        """
        self._registry.register_command(name, argument_count, description, handler)
        return self

    def option(self, name, argument_count, description=Unset, /):
        """Register an option on the most recently registered command; returns self."""
        self._registry.register_option(name, argument_count, description)
        return self

    def alias(self, name, /):
        """Bind another name to the most recently registered command; returns self."""
        self._registry.register_alias(name)
        return self

    # ── Parsing & dispatch ───────────────────────────────────────────────────

    def parse(self, raw=Unset, /):
        """
        Parse an argument line into a ParseResult and remember it.

        Parameters
        - raw: str | Unset. Unset → the process arguments joined by spaces.

        Returns
        - ParseResult (also available as self.result).
        """
        if raw is Unset:
            raw = " ".join(sys.argv[1:])
        elif not isinstance(raw, str):
            raise TypeError("parse() argument must be a string")
        self._registry.close()
        self._result = match(self._registry, *tokenize(raw))
        return self._result

    def execute(self):
        """
        Dispatch the last parse.

        - no parse yet → NotParsedWarning, then help; returns None.
        - parse with errors → help (including the errors); returns None.
        - otherwise → handler(list(args), {option: args}) with last-write-wins
          folding of repeated options; returns the handler's result.
        """
        if self._result is Unset:
            warnings.warn(NotParsedWarning(
                f"execute() was called before parse(); showing help instead [{NotParsedWarning.code.normalize()}]"
            ), stacklevel=2)
            self.help()
            return None
        if not self._result.valid:
            self.help()
            return None
        command = self._registry.lookup(self._result.command.name)
        return command.handle(list(self._result.args), self._result.options())

    # ── Help ─────────────────────────────────────────────────────────────────

    def _styler(self):
        styles = defaultdict(str, {
            "command-name": "bold #FF4D94",  # MAGENTA-PINK → commands pop
            "option-name": "bold #00E6FF",  # CYAN for value-bearing options
            "flag-name": "bold #22C55E",  # GREEN for flags
            "labels": "bold #FFD600",  # AMBER argument labels
            "detail": "#9CA3AF",  # Muted gray descriptions
            "options-label": "bold #FFFFFF",
            "errors-label": "bold #EF4444",
            "error-kind": "bold #FF4DA6",
            "error-detail": "#C8C8D0",
            "error-code": "bold #00E5FF",
            "panel-title": "bold #FF4D94",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if self._colorful else ""

        return styler

    def render(self):
        """
        Build the help text: every command once (aliases listed beside the
        name), then the errors of the last parse, if any.
        """
        styler = self._styler()
        text = Text("\n").join(
            command.help(styler, self._registry.aliases(command))
            for command in self._registry.commands()
        )
        if self._result is not Unset and self._result.errors:
            text.append("\n\n").append("Errors:", styler("errors-label"))
            for error in self._result.errors:
                text.append("\n\t").append(error.render(styler))
        return text

    def help(self):
        """
        Print the help text (see render()).

        Plain mode (neither colorful nor fancy) writes the text verbatim, tabs
        included; styled modes go through rich, which aligns the columns.
        """
        stderr = coalesce(self._stderr, self._result is not Unset and not self._result.valid)
        console = Console(stderr=stderr, highlight=False)

        renderable = self.render()
        if not (self._colorful or self._fancy):
            console.file.write(renderable.plain + "\n")
            return
        if self._fancy:
            styler = self._styler()
            prog = getattr(__import__("__main__"), "__prog__", os.path.basename(sys.argv[0]))
            renderable = Panel(
                renderable,
                title=Text.assemble("[", " ", f"{prog} HELP".upper(), " ", "]", style=styler("panel-title")),
                title_align="left",
            )
        console.print(renderable)


__all__ = (
    "Litargs",
)
