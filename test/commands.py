# python
"""
Litargs front-end behavioral tests (fluent registration, parse, execute, help).

Scope
- Validate the fluent API and the closed registration phase after parse().
- Validate dispatch to handlers with folded options.
- Validate fail-soft help rendering on invalid input and before any parse.
- Validate help layout (plain text) and instance isolation.

Conventions
- Test method names follow CamelCase per project convention.
- Console output is captured with contextlib redirects.
"""

from __future__ import annotations

import contextlib
import io
import sys
import unittest
import warnings
from unittest import TestCase
from unittest import mock

from litargs import Litargs, DefinitionError, NotParsedWarning, ParsePiece, ErrorKind


def build(received):
    def move(args, options):
        received.append((args, options))
        return "moved"

    return Litargs().command(
        "move",
        2,
        {"args": ["source", "destination"], "detail": "Move a file"},
        move,
    ).alias("m").option("cp", 0, {"detail": "copy"})


class TestParseAndExecute(TestCase):
    """Behavioral tests for parse() and execute()."""

    def setUp(self):
        self.received = []
        self.cli = build(self.received)

    def testFluentRegistrationReturnsInstance(self):
        cli = Litargs()
        self.assertIs(cli.command("list", 0), cli)
        self.assertIs(cli.alias("ls"), cli)
        self.assertIs(cli.option("all", 0), cli)

    def testMoveScenarioDispatches(self):
        result = self.cli.parse("move a.txt b.txt --cp")
        self.assertEqual(result.command, ParsePiece("move", ("a.txt", "b.txt")))
        self.assertEqual(result.option, (ParsePiece("cp", True),))
        self.assertTrue(self.cli.valid)
        self.assertEqual(self.cli.execute(), "moved")
        self.assertEqual(self.received, [(["a.txt", "b.txt"], {"cp": True})])

    def testShortSupplyDispatchesPadded(self):
        self.cli.parse("move a.txt")
        self.cli.execute()
        self.assertEqual(self.received, [(["a.txt", ""], {})])

    def testAliasDispatchesToSameHandler(self):
        self.cli.parse("m a b")
        self.cli.execute()
        self.assertEqual(self.received, [(["a", "b"], {})])

    def testUnknownCommandRendersHelpInsteadOfHandler(self):
        result = self.cli.parse("nosuch x")
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].kind, ErrorKind.REFERENCE)
        self.assertFalse(self.cli.valid)
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr), contextlib.redirect_stdout(io.StringIO()):
            self.assertIsNone(self.cli.execute())
        self.assertEqual(self.received, [])
        self.assertIn("no defined command 'nosuch'", stderr.getvalue())
        self.assertIn("move", stderr.getvalue())

    def testTooManyArgumentsSuppressesHandler(self):
        self.cli.parse("move a b c")
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertIsNone(self.cli.execute())
        self.assertEqual(self.received, [])

    def testDuplicateOptionSuppressesHandler(self):
        result = self.cli.parse("move a b --cp --cp")
        self.assertEqual(result.errors[0].kind, ErrorKind.DUPLICATE)
        with contextlib.redirect_stderr(io.StringIO()):
            self.cli.execute()
        self.assertEqual(self.received, [])

    def testExecuteBeforeParseWarnsAndRendersHelp(self):
        stdout = io.StringIO()
        with warnings.catch_warnings(record=True) as caught, contextlib.redirect_stdout(stdout):
            warnings.simplefilter("always")
            self.assertIsNone(self.cli.execute())
        self.assertTrue(any(issubclass(w.category, NotParsedWarning) for w in caught))
        self.assertIn("move", stdout.getvalue())
        self.assertEqual(self.received, [])

    def testNotParsedWarningCarriesItsCode(self):
        with warnings.catch_warnings(record=True) as caught, contextlib.redirect_stdout(io.StringIO()):
            warnings.simplefilter("always")
            self.cli.execute()
        message = next(str(w.message) for w in caught if issubclass(w.category, NotParsedWarning))
        self.assertTrue(message.endswith("[12101]"))

    def testHelpCommandRendersHelp(self):
        result = self.cli.parse("help")
        self.assertTrue(result.valid)
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            self.assertIsNone(self.cli.execute())
        self.assertIn("Move a file", stdout.getvalue())

    def testHelpCommandRejectsArguments(self):
        result = self.cli.parse("help move")
        self.assertEqual(result.errors[0].kind, ErrorKind.ARGUMENT)

    def testRegistrationClosedAfterParse(self):
        self.cli.parse("move a b")
        with self.assertRaises(DefinitionError):
            self.cli.command("list", 0)
        with self.assertRaises(DefinitionError):
            self.cli.option("force", 0)

    def testEachParseReplacesTheLastResult(self):
        first = self.cli.parse("nosuch")
        second = self.cli.parse("move a b")
        self.assertIsNot(first, second)
        self.assertIs(self.cli.result, second)
        self.assertTrue(self.cli.valid)

    def testDefaultInputIsProcessArguments(self):
        with mock.patch.object(sys, "argv", ["prog", "move", "a.txt", "b.txt", "--cp"]):
            result = self.cli.parse()
        self.assertEqual(result.command.args, ("a.txt", "b.txt"))
        self.assertEqual(result.options(), {"cp": True})

    def testNonStringInputRejected(self):
        with self.assertRaises(TypeError):
            self.cli.parse(["move", "a", "b"])

    def testHandlerExceptionsPropagate(self):
        def boom(args, options):
            raise RuntimeError("boom")

        cli = Litargs().command("boom", 0, "explode", boom)
        cli.parse("boom")
        with self.assertRaises(RuntimeError):
            cli.execute()


class TestInstances(TestCase):
    """Independent parser instances never share state."""

    def testRegistriesAreIndependent(self):
        one = Litargs().command("move", 2)
        two = Litargs().command("list", 0)
        self.assertTrue(one.parse("move a b").valid)
        self.assertFalse(two.parse("move a b").valid)
        self.assertIsNone(Litargs().result)

    def testSameCommandNameInTwoInstances(self):
        Litargs().command("move", 2)
        Litargs().command("move", 2)

    def testDuplicateCommandRejected(self):
        cli = Litargs().command("move", 2)
        with self.assertRaises(DefinitionError):
            cli.command("move", 2)

    def testFlagsMustBeBooleans(self):
        with self.assertRaises(TypeError):
            Litargs(colorful="yes")
        self.assertFalse(Litargs().colorful)
        self.assertTrue(Litargs(fancy=True).fancy)


class TestHelp(TestCase):
    """Behavioral tests for render() and help()."""

    def setUp(self):
        self.cli = build([])

    def testRenderLayout(self):
        self.assertEqual(
            self.cli.render().plain,
            "help\t\t\tshow this help message\n"
            "move, m\t[source, destination]\tMove a file\n"
            "\tOptions:\n"
            "\t--cp\t\t\tcopy"
        )

    def testRenderIncludesErrors(self):
        self.cli.parse("move a b c -zip")
        self.assertTrue(self.cli.render().plain.endswith(
            "\n\nErrors:\n"
            "\tArgumentError: too many arguments for command 'move', expected 2 arguments, have 3 arguments [11121]\n"
            "\tReferenceError: no defined move option '-zip' [11112]"
        ))

    def testValidParseRendersNoErrorSection(self):
        self.cli.parse("move a b")
        self.assertNotIn("Errors:", self.cli.render().plain)

    def testColorfulRenderKeepsPlainText(self):
        cli = Litargs(colorful=True).command("list", 0, "List files")
        self.assertEqual(cli.render().plain, "help\t\t\tshow this help message\nlist\t\t\tList files")
        self.assertTrue(cli.render().spans)

    def testPlainRenderHasNoStyles(self):
        self.assertFalse([span for span in self.cli.render().spans if span.style])

    def testHostPaletteOverride(self):
        cli = Litargs(colorful=True).command("list", 0, "List files")
        with mock.patch("__main__.__styles__", {"command-name": "italic red"}, create=True):
            styles = [span.style for span in cli.render().spans]
        self.assertIn("italic red", styles)
        self.assertNotIn("bold #FF4D94", styles)
        self.assertIn("bold #FF4D94", [span.style for span in cli.render().spans])

    def testHelpGoesToStdoutWhenValid(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            self.cli.help()
        self.assertIn("Move a file", stdout.getvalue())

    def testPlainHelpKeepsTabs(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            self.cli.help()
        self.assertEqual(stdout.getvalue(), self.cli.render().plain + "\n")
        self.assertIn("move, m\t[source, destination]\tMove a file\n", stdout.getvalue())

    def testInvalidPlainHelpKeepsTabsOnStderr(self):
        self.cli.parse("move a b c")
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            self.cli.help()
        self.assertIn("\tArgumentError: too many arguments", stderr.getvalue())

    def testExplicitStderrFlag(self):
        cli = Litargs(stderr=True).command("list", 0, "List files")
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            cli.help()
        self.assertIn("List files", stderr.getvalue())

    def testFancyHelpUsesPanelTitle(self):
        cli = Litargs(fancy=True).command("list", 0, "List files")
        stdout = io.StringIO()
        with mock.patch("__main__.__prog__", "tool", create=True), contextlib.redirect_stdout(stdout):
            cli.help()
        self.assertIn("TOOL HELP", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
