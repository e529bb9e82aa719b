# python
"""
Tests for the utility helpers (Unset sentinel, coalesce, rename, mirror, pluralize).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from types import MappingProxyType
from unittest import TestCase

from litargs.utils import *


class UnsetTest(TestCase):
    """Semantic guarantees of the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")
        self.assertIsNot(Unset, None)

    def testNotSubclassable(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testUnionWithTypes(self):
        self.assertTrue(isinstance("x", str | Unset))
        self.assertTrue(isinstance(Unset, str | Unset))
        self.assertFalse(isinstance(1, str | Unset))


class HelpersTest(TestCase):
    """Behavior of coalesce, rename, mirror and pluralize."""

    def testCoalescePreservesFalseyValues(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertIsNone(coalesce(Unset))

    def testRenameBothForms(self):
        def f():
            pass

        self.assertIs(rename(f, "g"), f)
        self.assertEqual((f.__name__, f.__qualname__), ("g", "g"))

        @rename("h")
        def k():
            pass

        self.assertEqual(k.__name__, "h")

    def testRenameRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(1, "x")
        with self.assertRaises(TypeError):
            rename()

    def testMirrorFreezesContainers(self):
        class Holder:
            items = mirror("items")
            table = mirror("table")
            pair = mirror("pair")

            def __init__(self):
                self._items = [1, 2]
                self._table = {"a": 1}
                self._pair = (1, 2)

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertIsInstance(holder.table, MappingProxyType)
        self.assertIs(holder.pair, holder._pair)
        with self.assertRaises(AttributeError):
            holder.items = []

    def testPluralize(self):
        self.assertEqual(pluralize("argument", 1), "1 argument")
        self.assertEqual(pluralize("argument", 0), "0 arguments")
        self.assertEqual(pluralize("label", 3), "3 labels")
        with self.assertRaises(TypeError):
            pluralize("argument", "3")


if __name__ == '__main__':
    unittest.main()
