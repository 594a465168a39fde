"""
Registry behavioral tests (declaration, aliases, classification).

Scope
- Validate the seeded help switch and the helper=False opt-out.
- Validate duplicate detection across switches, flags and aliases (single and bulk).
- Validate alias mapping: unknown targets, transactional bulk mapping, resolution.
- Validate that switches and flags stay disjoint and that accessors are copies.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from shargs import Registry, DuplicateIdentifierError, UnknownTargetError, HELP_SWITCH, HELP_ALIAS


class TestRegistrySeeding(TestCase):
    """The default help switch is declared exactly once, at construction."""

    def testDefaultRegistryDeclaresHelpSwitch(self):
        registry = Registry()
        self.assertEqual(registry.switches, {HELP_SWITCH: "Presents help documentation."})
        self.assertEqual(registry.aliases, {HELP_ALIAS: HELP_SWITCH})
        self.assertTrue(registry.is_switch("--help"))

    def testHelperOptOutStartsEmpty(self):
        registry = Registry(helper=False)
        self.assertEqual(registry.switches, {})
        self.assertEqual(registry.flags, {})
        self.assertEqual(registry.aliases, {})
        self.assertFalse(registry.is_switch("-h"))

    def testSeedingIsPerInstance(self):
        first, second = Registry(), Registry()
        first.declare_switch("-e", "extra")
        self.assertFalse(second.is_switch("-e"))
        self.assertEqual(len(second.switches), 1)


class TestRegistryDeclaration(TestCase):
    """Declaring switches and flags, one at a time and in bulk."""

    def setUp(self):
        self.registry = Registry()

    def testDeclareSwitchAndFlag(self):
        self.registry.declare_switch("-e", "extra").declare_flag("-f", "force")
        self.assertTrue(self.registry.is_switch("-e"))
        self.assertFalse(self.registry.is_flag("-e"))
        self.assertTrue(self.registry.is_flag("-f"))
        self.assertFalse(self.registry.is_switch("-f"))

    def testDuplicateSwitchRaises(self):
        self.registry.declare_switch("-e", "extra")
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.declare_switch("-e", "again")
        self.assertEqual(self.registry.switches["-e"], "extra")

    def testDuplicateFlagRaises(self):
        self.registry.declare_flag("-f", "force")
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.declare_flag("-f", "again")

    def testFlagCannotReuseSwitchIdentifier(self):
        self.registry.declare_switch("-x", "switch")
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.declare_flag("-x", "flag")
        self.assertFalse(self.registry.is_flag("-x"))

    def testSwitchCannotReuseAliasIdentifier(self):
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.declare_switch("--help", "shadowing the alias")

    def testBulkDeclareMerges(self):
        self.registry.declare_switches({"-a": "alpha", "-b": "beta"})
        self.registry.declare_flags({"-c": "gamma"})
        self.assertEqual(list(self.registry.switches), ["-h", "-a", "-b"])
        self.assertEqual(self.registry.flags, {"-c": "gamma"})

    def testBulkDeclareCollisionLeavesRegistryUntouched(self):
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.declare_switches({"-a": "alpha", "-h": "collides"})
        self.assertFalse(self.registry.is_switch("-a"))

    def testBulkDeclareFlagsCollidingWithSwitch(self):
        self.registry.declare_switch("-e", "extra")
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.declare_flags({"-q": "quiet", "-e": "collides"})
        self.assertFalse(self.registry.is_flag("-q"))

    def testDuplicateDetectedRegardlessOfOrder(self):
        self.registry.declare_flags({"-f": "force"})
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.declare_flag("-f", "force")
        registry = Registry()
        registry.declare_flag("-f", "force")
        with self.assertRaises(DuplicateIdentifierError):
            registry.declare_flags({"-f": "force"})

    def testIdentifiersAreCaseSensitive(self):
        self.registry.declare_switch("-e", "lower").declare_switch("-E", "upper")
        self.assertTrue(self.registry.is_switch("-E"))
        self.assertEqual(self.registry.switches["-E"], "upper")

    def testNonStringIdentifierRejected(self):
        with self.assertRaises(TypeError):
            self.registry.declare_switch(1, "number")

    def testEmptyIdentifierRejected(self):
        with self.assertRaises(ValueError):
            self.registry.declare_flag("  ", "blank")

    def testNonStringHelpRejected(self):
        with self.assertRaises(TypeError):
            self.registry.declare_flag("-f", None)

    def testBulkDeclareRequiresMapping(self):
        with self.assertRaises(TypeError):
            self.registry.declare_switches([("-a", "alpha")])


class TestRegistryAliases(TestCase):
    """Alias mapping, resolution and classification through aliases."""

    def setUp(self):
        self.registry = Registry()
        self.registry.declare_switch("-e", "extra").declare_flag("-f", "force")

    def testAliasResolvesToTarget(self):
        self.registry.map_alias("--extra", "-e")
        self.assertTrue(self.registry.is_alias("--extra"))
        self.assertEqual(self.registry.resolve_alias("--extra"), "-e")
        self.assertTrue(self.registry.is_switch("--extra"))
        self.assertFalse(self.registry.is_flag("--extra"))

    def testAliasClassificationMatchesTarget(self):
        self.registry.map_aliases(["--extra", "/e"], "-e").map_aliases(["--force"], "-f")
        for alias, target in self.registry.aliases.items():
            self.assertTrue(self.registry.is_alias(alias))
            self.assertEqual(self.registry.resolve_alias(alias), target)
            self.assertEqual(self.registry.is_switch(alias), self.registry.is_switch(target))
            self.assertEqual(self.registry.is_flag(alias), self.registry.is_flag(target))

    def testUnknownTargetRaises(self):
        with self.assertRaises(UnknownTargetError) as context:
            self.registry.map_alias("--nope", "-n")
        self.assertEqual(context.exception.target, "-n")
        self.assertFalse(self.registry.is_alias("--nope"))

    def testAliasOfAliasRejected(self):
        with self.assertRaises(UnknownTargetError):
            self.registry.map_alias("--assist", "--help")

    def testAliasCannotShadowDeclaredIdentifier(self):
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.map_alias("-f", "-e")
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.map_alias("--help", "-e")
        self.assertEqual(self.registry.resolve_alias("--help"), "-h")

    def testMapAliasesIsTransactional(self):
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.map_aliases(["--extra", "--help", "/e"], "-e")
        self.assertFalse(self.registry.is_alias("--extra"))
        self.assertFalse(self.registry.is_alias("/e"))

    def testMapAliasesRejectsRepeatedAliasInOneCall(self):
        with self.assertRaises(DuplicateIdentifierError):
            self.registry.map_aliases(["--extra", "--extra"], "-e")
        self.assertFalse(self.registry.is_alias("--extra"))

    def testMapAliasesRejectsBareString(self):
        with self.assertRaises(TypeError):
            self.registry.map_aliases("--extra", "-e")

    def testResolveUnknownReturnsNone(self):
        self.assertIsNone(self.registry.resolve_alias("-e"))
        self.assertIsNone(self.registry.resolve_alias("--missing"))

    def testUnknownIdentifierIsNothing(self):
        self.assertFalse(self.registry.is_switch("--missing"))
        self.assertFalse(self.registry.is_flag("--missing"))
        self.assertFalse(self.registry.is_alias("--missing"))
        self.assertNotIn("--missing", self.registry)

    def testAliasesOfKeepsDeclarationOrder(self):
        self.registry.map_aliases(["--extra", "/e", "-extra"], "-e")
        self.assertEqual(self.registry.aliases_of("-e"), ("--extra", "/e", "-extra"))
        self.assertEqual(self.registry.aliases_of("-f"), ())

    def testCanonical(self):
        self.registry.map_alias("--force", "-f")
        self.assertEqual(self.registry.canonical("--force"), "-f")
        self.assertEqual(self.registry.canonical("-f"), "-f")


class TestRegistryAccessors(TestCase):
    """Accessors return copies; snapshots are independent."""

    def testAccessorsAreCopies(self):
        registry = Registry()
        switches = registry.switches
        switches["-q"] = "sneaky"
        registry.aliases["--sneaky"] = "-h"
        self.assertFalse(registry.is_switch("-q"))
        self.assertFalse(registry.is_alias("--sneaky"))

    def testSnapshotIsIndependent(self):
        registry = Registry()
        snapshot = registry.snapshot()
        registry.declare_switch("-e", "extra")
        snapshot.declare_flag("-f", "force")
        self.assertFalse(snapshot.is_switch("-e"))
        self.assertFalse(registry.is_flag("-f"))

    def testRepr(self):
        self.assertIn("'-h'", repr(Registry()))


if __name__ == "__main__":
    unittest.main()
