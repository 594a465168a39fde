r"""
Shargs registry: declared switches, flags and aliases.

Overview
- Switch: identifier that expects exactly one following token as its value (e.g., -e value).
- Flag: identifier whose presence alone is the signal (e.g., -f).
- Alias: alternate identifier redirecting to a canonical switch or flag (e.g., --extra → -e).

Invariants
- One namespace: an identifier is a switch, a flag or an alias, never two of them.
- Aliases point at canonical identifiers only, so they are acyclic by construction.
- Identifiers are case-sensitive exact strings; they are validated but never normalized.
- Additive only: there is no removal API. Parsers and binders treat the registry as
  read-only once parsing begins.

Seeding
- Registry() declares the "-h" switch and maps "--help" onto it, once, at construction.
  Pass helper=False to start from an empty registry.

Quick example:
    >>> registry = Registry()
    >>> registry.declare_switch("-e", "extra value").declare_flag("-f", "force")
    >>> registry.map_aliases(["--extra", "/e"], "-e")
    >>> registry.is_switch("--extra")
    True
"""
import copy
import functools
import operator
from collections.abc import Iterable, Mapping

from .faults import DuplicateIdentifierError, UnknownTargetError
from .logger import logger
from .utils import mirror

HELP_SWITCH = "-h"
HELP_ALIAS = "--help"
HELP_TEXT = "Presents help documentation."


def _sanitize_identifier(identifier, /, *, role="identifier"):
    """
    Internal: validate one identifier before it reaches a mapping.

    Raises
    - TypeError: when the identifier is not a string.
    - ValueError: when the identifier is empty or whitespace-only.
    """
    if not isinstance(identifier, str):
        raise TypeError(f"{role} must be a string, not {type(identifier).__name__}")
    elif not identifier.strip():
        raise ValueError(f"{role} cannot be an empty-string")
    return identifier


def _sanitize_help(help, /):
    if not isinstance(help, str):
        raise TypeError(f"help text must be a string, not {type(help).__name__}")
    return help


class Registry:
    """
    Holds the declared switches, flags and aliases, and answers classification queries.

    Properties
    - switches / flags / aliases: fresh dict copies in declaration order; mutating them
      never changes the registry.

    Chaining
    - declare_* and map_* return the registry itself, so setup reads as one expression.
    """

    __introspectable__ = (
        "switches",
        "flags",
        "aliases",
    )

    switches = mirror("switches")
    flags = mirror("flags")
    aliases = mirror("aliases")

    def __init__(self, *, helper=True):
        self._switches = {}
        self._flags = {}
        self._aliases = {}
        if helper:
            self.declare_switch(HELP_SWITCH, HELP_TEXT)
            self.map_alias(HELP_ALIAS, HELP_SWITCH)

    def _claim(self, identifier, /):
        """
        Internal: fail when the identifier is already known in any of the three roles.
        """
        for role, mapping in (("switch", self._switches), ("flag", self._flags), ("alias", self._aliases)):
            if identifier in mapping:
                raise DuplicateIdentifierError(
                    f"{identifier!r} is already declared as a {role}",
                    identifier=identifier,
                    role=role,
                    hint="identifiers must be unique across switches, flags and aliases",
                )

    def _declare(self, mapping, role, entries, /):
        """
        Internal: validate every entry first, then merge; a collision leaves the registry untouched.
        """
        staged = {}
        for identifier, help in entries:
            _sanitize_identifier(identifier, role=f"{role} identifier")
            _sanitize_help(help)
            self._claim(identifier)
            if identifier in staged:
                raise DuplicateIdentifierError(
                    f"{identifier!r} is declared twice in the same call",
                    identifier=identifier,
                    role=role,
                )
            staged[identifier] = help
        mapping.update(staged)
        for identifier in staged:
            logger.debug("declared %s %r", role, identifier)
        return self

    def declare_switch(self, identifier, help, /):
        """
        Declare a switch: an identifier that takes the following token as its value.

        Raises DuplicateIdentifierError when the identifier is already known.
        """
        return self._declare(self._switches, "switch", [(identifier, help)])

    def declare_flag(self, identifier, help, /):
        """
        Declare a flag: an identifier whose presence is the whole signal.

        Raises DuplicateIdentifierError when the identifier is already known.
        """
        return self._declare(self._flags, "flag", [(identifier, help)])

    def declare_switches(self, switches, /):
        """
        Merge a mapping of identifier → help text into the switches (all-or-nothing).
        """
        if not isinstance(switches, Mapping):
            raise TypeError("declare_switches() argument must be a mapping")
        return self._declare(self._switches, "switch", switches.items())

    def declare_flags(self, flags, /):
        """
        Merge a mapping of identifier → help text into the flags (all-or-nothing).
        """
        if not isinstance(flags, Mapping):
            raise TypeError("declare_flags() argument must be a mapping")
        return self._declare(self._flags, "flag", flags.items())

    def _check_target(self, target, /):
        _sanitize_identifier(target, role="alias target")
        if target not in self._switches and target not in self._flags:
            raise UnknownTargetError(
                f"cannot assign an alias to {target!r}, which is neither a declared switch nor a declared flag",
                identifier=target,
                target=target,
                hint="declare the switch or flag before mapping aliases onto it",
            )

    def map_alias(self, alias, target, /):
        """
        Record alias → target.

        Raises
        - UnknownTargetError: target is not a declared switch or flag (aliases of aliases included).
        - DuplicateIdentifierError: alias is already a switch, a flag or an alias.
        """
        return self.map_aliases([alias], target)

    def map_aliases(self, aliases, target, /):
        """
        Map every alias in the ordered iterable onto target.

        Transactional: every alias is validated before any is recorded, so a failure
        leaves the registry exactly as it was.
        """
        if isinstance(aliases, str) or not isinstance(aliases, Iterable):
            raise TypeError("map_aliases() first argument must be an iterable of strings")
        self._check_target(target)
        staged = []
        for alias in aliases:
            _sanitize_identifier(alias, role="alias")
            self._claim(alias)
            if alias in staged:
                raise DuplicateIdentifierError(
                    f"{alias!r} is mapped twice in the same call",
                    identifier=alias,
                    role="alias",
                )
            staged.append(alias)
        for alias in staged:
            self._aliases[alias] = target
            logger.debug("mapped alias %r onto %r", alias, target)
        return self

    def resolve_alias(self, identifier, /):
        """
        Return the target of an alias, or None when the identifier is not an alias.
        """
        return self._aliases.get(identifier)

    def is_alias(self, identifier, /):
        return identifier in self._aliases

    def is_switch(self, identifier, /):
        """
        True for a declared switch, or for an alias whose target is a declared switch.
        """
        return identifier in self._switches or self._aliases.get(identifier) in self._switches

    def is_flag(self, identifier, /):
        """
        True for a declared flag, or for an alias whose target is a declared flag.
        """
        return identifier in self._flags or self._aliases.get(identifier) in self._flags

    def canonical(self, identifier, /):
        """
        Return the canonical identifier: the alias target for aliases, the identifier otherwise.
        """
        return self._aliases.get(identifier, identifier)

    def aliases_of(self, identifier, /):
        """
        Return the aliases mapped onto identifier, in declaration order.
        """
        return tuple(alias for alias, target in self._aliases.items() if target == identifier)

    def snapshot(self):
        """
        Return an independent deep copy; later changes on either side stay invisible to the other.
        """
        return copy.deepcopy(self)

    def __contains__(self, identifier, /):
        return identifier in self._switches or identifier in self._flags or identifier in self._aliases

    def __repr__(self):
        return f"registry({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


__all__ = (
    "Registry",
    "HELP_SWITCH",
    "HELP_ALIAS",
    "HELP_TEXT",
)
