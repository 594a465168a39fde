"""
Shargs parser: value extraction over a raw token sequence.

What this module provides
- Parser: pairs an immutable token sequence with a Registry and extracts the value
  that follows a switch, honoring alias indirection.
- extract_pure_tokens(tokens): keep only tokens that look like switches/flags
  (contain "-" or "/"). A heuristic filter, not a validation.

Precedence
- extract_value() checks aliases before the canonical identifier. Among several
  aliases present in the tokens, the first one in alias-declaration order wins.

Errors
- MissingValueError when the matched identifier is the last token.
- A declared switch that does not appear in the tokens yields None.

Quick example:
    >>> registry = Registry().declare_switch("-e", "extra").map_alias("--extra", "-e")
    >>> Parser(["--extra", "foo"], registry).extract_value("-e")
    'foo'
"""
import shlex
import sys
from collections.abc import Iterable

from .faults import MissingValueError
from .help import render
from .logger import logger
from .registry import Registry
from .utils import Unset


def extract_pure_tokens(tokens, /):
    """
    Return the tokens containing a hyphen or a forward slash, in their original order.
    """
    return [token for token in tokens if "-" in token or "/" in token]


def _tokenize(tokens, /):
    """
    Internal: normalize the accepted token inputs into a tuple of strings.

    - Unset: read sys.argv[1:].
    - str: shell-like string, split with shlex.split.
    - Iterable[str]: used as given (items are not trimmed or rewritten).
    """
    if tokens is Unset:
        return tuple(sys.argv[1:])
    if isinstance(tokens, str):
        return tuple(shlex.split(tokens))
    if isinstance(tokens, Iterable):
        tokens = tuple(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("Parser() tokens must be a string or an iterable of strings")
        return tokens
    raise TypeError("Parser() tokens must be a string or an iterable of strings")


class Parser:
    """
    Extract switch values from a token sequence according to a Registry.

    The parser keeps a reference to the registry it was given; declarations added to
    that registry later are visible here. Binder takes its own snapshot instead.

    Help metadata (title, description) is stored here for the help renderer.
    """

    def __init__(self, tokens=Unset, registry=Unset, /, *, title="", description=""):
        if registry is Unset:
            registry = Registry()
        elif not isinstance(registry, Registry):
            raise TypeError("Parser() registry must be a Registry")
        self._tokens = _tokenize(tokens)
        self._registry = registry
        self._title = ""
        self._description = ""
        self.set_help_title(title)
        self.set_help_description(description)

    @property
    def tokens(self):
        return self._tokens

    @property
    def registry(self):
        return self._registry

    @property
    def title(self):
        return self._title

    @property
    def description(self):
        return self._description

    @property
    def switches(self):
        return self._registry.switches

    @property
    def flags(self):
        return self._registry.flags

    @property
    def aliases(self):
        return self._registry.aliases

    def set_help_title(self, title, /):
        if not isinstance(title, str):
            raise TypeError("set_help_title() argument must be a string")
        self._title = title

    def set_help_description(self, description, /):
        if not isinstance(description, str):
            raise TypeError("set_help_description() argument must be a string")
        self._description = description

    def is_switch(self, identifier, /):
        return self._registry.is_switch(identifier)

    def is_flag(self, identifier, /):
        return self._registry.is_flag(identifier)

    def is_alias(self, identifier, /):
        return self._registry.is_alias(identifier)

    def resolve_alias(self, identifier, /):
        return self._registry.resolve_alias(identifier)

    def contains_token(self, identifier, /):
        """
        True when identifier appears verbatim anywhere in the tokens.
        """
        return identifier in self._tokens

    def _following(self, identifier, /):
        """
        Internal: the token right after the first occurrence of identifier.
        """
        index = self._tokens.index(identifier) + 1
        if index >= len(self._tokens):
            raise MissingValueError(
                f"switch {identifier!r} expects a value but none follows it",
                identifier=identifier,
                index=index - 1,
                hint=f"pass a value right after {identifier!r}",
            )
        return self._tokens[index]

    def extract_value(self, identifier, /):
        """
        Return the value that follows a switch in the tokens.

        Behavior
        - None when identifier is not a switch (directly or through an alias).
        - Aliases targeting identifier are checked first, in alias-declaration order.
        - Then identifier's own occurrence.
        - None when neither appears in the tokens.

        Raises
        - MissingValueError: the matched token is the last one.
        """
        if not self._registry.is_switch(identifier):
            return None

        for alias, target in self._registry.aliases.items():
            if target == identifier and self.contains_token(alias):
                logger.debug("extracting %r through alias %r", identifier, alias)
                return self._following(alias)

        if self.contains_token(identifier):
            return self._following(identifier)
        return None

    @staticmethod
    def extract_pure_tokens(tokens, /):
        """
        Return the tokens containing a hyphen or a forward slash.
        """
        return extract_pure_tokens(tokens)

    def pure_tokens(self):
        """
        Apply extract_pure_tokens() to this parser's own tokens.
        """
        return extract_pure_tokens(self._tokens)

    def help(self, /, **options):
        """
        Render the help view to the console (see shargs.help.render for options).
        """
        return render(self, **options)

    def __repr__(self):
        return f"parser(tokens={list(self._tokens)!r}, registry={self._registry!r})"

    def __rich_repr__(self):
        yield "tokens", list(self._tokens)
        yield "registry", self._registry
        yield "title", self._title, ""
        yield "description", self._description, ""


__all__ = (
    "Parser",
    "extract_pure_tokens",
)
