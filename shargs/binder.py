"""
Shargs binder: attach callables to switches and flags, and invoke them against parsed input.

Handler kinds
- SwitchHandler(callback): callback(value) where value is the string extracted for the switch.
- FlagHandler(callback): callback() since a flag carries no value.
Both return whatever the callback returns. Dispatch goes through the kind of the stored
handler; the callback's own signature is never inspected.

Ownership
- Binder(parser) snapshots the parser's registry at construction. Declarations made on the
  original registry afterwards do not change what the binder recognizes.

Binding rules
- Only canonical identifiers are bindable; aliases reach their target at invoke time.
- bind_switch/bind_flag return False for identifiers of the wrong kind (or aliases) and raise
  DuplicateIdentifierError when the identifier is already bound. The first binding stays.

Quick example:
    >>> registry = Registry().declare_switch("-e", "extra").declare_flag("-f", "force")
    >>> binder = Binder(Parser(["-e", "value1", "-f"], registry))
    >>> @binder.switch("-e")
    ... def on_extra(value):
    ...     return value.upper()
    >>> binder.invoke("-e")
    'VALUE1'
"""
from types import MappingProxyType

from .faults import DuplicateIdentifierError, UnknownTargetError
from .logger import logger
from .parser import Parser
from .utils import rename


class Handler:
    """
    Common invocable wrapper around a user callback.

    Subclasses set `kind` and implement __call__(parser, identifier).
    """
    __slots__ = ("_callback",)

    kind = None

    def __init__(self, callback, /):
        if not callable(callback):
            raise TypeError(f"{type(self).__name__}() argument must be callable")
        self._callback = callback

    @property
    def callback(self):
        return self._callback

    def __call__(self, parser, identifier, /):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.kind}-handler(callback={self._callback!r})"

    def __rich_repr__(self):
        yield "kind", self.kind
        yield "callback", self._callback


class SwitchHandler(Handler):
    __slots__ = ()

    kind = "switch"

    def __call__(self, parser, identifier, /):
        return self._callback(parser.extract_value(identifier))


class FlagHandler(Handler):
    __slots__ = ()

    kind = "flag"

    def __call__(self, parser, identifier, /):
        return self._callback()


class Binder:
    """
    Maps canonical switch/flag identifiers to handlers and invokes them by identifier or alias.
    """

    def __init__(self, parser, /):
        if not isinstance(parser, Parser):
            raise TypeError("Binder() argument must be a Parser")
        self._registry = parser.registry.snapshot()
        self._parser = Parser(
            parser.tokens,
            self._registry,
            title=parser.title,
            description=parser.description,
        )
        self._bindings = {}

    @property
    def parser(self):
        return self._parser

    @property
    def registry(self):
        return self._registry

    @property
    def bindings(self):
        return MappingProxyType(dict(self._bindings))

    def _bind(self, handler, identifier, accepts, /):
        if not accepts(identifier) or self._registry.is_alias(identifier):
            logger.debug("refused to bind %s handler to %r", handler.kind, identifier)
            return False
        if identifier in self._bindings:
            raise DuplicateIdentifierError(
                f"{identifier!r} is already bound to {self._bindings[identifier]!r}",
                identifier=identifier,
                hint="bind each switch or flag once",
            )
        self._bindings[identifier] = handler
        logger.debug("bound %s handler %r to %r", handler.kind, handler.callback, identifier)
        return True

    def bind_switch(self, identifier, callback, /):
        """
        Bind callback(value) to a canonical switch.

        Returns
        - True when bound; False when identifier is not a switch or is an alias.

        Raises
        - DuplicateIdentifierError: identifier already has a binding.
        """
        return self._bind(SwitchHandler(callback), identifier, self._registry.is_switch)

    def bind_flag(self, identifier, callback, /):
        """
        Bind callback() to a canonical flag.

        Returns
        - True when bound; False when identifier is not a flag or is an alias.

        Raises
        - DuplicateIdentifierError: identifier already has a binding.
        """
        return self._bind(FlagHandler(callback), identifier, self._registry.is_flag)

    def switch(self, identifier, /):
        """
        Decorator form of bind_switch(); the decorated callback is returned unchanged.
        """
        @rename("switch")
        def wrapper(callback, /):
            if not self.bind_switch(identifier, callback):
                raise UnknownTargetError(
                    f"{identifier!r} is not a canonical switch",
                    identifier=identifier,
                    target=identifier,
                    hint="bind the switch the alias points to",
                )
            return callback
        return wrapper

    def flag(self, identifier, /):
        """
        Decorator form of bind_flag(); the decorated callback is returned unchanged.
        """
        @rename("flag")
        def wrapper(callback, /):
            if not self.bind_flag(identifier, callback):
                raise UnknownTargetError(
                    f"{identifier!r} is not a canonical flag",
                    identifier=identifier,
                    target=identifier,
                    hint="bind the flag the alias points to",
                )
            return callback
        return wrapper

    def is_bound(self, identifier, /):
        return self._registry.canonical(identifier) in self._bindings

    def invoke(self, identifier, /):
        """
        Invoke the handler bound to identifier (aliases resolve to their target).

        Behavior
        - None when identifier is neither bound nor a recognized switch/flag.
        - None when the resolved identifier has no handler.
        - Switch handlers receive extract_value() of the switch (None when it is absent
          from the tokens); flag handlers receive nothing.

        Raises
        - MissingValueError: the switch is the last token.
        """
        registry = self._registry
        if identifier not in self._bindings and not (registry.is_switch(identifier) or registry.is_flag(identifier)):
            return None

        identifier = registry.canonical(identifier)
        if (handler := self._bindings.get(identifier)) is None:
            logger.debug("nothing bound to %r", identifier)
            return None

        logger.debug("invoking %s handler for %r", handler.kind, identifier)
        return handler(self._parser, identifier)

    def dispatch(self):
        """
        Invoke every bound identifier found in the tokens, once each, in order of first appearance.

        A token that directly follows a switch (or switch alias) is its value and is not
        treated as an identifier.

        Returns
        - dict: canonical identifier → handler result.
        """
        results = {}
        value = False
        for token in self._parser.tokens:
            if value:
                value = False
                continue
            value = self._registry.is_switch(token)
            identifier = self._registry.canonical(token)
            if identifier in results or identifier not in self._bindings:
                continue
            results[identifier] = self.invoke(identifier)
        return results

    def __repr__(self):
        return f"binder(bindings={dict(self._bindings)!r})"

    def __rich_repr__(self):
        yield "bindings", dict(self._bindings)
        yield "parser", self._parser


__all__ = (
    "Binder",
    "Handler",
    "SwitchHandler",
    "FlagHandler",
)
