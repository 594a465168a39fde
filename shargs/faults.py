"""
Shargs faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the package raises.
  Codes are grouped by domain (declaration vs. extraction) to keep searches predictable.
- ShargsException: base type that carries a message plus immutable options and knows
  how to render itself with rich.
- DuplicateIdentifierError / UnknownTargetError: setup-time faults. They signal a bug in
  the host's own declaration code and are raised immediately.
- MissingValueError: runtime fault. A switch was passed by the end user without the
  value that must follow it; the host should catch it and report a usage error.
- trigger(): host-facing entry point to surface a fault (raise it, or print it in shell mode).
- getdoc(): optional description lookup for a code from the host application.

Integration
- Core operations always raise. Nothing in the core prints or exits.
- A host that prefers friendly output wraps its dispatch in try/except and calls
  trigger(fault, shell=True) to print the rendering to stderr.
"""
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - declaration (2111x)
      • DUPLICATE_IDENTIFIER, UNKNOWN_TARGET
    - extraction (2112x)
      • MISSING_VALUE

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- declaration errors (2111x) ---
    DUPLICATE_IDENTIFIER = 21111
    UNKNOWN_TARGET       = 21112

    # --- extraction errors (2112x) ---
    MISSING_VALUE        = 21121

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ShargsException(Exception):
    """
    base class of every shargs fault.

    options
    - shell: print instead of raise when triggered (default False).
    - colorful / fancy: rendering switches for __rich__.
    - hint: one-sentence suggestion shown under the message.
    - any context the raiser attaches (identifier, target, index, ...).
    """
    __code__ = Unset
    __title__ = "fault"

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError("%s() message must be a string" % type(self).__name__)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.__code__

    @property
    def identifier(self):
        return self.options.get("identifier")

    def __str__(self):
        return self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        program = getattr(main, "__prog__", self.options.get("prog") or os.path.basename(sys.argv[0]) or "shargs")

        header = Text.assemble(
            "[ ",
            text(program, styler("prog-name")),
            " — ",
            text(self.code.normalize() if self.code else "", styler("code")),
            " | ",
            text(self.__title__.title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateIdentifierError(ShargsException):
    __code__ = FaultCode.DUPLICATE_IDENTIFIER
    __title__ = "duplicate identifier"


class UnknownTargetError(ShargsException):
    __code__ = FaultCode.UNKNOWN_TARGET
    __title__ = "unknown target"

    @property
    def target(self):
        return self.options.get("target")


class MissingValueError(ShargsException):
    __code__ = FaultCode.MISSING_VALUE
    __title__ = "missing value"

    @property
    def index(self):
        return self.options.get("index")


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ShargsException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - outside shell mode the merged fault is raised; in shell mode it is printed to
      stderr and trigger() returns None. The process is never terminated here.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "ShargsException",
    "DuplicateIdentifierError",
    "UnknownTargetError",
    "MissingValueError",
    "FaultCode",
    "trigger",
    "getdoc",
)
