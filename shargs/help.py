"""
Help rendering for a parser's registry.

Layout
- "// title //" headline and the description paragraph, when set.
- A "switches" table and a "flags" table, each listing identifier, aliases and help text
  in declaration order. Empty tables are skipped.

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- colorful=False suppresses styling; fancy=True wraps everything in a panel.

Palette keys
- title, description, group-label, table-border, switch-name, flag-name, alias, help-text, panel-title
"""
import io
from collections import defaultdict

from rich.box import ROUNDED, SIMPLE
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .utils import Unset


def _renderable(parser, /, *, colorful, fancy):
    styles = defaultdict(str, {
        "title": "bold #FF4D94",
        "description": "italic #A3A3A3",
        "group-label": "bold #FFFFFF",
        "table-border": "#4B5563",
        "switch-name": "bold #00E6FF",
        "flag-name": "bold #22C55E",
        "alias": "#36C5F0",
        "help-text": "#9CA3AF",
        "panel-title": "bold #FF4D94",
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), style)

    registry = parser.registry
    renders = []

    if parser.title:
        renders.append(Text.assemble("// ", text(parser.title, styler("title")), " //\n"))
    if parser.description:
        renders.append(text(parser.description, styler("description")).append("\n"))

    for label, mapping, style in (
            ("switches", registry.switches, "switch-name"),
            ("flags", registry.flags, "flag-name"),
    ):
        if not mapping:
            continue
        table = Table(
            "name", "aliases", "description",
            title=text(label, styler("group-label")),
            title_justify="left",
            box=ROUNDED if fancy else SIMPLE,
            border_style=styler("table-border") or None,
            header_style=styler("group-label") or None,
        )
        table.columns[0].no_wrap = True
        table.columns[1].no_wrap = True
        for identifier, help in mapping.items():
            table.add_row(
                text(identifier, styler(style)),
                text(", ".join(registry.aliases_of(identifier)), styler("alias")),
                text(help, styler("help-text")),
            )
        renders.append(table)

    renderable = Group(*renders)

    if fancy:
        renderable = Panel(
            renderable,
            title=text(f"[ {parser.title or 'help'} ]".upper(), styler("panel-title")),
            title_align="left",
        )

    return renderable


def render(parser, /, *, console=Unset, colorful=True, fancy=False):
    """
    Print the help view of parser to console (stdout when omitted).
    """
    console = Console() if console is Unset else console
    console.print(_renderable(parser, colorful=colorful, fancy=fancy))


def format(parser, /, *, width=80):
    """
    Return the uncolored help view of parser as a string.
    """
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None, force_terminal=False, highlight=False)
    render(parser, console=console, colorful=False)
    return buffer.getvalue()


__all__ = (
    "render",
    "format",
)
