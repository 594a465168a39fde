import sys

from rich.pretty import pprint

from shargs import *
from shargs.help import render

registry = Registry()
registry.declare_switch("-e", "Extra value to echo back.")
registry.declare_flag("-v", "Verbose output.")
registry.map_aliases(["--extra", "/e"], "-e")
registry.map_alias("--verbose", "-v")

parser = Parser(sys.argv[1:], registry, title="shargs demo", description="Echo a value, loudly if asked.")
binder = Binder(parser)


@binder.switch("-e")
def extra(value):
    return value


@binder.flag("-v")
def verbose():
    return True


if __name__ == '__main__':
    if parser.contains_token("-h") or parser.contains_token("--help"):
        render(parser)
        sys.exit(0)
    try:
        pprint(binder.dispatch())
    except MissingValueError as fault:
        trigger(fault, shell=True)
        sys.exit(2)
