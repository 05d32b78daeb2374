# ==================================================
# examples/walkthrough.py
# ==================================================
"""Replay inserts and lookups against a Table, dumping its state after every step.

    python -m chained_table.examples.walkthrough a=1 b=2 c=3 d=4 --lookup a --lookup z
"""
import argparse, logging

from chained_table import MISSING, Table


def parse_pair(text: str):
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def main(argv=None):
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("pairs", nargs="*", type=parse_pair, metavar="KEY=VALUE")
    p.add_argument("--lookup", action="append", default=[], metavar="KEY")
    p.add_argument("-v", "--verbose", action="store_true", help="log chain walks")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    table = Table()
    print(table.describe("Initialized"))
    for key, value in args.pairs:
        before = table.capacity
        table.add(key, value)
        if table.capacity != before:
            print(f"grew to capacity {table.capacity}")
        print(table.describe(f"Add: {key} - {value}"))

    for key in args.lookup:
        value = table.get(key)
        print(f"{key} -> {'<missing>' if value is MISSING else value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
