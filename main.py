# main.py
"""
Run from a checkout without installing:
    python main.py lookup 5907
    python main.py search "the hobbit" books title
"""
import sys

from grscrape.cli import lookup_main, search_main

COMMANDS = {"lookup": lookup_main, "search": search_main}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(f"usage: {sys.argv[0]} {{lookup,search}} ...", file=sys.stderr)
        return 2
    return COMMANDS[sys.argv[1]](sys.argv[2:])


if __name__ == "__main__":
    sys.exit(main())
