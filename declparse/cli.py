"""
Command line entry point for declparse.

Parses declarations from an argument, a file or standard input and prints
the resulting tree.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .options import ParserOptions
from .parser import ParseError, Program, parse
from .serializer import to_dict, to_source


def format_program(program: Program) -> str:
    """Render one line per declaration."""
    lines = []
    for declaration in program:
        declarator = declaration.declarator
        target = declarator.identifier
        if declarator.type_annotation is not None:
            target += f": {declarator.type_annotation}"
        value = declarator.value
        lines.append(f"{declaration.kind} {target} = {value.value!r} ({value.kind})")
    return "\n".join(lines)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="declparse",
        description="Parse variable declaration statements into a syntax tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    declparse "const a = 1"                         # Print declarations
    declparse "var bar:number=45.123" --json        # Print the tree as JSON
    declparse --file decls.txt --roundtrip          # Re-serialize a file
    echo "let b = 2" | declparse                    # Read standard input
        """
    )

    parser.add_argument('source', nargs='?',
                        help='Declaration source text (default: read standard input)')
    parser.add_argument('-f', '--file',
                        help='Read declaration source from a file')
    output = parser.add_mutually_exclusive_group()
    output.add_argument('--json', action='store_true',
                        help='Output the tree in JSON format')
    output.add_argument('--roundtrip', action='store_true',
                        help='Output the tree re-serialized as source text')
    parser.add_argument('--no-int-limit', action='store_true',
                        help='Classify whole numbers of any size as numeric literals')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point, returns the process exit status."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.source is not None and args.file:
        parser.error("give either SOURCE or --file, not both")

    integer_bits = None if args.no_int_limit else 64

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            print(f"declparse: cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 2
        except UnicodeDecodeError as e:
            print(f"declparse: cannot read {args.file}: not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
            return 2
        options = ParserOptions.for_file(args.file, integer_bits=integer_bits)
    else:
        source = args.source if args.source is not None else sys.stdin.read()
        options = ParserOptions(integer_bits=integer_bits)

    try:
        program = parse(source, options)
    except ParseError as e:
        print(str(e), end="", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(to_dict(program), indent=2))
    elif args.roundtrip:
        print(to_source(program))
    else:
        print(format_program(program))

    return 0


if __name__ == "__main__":
    sys.exit(main())
