#!/usr/bin/env python3
"""
Name: morse
Description: encode and decode Morse code with a binary tree table
Author: Richard James Howe, howe.r.j.89@gmail.com
License: unlicense

Each letter lives at a node of a binary tree. Starting at the root, a dot
moves to the left child and a dash to the right child. The tree is stored
flattened in a single string using heap numbering: the root is index 1 and
node n has children 2n (dot) and 2n+1 (dash). Decoding walks down the tree,
encoding walks back up it.
"""

import sys
import argparse

__version__ = "1.0.0"

PROJECT = "A Morse code encoder/decoder"
AUTHOR = "Richard James Howe"
LICENSE = "The Unlicense"
REPO = "https://github.com/howerj/morse"
EMAIL = "howe.r.j.89@gmail.com"

# --- Exit Codes ---
EXIT_SUCCESS = 0
EXIT_SELF_TEST = 1
EXIT_MISSING_COMMAND = 2
EXIT_UNKNOWN_COMMAND = 3
EXIT_WRITE_ERROR = 4
EXIT_NOT_ENCODABLE = 5
EXIT_INVALID_SYMBOL = 6

# --- Code Table ---

DOT = '.'
DASH = '-'

# '*' is a node with no letter (index 0 is padding, index 1 is the root),
# '?' is a leaf with no letter assigned.
CODE_TABLE = "**ETIANMSURWDKGOHVF?L?PJBXCYZQ???"
SENTINELS = ('*', '?')
UNKNOWN = '?'

# Five levels below the root fit in the table.
MAX_CODE_LENGTH = 5

TREE = r"""
        DIT or '.' <-- * --> DAH or '-'
                /             \
               E               T
             /   \           /   \
           I       A       N       M
          / \     / \     / \     / \
         S   U   R   W   D   K   G   O
        / \ / \ / \ / \ / \ / \ / \ / \
        H V F ? L ? P J B X C Y Z Q ? ?
"""

# --- Errors ---

class MorseError(ValueError):
    """Base class for anything the codec refuses to do."""


class NotEncodableError(MorseError):
    def __init__(self, character):
        self.character = character
        super().__init__(f"{character!r} has no Morse code")


class InvalidSymbolError(MorseError):
    def __init__(self, symbol, position):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"{symbol!r} at position {position} is not a morse code symbol"
        )

# --- Core Translation Functions ---

def _root_first(symbols: list) -> str:
    """Reverses a leaf-to-root path so it reads from the root down."""
    return "".join(symbols[::-1])

def encode(character: str) -> str:
    """
    Encodes one uppercase letter as a string of dots and dashes.

    Raises NotEncodableError for anything that is not a letter in the table,
    including the '*' and '?' placeholders themselves.
    """
    if not isinstance(character, str) or len(character) != 1:
        raise NotEncodableError(character)
    pos = CODE_TABLE.find(character)
    if pos < 0 or CODE_TABLE[pos] in SENTINELS:
        raise NotEncodableError(character)

    symbols = []
    while pos > 1:
        symbols.append(DASH if pos & 1 else DOT)
        pos //= 2
    return _root_first(symbols)

def decode(code: str) -> str:
    """
    Decodes a string of dots and dashes into a single character.

    An empty code gives '*' (the root) and a code that walks off the bottom
    of the tree gives '?'. Neither is an error; only a symbol other than a
    dot or a dash, or a code that is not a str, raises
    InvalidSymbolError.
    """
    if not isinstance(code, str):
        raise InvalidSymbolError(code, 0)
    n = 1
    for position, symbol in enumerate(code):
        if symbol == DOT:
            bit = 0
        elif symbol == DASH:
            bit = 1
        else:
            raise InvalidSymbolError(symbol, position)
        # Past the last leaf the result is already '?', keep validating.
        if n < len(CODE_TABLE):
            n = (n << 1) + bit
    if n >= len(CODE_TABLE):
        return UNKNOWN
    return CODE_TABLE[n]

def self_test() -> bool:
    """Checks that every letter A-Z survives an encode/decode round trip."""
    for ordinal in range(ord('A'), ord('Z') + 1):
        letter = chr(ordinal)
        try:
            if decode(encode(letter)) != letter:
                return False
        except MorseError:
            return False
    return True

def code_chart() -> str:
    """Returns the alphabet as two columns, A-M beside N-Z."""
    lines = []
    for ordinal in range(ord('A'), ord('M') + 1):
        left, right = chr(ordinal), chr(ordinal + 13)
        lines.append(f"\t\t{left} {encode(left):>5} {right} {encode(right):>5}")
    return "\n".join(lines)

# --- Command Line ---

def build_parser() -> argparse.ArgumentParser:
    description = "\n".join([
        f"Project: {PROJECT}",
        f"Author:  {AUTHOR}",
        f"License: {LICENSE}",
        f"Repo:    {REPO}",
        f"Email:   {EMAIL}",
        f"Version: {__version__}",
    ])
    epilog = (
        "This utility returns zero on success and non-zero on failure.\n"
        "Errors are printed to stderr, and output to stdout. This codebook\n"
        "only includes the upper case alphabet.\n\n"
        f"Characters:\n\n{code_chart()}\n\nTree:\n{TREE}"
    )
    parser = argparse.ArgumentParser(
        prog="morse",
        description=description,
        epilog=epilog,
        usage="%(prog)s encode|decode strings...",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    # Operands may start with '-', so everything after the subcommand is
    # passed through untouched.
    parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='encode or decode, followed by the strings to translate.'
    )
    return parser

def encode_strings(strings):
    """Writes the codes for each string on its own line."""
    for text in strings:
        for char in text:
            upper = char.upper()
            # Some letters upper-case to more than one character.
            if len(upper) != 1:
                raise NotEncodableError(char)
            sys.stdout.write(encode(upper) + " ")
        sys.stdout.write("\n")

def decode_strings(codes):
    """Writes the character for each code, all on one line."""
    for code in codes:
        sys.stdout.write(decode(code))
    sys.stdout.write("\n")

def main(argv=None):
    """Parses arguments and dispatches to the encoder or decoder."""
    # The help text is built from the table, so check the table first.
    if not self_test():
        print("morse: self test failed", file=sys.stderr)
        sys.exit(EXIT_SELF_TEST)

    parser = build_parser()
    # Leftovers are options argparse does not know, such as "-.-" given
    # where the command should be.
    args, unknown = parser.parse_known_args(argv)

    if unknown:
        command, operands = unknown[0], []
    elif args.command:
        command, operands = args.command[0], args.command[1:]
    else:
        parser.print_help(sys.stderr)
        sys.exit(EXIT_MISSING_COMMAND)

    actions = {'encode': encode_strings, 'decode': decode_strings}
    if command not in actions:
        print(f"{parser.prog}: unknown command '{command}'", file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(EXIT_UNKNOWN_COMMAND)

    try:
        actions[command](operands)
        sys.stdout.flush()
    except NotEncodableError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        sys.exit(EXIT_NOT_ENCODABLE)
    except InvalidSymbolError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        sys.exit(EXIT_INVALID_SYMBOL)
    except OSError as e:
        print(f"{parser.prog}: write error: {e}", file=sys.stderr)
        sys.exit(EXIT_WRITE_ERROR)

    sys.exit(EXIT_SUCCESS)

if __name__ == "__main__":
    main()
