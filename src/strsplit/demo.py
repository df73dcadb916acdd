# strsplit/demo.py
import argparse
import os
import sys

from .delimiter import CharDelimiter, DelimiterError, DelimiterTypeError, LiteralDelimiter
from .profiles import UnknownProfileError, get_profile
from .splitter import SplitInvariantError, StrSplit, until_char
from .utils.load_config import ConfigFileNotFound, ConfigParseError, ConfigTypeError
from .utils.log import ENV_VAR, reload_topics

_CLI_ERRORS = (
    DelimiterError,
    DelimiterTypeError,
    SplitInvariantError,
    UnknownProfileError,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
)


def run_examples():
    """Print the built-in demonstrations."""
    haystack = "a b c  d e"
    letters = list(StrSplit(haystack, " "))
    print(f"letters = {letters!r}")

    first_part = until_char("hello world", "o")
    print(f"until_char result = {first_part!r}")

    csv = "apple,banana,mango"
    fruits = list(StrSplit(csv, CharDelimiter(",")))
    print(f"fruits = {fruits!r}")


def _pick_delimiter(args):
    if args.profile is not None:
        return get_profile(args.profile, allow_comments=True)
    if args.char is not None:
        return CharDelimiter(args.char)
    delim = args.delim
    # argparse before 3.12 hands back ["--"] for --delim=--
    if isinstance(delim, list):
        delim = "".join(delim)
    return LiteralDelimiter(delim)


def main(argv=None):
    """CLI demo: split text lazily on a literal, a single character, or a named profile."""
    parser = argparse.ArgumentParser(
        prog="strsplit-demo",
        description="Split text into non-empty tokens. Without text, run the built-in examples.",
    )
    parser.add_argument("text", nargs="*", help="Text to split (joined with single spaces)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--delim",
        default="",
        help="Literal delimiter; the empty string (default) splits on whitespace",
    )
    group.add_argument("--char", help="Single-character delimiter")
    group.add_argument("--profile", help="Named delimiter from data/delimiters.json")
    parser.add_argument(
        "--first",
        action="store_true",
        help="Print only the text before the first --char delimiter",
    )
    parser.add_argument("--spans", action="store_true", help="Print [start, end) offsets too")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        os.environ[ENV_VAR] = "all"
        reload_topics()

    if not args.text:
        run_examples()
        return 0

    text = " ".join(args.text)
    if args.first and args.char is None:
        parser.error("--first requires --char")

    try:
        if args.first:
            print(repr(until_char(text, args.char)))
            return 0

        splitter = StrSplit(text, _pick_delimiter(args))
        if args.spans:
            for start, end in splitter.iter_spans():
                print(f"{start}\t{end}\t{text[start:end]!r}")
        else:
            print(list(splitter))
    except _CLI_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
