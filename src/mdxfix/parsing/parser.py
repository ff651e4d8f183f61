# mdxfix/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Rule names for --enable/--disable are not validated here; unknown
          names are ignored by rule selection, as they are for library calls.
    """
    p = argparse.ArgumentParser(
        prog="mdxfix",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [PATH ...] [OPTIONS]",
        description=(
            "mdxfix – repair markdown so a strict MDX parser accepts it\n"
            "Escapes '<' and '>' used as numeric comparisons in prose and "
            "normalizes code-fence language tags. Code is never rewritten."
        ),
    )

    g_in = p.add_argument_group("Input & output")
    g_rules = p.add_argument_group("Rules")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Input & output
    # -----------------------
    g_in.add_argument(
        "paths",
        metavar="PATH",
        nargs="*",
        help="Markdown files to process. Omit or use '-' to read standard input.",
    )
    out = g_in.add_mutually_exclusive_group()
    out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the processed text to FILE instead of standard output.",
    )
    out.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        dest="in_place",
        help="Rewrite each input file in place (only files that change are written).",
    )
    out.add_argument(
        "--check",
        action="store_true",
        dest="check",
        help="Write nothing; exit with status 1 when any input would change.",
    )

    # -----------------------
    # Rules
    # -----------------------
    g_rules.add_argument(
        "--enable",
        metavar="NAME",
        action="append",
        dest="enable",
        help="Run only the named rule(s). Repeatable.",
    )
    g_rules.add_argument(
        "--disable",
        metavar="NAME",
        action="append",
        dest="disable",
        help="Skip the named rule(s), applied after --enable. Repeatable.",
    )
    g_rules.add_argument(
        "--no-preserve-code",
        action="store_false",
        dest="preserve_code_blocks",
        help="Also rewrite fenced and inline code (code is skipped by default).",
    )
    g_rules.add_argument(
        "--list-rules",
        action="store_true",
        dest="list_rules",
        help="Print the default rules in application order and exit.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "--stats",
        action="store_true",
        dest="stats",
        help="Print fix statistics as JSON to standard error.",
    )
    g_misc.add_argument(
        "--debug",
        action="store_true",
        dest="debug",
        help="Log active rules and per-rule fix counts.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log lines as JSON (also enabled by MDXFIX_JSON_LOGS=1).",
    )
    return p
