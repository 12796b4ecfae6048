from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the classic ``tree`` command. Switches
may be written DOS-style (``/F``) or Unix-style (``-F``) in either case;
they are normalized before argparse sees them. Provides the mapping from
the parsed namespace to the immutable RenderConfig.
"""

import argparse
from typing import List, Sequence, Tuple

from foldertree.domain.constants import APP_NAME
from foldertree.domain.tree_models import RenderConfig
from foldertree.utils.i18n import i18n

# End-of-options marker understood by argparse
_END_OF_OPTIONS = "--"

# Keys of the single-character switches; anything else is ignored
_SWITCH_KEYS = frozenset("fa?")

# Long options whose next token is their value
_VALUE_OPTIONS = frozenset({"--log-file"})

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the foldertree CLI.

    The built-in help is disabled: ``-?`` prints the classic usage text on
    stderr instead, which is handled by the application controller.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
        add_help=False,
    )

    p.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help=i18n.t("cli.args.path"),
    )

    # --- Listing switches ---
    p.add_argument(
        "-f",
        dest="show_files",
        action="store_true",
        help=i18n.t("cli.args.files"),
    )
    p.add_argument(
        "-a",
        dest="use_ascii",
        action="store_true",
        help=i18n.t("cli.args.ascii"),
    )
    p.add_argument(
        "-?",
        dest="show_help",
        action="store_true",
        help=i18n.t("cli.args.help"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    return p


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """
    Normalize and parse a raw argument vector.

    Unrecognized switches are tolerated and exposed on the namespace as
    ``ignored`` rather than aborting the run.
    """
    tokens, ignored = normalize_switches(argv)
    parser = build_parser()
    args, unknown = parser.parse_known_intermixed_args(tokens)
    args.ignored = ignored + unknown
    return args

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> RenderConfig:
    """
    Translate the argparse Namespace into the rendering configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        RenderConfig: Immutable switches for the traversal.
    """
    return RenderConfig(
        show_files=bool(args.show_files),
        use_ascii=bool(args.use_ascii),
    )

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def normalize_switches(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Rewrite DOS and mixed-case switches into the lower-case Unix form.

    Only the character after the prefix is significant, so ``/F``, ``-F``
    and ``-Files`` all become ``-f``. Any other ``-`` token (including a
    bare ``-`` and number-like ``-1``) is an unknown switch and is set
    aside, as are unknown two-character ``/`` tokens. Longer ``/`` tokens are
    paths. Long options, their values, and everything after ``--`` pass
    through untouched.

    Returns:
        Tuple[List[str], List[str]]: (tokens for argparse, ignored switches).
    """
    out: List[str] = []
    ignored: List[str] = []
    passthrough = False
    expects_value = False

    for token in argv:
        if passthrough or expects_value:
            out.append(token)
            expects_value = False
        elif token.startswith(_END_OF_OPTIONS):
            passthrough = token == _END_OF_OPTIONS
            expects_value = token in _VALUE_OPTIONS
            out.append(token)
        elif token.startswith("-") or (token.startswith("/") and len(token) == 2):
            key = token[1:2].lower()
            if key and key in _SWITCH_KEYS:
                out.append("-" + key)
            else:
                ignored.append(token)
        else:
            out.append(token)

    return out, ignored
