from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap, the
volume banner, root validation, the traversal itself and the closing
"no subfolders" notice. Every outcome short of a crash exits with 0, as
the classic ``tree`` command does.
"""

import argparse
import sys
from typing import List, Optional

from foldertree.core.analysis.tree_generator import generate_directory_tree
from foldertree.infra.fs import (
    get_volume_info,
    is_listable_dir,
    resolve_root,
    split_drive,
)
from foldertree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from foldertree.interface.cli import args as cli_args
from foldertree.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments without the program name.
              Defaults to sys.argv[1:].

    Returns:
        int: Process exit code.
    """
    _configure_streams()

    # 1. Argument parsing phase
    args = cli_args.parse_args(sys.argv[1:] if argv is None else argv)

    # 2. Logging bootstrap (stderr, plus an optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    """Dispatch on the parsed arguments; see ``main``."""
    for switch in args.ignored:
        logger.debug(f"Ignoring unrecognized switch: {switch}")

    if args.show_help:
        _print_err(i18n.t("cli.usage"))
        return EXIT_OK

    if len(args.paths) > 1:
        _print_err(i18n.t("cli.errors.too_many_params", arg=args.paths[1]))
        return EXIT_OK

    config = cli_args.args_to_config(args)
    path_given = bool(args.paths)
    root = resolve_root(args.paths[0] if path_given else None)

    # 3. Banner
    _print_banner(root, path_given)

    # 4. Root validation
    if path_given and not is_listable_dir(root):
        logger.debug(f"Root is not a listable directory: {root}")
        _print_err(i18n.t("cli.errors.invalid_path", path=split_drive(root)[1]))
        _print_err(i18n.t("cli.errors.no_subfolders"))
        return EXIT_OK

    # 5. Traversal
    try:
        result = generate_directory_tree(root, config)
    except KeyboardInterrupt:
        _print_err(i18n.t("cli.status.interrupted"))
        return EXIT_INTERRUPTED

    if not result.has_subfolders:
        _print_err(i18n.t("cli.errors.no_subfolders"))

    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_banner(root: str, path_given: bool) -> None:
    """Volume label and serial, then the listed root."""
    volume = get_volume_info(root)
    print(i18n.t("cli.banner.volume", label=volume.label))
    print(i18n.t("cli.banner.serial", serial=volume.serial_text))

    if path_given:
        print(root.upper() if sys.platform == "win32" else root)
    else:
        print(i18n.t("cli.banner.current_dir", drive=split_drive(root)[0]))


def _configure_streams() -> None:
    """
    Make the standard streams able to carry any filename.

    Names that are not valid in the filesystem encoding reach us as
    surrogate escapes; stdout writes them back as the original bytes and
    stderr escapes them. Windows consoles are switched to UTF-8 first.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(errors="backslashreplace")


def _print_err(message: str) -> None:
    print(message, file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
