"""Command-line interface for the registry analyzer.

Loads a business registry CSV and starts the interactive shell:

    registry-analyzer data/businesses.csv AL
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from registry_analyzer.config import get_settings
from registry_analyzer.errors import RegistryError
from registry_analyzer.ingest.load_store import load_store
from registry_analyzer.logging_config import configure_logging
from registry_analyzer.shell import RegistryShell

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(
        prog="registry-analyzer",
        description="Answer summary queries over a business registry CSV.",
    )
    p.add_argument("path", nargs="?", type=Path, default=None,
                   help="registry CSV (defaults to REGISTRY_DATA_PATH)")
    p.add_argument("list_impl", nargs="?", choices=["AL", "LL"], default="AL",
                   help="list implementation toggle, accepted for compatibility and ignored")
    p.add_argument("--lenient", action="store_true",
                   help="skip malformed lines instead of aborting the load")
    p.add_argument("--log-file", type=Path, default=None)
    p.add_argument("--log-level", default=None,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging, load data and run the shell."""
    parser = build_parser()
    args = parser.parse_args(argv)
    s = get_settings()

    level = getattr(logging, args.log_level) if args.log_level else s.log_level
    configure_logging(args.log_file or s.log_path, level)

    path = args.path or s.data_path
    if path is None:
        parser.error("no registry file given and REGISTRY_DATA_PATH is not set")
    log.debug("List implementation %s requested; records are always held in a tuple", args.list_impl)

    strict = s.strict_load and not args.lenient
    try:
        store = load_store(path, strict=strict)
    except RegistryError as e:
        log.error("Failed to load %s: %s", path, e)
        raise SystemExit(1) from e

    RegistryShell(store, history_size=s.history_size).run()


if __name__ == "__main__":
    main()
