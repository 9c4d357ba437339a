"""Command line interface."""

from modmsg_charset.cli.app import check_file, collect_paths, configure_logging, create_app

__all__ = ["check_file", "collect_paths", "configure_logging", "create_app"]
