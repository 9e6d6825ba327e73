# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the doctag command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from doctag.compiler.artifact import artifact_path
from doctag.compiler.build import BuildError, extract_file
from doctag.config.settings import CONFIG_FILE_NAME, ConfigError, ExtractorConfig, default_config_text, load_config
from doctag.model.tree import TokenTree

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the doctag CLI."""
    parser = argparse.ArgumentParser(
        prog="doctag",
        description="doctag: documentation comment tag extractor",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a {CONFIG_FILE_NAME} file holding the default grammar settings.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # extract subcommand
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract token trees from node files",
        description="Pair documentation comments with declarations and report missing tag types.",
    )
    extract_parser.add_argument("node_files", nargs="+", metavar="NODE_FILE", help="Node files to process")
    _add_common_arguments(extract_parser)
    extract_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write one artifact per node file into this directory",
    )
    extract_parser.add_argument(
        "--collect",
        action="store_true",
        help="Report every missing tag type instead of stopping at the first",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the token tree of a node file",
        description="Print the extracted token tree of a node file as an indented listing.",
    )
    show_parser.add_argument("node_file", metavar="NODE_FILE", help="Node file to process")
    _add_common_arguments(show_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    subparser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "extract":
        return _cmd_extract(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _load_config(args: argparse.Namespace) -> ExtractorConfig:
    """Load the configuration named on the command line, or the local default file."""
    if args.config is not None:
        return load_config(args.config)
    local = Path.cwd() / CONFIG_FILE_NAME
    if local.exists():
        return load_config(local)
    return ExtractorConfig()


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _cmd_extract(args: argparse.Namespace) -> int:
    """Handle the extract subcommand."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output_dir is not None:
        duplicates = _shared_artifact_names(args.node_files)
        if duplicates:
            print(
                f"Error: node files would overwrite each other's artifacts: {', '.join(duplicates)}",
                file=sys.stderr,
            )
            return 1

    has_errors = False
    for node_file in args.node_files:
        try:
            result = extract_file(
                Path(node_file),
                config=config,
                output_dir=args.output_dir,
                fail_fast=not args.collect,
            )
        except BuildError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            has_errors = True
            continue

        for diagnostic in result.diagnostics:
            print(f"Error: {diagnostic.message}", file=sys.stderr)
            has_errors = True
        if result.tree is not None:
            print(f"{result.source_file}: {len(result.tree)} comment(s)")

    return 1 if has_errors else 0


def _shared_artifact_names(node_files: list[str]) -> list[str]:
    """Return the node files whose artifact name is already taken by an earlier file."""
    seen: set[Path] = set()
    duplicates: list[str] = []
    for node_file in node_files:
        target = artifact_path(Path(node_file), Path())
        if target in seen:
            duplicates.append(node_file)
        seen.add(target)
    return duplicates


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    try:
        config = _load_config(args)
        result = extract_file(Path(args.node_file), config=config)
    except (ConfigError, BuildError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result.tree is None:
        for diagnostic in result.diagnostics:
            print(f"Error: {diagnostic.message}", file=sys.stderr)
        return 1

    print(_format_tree(result.tree))
    return 0


def _format_tree(tree: TokenTree) -> str:
    """Render a token tree as an indented listing, one token per line."""
    lines: list[str] = []
    for index, comment in enumerate(tree.comments, start=1):
        lines.append(f"comment {index}")
        for tok in comment.children:
            parts = [f"  {tok.label}: {tok.content}"]
            if tok.type is not None:
                parts.append(f"type={'|'.join(tok.type)}")
            if tok.name is not None:
                parts.append(f"name={','.join(tok.name)}")
            if tok.description is not None:
                parts.append(f"description={tok.description!r}")
            lines.append("  ".join(parts))
    return "\n".join(lines)
