"""Command-line argument parsing for copytree.

This module defines the command-line interface for copytree, handling argument
parsing and validation.
"""

import argparse
from typing import Any, List, Optional, Sequence, Type, Union

from copytree import __version__
from copytree.content.size_limit import DEFAULT_MAX_FILE_BYTES, parse_file_size
from copytree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from copytree.exclusion_rules.glob_rules import GlobExclusionRules
from copytree.walker.permission_action import PermissionAction

PERMISSION_ACTIONS = {
    "ignore": PermissionAction.IGNORE,
    "warn": PermissionAction.WARN,
    "fail": PermissionAction.RAISE,
}


def create_exclusion_actions(
    glob_rules: GlobExclusionRules, gitignore_rules: GitIgnoreExclusionRules
) -> Type[argparse.Action]:
    """Create an action class that feeds exclusion options into rule objects.

    Rules are added while arguments are processed, so a gitignore-style pattern that
    cannot be compiled fails before any filesystem work starts. The raw values are also
    collected on the namespace under the option's ``dest``.

    Args:
        glob_rules: Receives ``-x/--exclude`` patterns.
        gitignore_rules: Receives ``-i/--ignore`` patterns and ``--ignore-file`` files.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            value = str(values)

            if self.dest == "exclude":
                glob_rules.add_rule(value)
            elif self.dest == "ignore":
                gitignore_rules.add_rule(value)
            else:
                gitignore_rules.load_rules(value)

            collected: List[str] = list(getattr(namespace, self.dest, None) or [])
            collected.append(value)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(glob_rules: GlobExclusionRules, gitignore_rules: GitIgnoreExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        glob_rules: Rules object populated from ``-x/--exclude`` during parsing.
        gitignore_rules: Rules object populated from ``-i/--ignore`` and ``--ignore-file``.

    Returns:
        An ArgumentParser instance configured with copytree's options.
    """
    description = """
    copytree: copy a directory tree and the contents of its files as one block of text.

    The output starts with an ASCII tree of the included files, followed by one section
    per file with a header line and the file's contents. It is copied to the clipboard
    unless --stdout or -o/--out is given, which makes it easy to paste a project into
    a chat with a language model.

    Files ignored by .gitignore, hidden files and symbolic links are left out by default.
    Files larger than --max-file-bytes and binary files are listed in the tree but their
    contents are replaced by a short notice.
    """

    epilog = """
    Examples:
      # Copy the current directory to the clipboard
      copytree

      # Print two directories instead of copying them
      copytree --stdout src docs

      # Exclude paths with glob patterns (** spans directories)
      copytree -x "**/target/**" -x "*.lock" .

      # Exclude paths with gitignore-style patterns
      copytree -i "*.log" -i "!keep.log" --ignore-file .dockerignore

      # Include large files, hidden files and ignored files
      copytree --max-file-bytes 0 --hidden --no-gitignore

      # Write to a file and report counts, including tokens for gpt-4
      copytree -o context.txt -s -t gpt-4
    """

    parser = argparse.ArgumentParser(
        prog="copytree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"copytree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_actions(glob_rules, gitignore_rules)

    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        metavar="PATH",
        help="Files and directories to include (default: the current directory).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Glob pattern for paths to exclude, matched against the whole path relative to the "
            "current directory. '*' and '?' stay within one path component, '**' matches any "
            "number of components. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern for paths to exclude, including directory markers (build/) "
            "and negations (!keep.log). Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "--ignore-file",
        metavar="FILE",
        action=ExclusionAction,
        help="File of gitignore-style patterns to exclude (can be specified multiple times).",
    )
    parser.add_argument(
        "--max-file-bytes",
        type=parse_file_size,
        default=DEFAULT_MAX_FILE_BYTES,
        metavar="SIZE",
        help=(
            "Skip the contents of files larger than SIZE, e.g. 16384, 16KiB or 1MB "
            f"(default: {DEFAULT_MAX_FILE_BYTES}). 0 disables the limit."
        ),
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not honor .gitignore files.",
    )
    parser.add_argument(
        "--hidden",
        action="store_true",
        help="Include hidden files and directories. The .git directory is always skipped.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links during traversal. By default, symbolic links are skipped.",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print to standard output instead of copying to the clipboard.",
    )
    output_group.add_argument(
        "-o",
        "--out",
        metavar="FILE",
        help="Write to FILE instead of copying to the clipboard.",
    )

    parser.add_argument(
        "-P",
        "--permission-action",
        choices=list(PERMISSION_ACTIONS),
        default="fail",
        help="How to handle directories and files that cannot be read (default: fail).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory, file, line, character and token counts to stderr.",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model to use for counting tokens (e.g., gpt-4). Specifying this enables token counting.",
    )

    return parser


def permission_action_from_args(args: argparse.Namespace) -> PermissionAction:
    """Map the -P/--permission-action choice to a PermissionAction."""
    return PERMISSION_ACTIONS[args.permission_action]
