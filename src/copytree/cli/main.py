"""Command-line interface for copytree.

This module wires argument parsing, the file walk, tree rendering and content
reading to the output sink, and turns failures into messages and exit codes.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: A directory or file could not be read and -P fail is in effect
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Copy the current directory to the clipboard
    $ copytree

    # Print a subdirectory, skipping build output
    $ copytree --stdout -x "**/target/**" src
"""

import sys
from typing import List, Optional, Sequence

from copytree.cli.argparser import create_parser, permission_action_from_args
from copytree.cli.output_sink import emit_output
from copytree.cli.signal_handler import setup_signal_handling, signal_handler
from copytree.copytree import StreamingCopyTree
from copytree.exceptions import WalkIOError
from copytree.exclusion_rules.composite_rules import CompositeExclusionRules
from copytree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from copytree.exclusion_rules.glob_rules import GlobExclusionRules

EXIT_ERROR = 1
EXIT_IO_ERROR = 126


def format_counts(copy: StreamingCopyTree) -> str:
    """Format the summary counts, one per line. Tokens appear only when counted."""
    result = [
        f"Directories: {copy.directory_count}",
        f"Files: {copy.file_count}",
        f"Skipped contents: {copy.skipped_count}",
        f"Lines: {copy.line_count}",
        f"Characters: {copy.character_count}",
    ]
    if copy.token_count is not None:
        result.insert(4, f"Tokens: {copy.token_count}")
    return "\n".join(result)


def report_warnings(errors: Sequence[WalkIOError]) -> None:
    for error in errors:
        print(f"Warning: {error}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the copytree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: A directory or file could not be read and -P fail is in effect
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated while arguments are parsed
        glob_rules = GlobExclusionRules()
        gitignore_rules = GitIgnoreExclusionRules()

        parser = create_parser(glob_rules, gitignore_rules)
        args = parser.parse_args(argv)
        permission_action = permission_action_from_args(args)

        try:
            copy = StreamingCopyTree(
                args.paths,
                exclusion_rules=CompositeExclusionRules([glob_rules, gitignore_rules]),
                current_dir=glob_rules.current_dir,
                respect_gitignore=not args.no_gitignore,
                include_hidden=args.hidden,
                follow_symlinks=args.follow_symlinks,
                permission_action=permission_action,
                max_file_bytes=args.max_file_bytes,
                tokenizer_model=args.tokenizer,
                skip_files=[args.out] if args.out else (),
            )

            try:
                emit_output(copy.stream(), to_stdout=args.stdout, out_file=args.out)
            except BrokenPipeError:
                pass  # Exit code is decided by the signal handler below

            report_warnings(copy.errors)

            if args.summary:
                print(format_counts(copy), file=sys.stderr)

        except WalkIOError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(EXIT_IO_ERROR)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
