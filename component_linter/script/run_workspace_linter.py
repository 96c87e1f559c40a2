#!/usr/bin/env python3

import argparse
import sys
from pathlib import Path
from typing import List


SCRIPT_DIR = Path(__file__).resolve().parent
PACKAGE_ROOT = SCRIPT_DIR.parent
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from component_linter.exceptions import ConfigurationError  # noqa: E402
from component_linter.linter import LintConfig, lint_files  # noqa: E402
from component_linter.linter.run_lint import find_component_files, print_results  # noqa: E402


COMPONENT_DIRS = ["components"]


def resolve_default_paths(workspace: Path) -> List[Path]:
    """Lint the workspace's components directory when it has one, the whole workspace otherwise."""
    paths = [workspace / name for name in COMPONENT_DIRS if (workspace / name).is_dir()]
    return paths or [workspace]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run the component linter for a workspace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "workspace",
        nargs="?",
        default=".",
        help="Workspace root (default: current directory)",
    )
    parser.add_argument(
        "--paths",
        nargs="*",
        default=None,
        help="Optional explicit paths to lint (files or directories)",
    )
    parser.add_argument(
        "--format",
        choices=["human", "json", "github-actions"],
        default="human",
        help="Output format (default: human)",
    )

    args = parser.parse_args()

    workspace = Path(args.workspace or ".").resolve()
    if args.paths:
        lint_targets = [Path(p).resolve() for p in args.paths]
    else:
        lint_targets = resolve_default_paths(workspace)

    try:
        config = LintConfig.discover(workspace)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)
    config.set_logging()

    source_files = find_component_files([str(p) for p in lint_targets], config)
    if not source_files:
        print("No component source files found.", file=sys.stderr)
        sys.exit(1)

    results = lint_files(source_files, config)
    print_results(results, args.format)

    if any(r.errors for r in results):
        sys.exit(1)
    if args.format == "human":
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == "__main__":
    main()
