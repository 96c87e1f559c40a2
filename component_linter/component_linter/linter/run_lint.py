#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for linting component source files."""

import argparse
import fnmatch
import json
import sys
from pathlib import Path
from typing import Dict, List, Sequence

from ..exceptions import ConfigurationError
from ..utils.source_location import format_source, location_from_entry
from . import lint_files, LintResult
from .lint_config import ALWAYS_EXCLUDED_DIRS, LintConfig
from .rules import RULES


def _is_excluded(path: Path, config: LintConfig) -> bool:
    if any(part in ALWAYS_EXCLUDED_DIRS for part in path.parts):
        return True
    posix = path.as_posix()
    return any(fnmatch.fnmatch(posix, pattern) for pattern in config.exclude)


def find_component_files(paths: Sequence[str], config: LintConfig) -> List[Path]:
    """Find all component source files in given paths."""
    source_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            # Explicitly named files are linted whatever their extension
            source_files.append(path)
        elif path.is_dir():
            for ext in config.extensions:
                source_files.extend(
                    p for p in path.rglob(f'*{ext}') if p.is_file() and not _is_excluded(p, config)
                )
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(source_files))


def parse_rule_overrides(values: Sequence[str]) -> Dict[str, str]:
    """Parse ``--rule NAME=SEVERITY`` arguments."""
    overrides = {}
    for value in values:
        name, sep, severity = value.partition('=')
        if not sep or not name or not severity:
            raise ConfigurationError(f"Invalid --rule value '{value}', expected NAME=SEVERITY")
        overrides[name.strip()] = severity.strip()
    return overrides


def print_rules(config: LintConfig) -> None:
    width = max(len(name) for name in RULES)
    for name, rule in RULES.items():
        print(f"{name:<{width}}  {config.severity_for(name):<7}  {rule.description}")


def print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [
                {
                    'file': str(r.file_path),
                    'errors': r.errors,
                    'warnings': r.warnings,
                }
                for r in results
            ]
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for level, entries in (('error', result.errors), ('warning', result.warnings)):
                for entry in entries:
                    title = f",title={entry['rule']}" if 'rule' in entry else ""
                    print(
                        f"::{level} file={result.file_path},line={entry.get('line', 1)},"
                        f"col={entry.get('column', 1)}{title}::{entry['message']}"
                    )
    else:  # human-readable
        for result in results:
            for level, entries in (('ERROR', result.errors), ('WARNING', result.warnings)):
                for entry in entries:
                    loc = format_source(location_from_entry(result.file_path, entry))
                    rule = f"  [{entry['rule']}]" if 'rule' in entry else ""
                    print(f"{loc}: {level}: {entry['message']}{rule}")
                    if 'docs_url' in entry:
                        print(f"    see {entry['docs_url']}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        description='Lint exported component descriptors in JavaScript sources',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Configuration file (default: nearest .component-lint.yaml)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--rule',
        action='append',
        default=[],
        metavar='NAME=SEVERITY',
        help='Override a rule severity (error, warning or off); may be repeated',
    )
    parser.add_argument(
        '--list-rules',
        action='store_true',
        help='List the available rules and their severities, then exit',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    args = parser.parse_args(argv)

    if not args.paths:
        args.paths = ['.']

    try:
        if args.config:
            config = LintConfig.from_file(args.config)
        else:
            config = LintConfig.discover(args.paths[0])
        config = config.with_rule_overrides(parse_rule_overrides(args.rule))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    # json and github-actions reports own stdout
    config.set_logging(verbose=args.verbose, stderr_only=args.format != 'human')

    if args.list_rules:
        print_rules(config)
        sys.exit(0)

    source_files = find_component_files(args.paths, config)

    if not source_files:
        print("No component source files found.", file=sys.stderr)
        sys.exit(1)

    results = lint_files(source_files, config)
    print_results(results, args.format)

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print(f"Lint succeeded with no errors ({len(results)} files checked).")
    sys.exit(0)


if __name__ == '__main__':
    main()
