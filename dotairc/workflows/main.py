"""
Generate a .airc file from per-technology instruction templates.

Usage:
    dotairc --stack vue,html \
        [--output .airc] \
        [--templates-dir path/to/templates]

    dotairc --list
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotairc.agents.aggregator import Aggregator, parse_stack, report_missing
from dotairc.config.settings import Settings
from dotairc.ingestion.template_loader import DirectoryTemplateLookup

USAGE_ERROR = "Please provide a technology stack using --stack option"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dotairc", description="Generate .airc files for your AI agents")
    parser.add_argument(
        "-stack",
        "--stack",
        metavar="<technologies>",
        nargs="?",
        const="",
        default="",
        help="Comma-separated list of technologies",
    )
    parser.add_argument("-o", "--output", help="Path of the generated file (default: .airc in the current directory).")
    parser.add_argument("--templates-dir", help="Directory containing <technology>.md templates.")
    parser.add_argument("--list", action="store_true", help="List available templates and exit.")
    return parser.parse_args(argv)


def save_document(content: str, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = Settings.from_env()
    templates_dir = Path(args.templates_dir) if args.templates_dir else settings.templates_dir
    lookup = DirectoryTemplateLookup(templates_dir)

    if args.list:
        for tech in lookup.available():
            print(tech)
        return 0

    if not args.stack.strip():
        print(USAGE_ERROR, file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else settings.output_path

    lookup.ensure_dir()
    document = Aggregator().resolve(parse_stack(args.stack), lookup)
    report_missing(document)

    save_document(document.content, output_path)
    print(".airc file generated successfully!")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
