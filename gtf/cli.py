"""Command line entry point.

Usage:
    gtf list [--category number] [--search time]
    gtf render page.html.j2 --context context.yaml [--text]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import yaml
from jinja2 import FileSystemLoader, TemplateError

from gtf.catalog import HelperCategory, get_helper_registry, new

logger = logging.getLogger(__name__)


def load_context(path: Optional[Path]) -> dict[str, Any]:
    """Load a YAML (or JSON) mapping used as the template context.

    Raises:
        ValueError: If the file does not hold a mapping
    """
    if path is None:
        return {}
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Context file must contain a mapping: {path}")
    return data


def cmd_list(args: argparse.Namespace) -> int:
    registry = get_helper_registry()
    if args.search:
        definitions = registry.search(args.search)
    elif args.category:
        definitions = registry.list_by_category(HelperCategory(args.category))
    else:
        definitions = registry.list_all()

    for d in definitions:
        params = ", ".join(d.parameters)
        print(f"{d.name:<16} {d.category.value:<10} ({params})  {d.description}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    template_path: Path = args.template
    try:
        context = load_context(args.context)
        env = new(
            loader=FileSystemLoader(str(template_path.parent)),
            autoescape=not args.text,
        )
        template = env.get_template(template_path.name)
        sys.stdout.write(template.render(**context))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except TemplateError as e:
        print(f"ERROR: Template rendering error for {template_path}: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gtf", description="Jinja2 template helper catalog")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List catalog helpers")
    list_parser.add_argument(
        "--category",
        choices=[c.value for c in HelperCategory],
        help="Only helpers in this category",
    )
    list_parser.add_argument("--search", help="Filter by name or description")
    list_parser.set_defaults(func=cmd_list)

    render_parser = subparsers.add_parser("render", help="Render a template file with the catalog loaded")
    render_parser.add_argument("template", type=Path, help="Path to the template file")
    render_parser.add_argument("--context", type=Path, help="YAML or JSON file with template variables")
    render_parser.add_argument("--text", action="store_true", help="Disable HTML autoescaping")
    render_parser.set_defaults(func=cmd_render)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug(f"Running command: {args.command}")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
