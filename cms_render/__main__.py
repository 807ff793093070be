"""CLI entry point for cms-render.

Usage:
    python -m cms_render validate page.json
    python -m cms_render render page.json --language ar -o page.html
    python -m cms_render schema --type Heading
    python -m cms_render fetch home --language ar
    python -m cms_render health
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from cms_render.client import CmsClient
from cms_render.config import EnvVar, get_default_language, get_environment, get_log_level
from cms_render.core import get_logger, setup_logging
from cms_render.i18n import Language
from cms_render.output import OutputGenerator, format_component_tree
from cms_render.page import HOME_SLUG, load_page
from cms_render.schema import export_component_schemas, export_json_schema, get_schema
from cms_render.validation import validate_page

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

LANGUAGE_CHOICES = [lang.value for lang in Language]


def _read_source(path: str) -> str | None:
    """Read page JSON from a file, or stdin for "-"."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return None


def _write_output(text: str, output: Path | None) -> None:
    if output is None:
        print(text)
        return
    output.write_text(text + "\n", encoding="utf-8")
    logger.info(f"Wrote {output}")


# =============================================================================
# Commands
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    source = _read_source(args.file)
    if source is None:
        return 1

    result = validate_page(source)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif result.success:
        print(format_component_tree(result.data.root, args.language))

    if not result.success:
        logger.error(f"Validation failed: {result.error.message}")
        return 1
    logger.info(f"Valid page ({result.data.root.count_nodes()} components)")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the render command."""
    source = _read_source(args.file)
    if source is None:
        return 1

    result = validate_page(source)
    if not result.success:
        logger.error(f"Validation failed: {result.error.message}")
        return 1

    output = OutputGenerator(default_language=args.language).generate(result.data)
    if args.tree:
        print(output.text_tree, file=sys.stderr)
    _write_output(output.html, args.output)
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    """Handle the schema command."""
    if args.json_schema:
        document = export_json_schema()
    elif args.type:
        schema = get_schema(args.type)
        if schema is None:
            logger.error(f"Unknown component type: {args.type}")
            return 1
        document = schema.to_dict()
    else:
        document = export_component_schemas()

    _write_output(json.dumps(document, indent=2, ensure_ascii=False), args.output)
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the fetch command."""
    with CmsClient(base_url=args.api_url) as client:
        rendered = load_page(client, args.slug, args.language)

    if rendered.metadata:
        logger.info(f"Title: {rendered.metadata.title}")
    _write_output(rendered.to_html(), args.output)

    if rendered.fallback:
        reason = rendered.error.message if rendered.error else "page not available"
        logger.error(f"Rendered fallback for '{args.slug}': {reason}")
        return 1
    return 0


def cmd_health(args: argparse.Namespace) -> int:
    """Handle the health command."""
    with CmsClient(base_url=args.api_url) as client:
        healthy = client.health_check()
        base_url = client.base_url

    if healthy:
        print(f"CMS API at {base_url} is healthy")
        return 0
    print(f"CMS API at {base_url} is unavailable")
    return 1


# =============================================================================
# Parser
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="cms-render",
        description="Validate and render bilingual CMS page content",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    default_language = get_default_language()

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a page content JSON file",
    )
    validate_parser.add_argument("file", type=str, help="Page JSON file ('-' for stdin)")
    validate_parser.add_argument(
        "--language",
        "-l",
        choices=LANGUAGE_CHOICES,
        default=default_language,
        help=f"Language for text previews (default: {default_language})",
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the validation result as JSON",
    )
    validate_parser.set_defaults(func=cmd_validate)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a page content JSON file to HTML",
    )
    render_parser.add_argument("file", type=str, help="Page JSON file ('-' for stdin)")
    render_parser.add_argument(
        "--language",
        "-l",
        choices=LANGUAGE_CHOICES,
        default=default_language,
        help=f"Content language (default: {default_language})",
    )
    render_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    render_parser.add_argument(
        "--tree",
        action="store_true",
        help="Also print the component outline to stderr",
    )
    render_parser.set_defaults(func=cmd_render)

    schema_parser = subparsers.add_parser(
        "schema",
        help="Export component schemas",
    )
    schema_parser.add_argument(
        "--type",
        "-t",
        type=str,
        default=None,
        help="Export a single component type",
    )
    schema_parser.add_argument(
        "--json-schema",
        action="store_true",
        help="Export a JSON Schema document for whole pages",
    )
    schema_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    schema_parser.set_defaults(func=cmd_schema)

    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch a page from the CMS and render it",
    )
    fetch_parser.add_argument(
        "slug",
        nargs="?",
        default=HOME_SLUG,
        help=f"Page slug (default: {HOME_SLUG})",
    )
    fetch_parser.add_argument(
        "--language",
        "-l",
        choices=LANGUAGE_CHOICES,
        default=default_language,
        help=f"Content language (default: {default_language})",
    )
    fetch_parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="CMS API URL (default: CMS_API_URL)",
    )
    fetch_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    fetch_parser.set_defaults(func=cmd_fetch)

    health_parser = subparsers.add_parser(
        "health",
        help="Check CMS API health",
    )
    health_parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="CMS API URL (default: CMS_API_URL)",
    )
    health_parser.set_defaults(func=cmd_health)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(get_log_level(), log_file=get_environment(EnvVar.CMS_LOG_FILE))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
