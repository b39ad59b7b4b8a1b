"""
codemass - Main CLI Entry Point

Weigh your code in tokens: duyet cay thu muc, dem token cho moi file text
va uoc tinh chi phi theo bang gia cua LLM model.

Flow: parse options -> ExclusionConfig -> FileScanner -> summarize -> report
"""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from config.model_config import (
    DEFAULT_MODEL_ID,
    format_model_list,
    get_model_pricing,
    get_pricing_table,
)
from core.aggregator import summarize
from core.exceptions import ConfigurationError, FatalScanError, InvalidPathError
from core.exclusion_policy import build_exclusion_config, parse_exclude_option
from core.logging_config import flush_logs, set_debug_mode
from core.utils.file_scanner import FileScanner, validate_root
from services.interfaces.tokenization_service import ITokenizationService
from services.report_service import render_header, render_report
from services.tokenization_service import TokenizationService

# Errors va diagnostics ra stderr, report ra stdout
err_console = Console(stderr=True)

EPILOG = (
    "Examples: codemass | codemass --model gpt-5 | codemass --no-json --no-yaml | "
    "codemass --exclude .test.js | codemass --list-models. "
    "Counts all non-binary text files by default, always respects .gitignore, "
    "token count uses OpenAI's o200k_base tokenizer."
)

app = typer.Typer(
    name="codemass",
    help="codemass - Weigh your code in tokens",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def create_token_counter() -> ITokenizationService:
    """Tao token counter cho mot lan chay CLI."""
    return TokenizationService()


def _fail(message: str, hint: Optional[str] = None) -> NoReturn:
    """In loi mau do ra stderr va exit 1."""
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    if hint:
        err_console.print(hint)
    raise typer.Exit(1)


@app.command(epilog=EPILOG)
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Directory to analyze (default: current directory)",
        show_default=False,
    ),
    exclude: Optional[str] = typer.Option(
        None,
        "--exclude",
        help="Exclude extensions or test/spec files (comma-separated, e.g. .lock,.test.ts)",
    ),
    no_json: bool = typer.Option(False, "--no-json", help="Exclude JSON files"),
    no_markdown: bool = typer.Option(
        False, "--no-markdown", "--no-md", help="Exclude Markdown files"
    ),
    no_yaml: bool = typer.Option(False, "--no-yaml", help="Exclude YAML files"),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help=f"LLM model for pricing (default: {DEFAULT_MODEL_ID})",
    ),
    list_models: bool = typer.Option(
        False, "--list-models", help="List available models and pricing"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """
    Weigh your code in tokens.
    """
    if verbose:
        set_debug_mode(True)

    try:
        _run(path, exclude, no_json, no_markdown, no_yaml, model, list_models)
    finally:
        flush_logs()


def _run(
    path: Optional[Path],
    exclude: Optional[str],
    no_json: bool,
    no_markdown: bool,
    no_yaml: bool,
    model: Optional[str],
    list_models: bool,
) -> None:
    try:
        pricing_table = get_pricing_table()
    except ConfigurationError as e:
        _fail(str(e))

    if list_models:
        typer.echo("\nAvailable Models:\n")
        typer.echo(format_model_list(pricing_table))
        raise typer.Exit(0)

    model_id = model or DEFAULT_MODEL_ID
    try:
        pricing = get_model_pricing(model_id, pricing_table)
    except ConfigurationError as e:
        _fail(str(e), "Use --list-models to see available models")

    project_root = path if path is not None else Path.cwd()
    try:
        validate_root(project_root)
    except InvalidPathError as e:
        _fail(str(e))

    typer.echo(render_header(str(project_root)))

    exclusion = build_exclusion_config(
        parse_exclude_option(exclude),
        no_json=no_json,
        no_markdown=no_markdown,
        no_yaml=no_yaml,
    )
    token_counter = create_token_counter()
    scanner = FileScanner(token_counter, exclusion=exclusion)

    try:
        records = scanner.scan(project_root)
    except FatalScanError as e:
        _fail(str(e))

    summary = summarize(records)
    typer.echo(
        render_report(
            summary,
            model_id,
            pricing,
            encoding_label=token_counter.encoding_label,
            is_estimated=token_counter.is_estimated,
        )
    )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
