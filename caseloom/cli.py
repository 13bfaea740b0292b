"""Command-line interface for Caseloom."""

import logging
import sys
from pathlib import Path

import click

from .output.exporter import ExportFormat
from .output.formatter import format_result
from .pipeline.runner import TestDesignPipeline
from .schema.errors import RequestLoadError, RequestValidationError
from .schema.loader import parse_request, parse_request_data


def _build_request(description: str | None, request_file: str | None, options: dict):
    """Build a request from a YAML file or from the command line.

    Flags given on the command line override the file's options.
    """
    if request_file and description:
        raise click.UsageError("Pass DESCRIPTION or --file, not both")
    if request_file:
        request = parse_request(request_file)
        data = request.model_dump()
        data["options"].update({k: v for k, v in options.items() if v is False})
        return parse_request_data(data)
    return parse_request_data({"description": description or "", "options": options})


def _run(pipeline: TestDesignPipeline, description, request_file, options):
    """Run the pipeline, exiting with code 2 on request errors."""
    try:
        request = _build_request(description, request_file, options)
    except RequestLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except RequestValidationError as e:
        click.echo(f"Request validation error: {e}", err=True)
        for line in e.describe():
            click.echo(f"  - {line}", err=True)
        sys.exit(2)

    return pipeline.run(request)


def _category_options(func):
    func = click.option(
        "--no-security", "no_security", is_flag=True, help="Skip security tests"
    )(func)
    func = click.option(
        "--no-boundary", "no_boundary", is_flag=True, help="Skip boundary tests"
    )(func)
    func = click.option(
        "--no-negative", "no_negative", is_flag=True, help="Skip negative tests"
    )(func)
    func = click.option(
        "--file",
        "request_file",
        type=click.Path(exists=True),
        help="YAML request file with a description and options",
    )(func)
    return func


def _options(no_security: bool, no_boundary: bool, no_negative: bool) -> dict:
    return {
        "include_security": not no_security,
        "include_boundary": not no_boundary,
        "include_negative": not no_negative,
    }


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    envvar="CASELOOM_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level (defaults to CASELOOM_LOG_LEVEL env var or WARNING)",
)
def main(log_level: str):
    """Caseloom: generate designed test cases from feature descriptions."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("description", required=False)
@_category_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def generate(
    description: str | None,
    request_file: str | None,
    no_security: bool,
    no_boundary: bool,
    no_negative: bool,
    output_format: str,
):
    """Generate test cases for a feature description.

    DESCRIPTION is the free-text feature description. Use --file to read
    it from a YAML request instead.

    Exit codes:
      0 - Success
      2 - Request file or validation error
    """
    result = _run(
        TestDesignPipeline(),
        description,
        request_file,
        _options(no_security, no_boundary, no_negative),
    )
    click.echo(format_result(result, output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("description", required=False)
@_category_options
@click.option(
    "--to",
    "export_format",
    type=click.Choice([f.value for f in ExportFormat]),
    default=ExportFormat.JSON.value,
    help="Export format",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    help="Write the export to this file instead of stdout",
)
def export(
    description: str | None,
    request_file: str | None,
    no_security: bool,
    no_boundary: bool,
    no_negative: bool,
    export_format: str,
    output_path: str | None,
):
    """Generate test cases and export them.

    DESCRIPTION is the free-text feature description.

    Exit codes:
      0 - Success
      2 - Request file or validation error
    """
    pipeline = TestDesignPipeline()
    result = _run(
        pipeline,
        description,
        request_file,
        _options(no_security, no_boundary, no_negative),
    )
    content = pipeline.export(result.test_cases, export_format)

    if output_path:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        click.echo(f"Exported {len(result.test_cases)} test case(s) to {path}")
    else:
        click.echo(content)
    sys.exit(0)


if __name__ == "__main__":
    main()
