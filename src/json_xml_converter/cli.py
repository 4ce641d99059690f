"""Command-line interface for the JSON XML Converter."""

import logging
import sys
import click
from pathlib import Path
from typing import Optional
from .converter import JsonXmlConverter
from .io import DEFAULT_INDENT
from .types import ConversionError, ConversionResult, Direction


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def _report(result: ConversionResult, output: Optional[Path]) -> None:
    if not result.success:
        click.echo("❌ Conversion failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    if output:
        click.echo(f"✅ Successfully wrote {result.direction.value} output to {result.output_path}")
    else:
        click.echo(result.output, nl=False)


def _run(input_file: Path, output: Optional[Path], indent: int,
         direction: Optional[Direction]) -> None:
    with JsonXmlConverter(default_indent=indent, max_workers=1) as converter:
        if output:
            result = converter.convert_file(input_file, output, direction=direction)
        else:
            resolved_direction = direction or _direction_for(input_file)
            try:
                text = converter.file_writer.read_text(input_file)
            except ConversionError as e:
                result = ConversionResult(False, resolved_direction, "", errors=[str(e)])
            else:
                result = converter.convert(text, resolved_direction)
    _report(result, output)


def _direction_for(input_file: Path) -> Direction:
    if input_file.suffix.lower() == ".xml":
        return Direction.XML_TO_JSON
    if input_file.suffix.lower() == ".json":
        return Direction.JSON_TO_XML
    raise click.BadParameter(f"cannot pick a direction for '{input_file.name}'", param_hint="INPUT_FILE")


@click.group()
@click.version_option(version="1.0.0")
def main():
    """JSON XML Converter - Convert between JSON and XML documents."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output XML file (default: stdout)')
@click.option('--indent', '-i', default=DEFAULT_INDENT, type=click.IntRange(min=0),
              help='Spaces per nesting level (default: 4)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def json2xml(input_file: Path, output: Optional[Path], indent: int, verbose: bool):
    """Convert a JSON file to XML."""
    _configure_logging(verbose)
    _run(input_file, output, indent, Direction.JSON_TO_XML)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file (default: stdout)')
@click.option('--indent', '-i', default=DEFAULT_INDENT, type=click.IntRange(min=0),
              help='Spaces per nesting level (default: 4)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def xml2json(input_file: Path, output: Optional[Path], indent: int, verbose: bool):
    """Convert an XML file to JSON."""
    _configure_logging(verbose)
    _run(input_file, output, indent, Direction.XML_TO_JSON)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file (default: stdout)')
@click.option('--indent', '-i', default=DEFAULT_INDENT, type=click.IntRange(min=0),
              help='Spaces per nesting level (default: 4)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def convert(input_file: Path, output: Optional[Path], indent: int, verbose: bool):
    """Convert a .json file to XML or a .xml file to JSON."""
    _configure_logging(verbose)
    _run(input_file, output, indent, None)


if __name__ == '__main__':
    main()
