import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from numeq.book import Book, book_to_dict
from numeq.config import NAME
from numeq.context import (
    MDBOOK_VERSION,
    PreprocessorContext,
    parse_input,
    version_compatible,
)
from numeq.errors import NumEqError
from numeq.json_utils import json_dumps
from numeq.preprocessor import NumEqPreprocessor

try:
    __version__ = version("mdbook-numeq")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

logger = logging.getLogger(__name__)


def _read_input(input_path: Optional[str]) -> tuple[PreprocessorContext, Book]:
    """Read the ``[context, book]`` pair from a file or from stdin.

    Args:
        input_path: File holding the pair; stdin when ``None``.

    Returns:
        The decoded context and book.

    Throws:
        click.ClickException: If the input cannot be decoded.
    """

    if input_path:
        data = Path(input_path).read_bytes()
    else:
        data = sys.stdin.buffer.read()

    try:
        return parse_input(data)
    except NumEqError as exc:
        raise click.ClickException(str(exc)) from exc


def _preprocess(input_path: Optional[str]) -> None:
    """Process the book mdBook sends and echo the result.

    Args:
        input_path: Optional file used instead of stdin.
    """

    ctx, book = _read_input(input_path)

    # A mismatch is reported but does not stop the build.
    if not version_compatible(ctx.mdbook_version):
        logger.warning(
            f"The {NAME} plugin was built against version "
            f"{MDBOOK_VERSION} of mdbook, but we're being called from "
            f"version {ctx.mdbook_version}"
        )

    try:
        pre = NumEqPreprocessor.from_context(ctx)
        processed = pre.run(ctx, book)
    except NumEqError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(json_dumps(book_to_dict(processed)))


@click.group(invoke_without_command=True)
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="NUMEQ_LOG_FILE",
)
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="Read the [context, book] pair from FILE instead of stdin.",
)
@click.version_option(__version__, prog_name="mdbook-numeq")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    trace: bool,
    log_file: Optional[str] = None,
    input_path: Optional[str] = None,
) -> None:
    """Number centered equations of an mdBook book.

    Without a sub-command, behaves as an mdBook preprocessor: reads the
    context and the book from stdin and writes the processed book to
    stdout.

    Args:
        ctx: Click context object.
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
        input_path: Optional file used instead of stdin.
    """
    load_dotenv()

    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        # stdout carries the book, so stay quiet unless something is wrong.
        level = logging.WARNING

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")

    if ctx.invoked_subcommand is None:
        _preprocess(input_path)


@cli.command()
@click.argument("renderer")
def supports(renderer: str) -> None:
    """Check whether a renderer is supported by this preprocessor.

    Exits with status 0 when ``renderer`` is supported.

    Args:
        renderer: Renderer name, such as ``html``.
    """

    pre = NumEqPreprocessor()
    if not pre.supports_renderer(renderer):
        raise click.ClickException(
            f"The {pre.name} preprocessor does not support the "
            f"'{renderer}' renderer"
        )


@cli.command()
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="Read the [context, book] pair from FILE instead of stdin.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
def labels(
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """List the labeled equations of a book.

    Args:
        input_path: Optional file used instead of stdin.
        output_path: Optional file or directory path for the table. If a
            directory is provided, the file is named ``labels.<format>``.
        output_format: Format of the table.
    """

    ctx, book = _read_input(input_path)

    try:
        pre = NumEqPreprocessor.from_context(ctx)
        table = pre.collect_labels(book)
    except NumEqError as exc:
        raise click.ClickException(str(exc)) from exc

    data = {label: info.as_dict() for label, info in table.items()}
    if output_format == "json":
        content = json_dumps(data, pretty=True)
    else:
        content = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)

    # When the user passes a directory, name the file after the format.
    if output_path:
        final_path = Path(output_path)
        if final_path.is_dir():
            final_path = final_path / f"labels.{output_format}"
        final_path.write_text(content, encoding="utf-8")
    else:
        click.echo(content)
