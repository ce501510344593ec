"""CLI entry point for copyscape-client."""

import logging
from pathlib import Path

import click

from copyscape_client.api.base import SearchIndex
from copyscape_client.client import CopyscapeClient
from copyscape_client.config import DEFAULT_ENCODING, ClientSettings, Credentials, load_config
from copyscape_client.errors import ConfigError
from copyscape_client.examples import run_examples
from copyscape_client.response.render import wrap_node
from copyscape_client.response.result import ApiResult

INDEX_CHOICE = click.Choice([i.value for i in SearchIndex])


def _make_client(ctx: click.Context) -> CopyscapeClient:
    """Build a client from --config and/or --username/--api-key (flags win)."""
    opts = ctx.obj
    username, api_key = opts["username"], opts["api_key"]
    settings = ClientSettings()

    if opts["config_path"] is not None:
        try:
            credentials, settings = load_config(opts["config_path"])
        except ConfigError as e:
            raise click.UsageError(str(e)) from e
        username = username or credentials.username
        api_key = api_key or credentials.api_key

    if not username or not api_key:
        raise click.UsageError(
            "Missing credentials: use --config, --username/--api-key, "
            "or COPYSCAPE_USERNAME/COPYSCAPE_API_KEY."
        )

    return CopyscapeClient(Credentials(username=username, api_key=api_key), settings)


def _emit(result: ApiResult, html: bool) -> None:
    """Print the rendered response; exit 1 on no result or API error."""
    if result.failed:
        click.echo("No result: the request or response could not be processed.", err=True)
        raise SystemExit(1)

    click.echo(wrap_node(result.response) if html else result.rendered.lstrip("\n"))

    if result.error is not None:
        click.echo(f"API error: {result.error}", err=True)
        raise SystemExit(1)


def _read_text(file_path: Path, encoding: str) -> str:
    try:
        return file_path.read_text(encoding=encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise click.BadParameter(f"Cannot read {file_path} as {encoding}: {e}") from e


html_option = click.option("--html", is_flag=True, help="Print an HTML fragment instead of plain text.")
full_option = click.option(
    "--full", default=0, type=click.IntRange(min=0), help="Full comparisons for the first N results (0 = none)."
)
index_option = click.option("--index", default="internet", type=INDEX_CHOICE, help="Index to search.")
encoding_option = click.option("--encoding", default=DEFAULT_ENCODING, help="Character encoding of the text.")
id_option = click.option("--id", "doc_id", default=None, help="Your own identifier for the document.")


@click.group()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with username, api_key and optional endpoint settings.",
)
@click.option("--username", envvar="COPYSCAPE_USERNAME", default=None, help="Copyscape account name.")
@click.option("--api-key", envvar="COPYSCAPE_API_KEY", default=None, help="Copyscape API key.")
@click.option("-v", "--verbose", is_flag=True, help="Log each call.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, username: str | None, api_key: str | None, verbose: bool):
    """Copyscape Premium API client: search, manage the private index, check balance."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"config_path": config_path, "username": username, "api_key": api_key}


@main.command()
@html_option
@click.pass_context
def balance(ctx: click.Context, html: bool):
    """Show the account balance."""
    _emit(_make_client(ctx).check_balance(), html)


@main.command()
@click.argument("url")
@index_option
@full_option
@html_option
@click.pass_context
def search_url(ctx: click.Context, url: str, index: str, full: int, html: bool):
    """Search for copies of the page at URL."""
    _emit(_make_client(ctx).search_url(url, SearchIndex(index), full), html)


@main.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@encoding_option
@index_option
@full_option
@html_option
@click.pass_context
def search_text(ctx: click.Context, file_path: Path, encoding: str, index: str, full: int, html: bool):
    """Search for copies of the text in FILE_PATH."""
    text = _read_text(file_path, encoding)
    _emit(_make_client(ctx).search_text(text, encoding, SearchIndex(index), full), html)


@main.command()
@click.argument("url")
@id_option
@html_option
@click.pass_context
def add_url(ctx: click.Context, url: str, doc_id: str | None, html: bool):
    """Add the page at URL to the private index."""
    _emit(_make_client(ctx).url_add_to_private(url, id=doc_id), html)


@main.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@encoding_option
@click.option("--title", default=None, help="Title stored with the document.")
@id_option
@html_option
@click.pass_context
def add_text(ctx: click.Context, file_path: Path, encoding: str, title: str | None, doc_id: str | None, html: bool):
    """Add the text in FILE_PATH to the private index."""
    text = _read_text(file_path, encoding)
    _emit(_make_client(ctx).text_add_to_private(text, encoding, title=title, id=doc_id), html)


@main.command()
@click.argument("handle")
@html_option
@click.pass_context
def delete(ctx: click.Context, handle: str, html: bool):
    """Delete a document from the private index by HANDLE."""
    _emit(_make_client(ctx).delete_from_private(handle), html)


@main.command()
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output HTML file.")
@click.pass_context
def examples(ctx: click.Context, output: Path):
    """Run every API action once and save the responses as an HTML page."""
    client = _make_client(ctx)
    click.echo("Running example calls...")
    page = run_examples(client)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page, encoding="utf-8")
    click.echo(f"Responses saved to {output}")
