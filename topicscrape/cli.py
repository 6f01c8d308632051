"""topicscrape CLI: extract topic pages to CSV or JSON.

Usage:
    topicscrape URL [URL ...]                   # Write ./topic.csv
    topicscrape URL --file answers.csv          # Write ./answers.csv
    topicscrape URL --json                      # Print JSON to stdout
    topicscrape URL --timeout 30 -v             # Bounded fetch, debug logging
"""

from __future__ import annotations

import logging

import click

from topicscrape.common.exceptions import TopicScrapeException
from topicscrape.common.request_manager import (
    DEFAULT_USER_AGENT,
    SyncRequestManager,
)
from topicscrape.data_types import Topic
from topicscrape.driver import TopicDriver
from topicscrape.output import (
    DEFAULT_CSV_FILENAME,
    render_json,
    resolve_output_path,
    write_csv,
)


@click.command()
@click.version_option(package_name="topicscrape")
@click.argument("urls", nargs=-1, required=True)
@click.option(
    "--file",
    "filename",
    default=DEFAULT_CSV_FILENAME,
    show_default=True,
    help="CSV file name, always written under the current directory.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the topic as JSON to stdout instead of writing CSV.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Request timeout in seconds (default: no timeout).",
)
@click.option(
    "--user-agent",
    default=DEFAULT_USER_AGENT,
    show_default=True,
    help="User-Agent header sent with each request.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def cli(
    urls: tuple[str, ...],
    filename: str,
    as_json: bool,
    timeout: float | None,
    user_agent: str,
    verbose: bool,
) -> None:
    """Extract the question, linked questions and comments of topic pages.

    URLS are processed one after another. The first fetch, parse or output
    error stops the run.

    \b
    Examples:
        topicscrape https://example.com/topic/42
        topicscrape https://example.com/topic/42 --json
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    output_path = resolve_output_path(filename)

    def emit(url: str, topic: Topic) -> None:
        if as_json:
            click.echo(render_json(topic, url))
            return
        write_csv(topic, output_path, url)
        click.echo(f"The file ./{output_path} was successfully written")

    with SyncRequestManager(
        timeout=timeout, user_agent=user_agent
    ) as request_manager:
        driver = TopicDriver(
            urls, request_manager=request_manager, on_topic=emit
        )
        try:
            driver.run()
        except TopicScrapeException as e:
            raise click.ClickException(str(e)) from e


def main() -> None:
    """Entry point for the ``topicscrape`` console script."""
    cli()
