import logging
import os
import sys
from pathlib import Path

import click

sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from bencode import BencodeDecodeError
from torrent import is_torrent_file, load_torrent, render_summary
from torrent.summary import MAX_FILES_DISPLAY


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--max-files", default=MAX_FILES_DISPLAY, show_default=True, help="Files listed per torrent")
@click.option("--magnet-only", is_flag=True, help="Print only the magnet link")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(paths, max_files, magnet_only, verbose):
    """Print the metadata of one or more .torrent files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    failed = False
    for path in paths:
        if not is_torrent_file(path):
            click.echo(f"[Warn] {path} does not have a .torrent extension", err=True)

        try:
            meta = load_torrent(path)
        except (BencodeDecodeError, OSError) as exc:
            click.echo(f"[Error] {path}: {exc}", err=True)
            failed = True
            continue

        if magnet_only:
            click.echo(meta.magnet_link or "")
        else:
            click.echo(render_summary(meta, max_files=max_files))
            click.echo()

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
