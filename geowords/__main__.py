import sys

import click

from .errors import ConfigError


def main():
    """Entry point; settings are read on import, so a bad setting stops here with status 2."""
    try:
        from .cli import cli
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    cli(prog_name="geowords")


if __name__ == "__main__":
    main()
