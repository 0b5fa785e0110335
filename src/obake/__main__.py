"""Main entry point for obake."""

from obake.cli.main import cli

if __name__ == "__main__":
    cli()
