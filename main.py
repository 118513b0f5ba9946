"""CLI entrypoint for the word search puzzle generator."""

from wordsearch.cli import cli


if __name__ == "__main__":  # pragma: no cover
    cli()
