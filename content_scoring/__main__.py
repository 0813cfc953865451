"""Main entry point for the content scoring package."""

from content_scoring.cli import cli

if __name__ == "__main__":
    cli()
