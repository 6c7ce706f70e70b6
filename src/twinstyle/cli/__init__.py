from twinstyle.cli.main import cli

__all__ = ["cli"]
