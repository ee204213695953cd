"""CLI subcommands for layoutctl."""
