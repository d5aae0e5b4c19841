"""CLI command modules for tsdecl."""
