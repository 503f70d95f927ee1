"""Command modules for Tasklist CLI."""
