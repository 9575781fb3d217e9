"""CLI configuration — settings and logging setup."""
