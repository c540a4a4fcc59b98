"""Companion command-line tools (balance check, single test mint)."""
