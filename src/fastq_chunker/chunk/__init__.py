"""Splitting one mate's line stream into numbered chunk files."""
