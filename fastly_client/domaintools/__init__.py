"""Fastly Domain Research API tools."""
