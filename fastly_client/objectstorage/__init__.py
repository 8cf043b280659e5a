"""Fastly Object Storage resources."""
