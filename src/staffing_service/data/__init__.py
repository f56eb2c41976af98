"""Bundled sample dataset."""
