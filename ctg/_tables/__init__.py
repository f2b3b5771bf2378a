"""Bundled language and host tables (package data)."""
