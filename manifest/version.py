"""Manifest builder version."""

VERSION = "2026.10.17"
