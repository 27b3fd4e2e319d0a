"""Shared utilities: configuration, logging, exceptions and HTTP helpers."""
