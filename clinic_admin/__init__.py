"""Typed async client for the clinic administration REST API."""

__version__ = "0.1.0"
