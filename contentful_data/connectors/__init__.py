"""Endpoint connectors."""

from .contentful import entries

__all__ = ["entries"]
