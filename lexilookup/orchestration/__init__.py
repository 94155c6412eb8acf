"""Orchestration processors for coordinating services."""

from .lookup_processor import LookupProcessor

__all__ = ["LookupProcessor"]
