"""Reconciliation helpers for operator-managed cluster resources, with an in-memory client."""

__version__ = "0.13.0"
__all__ = ["cache", "client", "environment", "labels", "objects", "request", "resource"]