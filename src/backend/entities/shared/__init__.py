"""Shared database plumbing for the entity modules."""

from .pg_client import PostgresClient
from .protocols import SqlExecutor

__all__ = [
    "PostgresClient",
    "SqlExecutor",
]
