"""Document store connection management."""

from vrs.database.connection import (
    Connection,
    ConnectionManager,
    StoreError,
    StoreNotConnected,
    UnsupportedDatabaseURL,
    get_connection,
    get_connection_manager,
    set_connection_manager,
)

__all__ = [
    "Connection",
    "ConnectionManager",
    "StoreError",
    "StoreNotConnected",
    "UnsupportedDatabaseURL",
    "get_connection",
    "get_connection_manager",
    "set_connection_manager",
]
