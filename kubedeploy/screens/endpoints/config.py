"""Endpoints screen configuration - column definitions and widget IDs."""

from __future__ import annotations

ENDPOINT_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 30),
    ("Namespace", 18),
    ("Type", 14),
    ("Cluster IP", 16),
    ("External IP", 18),
    ("Ports", 36),
    ("Created", 22),
]

ENDPOINTS_TABLE_ID = "endpoints-table"
ENDPOINTS_STATUS_ID = "endpoints-status"

__all__ = [
    "ENDPOINTS_STATUS_ID",
    "ENDPOINTS_TABLE_ID",
    "ENDPOINT_TABLE_COLUMNS",
]
