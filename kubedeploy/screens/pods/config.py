"""Pods screen configuration - column definitions and widget IDs."""

from __future__ import annotations

POD_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 40),
    ("Namespace", 18),
    ("Phase", 12),
    ("Status", 12),
    ("Restarts", 9),
    ("Image", 36),
    ("Created", 22),
]

ALL_NAMESPACES_LABEL = "All namespaces"

PODS_TABLE_ID = "pods-table"
PODS_STATUS_ID = "pods-status"
PODS_NAMESPACE_SELECT_ID = "pods-namespace"

__all__ = [
    "ALL_NAMESPACES_LABEL",
    "PODS_NAMESPACE_SELECT_ID",
    "PODS_STATUS_ID",
    "PODS_TABLE_ID",
    "POD_TABLE_COLUMNS",
]
