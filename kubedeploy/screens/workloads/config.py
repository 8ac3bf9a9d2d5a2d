"""Workloads screen configuration - column definitions and widget IDs."""

from __future__ import annotations

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

WORKLOAD_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 30),
    ("Namespace", 18),
    ("Ready", 9),
    ("Available", 10),
    ("Health", 12),
    ("Image", 40),
    ("Created", 22),
]

# =============================================================================
# Widget IDs
# =============================================================================

WORKLOADS_TABLE_ID = "workloads-table"
WORKLOADS_STATUS_ID = "workloads-status"

__all__ = [
    "WORKLOADS_STATUS_ID",
    "WORKLOADS_TABLE_ID",
    "WORKLOAD_TABLE_COLUMNS",
]
