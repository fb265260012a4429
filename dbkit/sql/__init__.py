"""Vendor-aware SQL fragment helpers."""

from dbkit.sql.table_prefix import get_table_name_prefix
from dbkit.sql.values import get_trimmed_to_length

__all__ = ["get_table_name_prefix", "get_trimmed_to_length"]
