"""
Summary: Public surface for the tab-delimited attribute exchange table.
Why: Provide a stable import path for the list and apply pipelines.
"""

from .table_codec import parse_row, read_table, render_row, write_table

__all__ = ["parse_row", "read_table", "render_row", "write_table"]
