"""Report export for placement-prep."""
from placement_prep.export.report import (
    default_report_name,
    render_report,
    save_report,
)

__all__ = ["render_report", "save_report", "default_report_name"]
