"""Finance aggregates and report exports."""
from studiodesk.reporting.finance import (
    TAX_RESERVE_RATE,
    dashboard_metrics,
    derived_client_stats,
    finance_summary,
    invoice_rows,
    quotation_rows,
)
from studiodesk.reporting.sinks import write_csv, write_excel

__all__ = [
    "TAX_RESERVE_RATE",
    "dashboard_metrics",
    "derived_client_stats",
    "finance_summary",
    "invoice_rows",
    "quotation_rows",
    "write_csv",
    "write_excel",
]
