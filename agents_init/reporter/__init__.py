"""agents-init reporter -- console summaries and the next-steps guide."""

from agents_init.reporter.summary import NEXT_STEPS, SummaryReporter, build_summary_rows

__all__ = [
    "NEXT_STEPS",
    "SummaryReporter",
    "build_summary_rows",
]
