from src.reporting.orchestrator import generate_report, generate_report_result
from src.reporting.report_builder import build_report, compute_client_stats
from src.reporting.report_formatter import format_report

__all__ = [
    "build_report",
    "compute_client_stats",
    "format_report",
    "generate_report",
    "generate_report_result",
]
