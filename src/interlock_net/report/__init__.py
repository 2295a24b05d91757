"""Network report: aggregation of the centrality and clique analyses, and export."""

from .aggregator import analyze, analyze_network, build_report
from .export import write_report_csv, write_report_json
from .models import NetworkAnalysis, NetworkReport, ReportSummary

__all__ = [
    "NetworkAnalysis",
    "NetworkReport",
    "ReportSummary",
    "analyze",
    "analyze_network",
    "build_report",
    "write_report_csv",
    "write_report_json",
]
