"""Interlocking affiliation network analysis: projections, centrality and cliques."""

__version__ = "0.1.0"

from interlock_net.config import AnalysisConfig as AnalysisConfig
from interlock_net.network_analysis.network import AffiliationRecord as AffiliationRecord
from interlock_net.report import NetworkReport as NetworkReport
from interlock_net.report import analyze as analyze
from interlock_net.report import analyze_network as analyze_network
