"""
Quake Log Report Tools

This package provides command-line tools that turn a Quake 3 Arena server
log into match reports, Excel workbooks and score charts.
"""

from .match_report import MatchReportTool
from .match_excel import MatchExcelTool
from .kill_chart import KillChartTool

__all__ = [
    'MatchReportTool',
    'MatchExcelTool',
    'KillChartTool',
]
