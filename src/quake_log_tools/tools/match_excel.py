#!/usr/bin/env python3
"""
Match Excel Export Tool

Exports every match of a Quake 3 Arena log to an Excel workbook with a
summary sheet and a per-player score sheet.
"""

import argparse
import logging
import os
from typing import Dict, Any, List, Optional

try:
    import pandas as pd
    import openpyxl
except ImportError:
    raise ImportError("This tool requires pandas and openpyxl. Install with: pip install pandas openpyxl")

from ..base import QuakeTool, FileBasedTool
from ..log import LogSource
from ..parser import MatchReport

__all__ = ['MatchExcelTool', 'main']

logger = logging.getLogger(__name__)


class MatchExcelTool(FileBasedTool):
    """Tool for exporting match reports to Excel."""

    SUMMARY_SHEET = "Matches"
    SCORES_SHEET = "Scores"

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the match excel tool.

        Args:
            config: Optional configuration dictionary
        """
        super().__init__(config)
        self.initialize_directories()

    def build_frames(self, reports: List[MatchReport]):
        """
        Build the summary and score DataFrames.

        Args:
            reports: Match reports in encounter order

        Returns:
            Tuple of (summary DataFrame, scores DataFrame)
        """
        summary = pd.DataFrame(
            [{"Match": r.name, "Total Kills": r.total_kills, "Players": ", ".join(r.players)}
             for r in reports],
            columns=["Match", "Total Kills", "Players"],
        )

        # Matches stay in encounter order, players ranked by score within each match
        scores = pd.DataFrame(
            [{"Match": r.name, "Player": player, "Score": score}
             for r in reports
             for player, score in sorted(r.kills.items(), key=lambda item: item[1], reverse=True)],
            columns=["Match", "Player", "Score"],
        )

        return summary, scores

    def _autosize_columns(self, worksheet, df) -> None:
        """Widen each column to fit its longest value."""
        for idx, column in enumerate(df.columns, 1):
            letter = openpyxl.utils.get_column_letter(idx)
            longest = max([len(str(column))] + [len(str(value)) for value in df[column]])
            worksheet.column_dimensions[letter].width = longest + 2

    def export(self, reports: List[MatchReport], excel_file: str) -> str:
        """
        Write reports to an Excel workbook.

        Args:
            reports: Match reports to export
            excel_file: Path to the output workbook

        Returns:
            Absolute path to the written workbook
        """
        excel_path = self.output_path_for(excel_file)
        os.makedirs(os.path.dirname(excel_path), exist_ok=True)

        summary, scores = self.build_frames(reports)

        with pd.ExcelWriter(excel_path, engine='openpyxl') as writer:
            summary.to_excel(writer, sheet_name=self.SUMMARY_SHEET, index=False)
            scores.to_excel(writer, sheet_name=self.SCORES_SHEET, index=False)
            self._autosize_columns(writer.sheets[self.SUMMARY_SHEET], summary)
            self._autosize_columns(writer.sheets[self.SCORES_SHEET], scores)

        logger.info(f"Successfully exported {len(reports)} matches to {excel_path}")
        return excel_path

    def run(self, log_path: Optional[str] = None, output_path: Optional[str] = None) -> str:
        """
        Parse the log and export it to Excel.

        Args:
            log_path: Log file path or URL (default: paths.games_log)
            output_path: Workbook path (default: timestamped name in the output directory)

        Returns:
            Path to the written workbook
        """
        reports = LogSource(self.config, log_path).list_matches()
        output_path = output_path or self.generate_timestamped_filename("match_report", "xlsx")
        return self.export(reports, output_path)


def main():
    """Main function for the match excel tool."""
    parser = argparse.ArgumentParser(
        description='Export every match of a Quake 3 Arena log to an Excel workbook.'
    )
    parser.add_argument('--log',
                        help='Path or URL of the log (if not specified, uses paths.games_log)')
    parser.add_argument('--output',
                        help='Output workbook path (if not specified, generates a timestamped name)')

    QuakeTool.add_standard_arguments(parser)

    args = parser.parse_args()

    try:
        config = QuakeTool.load_config(args.profile)

        tool = MatchExcelTool(config)
        output_path = tool.run(args.log, args.output)

        if args.console:
            logger.info(f"Workbook written to {output_path}")
        return 0

    except Exception as e:
        logging.error(f"Error: {str(e)}")
        import traceback
        logging.debug(traceback.format_exc())
        return 1


if __name__ == "__main__":
    import sys
    sys.exit(main())
