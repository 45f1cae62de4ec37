#!/usr/bin/env python3
"""
Quake Log Tools - Match Report

Parses a Quake 3 Arena server log and reports, per match, the total number
of kills, the players and each player's frag score.
"""

import argparse
import json
import logging
from typing import Dict, Any, List, Optional

from ..base import QuakeTool, FileBasedTool
from ..log import LogSource
from ..parser import MatchReport

logger = logging.getLogger(__name__)


class MatchReportTool(FileBasedTool):
    """
    Builds match reports from a Quake 3 Arena log.

    Reports are printed as JSON and can also be written to a JSON or CSV file
    in the configured output directory.
    """

    OUTPUT_FORMATS = ("json", "csv")
    CSV_HEADERS = ["Match", "Total Kills", "Player", "Score"]

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the MatchReportTool with configuration.

        Args:
            config: Configuration dictionary from Config class
        """
        super().__init__(config)
        self.initialize_directories()

    def collect(self, log_path: Optional[str] = None, name: Optional[str] = None) -> List[MatchReport]:
        """
        Collect the reports to output.

        Args:
            log_path: Log file path or URL (default: paths.games_log)
            name: Optional match name; when given only that match is returned

        Returns:
            List of MatchReport, empty when the named match does not exist.
        """
        source = LogSource(self.config, log_path)

        if name is None:
            return source.list_matches()

        report = source.find_match(name)
        if report is None:
            logger.warning(f"Match '{name}' not found in {source.location}")
            return []
        return [report]

    def _prepare_csv_data(self, reports: List[MatchReport]) -> List[Dict[str, Any]]:
        """
        Flatten reports into one CSV row per match and player.

        Matches without players still get one row so they show up in the file.
        """
        rows = []
        for report in reports:
            if not report.kills:
                rows.append({"Match": report.name, "Total Kills": report.total_kills,
                             "Player": "", "Score": ""})
                continue
            ranked = sorted(report.kills.items(), key=lambda item: item[1], reverse=True)
            for player, score in ranked:
                rows.append({"Match": report.name, "Total Kills": report.total_kills,
                             "Player": player, "Score": score})
        return rows

    def save(self, reports: List[MatchReport], output_format: str) -> str:
        """
        Save reports to a timestamped file.

        Args:
            reports: Reports to save
            output_format: "json" or "csv"

        Returns:
            Path to the saved file
        """
        output_file = self.generate_timestamped_filename("match_report", output_format)

        if output_format == "csv":
            return self.write_csv(self._prepare_csv_data(reports), output_file, headers=self.CSV_HEADERS)

        return self.write_json([report.to_dict() for report in reports], output_file)

    def run(self, log_path: Optional[str] = None, name: Optional[str] = None,
            output_format: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the match report.

        Args:
            log_path: Log file path or URL
            name: Optional match name to report on
            output_format: Optional file format to save ("json" or "csv")

        Returns:
            Dictionary with the reports and the output file, if any
        """
        if output_format is not None and output_format not in self.OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {', '.join(self.OUTPUT_FORMATS)}")

        reports = self.collect(log_path, name)

        result = {
            "success": bool(reports) or name is None,
            "match_count": len(reports),
            "matches": [report.to_dict() for report in reports],
            "output_file": None,
        }

        if reports and output_format:
            result["output_file"] = self.save(reports, output_format)

        logger.info(f"Match report complete: {len(reports)} matches")
        return result


def main():
    """
    Main entry point for the match report command line tool.
    """
    parser = argparse.ArgumentParser(
        description="Parse a Quake 3 Arena log and report kills per match.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --log /path/to/games.log
    %(prog)s --match game_3
    %(prog)s --format csv --profile my_server

Configuration:
    - paths.games_log: Log file path or URL
    - general.output_path: Directory for saved reports
        """
    )
    parser.add_argument("--log", help="Path or URL of the log. If not specified, uses the configured path.")
    parser.add_argument("--match", help="Only report the match with this name (e.g. game_3).")
    parser.add_argument("--format", choices=MatchReportTool.OUTPUT_FORMATS,
                        help="Also save the report to a file in this format.")

    QuakeTool.add_standard_arguments(parser)
    args = parser.parse_args()

    try:
        config = MatchReportTool.load_config(args.profile)

        tool = MatchReportTool(config)
        result = tool.run(args.log, args.match, args.format)

        print(json.dumps(result["matches"], indent=2))

        if args.console:
            logger.info(f"Match report completed: {result['match_count']} matches, output file: {result['output_file']}")

        return 0 if result["success"] else 1

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
