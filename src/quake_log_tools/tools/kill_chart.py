"""
Kill Chart Tool

This tool renders the per-player frag scores of one match as a bar chart.
Negative scores (more environmental deaths than kills) are drawn below the
axis in a separate color.
"""

import argparse
import logging
import os
from typing import Dict, Any, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from quake_log_tools.base import QuakeTool, FileBasedTool
from quake_log_tools.log import LogSource
from quake_log_tools.parser import MatchReport

logger = logging.getLogger(__name__)


class KillChartTool(FileBasedTool):
    """
    A tool for plotting the frag scores of a match.

    Bars are sorted from highest to lowest score.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Kill Chart Tool.

        Args:
            config: Configuration dictionary from Config class
        """
        super().__init__(config)
        self.initialize_directories()

        chart_config = self.get_config('kill_chart', {}) or {}
        self.output_dpi = int(chart_config.get('output_dpi', 150))
        self.positive_color = chart_config.get('positive_color', 'tab:blue')
        self.negative_color = chart_config.get('negative_color', 'tab:red')

    def plot(self, report: MatchReport, output_path: Optional[str] = None) -> str:
        """
        Plot a match's scores and save the chart as PNG.

        Args:
            report: The match to plot
            output_path: Optional output path (default: timestamped name in the output directory)

        Returns:
            Path to the generated image
        """
        ranked = sorted(report.kills.items(), key=lambda item: item[1], reverse=True)
        players = [player for player, _ in ranked]
        scores = [score for _, score in ranked]
        colors = [self.positive_color if score >= 0 else self.negative_color for score in scores]

        plt.figure(figsize=(max(6, len(players) * 1.2), 6))
        plt.bar(players, scores, color=colors, edgecolor='black', linewidth=0.5)
        plt.axhline(0, color='black', linewidth=0.8)
        plt.title(f"{report.name} ({report.total_kills} kills)", fontsize=14, fontweight='bold')
        plt.ylabel("Score")
        plt.xticks(rotation=30, ha='right')
        plt.tight_layout()

        if output_path is None:
            output_path = self.generate_timestamped_filename(f"kill_chart_{report.name}", "png")
        output_path = self.output_path_for(output_path)
        self.ensure_dir(os.path.dirname(output_path))

        plt.savefig(output_path, dpi=self.output_dpi, facecolor='white')
        plt.close()

        logger.info(f"Chart saved to: {output_path}")
        return output_path

    def run(self, name: str, log_path: Optional[str] = None, output_path: Optional[str] = None) -> Optional[str]:
        """
        Find a match and plot it.

        Args:
            name: Match name such as "game_2"
            log_path: Log file path or URL
            output_path: Optional output image path

        Returns:
            Path to the generated image, or None if the match was not found
        """
        report = LogSource(self.config, log_path).find_match(name)
        if report is None:
            logger.error(f"Match '{name}' not found")
            return None

        if not report.kills:
            logger.warning(f"Match '{report.name}' has no scores to plot")

        return self.plot(report, output_path)


def main():
    """Main entry point for the kill chart tool."""
    parser = argparse.ArgumentParser(description="Plot the frag scores of one Quake 3 Arena match.")
    parser.add_argument("match", help="Name of the match to plot (e.g. game_2)")
    parser.add_argument("--log", help="Path or URL of the log (default: paths.games_log)")
    parser.add_argument("--output", help="Output PNG path (default: timestamped name in the output directory)")

    QuakeTool.add_standard_arguments(parser)
    args = parser.parse_args()

    try:
        config = QuakeTool.load_config(args.profile)
        tool = KillChartTool(config)
        output_path = tool.run(args.match, args.log, args.output)

        if args.console and output_path:
            logger.info(f"Kill chart written to {output_path}")
        return 0 if output_path else 1

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    import sys
    sys.exit(main())
