"""Formats and exports run reports."""
import logging
from dataclasses import asdict
from pathlib import Path
from typing import List, Union

import pandas as pd

from .models import RunReport


# Configure logging
logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["workload", "pool_size", "total_requests", "total_duration", "mean_duration", "failure_count"]


class ResultExporter:
    """Handles formatting run reports for the console and exporting them to CSV."""

    @staticmethod
    def format_header(label: str) -> str:
        """Column header line printed before a workload's report line."""
        return f"{label}/Parallel clients; total duration; avg duration per call; failed calls"

    @staticmethod
    def format_line(report: RunReport) -> str:
        """
        Format a report as pool_size;total_duration;mean_duration;failure_count.

        Durations are printed in seconds with an "s" suffix.
        """
        return f"{report.pool_size};{report.total_duration:.6f}s;{report.mean_duration:.6f}s;{report.failure_count}"

    @staticmethod
    def save_reports(reports: List[RunReport], output_path: Union[Path, str]) -> None:
        """
        Save reports to CSV, one row per report.

        Args:
            reports: Reports to save.
            output_path: Path to save CSV.
        """
        if not reports:
            logger.warning("No reports available for saving")
            return

        df = pd.DataFrame([asdict(report) for report in reports], columns=REPORT_COLUMNS)
        df.to_csv(output_path, index=False)
        logger.info(f"CSV saved: {output_path}")

    @staticmethod
    def load_reports(input_path: Union[Path, str]) -> List[RunReport]:
        """
        Load reports previously written by save_reports.

        Args:
            input_path: Path to load CSV from.

        Returns:
            List of reports in file order.
        """
        df = pd.read_csv(input_path)
        reports = [
            RunReport(
                workload=str(row["workload"]),
                pool_size=int(row["pool_size"]),
                total_requests=int(row["total_requests"]),
                total_duration=float(row["total_duration"]),
                mean_duration=float(row["mean_duration"]),
                failure_count=int(row["failure_count"]),
            )
            for _, row in df.iterrows()
        ]
        logger.info(f"Reports loaded from CSV: {input_path}")
        return reports
