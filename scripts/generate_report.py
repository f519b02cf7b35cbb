"""
Script to render the completion dashboard as a Markdown report.

Usage:
    python scripts/generate_report.py [output_file]

Without an output file the report is printed.
"""

import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from contexttasks.infra.config import get_settings, configure_logging
from contexttasks.infra.repository import open_repository
from contexttasks.services import StatsService, ReportService


def main():
    settings = get_settings()
    configure_logging(settings)

    repo = open_repository(settings.get_db_url())
    summary = StatsService(repo).summary(datetime.now())
    service = ReportService()

    if len(sys.argv) < 2:
        print(service.render(summary))
        return

    output_file = Path(sys.argv[1])
    service.write(summary, output_file)
    print(f"Report successfully saved to: {output_file.absolute()}")


if __name__ == "__main__":
    main()
