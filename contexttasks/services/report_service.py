"""
Report Generation Service using Jinja2 templates.

Architecture Decision: Template Pattern
Allows users to customize the exported dashboard without changing code.
"""

import datetime
import logging
from pathlib import Path
from typing import List, Optional
from jinja2 import Environment, FileSystemLoader

from contexttasks.utils import get_resource_path
from .stats_service import DashboardSummary

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "dashboard_report.md"


class ReportService:
    """
    Renders the dashboard summary through Jinja2 templates.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize the report service.

        Args:
            template_dir: Directory containing Jinja2 templates
        """
        if template_dir is None:
            template_dir = get_resource_path("contexttasks/resources/templates")

        self.template_dir = template_dir

        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True
        )

        self.env.filters['format_date'] = self._format_date
        self.env.filters['bar'] = self._bar

    @staticmethod
    def _format_date(value: datetime.date, fmt: str = "%Y-%m-%d") -> str:
        return value.strftime(fmt)

    @staticmethod
    def _bar(intensity: float, width: int = 10) -> str:
        """Text bar for a 0..1 intensity"""
        filled = round(intensity * width)
        return "#" * filled + "." * (width - filled)

    def render(self, summary: DashboardSummary,
               template_name: str = DEFAULT_TEMPLATE,
               generated_at: Optional[datetime.datetime] = None) -> str:
        """
        Render a dashboard summary.

        Args:
            summary: Figures to render
            template_name: Template file inside the template directory
            generated_at: Timestamp printed in the report (defaults to now)

        Returns:
            The rendered report
        """
        template = self.env.get_template(template_name)
        return template.render(
            summary=summary,
            generated_at=generated_at or datetime.datetime.now()
        )

    def write(self, summary: DashboardSummary, output_file: Path,
              template_name: str = DEFAULT_TEMPLATE) -> Path:
        """Render and save to `output_file`"""
        content = self.render(summary, template_name)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(content)
        logger.info(f"Report written to {output_file}")
        return output_file

    def list_templates(self) -> List[str]:
        """List all available template files"""
        return sorted(f.name for f in self.template_dir.glob("*")
                      if f.suffix in (".md", ".txt", ".html"))
