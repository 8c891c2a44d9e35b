"""Access Log Stats - File analysis and report building"""

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from .models import LogEntry, LogStats
from .parser import parse_logs
from .patterns import DEFAULT_ROW_LIMIT
from .stats import calculate_stats, error_rate, status_groups

logger = logging.getLogger(__name__)


def filter_entries(
    entries: Iterable[LogEntry],
    search: Optional[str] = None,
    status: Optional[int] = None,
    method: Optional[str] = None,
) -> List[LogEntry]:
    """Keep entries matching every given filter.

    ``search`` is a case-insensitive substring of the path or ip.
    """
    needle = search.lower() if search else None
    matched = []
    for entry in entries:
        if needle and needle not in entry.path.lower() and needle not in entry.ip.lower():
            continue
        if status is not None and entry.status != status:
            continue
        if method is not None and entry.method != method:
            continue
        matched.append(entry)
    return matched


class LogAnalyzer:
    """Reads access logs and turns them into a report"""

    def __init__(self, row_limit: int = DEFAULT_ROW_LIMIT, console=None):
        self.row_limit = row_limit
        self.console = console
        self.entries: List[LogEntry] = []
        self.stats: LogStats = calculate_stats([])

    def analyze_text(
        self,
        text: str,
        search: Optional[str] = None,
        status: Optional[int] = None,
        method: Optional[str] = None,
    ) -> Dict:
        """Analyze raw log text already in memory"""
        self.entries = parse_logs(text)
        self.stats = calculate_stats(self.entries)
        shown = filter_entries(self.entries, search=search, status=status, method=method)
        return self.generate_report(shown)

    def analyze_file(self, filepath: str, **filters) -> Dict:
        """Analyze a log file"""
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Log file not found: {filepath}")

        logger.debug("Reading %s", path)
        if self.console is not None:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True,
            ) as progress:
                progress.add_task("Analyzing logs...", total=None)
                text = path.read_text(encoding='utf-8-sig', errors='ignore')
                return self.analyze_text(text, **filters)

        text = path.read_text(encoding='utf-8-sig', errors='ignore')
        return self.analyze_text(text, **filters)

    def generate_report(self, shown: Optional[List[LogEntry]] = None) -> Dict:
        """Build a JSON-serializable report from the last analysis"""
        if shown is None:
            shown = self.entries
        stats = self.stats
        has_requests = stats.total_requests > 0

        return {
            'summary': {
                'total_requests': stats.total_requests,
                'unique_ips': stats.unique_ips,
                'total_bytes': stats.total_bytes,
                # NaN is not valid JSON
                'avg_response_size': stats.avg_response_size if has_requests else None,
                'error_rate': round(error_rate(stats), 2),
            },
            'status_codes': dict(stats.status_codes),
            'status_groups': status_groups(stats.status_codes),
            'request_methods': dict(stats.request_methods),
            'top_paths': [asdict(p) for p in stats.top_paths],
            'requests_per_hour': [asdict(h) for h in stats.requests_per_hour],
            'requests_per_day': [asdict(d) for d in stats.requests_per_day],
            'entries': {
                'matched': len(shown),
                'shown': [asdict(e) for e in shown[:self.row_limit]],
            },
        }
