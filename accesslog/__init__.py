"""Access Log Stats package"""

from .patterns import VERSION, SAMPLE_LOG
from .models import LogEntry, LogStats, ParsedTimestamp, PathCount, HourCount, DayCount
from .parser import parse_line, parse_logs, parse_timestamp
from .stats import calculate_stats, error_rate, status_groups
from .analyzer import LogAnalyzer, filter_entries
from .output import format_bytes, print_report

__all__ = [
    'VERSION', 'SAMPLE_LOG',
    'LogEntry', 'LogStats', 'ParsedTimestamp', 'PathCount', 'HourCount', 'DayCount',
    'parse_line', 'parse_logs', 'parse_timestamp',
    'calculate_stats', 'error_rate', 'status_groups',
    'LogAnalyzer', 'filter_entries',
    'format_bytes', 'print_report',
]
