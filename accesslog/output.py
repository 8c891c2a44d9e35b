"""Access Log Stats - Report output"""

import math
from typing import Dict, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .patterns import BYTE_BASE, BYTE_UNITS, PATH_DISPLAY_WIDTH


def format_bytes(size: float) -> str:
    """Human readable size: base 1024, up to two decimals, capped at GB"""
    if not size or not math.isfinite(size) or size < 0:
        return '0 Bytes'

    unit = 0
    while size >= BYTE_BASE and unit < len(BYTE_UNITS) - 1:
        size /= BYTE_BASE
        unit += 1

    value = f"{size:.2f}".rstrip('0').rstrip('.')
    return f"{value} {BYTE_UNITS[unit]}"


def truncate_path(path: str, width: int = PATH_DISPLAY_WIDTH) -> str:
    if len(path) <= width:
        return path
    return path[:width - 3] + "..."


def status_style(code: int) -> str:
    if code < 300:
        return 'green'
    if code < 400:
        return 'yellow'
    if code < 500:
        return 'magenta'
    return 'red'


def print_report(report: Dict, console: Optional[Console] = None):
    console = console or Console()

    console.print("\n" + "═" * 70, style="cyan")
    console.print("              ACCESS LOG REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    summary = report['summary']
    if summary['total_requests'] == 0:
        console.print("[yellow]No valid log entries found.[/]")
        console.print("═" * 70, style="cyan")
        return

    error_rate = summary['error_rate']
    console.print(Panel.fit(
        f"Total Requests: [cyan]{summary['total_requests']:,}[/]\n"
        f"Unique IPs: [cyan]{summary['unique_ips']:,}[/]\n"
        f"Total Data: [cyan]{format_bytes(summary['total_bytes'])}[/]\n"
        f"Avg Response Size: [cyan]{format_bytes(summary['avg_response_size'])}[/]\n"
        f"Error Rate: [{'red' if error_rate > 0 else 'green'}]{error_rate:.2f}%[/]",
        title="Summary",
        border_style="cyan"
    ))

    # Status codes
    console.print("\n" + "─" * 70, style="cyan")
    console.print("STATUS CODES", style="bold")
    for code, count in sorted(report['status_codes'].items()):
        console.print(f"  {code}: [{status_style(int(code))}]{count}[/]")
    for group, count in report['status_groups'].items():
        console.print(f"  [dim]{group}:[/] {count}")

    # Methods
    console.print("\n" + "─" * 70, style="cyan")
    console.print("REQUEST METHODS", style="bold")
    for method, count in report['request_methods'].items():
        console.print(f"  {method}: [cyan]{count}[/]")

    # Top paths
    console.print("\n" + "─" * 70, style="cyan")
    console.print("TOP PATHS", style="bold")
    table = Table(box=box.ROUNDED)
    table.add_column("Path", style="cyan")
    table.add_column("Requests", style="white", justify="right")
    for row in report['top_paths']:
        table.add_row(escape(truncate_path(row['path'])), str(row['count']))
    console.print(table)

    # Time series
    console.print("\n" + "─" * 70, style="cyan")
    console.print("REQUESTS PER HOUR", style="bold")
    peak = max(row['count'] for row in report['requests_per_hour']) or 1
    for row in report['requests_per_hour']:
        bar = "█" * round(row['count'] / peak * 40)
        console.print(f"  {row['hour']:02d}:00 [cyan]{bar}[/] {row['count']}")

    if report['requests_per_day']:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("REQUESTS PER DAY", style="bold")
        for row in report['requests_per_day']:
            console.print(f"  Day {row['day']:>2}: [cyan]{row['count']}[/]")

    # Entries
    entries = report['entries']
    console.print("\n" + "─" * 70, style="cyan")
    console.print("LOG ENTRIES", style="bold")
    table = Table(box=box.ROUNDED)
    table.add_column("IP Address", style="cyan")
    table.add_column("Timestamp")
    table.add_column("Method")
    table.add_column("Path")
    table.add_column("Status", justify="right")
    table.add_column("Size", justify="right")
    for entry in entries['shown']:
        table.add_row(
            escape(entry['ip']),
            entry['timestamp'],
            entry['method'],
            escape(entry['path']),
            f"[{status_style(entry['status'])}]{entry['status']}[/]",
            format_bytes(entry['size']),
        )
    console.print(table)
    console.print(f"  Showing {len(entries['shown'])} of {entries['matched']} log entries")

    console.print("\n" + "═" * 70, style="cyan")
