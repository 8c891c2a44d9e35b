"""Access Log Stats - Aggregation over parsed entries"""

import math
from collections import Counter
from typing import Dict, Iterable

from .models import DayCount, HourCount, LogEntry, LogStats, PathCount
from .patterns import (
    ERROR_STATUS_PREFIXES,
    HOURS_PER_DAY,
    STATUS_GROUPS,
    TOP_PATHS_LIMIT,
)


def calculate_stats(entries: Iterable[LogEntry]) -> LogStats:
    """Aggregate entries into a fresh LogStats.

    Counters are filled in input order, so ``sorted`` (which is stable)
    leaves paths with equal counts in first-seen order.
    """
    total_requests = 0
    total_bytes = 0
    ips = set()
    status_codes: Counter = Counter()
    path_counts: Counter = Counter()
    hour_counts: Counter = Counter()
    day_counts: Counter = Counter()
    methods: Counter = Counter()

    for entry in entries:
        total_requests += 1
        total_bytes += entry.size
        ips.add(entry.ip)
        status_codes[str(entry.status)] += 1
        path_counts[entry.path] += 1
        methods[entry.method] += 1

        # hour and day come from the same timestamp
        if entry.hour is not None:
            hour_counts[entry.hour] += 1
        if entry.day is not None:
            day_counts[entry.day] += 1

    ranked = sorted(path_counts.items(), key=lambda item: item[1], reverse=True)

    return LogStats(
        total_requests=total_requests,
        unique_ips=len(ips),
        total_bytes=total_bytes,
        avg_response_size=total_bytes / total_requests if total_requests else math.nan,
        status_codes=dict(status_codes),
        top_paths=[PathCount(path, count) for path, count in ranked[:TOP_PATHS_LIMIT]],
        requests_per_hour=[HourCount(hour, hour_counts[hour]) for hour in range(HOURS_PER_DAY)],
        requests_per_day=[DayCount(day, day_counts[day]) for day in sorted(day_counts)],
        request_methods=dict(methods),
    )


def error_rate(stats: LogStats) -> float:
    """Percentage of 4xx and 5xx responses, 0.0 with no requests"""
    if not stats.total_requests:
        return 0.0
    errors = sum(
        count for code, count in stats.status_codes.items()
        if code.startswith(ERROR_STATUS_PREFIXES)
    )
    return errors / stats.total_requests * 100


def status_groups(status_codes: Dict[str, int]) -> Dict[str, int]:
    """Fold status codes into 2xx/3xx/4xx/5xx groups"""
    groups: Dict[str, int] = {}
    for code, count in status_codes.items():
        label = STATUS_GROUPS.get(code[:1], f"{code} Other")
        groups[label] = groups.get(label, 0) + count
    return groups

