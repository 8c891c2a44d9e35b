"""Access Log Stats - Data models"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional


@dataclass(frozen=True)
class LogEntry:
    """Parsed access log line"""
    ip: str
    timestamp: str
    method: str
    path: str
    request: str
    status: int
    size: int
    hour: Optional[int] = None
    day: Optional[int] = None


@dataclass(frozen=True)
class ParsedTimestamp:
    """Calendar fields read from a log timestamp, timezone not applied"""
    hour: int
    day: int
    full_date: datetime


@dataclass(frozen=True)
class PathCount:
    path: str
    count: int


@dataclass(frozen=True)
class HourCount:
    hour: int
    count: int


@dataclass(frozen=True)
class DayCount:
    day: int
    count: int


@dataclass
class LogStats:
    """Aggregate traffic statistics

    avg_response_size is NaN when total_requests is 0; callers must check
    total_requests before displaying it.
    """
    total_requests: int = 0
    unique_ips: int = 0
    total_bytes: int = 0
    avg_response_size: float = math.nan
    status_codes: Dict[str, int] = field(default_factory=dict)
    top_paths: List[PathCount] = field(default_factory=list)
    requests_per_hour: List[HourCount] = field(default_factory=list)
    requests_per_day: List[DayCount] = field(default_factory=list)
    request_methods: Dict[str, int] = field(default_factory=dict)
