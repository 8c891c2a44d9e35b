"""Access Log Stats - Line and timestamp parsing"""

import logging
from datetime import datetime
from typing import List, Optional

from .models import LogEntry, ParsedTimestamp
from .patterns import (
    LINE_PATTERN,
    MONTHS,
    NEWLINE_PATTERN,
    NORMALIZED_PROTOCOL,
    TIMESTAMP_PATTERN,
)

logger = logging.getLogger(__name__)


def parse_timestamp(raw: str) -> Optional[ParsedTimestamp]:
    """Read day and hour from a ``DD/MMM/YYYY:HH:MM:SS`` timestamp.

    The timezone offset is ignored, so ``hour`` and ``day`` are the literal
    numbers written in the log. Returns None for an unknown month or for
    fields that do not form a valid date.
    """
    match = TIMESTAMP_PATTERN.search(raw)
    if not match:
        return None

    month = MONTHS.get(match.group('month'))
    if month is None:
        return None

    try:
        full_date = datetime(
            int(match.group('year')),
            month,
            int(match.group('day')),
            int(match.group('hour')),
            int(match.group('minute')),
            int(match.group('second')),
        )
    except ValueError:
        return None

    return ParsedTimestamp(hour=full_date.hour, day=full_date.day, full_date=full_date)


def parse_line(line: str) -> Optional[LogEntry]:
    """Parse a single log line, None if it does not fit the grammar"""
    match = LINE_PATTERN.match(line)
    if not match:
        return None

    groups = match.groupdict()
    method = groups['method']
    path = groups['path']
    try:
        size = 0 if groups['size'] == '-' else int(groups['size'])
    except ValueError:
        # longer than the interpreter's int conversion limit
        return None
    parsed = parse_timestamp(groups['timestamp'])

    return LogEntry(
        ip=groups['ip'],
        timestamp=groups['timestamp'],
        method=method,
        path=path,
        request=f"{method} {path} {NORMALIZED_PROTOCOL}",
        status=int(groups['status']),
        size=size,
        hour=parsed.hour if parsed else None,
        day=parsed.day if parsed else None,
    )


def parse_logs(text: str) -> List[LogEntry]:
    """Parse raw log text, keeping matching lines in source order"""
    entries = []
    dropped = 0
    untimed = 0

    for line in NEWLINE_PATTERN.split(text):
        # BOM counts as surrounding whitespace
        line = line.strip().strip('\ufeff').strip()
        if not line:
            continue

        entry = parse_line(line)
        if entry is None:
            dropped += 1
            continue
        if entry.hour is None:
            untimed += 1
        entries.append(entry)

    logger.debug(
        "Parsed %d entries, dropped %d lines, %d without a usable timestamp",
        len(entries), dropped, untimed,
    )
    return entries
