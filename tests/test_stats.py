import math

from accesslog import (
    DayCount,
    HourCount,
    LogEntry,
    PathCount,
    calculate_stats,
    error_rate,
    parse_logs,
    status_groups,
)
from tests.conftest import make_line


def entry(path='/', ip='10.0.0.1', method='GET', status=200, size=100, hour=0, day=1):
    return LogEntry(
        ip=ip,
        timestamp='01/Jul/1995:00:00:00 -0400',
        method=method,
        path=path,
        request=f'{method} {path} HTTP/1.0',
        status=status,
        size=size,
        hour=hour,
        day=day,
    )


def test_sample_totals(sample_entries):
    stats = calculate_stats(sample_entries)
    assert stats.total_requests == 19
    assert stats.unique_ips == 9
    assert stats.total_bytes == 240412
    assert math.isclose(stats.avg_response_size, 240412 / 19)
    assert stats.status_codes == {'200': 15, '304': 2, '404': 1, '500': 1}
    assert stats.request_methods == {'GET': 18, 'HEAD': 1}


def test_sample_top_paths(sample_entries):
    stats = calculate_stats(sample_entries)
    assert len(stats.top_paths) == 10
    assert stats.top_paths[:3] == [
        PathCount('/shuttle/countdown/', 2),
        PathCount('/shuttle/countdown/countdown.html', 2),
        PathCount('/history/apollo/', 1),
    ]
    assert stats.top_paths[-1] == PathCount('/shuttle/countdown/count.gif', 1)


def test_sample_time_series(sample_entries):
    stats = calculate_stats(sample_entries)
    assert stats.requests_per_hour[0] == HourCount(0, 19)
    assert all(h.count == 0 for h in stats.requests_per_hour[1:])
    assert stats.requests_per_day == [DayCount(1, 19)]


def test_top_paths_tie_break_uses_first_seen_order():
    paths = ['/a', '/b', '/c', '/a', '/c', '/b', '/c', '/a', '/c', '/b', '/c']
    stats = calculate_stats([entry(path=p) for p in paths])
    assert stats.top_paths == [
        PathCount('/c', 5),
        PathCount('/a', 3),
        PathCount('/b', 3),
    ]


def test_top_paths_limited_to_ten():
    stats = calculate_stats([entry(path=f'/p{i}') for i in range(15)])
    assert [p.path for p in stats.top_paths] == [f'/p{i}' for i in range(10)]


def test_hours_zero_filled_and_ordered():
    stats = calculate_stats([entry(hour=23), entry(hour=5), entry(hour=5)])
    assert len(stats.requests_per_hour) == 24
    assert [h.hour for h in stats.requests_per_hour] == list(range(24))
    assert stats.requests_per_hour[5] == HourCount(5, 2)
    assert stats.requests_per_hour[23] == HourCount(23, 1)
    assert sum(h.count for h in stats.requests_per_hour) == 3


def test_days_only_observed_ascending():
    stats = calculate_stats([entry(day=12), entry(day=3), entry(day=12), entry(day=28)])
    assert stats.requests_per_day == [DayCount(3, 1), DayCount(12, 2), DayCount(28, 1)]


def test_untimed_entries_skip_time_buckets():
    stats = calculate_stats([entry(hour=None, day=None), entry(hour=4, day=2)])
    assert stats.total_requests == 2
    assert sum(h.count for h in stats.requests_per_hour) == 1
    assert len(stats.requests_per_hour) == 24
    assert stats.requests_per_day == [DayCount(2, 1)]


def test_bad_month_line_counts_but_not_in_hours():
    text = "\n".join([
        make_line(timestamp='01/Abc/1995:10:00:00 -0400'),
        make_line(timestamp='01/Jul/1995:10:00:00 -0400'),
    ])
    stats = calculate_stats(parse_logs(text))
    assert stats.total_requests == 2
    assert stats.requests_per_hour[10] == HourCount(10, 1)


def test_empty_input():
    stats = calculate_stats([])
    assert stats.total_requests == 0
    assert stats.unique_ips == 0
    assert stats.total_bytes == 0
    assert math.isnan(stats.avg_response_size)
    assert stats.status_codes == {}
    assert stats.top_paths == []
    assert stats.requests_per_day == []
    assert stats.request_methods == {}
    assert stats.requests_per_hour == [HourCount(h, 0) for h in range(24)]


def test_only_observed_keys():
    stats = calculate_stats([entry(status=418, method='BREW')])
    assert stats.status_codes == {'418': 1}
    assert stats.request_methods == {'BREW': 1}
    assert '200' not in stats.status_codes


def test_accepts_any_iterable(sample_entries):
    assert calculate_stats(iter(sample_entries)) == calculate_stats(sample_entries)


def test_idempotent(sample_entries):
    first = calculate_stats(sample_entries)
    second = calculate_stats(sample_entries)
    assert first == second
    assert first is not second
    assert first.top_paths is not second.top_paths


def test_error_rate(sample_entries):
    stats = calculate_stats(sample_entries)
    assert math.isclose(error_rate(stats), 2 / 19 * 100)


def test_error_rate_empty():
    assert error_rate(calculate_stats([])) == 0.0


def test_status_groups():
    groups = status_groups({'200': 15, '304': 2, '206': 1, '404': 1, '500': 1, '102': 3})
    assert groups == {
        '2xx Success': 16,
        '3xx Redirect': 2,
        '4xx Client Error': 1,
        '5xx Server Error': 1,
        '102 Other': 3,
    }
