"""Access Log Stats - Constants and patterns"""

import re

VERSION = "1.0.0"

# NASA HTTP log line:
#   <ip> - - [<timestamp>] "<METHOD> <path> HTTP/<d>.<d>" <status> <size>
# Only the literal "- -" identd/userid pair is accepted. The path is matched
# lazily, so it ends at the first ' HTTP/d.d" ' that lets the rest match.
LINE_PATTERN = re.compile(
    r'^(?P<ip>\S+) - - '
    r'\[(?P<timestamp>[\w:/]+\s[+\-]\d{4})\] '
    r'"(?P<method>[A-Z]+) (?P<path>.+?) HTTP/\d\.\d" '
    r'(?P<status>\d{3}) '
    r'(?P<size>\d+|-)',
    re.ASCII,
)

# DD/MMM/YYYY:HH:MM:SS, timezone offset ignored
TIMESTAMP_PATTERN = re.compile(
    r'(?P<day>\d{2})/(?P<month>\w{3})/(?P<year>\d{4}):'
    r'(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})',
    re.ASCII,
)

MONTHS = {
    'Jan': 1, 'Feb': 2, 'Mar': 3, 'Apr': 4, 'May': 5, 'Jun': 6,
    'Jul': 7, 'Aug': 8, 'Sep': 9, 'Oct': 10, 'Nov': 11, 'Dec': 12,
}

# Lines are split on any newline convention
NEWLINE_PATTERN = re.compile(r'\r\n|\r|\n')

NORMALIZED_PROTOCOL = "HTTP/1.0"

TOP_PATHS_LIMIT = 10
HOURS_PER_DAY = 24

BYTE_UNITS = ['Bytes', 'KB', 'MB', 'GB']
BYTE_BASE = 1024

# Leading status digit -> display group
STATUS_GROUPS = {
    '2': '2xx Success',
    '3': '3xx Redirect',
    '4': '4xx Client Error',
    '5': '5xx Server Error',
}
ERROR_STATUS_PREFIXES = ('4', '5')

# Presentation limits
DEFAULT_ROW_LIMIT = 1000
PATH_DISPLAY_WIDTH = 20

SAMPLE_LOG = "\n".join([
    '199.72.81.55 - - [01/Jul/1995:00:00:01 -0400] "GET /history/apollo/ HTTP/1.0" 200 6245',
    'unicomp6.unicomp.net - - [01/Jul/1995:00:00:06 -0400] "GET /shuttle/countdown/ HTTP/1.0" 200 3985',
    '199.120.110.21 - - [01/Jul/1995:00:00:09 -0400] "GET /shuttle/missions/sts-73/mission-sts-73.html HTTP/1.0" 200 4085',
    'burger.letters.com - - [01/Jul/1995:00:00:11 -0400] "GET /shuttle/countdown/liftoff.html HTTP/1.0" 304 0',
    '199.120.110.21 - - [01/Jul/1995:00:00:11 -0400] "GET /shuttle/missions/sts-73/sts-73-patch-small.gif HTTP/1.0" 200 4179',
    'burger.letters.com - - [01/Jul/1995:00:00:12 -0400] "GET /images/NASA-logosmall.gif HTTP/1.0" 304 0',
    'burger.letters.com - - [01/Jul/1995:00:00:12 -0400] "GET /shuttle/countdown/video/livevideo.gif HTTP/1.0" 200 0',
    '205.212.115.106 - - [01/Jul/1995:00:00:12 -0400] "GET /shuttle/countdown/countdown.html HTTP/1.0" 200 3985',
    'd104.aa.net - - [01/Jul/1995:00:00:13 -0400] "GET /shuttle/countdown/ HTTP/1.0" 200 3985',
    '129.94.144.152 - - [01/Jul/1995:00:00:13 -0400] "GET / HTTP/1.0" 200 7074',
    'unicomp6.unicomp.net - - [01/Jul/1995:00:00:14 -0400] "GET /shuttle/countdown/count.gif HTTP/1.0" 200 40310',
    '199.120.110.21 - - [01/Jul/1995:00:00:15 -0400] "GET /shuttle/missions/sts-73/sts-73-patch-large.gif HTTP/1.0" 200 98084',
    'pipe3.nyc.pipeline.com - - [01/Jul/1995:00:00:17 -0400] "GET /shuttle/missions/sts-71/images/KSC-95EC-0423.jpg HTTP/1.0" 200 46273',
    '205.212.115.106 - - [01/Jul/1995:00:00:17 -0400] "GET /shuttle/countdown/countclock.gif HTTP/1.0" 200 13769',
    'd104.aa.net - - [01/Jul/1995:00:00:18 -0400] "GET /shuttle/countdown/clock_lite.gif HTTP/1.0" 200 733',
    '129.94.144.152 - - [01/Jul/1995:00:00:18 -0400] "GET /images/ksclogo-medium.gif HTTP/1.0" 200 5866',
    'unicomp6.unicomp.net - - [01/Jul/1995:00:00:14 -0400] "GET /shuttle/countdown/countdown.html HTTP/1.0" 404 0',
    '199.120.110.21 - - [01/Jul/1995:00:00:15 -0400] "GET /shuttle/missions/missions.html HTTP/1.0" 500 1839',
    '130.110.74.81 - - [01/Jul/1995:00:00:13 -0400] "HEAD /shuttle/missions/sts-71/mission-sts-71.html HTTP/1.0" 200 0',
])
