import pytest

from accesslog import SAMPLE_LOG, parse_logs


APOLLO_LINE = '199.72.81.55 - - [01/Jul/1995:00:00:01 -0400] "GET /history/apollo/ HTTP/1.0" 200 6245'


def make_line(ip='10.0.0.1', timestamp='01/Jul/1995:00:00:01 -0400', method='GET',
              path='/', protocol='HTTP/1.0', status='200', size='100'):
    return f'{ip} - - [{timestamp}] "{method} {path} {protocol}" {status} {size}'


@pytest.fixture
def sample_text():
    return SAMPLE_LOG


@pytest.fixture
def sample_entries():
    return parse_logs(SAMPLE_LOG)


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "access.log"
    path.write_text(SAMPLE_LOG + "\n\nnot a log line\n", encoding='utf-8')
    return path
