import io

import pytest

from ipmasking.console import Output
from ipmasking.settings import Settings


@pytest.fixture(autouse=True)
def color_env(monkeypatch):
    for name in ('NO_COLOR', 'FORCE_COLOR', 'TTY_COMPATIBLE', 'TTY_INTERACTIVE'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    return tmp_path


@pytest.fixture
def settings(home):
    return Settings()


@pytest.fixture
def config_file(tmp_path):
    def write(content):
        path = tmp_path / 'custom.conf'
        path.write_text(content)
        return str(path)
    return write


class Terminal(object):
    """An Output fed from a list of typed lines, capturing what is shown."""
    def __init__(self, lines, color='never'):
        self.stdout = io.StringIO()
        stdin = io.StringIO(''.join('%s\n' % line for line in lines))
        self.output = Output(color, file=self.stdout, stdin=stdin)

    @property
    def text(self):
        return self.stdout.getvalue()


@pytest.fixture
def terminal():
    return Terminal
