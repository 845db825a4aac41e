import pytest

from .fakes import FakeClock


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / 'subdomains.txt'
    path.write_text('www\nmail\n\nghost\n', encoding='utf-8')
    return path
