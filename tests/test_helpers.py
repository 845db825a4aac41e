import pytest

from subenum.errors import ConfigError, WordlistError
from subenum.utils.helpers import format_nameserver, load_wordlist, parse_nameserver


def test_load_wordlist_keeps_order_and_skips_blank_lines(wordlist_file):
    assert load_wordlist(str(wordlist_file)) == ['www', 'mail', 'ghost']


def test_load_wordlist_strips_whitespace(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('  api \r\n\t\ndev\n', encoding='utf-8')
    assert load_wordlist(str(path)) == ['api', 'dev']


def test_missing_wordlist_raises(tmp_path):
    with pytest.raises(WordlistError):
        load_wordlist(str(tmp_path / 'missing.txt'))


@pytest.mark.parametrize('value, expected', [
    (None, None),
    ('', None),
    ('1.1.1.1', ('1.1.1.1', 53)),
    (' 8.8.8.8:5353 ', ('8.8.8.8', 5353)),
    ('2606:4700::1111', ('2606:4700::1111', 53)),
    ('[2606:4700::1111]:5300', ('2606:4700::1111', 5300)),
    ('[::1]', ('::1', 53)),
])
def test_parse_nameserver(value, expected):
    assert parse_nameserver(value) == expected


@pytest.mark.parametrize('value', [
    'dns.google',
    '1.1.1.1:abc',
    '1.1.1.1:0',
    '[::1',
    '[::1]53',
    '999.1.1.1',
])
def test_parse_nameserver_rejects_bad_addresses(value):
    with pytest.raises(ConfigError):
        parse_nameserver(value)


def test_format_nameserver():
    assert format_nameserver(None) == '系统默认'
    assert format_nameserver(('1.1.1.1', 53)) == '1.1.1.1:53'
    assert format_nameserver(('::1', 5300)) == '[::1]:5300'
