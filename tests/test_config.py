import dataclasses

import pytest

from subenum.core.config import Config, EngineConfig
from subenum.errors import ConfigError
from subenum.main import build_parser


def parse(*argv):
    return build_parser().parse_args(list(argv))


def write_config(tmp_path, text):
    path = tmp_path / 'subenum.yaml'
    path.write_text(text, encoding='utf-8')
    return Config(str(path))


def test_packaged_defaults(wordlist_file):
    config = EngineConfig.from_sources(parse('-s', str(wordlist_file), '-t', 'example.com'), Config())
    assert config.domain == 'example.com'
    assert config.wordlist == str(wordlist_file)
    assert config.qps == 10
    assert config.timeout == 5.0
    assert config.capacity == 10
    assert config.in_flight_limit == 100
    assert config.nameserver is None
    assert config.backend == 'dnspython'
    assert config.record_types == ('A', 'AAAA')
    assert config.queue_size == 1024


def test_yaml_values_fill_in_missing_flags(tmp_path, wordlist_file):
    yaml_config = write_config(tmp_path, (
        "qps: 50\n"
        "burst: 5\n"
        "nameserver: '1.1.1.1:5353'\n"
        "backend: aiodns\n"
        "record_types: a\n"
    ))
    config = EngineConfig.from_sources(parse('-s', str(wordlist_file), '-t', 'example.com'), yaml_config)
    assert config.qps == 50
    assert config.capacity == 5
    assert config.nameserver == ('1.1.1.1', 5353)
    assert config.backend == 'aiodns'
    assert config.record_types == ('A',)


def test_command_line_wins_over_yaml(tmp_path, wordlist_file):
    yaml_config = write_config(tmp_path, "qps: 50\nnameserver: 8.8.8.8\ntimeout: 9\n")
    args = parse('-s', str(wordlist_file), '-t', 'example.com', '-q', '3', '-n', '[2606:4700::1111]:53')
    config = EngineConfig.from_sources(args, yaml_config)
    assert config.qps == 3
    assert config.nameserver == ('2606:4700::1111', 53)
    assert config.timeout == 9


def test_wordlist_from_yaml(tmp_path, wordlist_file):
    yaml_config = write_config(tmp_path, f"wordlist: '{wordlist_file}'\n")
    config = EngineConfig.from_sources(parse('-t', 'example.com'), yaml_config)
    assert config.wordlist == str(wordlist_file)


def test_numbers_written_as_strings_are_accepted(tmp_path, wordlist_file):
    yaml_config = write_config(tmp_path, "qps: '20'\nconcurrency: '8'\n")
    config = EngineConfig.from_sources(parse('-s', str(wordlist_file), '-t', 'example.com'), yaml_config)
    assert config.qps == 20
    assert config.in_flight_limit == 8


@pytest.mark.parametrize('argv', [
    ('-t', 'example.com'),
    ('-s', 'words.txt'),
    ('-s', 'words.txt', '-t', 'example.com', '-q', '0'),
    ('-s', 'words.txt', '-t', 'example.com', '-q', '-2'),
    ('-s', 'words.txt', '-t', 'example.com', '-q', 'nan'),
    ('-s', 'words.txt', '-t', 'example.com', '-T', '0'),
    ('-s', 'words.txt', '-t', 'example.com', '-b', '0.5'),
    ('-s', 'words.txt', '-t', 'example.com', '-c', '0'),
    ('-s', 'words.txt', '-t', 'example.com', '-n', 'not-an-ip'),
    ('-s', 'words.txt', '-t', 'example.com', '-n', '1.1.1.1:99999'),
])
def test_invalid_command_lines_are_rejected(argv):
    with pytest.raises(ConfigError):
        EngineConfig.from_sources(parse(*argv), Config())


def test_non_numeric_yaml_value_is_rejected(tmp_path, wordlist_file):
    yaml_config = write_config(tmp_path, "qps: fast\n")
    with pytest.raises(ConfigError):
        EngineConfig.from_sources(parse('-s', str(wordlist_file), '-t', 'example.com'), yaml_config)


@pytest.mark.parametrize('text', ["burst: .nan\n", "burst: .inf\n", "timeout: .inf\n"])
def test_non_finite_yaml_values_are_rejected(tmp_path, wordlist_file, text):
    yaml_config = write_config(tmp_path, text)
    with pytest.raises(ConfigError):
        EngineConfig.from_sources(parse('-s', str(wordlist_file), '-t', 'example.com'), yaml_config)


@pytest.mark.parametrize('text', ["qps: [10\n", "- qps\n- 10\n"])
def test_malformed_yaml_is_rejected(tmp_path, text):
    with pytest.raises(ConfigError):
        write_config(tmp_path, text)


def test_missing_explicit_config_file_is_rejected(tmp_path):
    with pytest.raises(ConfigError):
        Config(str(tmp_path / 'nope.yaml'))


@pytest.mark.parametrize('overrides', [
    {'qps': 0},
    {'qps': float('inf')},
    {'qps': True},
    {'timeout': -1},
    {'timeout': float('inf')},
    {'timeout': float('nan')},
    {'timeout': True},
    {'burst': 0},
    {'burst': float('nan')},
    {'burst': float('inf')},
    {'max_in_flight': 0},
    {'queue_size': 0},
    {'backend': 'bogus'},
    {'record_types': ()},
    {'domain': ' . '},
])
def test_engine_config_validation(overrides):
    values = {'domain': 'example.com'}
    values.update(overrides)
    with pytest.raises(ConfigError):
        EngineConfig(**values)


def test_in_flight_limit_has_a_floor():
    assert EngineConfig('example.com', qps=10, timeout=1).in_flight_limit == 64
    assert EngineConfig('example.com', qps=100, timeout=2).in_flight_limit == 400
    assert EngineConfig('example.com', max_in_flight=5).in_flight_limit == 5


def test_engine_config_is_read_only():
    config = EngineConfig('example.com')
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.qps = 100
