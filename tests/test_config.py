import pytest

from packcalc.config import (
    Config,
    ConfigError,
    load_config,
    normalize_port,
    parse_pack_sizes,
)


def write_config(directory, content):
    (directory / "config.yaml").write_text(content, encoding="utf-8")


def test_default_values(tmp_path):
    cfg = load_config([tmp_path], {})
    assert cfg.port == ":3000"
    assert cfg.pack_sizes == [250, 500, 1000, 2000, 5000]


def test_environment_variables(tmp_path):
    cfg = load_config([tmp_path], {"PORT": "4000", "PACK_SIZES": "100,200,300"})
    assert cfg.port == ":4000"
    assert cfg.pack_sizes == [100, 200, 300]


def test_config_file(tmp_path):
    write_config(tmp_path, '\nport: "5000"\npack_sizes: "50,100,150"\n')
    cfg = load_config([tmp_path], {})
    assert cfg.port == ":5000"
    assert cfg.pack_sizes == [50, 100, 150]


def test_invalid_pack_sizes(tmp_path):
    write_config(tmp_path, '\nport: "6000"\npack_sizes: "invalid,100,200"\n')
    cfg = load_config([tmp_path], {})
    assert cfg.port == ":6000"
    assert cfg.pack_sizes == [100, 200]


def test_environment_overrides_file(tmp_path):
    write_config(tmp_path, '\nport: "5000"\npack_sizes: "50,100,150"\n')
    cfg = load_config([tmp_path], {"PORT": "4000", "PACK_SIZES": "100,200,300"})
    assert cfg == Config(port=":4000", pack_sizes=[100, 200, 300])


def test_empty_environment_value_is_ignored(tmp_path):
    write_config(tmp_path, 'port: "5000"\n')
    cfg = load_config([tmp_path], {"PORT": ""})
    assert cfg.port == ":5000"


def test_first_search_path_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    write_config(first, 'port: "5000"\n')
    write_config(second, 'port: "6000"\n')
    assert load_config([first, second], {}).port == ":5000"


def test_integer_yaml_values(tmp_path):
    write_config(tmp_path, "port: 5000\npack_sizes: [50, 100]\n")
    cfg = load_config([tmp_path], {})
    assert cfg.port == ":5000"
    assert cfg.pack_sizes == [50, 100]


def test_no_valid_pack_sizes_falls_back_to_defaults(tmp_path):
    cfg = load_config([tmp_path], {"PACK_SIZES": "a,-5,0"})
    assert cfg.pack_sizes == [250, 500, 1000, 2000, 5000]


def test_invalid_yaml_raises(tmp_path):
    write_config(tmp_path, "port: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config([tmp_path], {})


def test_non_mapping_yaml_raises(tmp_path):
    write_config(tmp_path, "- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config([tmp_path], {})


@pytest.mark.parametrize(
    ("port", "expected"),
    [
        ("3000", ":3000"),
        (":3000", ":3000"),
        ("localhost:3000", "localhost:3000"),
    ],
)
def test_normalize_port(port, expected):
    assert normalize_port(port) == expected


def test_parse_pack_sizes_trims_and_skips():
    assert parse_pack_sizes(" 10 , ,20,x,-3,0,30 ") == [10, 20, 30]


def test_parse_pack_sizes_empty():
    assert parse_pack_sizes("") == []