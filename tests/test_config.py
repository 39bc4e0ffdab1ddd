"""Tests for configuration loading."""

from extrol.config import DEFAULT_API_BASE, Config, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "nope.conf")
    assert config == Config()
    assert config.api_base == DEFAULT_API_BASE


def test_parses_values(tmp_path):
    path = tmp_path / "extrol.conf"
    path.write_text(
        "# Extrol settings\n"
        'API_BASE="http://localhost:4000/"  # dev server\n'
        "REQUEST_TIMEOUT=3.5\n"
        "CURRENCY_SYMBOL='$'\n"
        "DEFAULT_SORT=price_desc # biggest first\n"
        "CACHE_DIR=~/extrol-cache\n"
        "UNKNOWN_KEY=ignored\n"
        "not a setting\n"
    )

    config = load_config(path)

    assert config.api_base == "http://localhost:4000"
    assert config.request_timeout == 3.5
    assert config.currency_symbol == "$"
    assert config.default_sort == "price_desc"
    assert "~" not in str(config.cache_path)


def test_bad_values_keep_defaults(tmp_path, caplog):
    path = tmp_path / "extrol.conf"
    path.write_text("REQUEST_TIMEOUT=soon\nDEFAULT_SORT=random\n")

    config = load_config(path)

    assert config.request_timeout == Config().request_timeout
    assert config.default_sort == "date_desc"
    assert "REQUEST_TIMEOUT" in caplog.text
    assert "DEFAULT_SORT" in caplog.text
