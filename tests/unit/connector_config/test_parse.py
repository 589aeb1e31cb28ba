"""Tests covering connector config parsing."""

from __future__ import annotations

import logging

import pytest

from materialize_connector import Config, ValidationError, ViolationKind, parse


def test_parse_valid_config_returns_identical_values(valid_raw_config):
    """Test that a valid mapping round-trips into the Config record."""

    config = parse(valid_raw_config)

    assert config == Config(url="https://materialize.example.com", table="t1", key="k1")


def test_parse_defaults_missing_optional_keys_to_empty():
    config = parse({"url": "postgres://materialize@localhost:6875/materialize"})

    assert config.table == ""
    assert config.key == ""


def test_parse_ignores_unrecognized_keys(valid_raw_config):
    valid_raw_config["batch_size"] = "100"

    config = parse(valid_raw_config)

    assert config.url == valid_raw_config["url"]


@pytest.mark.parametrize("raw", [{}, {"url": ""}, None])
def test_parse_requires_url(raw):
    with pytest.raises(ValidationError) as excinfo:
        parse(raw)

    assert "url config value must be set" in str(excinfo.value)
    assert [v.kind for v in excinfo.value.violations] == [ViolationKind.REQUIRED]


def test_parse_rejects_malformed_url():
    with pytest.raises(ValidationError) as excinfo:
        parse({"url": "not a url"})

    assert "url config value must be a valid url" in str(excinfo.value)
    # An empty URL only reports the required rule; a present one only the syntax rule.
    assert "must be set" not in str(excinfo.value)


@pytest.mark.parametrize("field", ["table", "key"])
def test_parse_identifier_length_boundary(valid_raw_config, identifier_63, identifier_64, field):
    """Test that 63 characters pass and 64 characters fail for identifiers."""

    valid_raw_config[field] = identifier_63
    assert getattr(parse(valid_raw_config), field) == identifier_63

    valid_raw_config[field] = identifier_64
    with pytest.raises(ValidationError) as excinfo:
        parse(valid_raw_config)

    assert str(excinfo.value) == f"{field} config value is too long"
    assert excinfo.value.violations[0].kind is ViolationKind.TOO_LONG


def test_parse_counts_characters_not_bytes(valid_raw_config):
    valid_raw_config["table"] = "é" * 63

    assert parse(valid_raw_config).table == "é" * 63


def test_parse_aggregates_every_violation_in_field_order():
    """Test that violations are collected, not short-circuited."""

    with pytest.raises(ValidationError) as excinfo:
        parse({"key": "k" * 70, "table": "t" * 70})

    err = excinfo.value
    assert err.messages == [
        "url config value must be set",
        "table config value is too long",
        "key config value is too long",
    ]
    assert str(err) == "; ".join(err.messages)


def test_parse_logs_warning_on_failure(caplog):
    with caplog.at_level(logging.WARNING, logger="materialize_connector.config.config"):
        with pytest.raises(ValidationError):
            parse({"url": "nope"})

    assert "url config value must be a valid url" in caplog.text


def test_validation_error_is_configuration_error():
    from materialize_connector import ConfigurationError, ConnectorError

    with pytest.raises(ConfigurationError):
        parse({})
    with pytest.raises(ConnectorError):
        parse({})
