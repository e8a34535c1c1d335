"""Tests for the esm-loader CLI."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from esm_loader.cli import cli
from esm_loader.search_path import CORE_MODULES_BASE
from esm_loader.search_path import ESM_MODULES_BASE
from esm_loader.settings import LoaderSettings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def settings():
    return LoaderSettings(search_paths=["resource:///extra/"])


@pytest.fixture(autouse=True)
def patched_settings(settings):
    with patch("esm_loader.cli.load_settings", return_value=settings) as mock_load:
        yield mock_load


def test_search_path_lists_bases_in_probe_order(runner):
    result = runner.invoke(cli, ["search-path"])

    assert result.exit_code == 0
    output = result.output
    assert output.index(ESM_MODULES_BASE) < output.index(CORE_MODULES_BASE) < output.index("resource:///extra/")


def test_search_path_empty(runner, settings):
    settings.include_default_search_paths = False
    settings.search_paths = []

    result = runner.invoke(cli, ["search-path"])

    assert result.exit_code == 0
    assert "Search path is empty" in result.output


def test_candidates(runner):
    result = runner.invoke(cli, ["candidates", "widgets"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "resource:///esm_loader/modules/esm/widgets.js",
        "resource:///esm_loader/modules/core/widgets.js",
        "resource:///extra/widgets.js",
    ]


def test_candidates_rejects_non_bare(runner):
    result = runner.invoke(cli, ["candidates", "./util"])

    assert result.exit_code == 1
    assert "Not a bare specifier" in result.output


@pytest.mark.parametrize(
    ("specifier", "expected"),
    [
        ("./util", "Kind: relative"),
        ("widgets", "Kind: bare"),
        ("File:///app/main.js", "Scheme: file"),
    ],
)
def test_classify(runner, specifier, expected):
    result = runner.invoke(cli, ["classify", specifier])

    assert result.exit_code == 0
    assert expected in result.output


def test_config_dumps_effective_settings(runner):
    result = runner.invoke(cli, ["config"])

    assert result.exit_code == 0
    assert "resource:///extra/" in result.output
    assert "log_level: INFO" in result.output


def test_log_path_enables_json_logging(runner, settings, tmp_path):
    settings.log_path = str(tmp_path / "log.jsonl")

    with patch("esm_loader.cli.init_json_logging") as mock_init:
        result = runner.invoke(cli, ["classify", "x"])

    assert result.exit_code == 0
    mock_init.assert_called_once_with(settings.log_path, "INFO")
