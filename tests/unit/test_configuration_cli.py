"""Unit tests for the command line interface."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from sync_hold_labeler.configuration.cli import typer_app
from sync_hold_labeler.configuration.models import SyncHoldConfig
from sync_hold_labeler.status.exceptions import StatusDocumentFetchError
from sync_hold_labeler.synchronize.exceptions import MissingDistroLabelError
from sync_hold_labeler.synchronize.models import SyncDecision
from sync_hold_labeler.synchronize.results import AllSyncHoldResults, IssueSyncHoldResult

runner = CliRunner()

ENV_NAMES = [
    "GITHUB_REPO_ORG",
    "GITHUB_REPO_NAME",
    "GITHUB_REPO_BRANCH_NAME",
    "GITHUB_REPO_PATH_TO_SYNC_STATUS",
    "GITHUB_PERSONAL_ACCESS_TOKEN",
    "DRY_RUN",
    "DEBUG",
]

CLI_ARGS = [
    "--repo-org",
    "ros",
    "--repo-name",
    "rosdistro",
    "--repo-branch-name",
    "master",
    "--repo-path-to-sync-status",
    "sync_status.yaml",
    "--github-personal-access-token",
    "token",
]


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Clear configuration environment variables and stub out logging setup."""
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    empty_settings = MagicMock()
    for name in ENV_NAMES:
        setattr(empty_settings, name, None)
    empty_settings.DRY_RUN = False
    empty_settings.DEBUG = False
    empty_settings.REQUEST_TIMEOUT = 30.0
    empty_settings.GITHUB_API_URL = "https://api.github.com"
    empty_settings.RAW_CONTENT_HOST = "raw.githubusercontent.com"
    empty_settings.SYNC_HOLD_LABEL = "in_sync_hold"
    monkeypatch.setattr("sync_hold_labeler.configuration.reconcile.settings", empty_settings)
    mock_configure = MagicMock()
    monkeypatch.setattr("sync_hold_labeler.configuration.cli.configure_logging", mock_configure)
    return mock_configure


def test_sync_success_prints_summary() -> None:
    """Test that a successful run exits 0 and summarizes the changes."""
    results = AllSyncHoldResults(
        [
            IssueSyncHoldResult(1, "A", "focal", SyncDecision.ADD_LABEL, ["focal"], ["focal", "in_sync_hold"], updated=True),
            IssueSyncHoldResult(2, "B", "jammy", SyncDecision.NOOP, ["jammy"], ["jammy"], updated=False),
        ]
    )
    with patch("sync_hold_labeler.configuration.cli.run_sync_hold_workflow", new=AsyncMock(return_value=results)) as mock_run:
        result = runner.invoke(typer_app, CLI_ARGS)

    assert result.exit_code == 0, result.output
    assert "Processed 2 open issues: 1 were labeled, 0 were unlabeled, 1 already correct" in result.output
    config: SyncHoldConfig = mock_run.await_args.args[0]
    assert config.repo_org == "ros"
    assert config.repo_name == "rosdistro"
    assert config.sync_hold_label == "in_sync_hold"
    assert config.dry_run is False


def test_sync_reads_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that options fall back to their environment variables."""
    monkeypatch.setenv("GITHUB_REPO_ORG", "env-org")
    monkeypatch.setenv("GITHUB_REPO_NAME", "env-repo")
    monkeypatch.setenv("GITHUB_REPO_BRANCH_NAME", "main")
    monkeypatch.setenv("GITHUB_REPO_PATH_TO_SYNC_STATUS", "status.yaml")
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "env-token")
    with patch("sync_hold_labeler.configuration.cli.run_sync_hold_workflow", new=AsyncMock(return_value=AllSyncHoldResults([]))) as mock_run:
        result = runner.invoke(typer_app, [])

    assert result.exit_code == 0, result.output
    config: SyncHoldConfig = mock_run.await_args.args[0]
    assert config.repo_org == "env-org"
    assert config.github_personal_access_token == "env-token"


def test_sync_dry_run() -> None:
    """Test that --dry-run is passed through and reported."""
    with patch(
        "sync_hold_labeler.configuration.cli.run_sync_hold_workflow", new=AsyncMock(return_value=AllSyncHoldResults([], dry_run=True))
    ) as mock_run:
        result = runner.invoke(typer_app, [*CLI_ARGS, "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "Dry run is enabled" in result.output
    assert "would be labeled" in result.output
    assert mock_run.await_args.args[0].dry_run is True


def test_sync_missing_configuration_exits_before_network() -> None:
    """Test that missing configuration exits 1 without running the workflow."""
    with patch("sync_hold_labeler.configuration.cli.run_sync_hold_workflow", new=AsyncMock()) as mock_run:
        result = runner.invoke(typer_app, ["--repo-org", "ros"])

    assert result.exit_code == 1
    assert "Missing required configuration element: GitHub repository name" in result.output
    mock_run.assert_not_awaited()


@pytest.mark.parametrize(
    "error",
    [
        pytest.param(StatusDocumentFetchError("https://example.com/s.yaml", "Request to get sync status YAML failed"), id="transport"),
        pytest.param(MissingDistroLabelError(12, ["bug"]), id="missing distro label"),
    ],
)
def test_sync_fatal_error_exits_1(error: Exception) -> None:
    """Test that workflow failures are reported and exit with status 1."""
    with patch("sync_hold_labeler.configuration.cli.run_sync_hold_workflow", new=AsyncMock(side_effect=error)):
        result = runner.invoke(typer_app, CLI_ARGS)

    assert result.exit_code == 1
    assert f"Error: {error}" in result.output


def test_sync_debug_configures_debug_logging(isolate_environment: MagicMock) -> None:
    """Test that --debug enables debug logging."""
    with patch("sync_hold_labeler.configuration.cli.run_sync_hold_workflow", new=AsyncMock(return_value=AllSyncHoldResults([]))):
        result = runner.invoke(typer_app, [*CLI_ARGS, "--debug"])

    assert result.exit_code == 0, result.output
    isolate_environment.assert_called_once_with(debug=True)
