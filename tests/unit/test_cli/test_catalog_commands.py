"""Unit tests for the runtime-metrics catalog CLI commands.

Tests cover:
- list with kind, cumulative and prefix filters
- show for known, unknown and malformed names
- docs in text and markdown formats, including the configured default
- validate on the real catalog, a corrupt one and one breaking conventions
- config loading failures surfaced as error envelopes
"""

import json

from runtime_metrics.cli.main import cli
from runtime_metrics.config import get_config
from runtime_metrics.core.metrics import (
    MetricDescriptor,
    ValueKind,
    all_metrics,
    export_catalog_as_markdown,
    get_metrics_by_prefix,
    render_catalog_text,
)


def _json(result):
    return json.loads(result.stdout)


class TestListCommand:
    def test_lists_all_metrics_in_order(self, cli_runner):
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0, f"Unexpected output: {result.output}"
        data = _json(result)
        assert data["success"] is True
        assert data["error"] is None
        names = [m["name"] for m in data["data"]["metrics"]]
        assert names == [d.name for d in all_metrics()]
        assert data["data"]["total_count"] == len(names)

    def test_kind_filter(self, cli_runner):
        result = cli_runner.invoke(cli, ["list", "--kind", "float64-histogram"])
        assert result.exit_code == 0
        names = {m["name"] for m in _json(result)["data"]["metrics"]}
        assert "/gc/heap/allocs-by-size:bytes" in names
        assert "/gc/pauses:seconds" in names
        assert "/gc/heap/goal:bytes" not in names

    def test_kind_and_cumulative_filters_combine(self, cli_runner):
        result = cli_runner.invoke(cli, ["list", "--kind", "float64-histogram", "--cumulative"])
        metrics = _json(result)["data"]["metrics"]
        assert metrics
        assert all(m["cumulative"] and m["kind"] == "float64-histogram" for m in metrics)
        assert "/sched/latencies:seconds" not in {m["name"] for m in metrics}

    def test_prefix_filter(self, cli_runner):
        result = cli_runner.invoke(cli, ["list", "--prefix", "/memory/classes"])
        data = _json(result)["data"]
        assert data["total_count"] == len(get_metrics_by_prefix("/memory/classes"))
        assert all(m["path"].startswith("/memory/classes/") for m in data["metrics"])

    def test_bad_kind_rejected_by_click(self, cli_runner):
        result = cli_runner.invoke(cli, ["list", "--kind", "bad"])
        assert result.exit_code == 2


class TestShowCommand:
    def test_show_scalar_metric(self, cli_runner):
        result = cli_runner.invoke(cli, ["show", "/memory/classes/total:bytes"])
        assert result.exit_code == 0
        metric = _json(result)["data"]["metric"]
        assert metric["cumulative"] is False
        assert metric["kind"] == "uint64"
        assert metric["unit"] == "bytes"
        assert "count_unit" not in metric

    def test_show_histogram_includes_count_unit(self, cli_runner):
        result = cli_runner.invoke(cli, ["show", "/gc/pauses:seconds"])
        assert result.exit_code == 0
        assert _json(result)["data"]["metric"]["count_unit"] == "samples"

    def test_unknown_metric(self, cli_runner):
        result = cli_runner.invoke(cli, ["show", "/gc/heap/unknown:bytes"])
        assert result.exit_code == 1
        data = _json(result)
        assert data["success"] is False
        assert data["data"]["error_code"] == "NOT_FOUND"
        assert data["data"]["name"] == "/gc/heap/unknown:bytes"

    def test_malformed_name(self, cli_runner):
        result = cli_runner.invoke(cli, ["show", "gc-heap-goal"])
        assert result.exit_code == 1
        data = _json(result)
        assert data["data"]["error_code"] == "MALFORMED_NAME"
        assert "Malformed metric name" in data["error"]


class TestDocsCommand:
    def test_text_is_default(self, cli_runner):
        result = cli_runner.invoke(cli, ["docs"])
        assert result.exit_code == 0
        assert result.stdout == render_catalog_text()

    def test_markdown(self, cli_runner):
        result = cli_runner.invoke(cli, ["docs", "--format", "markdown"])
        assert result.exit_code == 0
        assert result.stdout == export_catalog_as_markdown()

    def test_configured_default_format(self, cli_runner, tmp_path):
        config = tmp_path / "custom.toml"
        config.write_text('[runtime_metrics]\ndocs_format = "markdown"\n')
        result = cli_runner.invoke(cli, ["--config", str(config), "docs"])
        assert result.exit_code == 0
        assert result.stdout.startswith("# Runtime Metrics")

    def test_docs_format_env_var(self, cli_runner, monkeypatch):
        monkeypatch.setenv("RUNTIME_METRICS_DOCS_FORMAT", "markdown")
        result = cli_runner.invoke(cli, ["docs"])
        assert result.exit_code == 0
        assert result.stdout == export_catalog_as_markdown()

    def test_format_option_beats_env_var(self, cli_runner, monkeypatch):
        monkeypatch.setenv("RUNTIME_METRICS_DOCS_FORMAT", "markdown")
        result = cli_runner.invoke(cli, ["docs", "--format", "text"])
        assert result.exit_code == 0
        assert result.stdout == render_catalog_text()


class TestValidateCommand:
    def test_valid_catalog(self, cli_runner):
        result = cli_runner.invoke(cli, ["validate"])
        assert result.exit_code == 0
        data = _json(result)["data"]
        assert data["valid"] is True
        assert data["total_count"] == len(all_metrics())
        assert data["histogram_count"] == sum(
            1 for d in all_metrics() if d.kind is ValueKind.FLOAT64_HISTOGRAM
        )

    def test_corrupt_catalog_reported(self, cli_runner, monkeypatch):
        duplicate = MetricDescriptor(name="/a:bytes", description="A.", kind=ValueKind.UINT64)
        monkeypatch.setattr(
            "runtime_metrics.cli.commands.catalog.all_metrics",
            lambda: [duplicate, duplicate],
        )
        result = cli_runner.invoke(cli, ["validate"])
        assert result.exit_code == 1
        assert _json(result)["data"]["error_code"] == "DUPLICATE_METRIC"

    def test_real_catalog_follows_conventions(self, cli_runner):
        result = cli_runner.invoke(cli, ["validate", "--strict"])
        assert result.exit_code == 0
        data = _json(result)["data"]
        assert data["conventions_ok"] is True
        assert data["convention_issues"] == []
        assert data["histogram_count_unit"] == "samples"

    def test_convention_issue_reported(self, cli_runner, monkeypatch):
        entries = [
            MetricDescriptor(name="/a:bytes", description="No trailing stop", kind=ValueKind.UINT64),
            MetricDescriptor(name="/b:bytes", description="Fine.", kind=ValueKind.UINT64),
        ]
        monkeypatch.setattr("runtime_metrics.cli.commands.catalog.all_metrics", lambda: entries)
        result = cli_runner.invoke(cli, ["--log-level", "error", "validate"])
        assert result.exit_code == 0
        data = _json(result)["data"]
        assert data["valid"] is True
        assert data["conventions_ok"] is False
        assert [issue["name"] for issue in data["convention_issues"]] == ["/a:bytes"]

    def test_strict_fails_on_convention_issue(self, cli_runner, monkeypatch):
        entries = [
            MetricDescriptor(
                name="/sched/waits:samples",
                description="Distribution of waits.",
                kind=ValueKind.FLOAT64_HISTOGRAM,
            ),
        ]
        monkeypatch.setattr("runtime_metrics.cli.commands.catalog.all_metrics", lambda: entries)
        result = cli_runner.invoke(cli, ["--log-level", "error", "validate", "--strict"])
        assert result.exit_code == 1
        data = _json(result)
        assert data["success"] is False
        assert data["data"]["error_code"] == "CONVENTION_VIOLATION"
        assert data["data"]["convention_issues"][0]["name"] == "/sched/waits:samples"


class TestGlobalOptions:
    def test_unparseable_config_file(self, cli_runner, tmp_path):
        config = tmp_path / "bad.toml"
        config.write_text("[runtime_metrics\n")
        result = cli_runner.invoke(cli, ["--config", str(config), "list"])
        assert result.exit_code == 1
        assert _json(result)["data"]["error_code"] == "CONFIG_ERROR"

    def test_log_level_override(self, cli_runner):
        result = cli_runner.invoke(cli, ["--log-level", "error", "list"])
        assert result.exit_code == 0
        assert get_config().log_level == "ERROR"
