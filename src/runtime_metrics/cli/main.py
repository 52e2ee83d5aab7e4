"""Entry point for the ``runtime-metrics`` introspection CLI."""

from typing import Optional

import click

from runtime_metrics.cli.commands import docs_cmd, list_cmd, show_cmd, validate_cmd
from runtime_metrics.cli.output import emit_error
from runtime_metrics.config import CatalogSettings, set_config
from runtime_metrics.core.errors import ConfigError, error_code_for


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    help="Path to a TOML config file (overrides RUNTIME_METRICS_CONFIG_FILE).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the configured log level.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str]) -> None:
    """Inspect the runtime metrics catalog."""
    try:
        settings = CatalogSettings.from_env(config_file)
    except ConfigError as e:
        emit_error(str(e), code=error_code_for(e) or "CONFIG_ERROR")
        return
    if log_level:
        settings.log_level = log_level.upper()
    settings.setup_logging()
    set_config(settings)
    ctx.obj = settings


cli.add_command(list_cmd)
cli.add_command(show_cmd)
cli.add_command(docs_cmd)
cli.add_command(validate_cmd)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
