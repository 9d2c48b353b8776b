"""
CLI interface for httpscallable.

Provides commands to create configuration and to call a trigger through
the configured functions client.
"""

import json
from pathlib import Path

import click

from httpscallable import __version__


@click.group()
@click.version_option(version=__version__, prog_name="httpscallable")
@click.pass_context
def main(ctx):
    """
    httpscallable - Call Cloud Functions callable triggers.
    """
    from httpscallable.config import load_config

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config()
    except Exception as e:
        # init does not need a config; other commands check ctx.obj["config_error"]
        ctx.obj["config_error"] = str(e)


@main.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """Initialize httpscallable configuration."""
    from httpscallable.config import get_httpscallable_home
    import yaml

    home = get_httpscallable_home()
    if not home.exists():
        home.mkdir(parents=True)

    cfg_path = home / "config.yaml"
    if cfg_path.exists() and not force:
        click.echo(f"Config already exists at {cfg_path}. Use --force to overwrite.", err=True)
        raise SystemExit(1)

    default_cfg = {
        "client": None,
        "client_options": {},
        "default_timeout": 70,
        "log_level": "INFO",
        "log_format": "pretty",
        "log_file": None,
        "env_file": str(home / ".env"),
    }
    cfg_path.write_text(yaml.safe_dump(default_cfg, sort_keys=False))

    env_path = home / ".env"
    if not env_path.exists():
        env_path.write_text("# HTTPSCALLABLE_TIMEOUT=70\n")

    click.echo(f"Initialized httpscallable config at {cfg_path}")
    click.echo("Set 'client' to the import path of your functions client, e.g. mypkg.transport:make_client")


@main.command("config")
@click.pass_context
def show_config(ctx):
    """Show the effective configuration."""
    config = _require_config(ctx)
    for key, value in config.to_dict().items():
        click.echo(f"{key}: {json.dumps(value)}")


@main.command("call")
@click.argument("name")
@click.option("--data", "data_json", help="JSON payload to send")
@click.option(
    "--data-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the JSON payload from a file",
)
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="Timeout in seconds")
@click.option("--client", "client_path", help="Functions client import path (module:attribute)")
@click.option("--dry-run", is_flag=True, help="Use a no-op client; nothing is sent")
@click.pass_context
def call(ctx, name: str, data_json: str | None, data_file: Path | None,
         timeout: float | None, client_path: str | None, dry_run: bool):
    """Call trigger NAME and print its result as JSON."""
    from httpscallable.clients import NoOpFunctionsClient, load_client
    from httpscallable.config import default_config
    from httpscallable.errors import ConfigError, FunctionsError
    from httpscallable.functions import Functions
    from httpscallable.utils import dump_json, setup_logging

    if data_json is not None and data_file is not None:
        raise click.UsageError("--data and --data-file are mutually exclusive")
    if dry_run and client_path:
        raise click.UsageError("--dry-run and --client are mutually exclusive")

    raw = data_file.read_text() if data_file is not None else data_json
    try:
        data = json.loads(raw) if raw is not None else None
    except json.JSONDecodeError as e:
        raise click.UsageError(f"Payload is not valid JSON: {e}")

    # Explicit client choices work without a config file
    config = ctx.obj.get("config")
    if config is None:
        if not (dry_run or client_path):
            _require_config(ctx)
        try:
            config = default_config()
        except ConfigError as e:
            click.echo(f"✗ {e}", err=True)
            raise SystemExit(1)

    setup_logging(config.log_level, config.log_format, config.get_log_file_path())

    try:
        if dry_run:
            functions = Functions(NoOpFunctionsClient(), default_timeout=config.default_timeout)
        elif client_path:
            client = load_client(client_path, **config.client_options)
            functions = Functions(client, default_timeout=config.default_timeout)
        else:
            functions = Functions.from_config(config)
    except ConfigError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1)

    if dry_run:
        click.echo("=== DRY RUN MODE === (no request sent)", err=True)

    reference = functions.https_callable(name, timeout=timeout)
    outcome = {}

    def on_complete(result, error):
        outcome["result"] = result
        outcome["error"] = error

    reference.call(data, on_complete=on_complete)

    error = outcome["error"]
    if error is not None:
        if isinstance(error, FunctionsError):
            click.echo(f"✗ {name} failed [{error.code.value}]: {error.message}", err=True)
            if error.details is not None:
                click.echo(dump_json(error.details), err=True)
        else:
            click.echo(f"✗ {name} failed: {type(error).__name__}: {error}", err=True)
        raise SystemExit(1)

    click.echo(dump_json(outcome["result"].data))


def _require_config(ctx):
    """Return loaded config or exit with the load error."""
    config = ctx.obj.get("config")
    if config is None:
        click.echo(f"✗ Config not loaded: {ctx.obj.get('config_error', 'Unknown error')}", err=True)
        click.echo("Run 'httpscallable init' to create a configuration file.", err=True)
        raise SystemExit(1)
    return config


if __name__ == "__main__":
    main()
