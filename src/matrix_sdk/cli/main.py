"""
Matrix SDK CLI: the `matrix` command.

Commands:
  matrix versions            API versions supported by a homeserver
  matrix auth guest|login    Register a guest or log in; saves the token
  matrix auth status|logout  Show or clear saved credentials
  matrix whoami              Current user
  matrix rooms <cmd>         Joined rooms, join, send, messages
  matrix sync                One sync poll
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install matrix-sdk[cli]")

from matrix_sdk import request
from matrix_sdk.client import AsyncMatrixClient, Result
from matrix_sdk.errors import MatrixSDKError, ProtocolError
from matrix_sdk.models.request import Request

console = Console()
CONFIG_FILE = Path.home() / ".matrix-sdk" / "config.json"
DEFAULT_BASE_URL = "https://matrix.org"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _credentials() -> tuple[str, str]:
    """Saved (base_url, access_token), or exit if not logged in."""
    cfg = _load_config()
    if not cfg.get("access_token"):
        console.print("[red]Not logged in. Run `matrix auth login` or `matrix auth guest` first.[/red]")
        raise SystemExit(1)
    return cfg.get("base_url", DEFAULT_BASE_URL), cfg["access_token"]


def _run(coro):
    return asyncio.run(coro)


async def _send(req: Request) -> Result:
    async with AsyncMatrixClient() as client:
        return await client.do_request(req)


def _call(req: Request) -> Any:
    """Dispatch and return the response body, or exit on any error."""
    return _body_or_exit(_run(_send(req)))


def _body_or_exit(result: Result) -> Any:
    if isinstance(result, ProtocolError):
        console.print(f"[red]{result.kind}[/red] ({result.status_code}): {result.message or ''}")
        raise SystemExit(1)
    if isinstance(result, MatrixSDKError):
        console.print(f"[red]{result.code}[/red]: {result}")
        raise SystemExit(1)
    return result.body


def _print_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log requests and responses")
def main(verbose: bool):
    """Matrix SDK CLI. Talk to a Matrix homeserver."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")


@main.command("versions")
@click.option("--base-url", default=None, help="Homeserver base URL")
def versions_cmd(base_url: Optional[str]):
    """API versions supported by the homeserver."""
    url = base_url or _load_config().get("base_url", DEFAULT_BASE_URL)
    body = _call(request.spec_versions(url))
    for version in body.get("versions", []):
        console.print(version)


@main.command("whoami")
def whoami_cmd():
    """Show the user the saved token belongs to."""
    base_url, token = _credentials()
    body = _call(request.whoami(base_url, token))
    console.print(f"[green]{body.get('user_id')}[/green]")


@main.command("sync")
@click.option("--since", default=None, help="next_batch token from a previous sync")
@click.option("--timeout", default=0, type=int, help="Long-poll timeout in milliseconds")
def sync_cmd(since: Optional[str], timeout: int):
    """Run one sync poll and print the raw response."""
    base_url, token = _credentials()
    options: dict[str, Any] = {"timeout": timeout}
    if since:
        options["since"] = since
    _print_json(_call(request.sync(base_url, token, options)))


# Register subcommands from separate modules
from matrix_sdk.cli.auth import auth
from matrix_sdk.cli.rooms import rooms

main.add_command(auth)
main.add_command(rooms)


if __name__ == "__main__":
    main()
