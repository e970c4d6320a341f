"""CLI: matrix auth guest|login|status|logout"""

from typing import Optional

import click
from rich.console import Console

from matrix_sdk import auth as auth_payloads
from matrix_sdk import request
from matrix_sdk.client import is_error

console = Console()


def _load_config() -> dict:
    from matrix_sdk.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from matrix_sdk.cli.main import _save_config
    _save_config(cfg)


def _call(req):
    from matrix_sdk.cli.main import _call
    return _call(req)


def _dispatch(req):
    """Like `_call`, but hands back the result instead of exiting on error."""
    from matrix_sdk.cli.main import _run, _send
    return _run(_send(req))


def _base_url(base_url: Optional[str], cfg: dict) -> str:
    from matrix_sdk.cli.main import DEFAULT_BASE_URL
    return base_url or cfg.get("base_url", DEFAULT_BASE_URL)


def _store(cfg: dict, url: str, body: dict) -> None:
    _save_config({**cfg, "base_url": url, "access_token": body["access_token"], "user_id": body.get("user_id")})
    console.print("[dim]Token saved to ~/.matrix-sdk/config.json[/dim]")


@click.group()
def auth():
    """Authentication commands."""


@auth.command("guest")
@click.option("--base-url", default=None, help="Homeserver base URL")
def auth_guest(base_url: Optional[str]):
    """Register a guest account."""
    cfg = _load_config()
    url = _base_url(base_url, cfg)
    with console.status("Registering guest..."):
        body = _call(request.register_guest(url))
    console.print(f"[green]Registered guest {body.get('user_id')}[/green]")
    _store(cfg, url, body)


@auth.command("login")
@click.option("--base-url", default=None, help="Homeserver base URL")
@click.option("--device-name", default=None, help="Initial device display name")
def auth_login(base_url: Optional[str], device_name: Optional[str]):
    """Log in with a username and password."""
    cfg = _load_config()
    url = _base_url(base_url, cfg)

    user = click.prompt("Username")
    password = click.prompt("Password", hide_input=True)
    options = {"initial_device_display_name": device_name} if device_name else None
    with console.status("Logging in..."):
        body = _call(request.login(url, auth_payloads.login_user(user, password), options))
    console.print(f"[green]Logged in as {body.get('user_id')}[/green]")
    _store(cfg, url, body)


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = _load_config()
    if cfg.get("access_token"):
        console.print(f"[green]Logged in[/green] as {cfg.get('user_id', 'unknown')} on {cfg.get('base_url')}")
    else:
        console.print("[yellow]Not logged in. Run `matrix auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Invalidate the saved token and clear credentials."""
    cfg = _load_config()
    if cfg.get("access_token"):
        result = _dispatch(request.logout(_base_url(None, cfg), cfg["access_token"]))
        if is_error(result):
            console.print(f"[yellow]Server logout failed ({result.code}); clearing local credentials anyway.[/yellow]")
    _save_config({})
    console.print("[green]Logged out.[/green]")
