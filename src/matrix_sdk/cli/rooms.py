"""CLI: matrix rooms joined|join|send|messages"""

import json
import uuid

import click
from rich.console import Console
from rich.table import Table

from matrix_sdk import request
from matrix_sdk.models.events import MessageType, RoomEvent

console = Console()


def _credentials():
    from matrix_sdk.cli.main import _credentials
    return _credentials()


def _call(req):
    from matrix_sdk.cli.main import _call
    return _call(req)


@click.group()
def rooms():
    """Room commands."""


@rooms.command("joined")
def rooms_joined():
    """List joined rooms."""
    base_url, token = _credentials()
    body = _call(request.joined_rooms(base_url, token))
    table = Table(title=f"Joined rooms ({len(body.get('joined_rooms', []))})")
    table.add_column("Room ID", style="bold")
    for room_id in body.get("joined_rooms", []):
        table.add_row(room_id)
    console.print(table)


@rooms.command("join")
@click.argument("room")
def rooms_join(room):
    """Join a room by ID or alias."""
    base_url, token = _credentials()
    with console.status(f"Joining {room}..."):
        body = _call(request.join_room(base_url, token, room))
    console.print(f"[green]Joined {body.get('room_id')}[/green]")


@rooms.command("send")
@click.argument("room_id")
@click.argument("message")
@click.option("--notice", is_flag=True, help="Send as m.notice")
@click.option("--txn-id", default=None, help="Transaction id (default: random)")
def rooms_send(room_id, message, notice, txn_id):
    """Send a text message."""
    base_url, token = _credentials()
    msgtype = MessageType.NOTICE if notice else MessageType.TEXT
    event = RoomEvent.message(room_id, msgtype, message, txn_id or uuid.uuid4().hex)
    body = _call(request.send_room_event(base_url, token, event))
    console.print(f"[green]Sent {body.get('event_id')}[/green]")


@rooms.command("messages")
@click.argument("room_id")
@click.option("--from", "from_token", required=True, help="Pagination token, e.g. prev_batch from `matrix sync`")
@click.option("--dir", "direction", default="b", type=click.Choice(["b", "f"]))
@click.option("--limit", default=10, type=int)
@click.option("--json-output", "--json", is_flag=True)
def rooms_messages(room_id, from_token, direction, limit, json_output):
    """Page through a room's timeline."""
    base_url, token = _credentials()
    body = _call(request.room_messages(base_url, token, room_id, from_token, direction, {"limit": limit}))
    if json_output:
        click.echo(json.dumps(body, indent=2))
        return
    for event in body.get("chunk", []):
        content = event.get("content", {})
        console.print(f"[bold]{event.get('sender')}[/bold] {content.get('body', event.get('type'))}")
