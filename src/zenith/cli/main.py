"""Zenith CLI — run the server and talk to its API.

Usage:
    zenith serve                                  # Run the API with uvicorn
    zenith register a@x.com --password s3cret     # Create an account, print token
    zenith login a@x.com --password s3cret        # Print a fresh token
    zenith me --token eyJ...                      # Who does this token belong to?
    zenith tasks 1                                # List user 1's tasks
    zenith add-task 1 "Book the train"            # Create a task for user 1
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import json
import os
import sys
from typing import Optional

import click
import httpx

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

DEFAULT_API_URL = "http://localhost:8080"


def _api_url() -> str:
    return os.environ.get("ZENITH_API_URL", DEFAULT_API_URL).rstrip("/")


def _client() -> httpx.AsyncClient:
    """Build an async HTTP client pointed at the Zenith backend."""
    return httpx.AsyncClient(base_url=_api_url(), timeout=30.0)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(coro):
    """Run an async coroutine from a synchronous Click handler.

    Offloads to a thread when a loop is already running (e.g. tests).
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, coro).result()


def _fail(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _detail(r: httpx.Response) -> str:
    try:
        return str(r.json().get("detail", r.text))
    except ValueError:
        return r.text or r.reason_phrase


def _pretty_json(data: dict | list) -> str:
    return json.dumps(data, indent=2, default=str)


def _print_auth(data: dict) -> None:
    user = data["user"]
    click.secho(f"User #{user['id']} <{user['email']}>", fg="green")
    click.echo(data["token"])


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version="0.1.0", prog_name="zenith")
def main():
    """Zenith — accounts, tasks and travel catalog backend."""


@main.command()
@click.option("--host", default=None, help="Bind host (default: ZENITH_HOST)")
@click.option("--port", type=int, default=None, help="Bind port (default: ZENITH_PORT)")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the API server."""
    import uvicorn

    from zenith.config import settings

    uvicorn.run(
        "zenith.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


@main.command()
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--name", "-n", default=None, help="Display name")
def register(email: str, password: str, name: Optional[str]):
    """Create an account and print its token."""
    _run(_register_impl(email, password, name))


async def _register_impl(email: str, password: str, name: Optional[str]):
    async with _client() as c:
        r = await c.post("/api/users", json={"email": email, "password": password, "name": name})
        if r.status_code == 409:
            _fail(f"{email} is already registered")
        if r.status_code != 201:
            _fail(_detail(r))
        _print_auth(r.json())


@main.command()
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True)
def login(email: str, password: str):
    """Log in and print a fresh token."""
    _run(_login_impl(email, password))


async def _login_impl(email: str, password: str):
    async with _client() as c:
        r = await c.post("/api/auth/login", json={"email": email, "password": password})
        if r.status_code == 401:
            _fail("Invalid credentials")
        if r.status_code != 200:
            _fail(_detail(r))
        _print_auth(r.json())


@main.command()
@click.option("--token", envvar="ZENITH_TOKEN", required=True, help="Bearer token (or ZENITH_TOKEN)")
def me(token: str):
    """Show the account a token belongs to."""
    _run(_me_impl(token))


async def _me_impl(token: str):
    async with _client() as c:
        r = await c.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        if r.status_code != 200:
            _fail(_detail(r))
        click.echo(_pretty_json(r.json()))


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


@main.command()
@click.argument("user_id", type=int)
def tasks(user_id: int):
    """List a user's tasks."""
    _run(_tasks_impl(user_id))


async def _tasks_impl(user_id: int):
    async with _client() as c:
        r = await c.get(f"/api/tasks/{user_id}")
        if r.status_code == 204:
            click.echo("No tasks.")
            return
        if r.status_code != 200:
            _fail(_detail(r))
        for t in r.json():
            mark = click.style("✓", fg="green") if t["completed"] else " "
            click.echo(f"  [{mark}] #{t['id']:<5} {t['title']}")


@main.command("add-task")
@click.argument("user_id", type=int)
@click.argument("title")
@click.option("--description", "-d", default=None)
def add_task(user_id: int, title: str, description: Optional[str]):
    """Create a task for a user."""
    _run(_add_task_impl(user_id, title, description))


async def _add_task_impl(user_id: int, title: str, description: Optional[str]):
    async with _client() as c:
        r = await c.post(
            "/api/tasks",
            json={"title": title, "description": description, "user_id": user_id},
        )
        if r.status_code == 404:
            _fail(f"User {user_id} not found")
        if r.status_code != 201:
            _fail(_detail(r))
        click.secho(f"Task #{r.json()['id']} created", fg="green")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    main()
