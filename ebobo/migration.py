"""Database schema and the migration command."""

from __future__ import annotations

import argparse
import os
import sqlite3
import sys
from collections.abc import Callable
from contextlib import closing

INITIAL = "m20240330_104732_initial"
_TRACKING_TABLE = "seaql_migrations"
COMMANDS = ("up", "down", "fresh", "refresh", "reset", "status")


def up(connection: sqlite3.Connection) -> None:
    """Create the fighters, matches and plays tables if they are missing."""
    connection.executescript(
        """
        CREATE TABLE IF NOT EXISTS fighters (
            fingerprint TEXT NOT NULL PRIMARY KEY,
            emo TEXT NOT NULL UNIQUE,
            rank INTEGER NOT NULL DEFAULT 0,
            queued BOOLEAN NOT NULL DEFAULT 0
        );
        CREATE TABLE IF NOT EXISTS matches (
            id TEXT NOT NULL PRIMARY KEY,
            winner TEXT NULL,
            date TEXT NOT NULL,
            FOREIGN KEY (winner) REFERENCES fighters (fingerprint)
        );
        CREATE TABLE IF NOT EXISTS plays (
            fighter TEXT NOT NULL,
            "match" TEXT NOT NULL,
            PRIMARY KEY ("match", fighter),
            FOREIGN KEY (fighter) REFERENCES fighters (fingerprint)
        );
        """
    )


def down(connection: sqlite3.Connection) -> None:
    """Drop the tables created by :func:`up`."""
    for table in ("fighters", "matches", "plays"):
        connection.execute(f"DROP TABLE {table}")
    connection.commit()


_MIGRATIONS: tuple[tuple[str, Callable[[sqlite3.Connection], None], Callable[[sqlite3.Connection], None]], ...] = (
    (INITIAL, up, down),
)


def _ensure_tracking(connection: sqlite3.Connection) -> None:
    connection.execute(
        f"CREATE TABLE IF NOT EXISTS {_TRACKING_TABLE} "
        "(version TEXT NOT NULL PRIMARY KEY, applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP)"
    )
    connection.commit()


def _applied(connection: sqlite3.Connection) -> list[str]:
    rows = connection.execute(f"SELECT version FROM {_TRACKING_TABLE} ORDER BY version")
    return [version for (version,) in rows]


def _apply_pending(connection: sqlite3.Connection) -> list[str]:
    done = set(_applied(connection))
    applied = []
    for name, forward, _ in _MIGRATIONS:
        if name in done:
            continue
        forward(connection)
        connection.execute(f"INSERT INTO {_TRACKING_TABLE} (version) VALUES (?)", (name,))
        connection.commit()
        applied.append(name)
    return applied


def _revert(connection: sqlite3.Connection, count: int | None) -> list[str]:
    done = set(_applied(connection))
    reverted = []
    for name, _, backward in reversed(_MIGRATIONS):
        if count is not None and len(reverted) >= count:
            break
        if name not in done:
            continue
        backward(connection)
        connection.execute(f"DELETE FROM {_TRACKING_TABLE} WHERE version = ?", (name,))
        connection.commit()
        reverted.append(name)
    return reverted


def _drop_all(connection: sqlite3.Connection) -> None:
    tables = [
        name
        for (name,) in connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
        )
    ]
    for table in tables:
        connection.execute(f'DROP TABLE "{table}"')
    connection.commit()


def run(connection: sqlite3.Connection, command: str) -> list[str]:
    """Run a migration command and return the lines describing what it did."""
    if command not in COMMANDS:
        raise ValueError(f"unknown migration command: {command!r}")
    _ensure_tracking(connection)
    if command == "status":
        done = set(_applied(connection))
        return [
            f"{name} {'applied' if name in done else 'pending'}" for name, _, _ in _MIGRATIONS
        ]
    if command == "up":
        return _apply_pending(connection)
    if command == "down":
        return _revert(connection, 1)
    if command == "reset":
        return _revert(connection, None)
    if command == "refresh":
        _revert(connection, None)
        return _apply_pending(connection)
    _drop_all(connection)
    _ensure_tracking(connection)
    return _apply_pending(connection)


def _database_path(url: str) -> str:
    if url.startswith("sqlite://"):
        url = url[len("sqlite://"):]
    return url.split("?", 1)[0]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ebobo-migrate", description="Manage the database schema.")
    parser.add_argument(
        "-u",
        "--database-url",
        default=os.environ.get("DATABASE_URL"),
        help="database to migrate (defaults to $DATABASE_URL)",
    )
    parser.add_argument("command", nargs="?", default="up", choices=COMMANDS)
    args = parser.parse_args(argv)
    if not args.database_url:
        parser.error("a database URL is required")
    with closing(sqlite3.connect(_database_path(args.database_url))) as connection:
        lines = run(connection, args.command)
    for line in lines:
        print(line)
    if not lines and args.command != "status":
        print("Nothing to do", file=sys.stderr)
    return 0