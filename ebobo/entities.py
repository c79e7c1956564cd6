"""Persistent records of fighters, matches and plays, kept in SQLite."""

from __future__ import annotations

import os
import sqlite3
import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime

from ebobo.migration import up


class StoreError(Exception):
    """Raised when the store cannot complete an operation."""


@dataclass(frozen=True)
class FighterRecord:
    fingerprint: str
    emo: str
    rank: int = 0
    queued: bool = False


@dataclass(frozen=True)
class MatchRecord:
    id: uuid.UUID
    winner: str | None
    date: datetime


@dataclass(frozen=True)
class PlayRecord:
    fighter: str
    match_id: uuid.UUID


def _fighter(row: tuple) -> FighterRecord:
    fingerprint, emo, rank, queued = row
    return FighterRecord(fingerprint, emo, rank, bool(queued))


class Store:
    """A SQLite database holding the game's records."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(os.fspath(path), check_same_thread=False)
            self._conn.execute("PRAGMA foreign_keys = ON")
            up(self._conn)
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc

    def __enter__(self) -> Store:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    @contextmanager
    def _db(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            try:
                with self._conn:
                    yield self._conn
            except sqlite3.Error as exc:
                raise StoreError(str(exc)) from exc

    def find_fighter(self, fingerprint: str) -> FighterRecord | None:
        with self._db() as db:
            row = db.execute(
                "SELECT fingerprint, emo, rank, queued FROM fighters WHERE fingerprint = ?",
                (fingerprint,),
            ).fetchone()
        return _fighter(row) if row else None

    def fighters(self) -> list[FighterRecord]:
        with self._db() as db:
            rows = db.execute(
                "SELECT fingerprint, emo, rank, queued FROM fighters ORDER BY rowid"
            ).fetchall()
        return [_fighter(row) for row in rows]

    def count_fighters(self) -> int:
        with self._db() as db:
            return db.execute("SELECT COUNT(*) FROM fighters").fetchone()[0]

    def count_queued(self) -> int:
        with self._db() as db:
            return db.execute("SELECT COUNT(*) FROM fighters WHERE queued").fetchone()[0]

    def taken_emos(self) -> set[str]:
        with self._db() as db:
            return {emo for (emo,) in db.execute("SELECT emo FROM fighters")}

    def insert_fighter(self, fingerprint: str, emo: str) -> FighterRecord:
        with self._db() as db:
            db.execute(
                "INSERT INTO fighters (fingerprint, emo) VALUES (?, ?)", (fingerprint, emo)
            )
        return FighterRecord(fingerprint, emo)

    def set_queued(self, fingerprint: str, queued: bool) -> None:
        with self._db() as db:
            db.execute(
                "UPDATE fighters SET queued = ? WHERE fingerprint = ?",
                (int(queued), fingerprint),
            )

    def find_opponent(self, fingerprint: str) -> FighterRecord | None:
        """Return some queued fighter other than the given one."""
        with self._db() as db:
            row = db.execute(
                "SELECT fingerprint, emo, rank, queued FROM fighters "
                "WHERE fingerprint != ? AND queued LIMIT 1",
                (fingerprint,),
            ).fetchone()
        return _fighter(row) if row else None

    def finish_fight(self, fingerprint: str, rank: int) -> None:
        """Store a fighter's new rank and take it out of the queue."""
        with self._db() as db:
            db.execute(
                "UPDATE fighters SET rank = ?, queued = 0 WHERE fingerprint = ?",
                (rank, fingerprint),
            )

    def insert_match(self, match: MatchRecord) -> None:
        with self._db() as db:
            db.execute(
                "INSERT INTO matches (id, winner, date) VALUES (?, ?, ?)",
                (str(match.id), match.winner, match.date.isoformat()),
            )

    def insert_play(self, play: PlayRecord) -> None:
        with self._db() as db:
            db.execute(
                'INSERT INTO plays (fighter, "match") VALUES (?, ?)',
                (play.fighter, str(play.match_id)),
            )

    def matches(self) -> list[MatchRecord]:
        with self._db() as db:
            rows = db.execute("SELECT id, winner, date FROM matches ORDER BY rowid").fetchall()
        return [
            MatchRecord(uuid.UUID(match_id), winner, datetime.fromisoformat(date))
            for match_id, winner, date in rows
        ]

    def plays(self) -> list[PlayRecord]:
        with self._db() as db:
            rows = db.execute('SELECT fighter, "match" FROM plays ORDER BY rowid').fetchall()
        return [PlayRecord(fighter, uuid.UUID(match_id)) for fighter, match_id in rows]