"""Deciding fights between two queued fighters and recording them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from ebobo.entities import FighterRecord, MatchRecord, PlayRecord, Store


@dataclass(frozen=True)
class Outcome:
    """Result of a fight: the winner's fingerprint (None on a draw) and the new ranks."""

    winner: str | None
    my_rank: int
    enemy_rank: int


def decide(my_fingerprint: str, my_rank: int, enemy_fingerprint: str, enemy_rank: int) -> Outcome:
    """Decide a fight: the higher rank wins, equal ranks draw."""
    mine = my_rank + 1
    theirs = enemy_rank + 1
    if enemy_rank == my_rank:
        return Outcome(None, mine + 1, theirs + 1)
    if enemy_rank < my_rank:
        return Outcome(my_fingerprint, mine + 2, theirs)
    return Outcome(enemy_fingerprint, mine, theirs + 2)


def settle(store: Store, fighter: FighterRecord, enemy: FighterRecord, now: datetime) -> MatchRecord:
    """Fight two fighters, store the new ranks, the match and both plays."""
    outcome = decide(fighter.fingerprint, fighter.rank, enemy.fingerprint, enemy.rank)
    store.finish_fight(fighter.fingerprint, outcome.my_rank)
    store.finish_fight(enemy.fingerprint, outcome.enemy_rank)
    match = MatchRecord(uuid.uuid4(), outcome.winner, now)
    store.insert_match(match)
    store.insert_play(PlayRecord(fighter.fingerprint, match.id))
    store.insert_play(PlayRecord(enemy.fingerprint, match.id))
    return match