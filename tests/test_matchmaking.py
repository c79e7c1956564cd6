from datetime import datetime

import pytest

from ebobo.entities import Store
from ebobo.matchmaking import Outcome, decide, settle


@pytest.fixture
def store(tmp_path):
    with Store(tmp_path / "game.db") as db:
        yield db


def test_draw_worked_example():
    assert decide("a", 0, "b", 0) == Outcome(None, 2, 2)


def test_draw_gives_equal_ranks():
    outcome = decide("a", 7, "b", 7)
    assert outcome.winner is None
    assert outcome.my_rank == outcome.enemy_rank


def test_higher_rank_wins():
    assert decide("a", 5, "b", 2).winner == "a"
    assert decide("a", 2, "b", 5).winner == "b"


@pytest.mark.parametrize("mine,theirs", [(0, 0), (1, 4), (9, 3), (10, 10)])
def test_total_gain_is_constant(mine, theirs):
    outcome = decide("a", mine, "b", theirs)
    assert outcome.my_rank + outcome.enemy_rank - mine - theirs == 4


@pytest.mark.parametrize("mine,theirs", [(0, 0), (1, 4), (9, 3)])
def test_decision_is_symmetric(mine, theirs):
    forward = decide("a", mine, "b", theirs)
    backward = decide("b", theirs, "a", mine)
    assert forward.winner == backward.winner
    assert (forward.my_rank, forward.enemy_rank) == (backward.enemy_rank, backward.my_rank)


def test_winner_gains_more_than_loser():
    outcome = decide("a", 6, "b", 1)
    assert outcome.my_rank - 6 > outcome.enemy_rank - 1


def test_settle_records_everything(store):
    store.insert_fighter("fp-a", "🐱")
    store.insert_fighter("fp-b", "🐶")
    store.finish_fight("fp-b", 3)
    store.set_queued("fp-a", True)
    store.set_queued("fp-b", True)
    me = store.find_fighter("fp-a")
    enemy = store.find_fighter("fp-b")
    now = datetime(2024, 3, 30, 10, 47, 32)

    match = settle(store, me, enemy, now)
    expected = decide("fp-a", me.rank, "fp-b", enemy.rank)

    assert match.winner == "fp-b"
    assert store.find_fighter("fp-a").rank == expected.my_rank
    assert store.find_fighter("fp-b").rank == expected.enemy_rank
    assert store.count_queued() == 0
    assert store.matches() == [match]
    assert {(p.fighter, p.match_id) for p in store.plays()} == {
        ("fp-a", match.id),
        ("fp-b", match.id),
    }


def test_settle_draw_has_no_winner(store):
    store.insert_fighter("fp-a", "🐱")
    store.insert_fighter("fp-b", "🐶")
    match = settle(store, store.find_fighter("fp-a"), store.find_fighter("fp-b"), datetime(2024, 1, 1))
    assert match.winner is None
    assert store.matches()[0].winner is None
    assert store.find_fighter("fp-a").rank == store.find_fighter("fp-b").rank