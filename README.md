# ebobo

The pieces of a small arena game. Every player is identified by a device
fingerprint sent in the `EBOBO-FINGERPRINT` header, claims an emoji fighter,
and queues up for fights. When two queued fighters meet, the one with the
higher rank wins; equal ranks draw.

## Installation

```
pip install ebobo
```

For running the test suite:

```
pip install "ebobo[test]"
pytest
```

## What is in the package

- `ebobo.shared` – the JSON wire types `Index`, `Arena`, `Fighter` and
  `Choice`, with `to_dict`/`from_dict` (objects) or `to_json`/`from_json`
  (bare strings), and the header name `AUTH_HEADER`.
- `ebobo.entities` – `Store`, a SQLite database of `FighterRecord`,
  `MatchRecord` and `PlayRecord` rows. It creates its tables on opening, can
  be used as a context manager, and raises `StoreError` when SQLite fails
  (for example when an emoji is already taken).
- `ebobo.migration` – the schema (`up`, `down`), `run(connection, command)`
  and the `ebobo-migrate` command.
- `ebobo.auth` – `authenticate(headers, client_ip, store)` returns an `Auth`
  holding the fingerprint and the caller's fighter, if any. Failures raise
  `AuthError`, whose `kind` is an `AuthErrorKind` and whose `status` is the
  HTTP status to answer with (401, or 500 for a missing store or a store
  error). `Auth.require_fighter()` raises when no fighter has been chosen.
- `ebobo.matchmaking` – `decide` and `settle`.
- `ebobo.client` – `ApiClient`, plus `default_url()` and `resolve_route()`.

## Preparing a database

```
ebobo-migrate --database-url sqlite://ebobo.sqlite3 up
```

The URL may also come from `$DATABASE_URL`; a leading `sqlite://` and any
`?query` are stripped. Commands are `up` (the default), `down`, `fresh`,
`refresh`, `reset` and `status`. Applied migrations are recorded in a
`seaql_migrations` table.

## Storing fighters and settling fights

```python
from datetime import datetime, timezone

from ebobo.entities import Store
from ebobo.matchmaking import settle

with Store("ebobo.sqlite3") as store:
    store.insert_fighter("device-a", "🐱")
    store.insert_fighter("device-b", "🐶")
    store.set_queued("device-a", True)
    store.set_queued("device-b", True)

    me = store.find_fighter("device-a")
    enemy = store.find_opponent("device-a")
    if enemy is not None:
        match = settle(store, me, enemy, datetime.now(timezone.utc))
        print(match.winner)
```

`decide(my_fingerprint, my_rank, enemy_fingerprint, enemy_rank)` returns an
`Outcome` without touching a store: the winner gains 3 rank and the loser 1;
on a draw the winner is `None` and both gain 2. `settle` writes both new
ranks, takes both fighters out of the queue, and records the match and the
two plays.

## Talking to a server

```python
from ebobo.client import ApiClient

with ApiClient("device-a") as api:
    print(api.index().greet)
    fighters = api.available()
    if fighters:
        api.choose(fighters[0].to_json())
```

When no base URL is given, the client uses `$EBOBO_API_URL`, or
`http://localhost:8000` when that is unset. A custom `httpx` transport may be
passed for testing. HTTP error statuses raise `httpx.HTTPStatusError`.

`resolve_route(path)` maps a browser path to an `AppRoute`: `INDEX` for `/`,
`ARENA` for `/arena`, and `NOT_FOUND` for anything else.

## What it does not do

The package has no HTTP or WebSocket server and no CORS handling: it provides
the storage, authentication, matchmaking and client that such a server would
be built from, but nothing here listens for requests. There is likewise no
graphical front end; only the route mapping is included.