# templweaver

A small tower defense simulation played one round at a time, together with
a minimal login service and a method-checked route table.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The game

A board is a list of strings. `0` marks where monsters enter, `1` marks the
path they walk, a space is scenery, and any other character is a turret whose
`(range, shots)` come from a turret map.

```python
from templweaver.game import GameService

service = GameService()                      # uses LAYOUTS[0]
state, drawables = service.draw()
print(state.round, state.score)

state, drawables = service.draw(move=True)                 # advance a round
state, drawables = service.draw(move=True, reverse=True)   # step back
```

`templweaver.game.LAYOUTS` holds two built-in `GameLayout`s (board, turret
map and wave of monster healths); pass one to `GameService(layout)` to play
it. Each `draw` call gives back the current `GameState` and a grid of
`Drawable` cells. Every cell has a `position`, a `symbol`, a `DrawableType`
(`MONSTER`, `TURRET`, `PATH`, `START` or `TREE`), a `tooltip` and a
`css_class` string. Stepping back from round 0 leaves the state as it is.

Monsters that reach the end of the path are kept in `state.survivors` as
`(index, health)` pairs, where blank slots in the wave (health 0) are not
counted in the index, and their remaining health adds to `state.score`.

The building blocks are also usable on their own:

- `templweaver.units`: `Point` (with Manhattan `distance`), `Direction`,
  `Monster` (`is_dead`, `move`; it starts off the board at `(-1, -1)`) and
  `Turret` (`in_range`, `shoot`, `reload`; its ammunition starts at its
  shots per round).
- `templweaver.state`: `GameState`, `new_game_state` and `GameState.update`,
  which returns the next round's state given the original board, the path
  from its end back to its start, and the directions.
- `templweaver.game`: `find_elements`, which reads a board and gives back the
  start, the ordered path, the directions and the turrets, raising
  `ValueError` when the board names a turret that is not in the map or whose
  stats are not a pair; and `sort_path`, which orders path cells by walking
  from the start without turning straight back.

## Authentication

```python
from templweaver.auth import AuthService, AuthError

auth = AuthService()
password = "password"
auth.login("player@example.com", password)
auth.check_is_logged_in()
```

`login` raises `AuthError` when the e-mail or password is empty, and
`check_is_logged_in` raises `AuthError` until a login has succeeded.

## Routes

```python
from templweaver.routes import Route, Routes, MethodNotAllowed

routes = Routes({
    "/ping": Route(handler=lambda request: "pong", title="Ping",
                   allowed_methods=("POST",), api_only=True),
})
routes.dispatch("POST", "/ping", None)   # "pong"
routes.dispatch("GET", "/ping", None)    # raises MethodNotAllowed (status 405)
```

A route with no allowed methods accepts every method. `Routes.match` finds
the route for a path: an exact pattern first, then the longest pattern ending
in `/` that the path starts with. `Routes.dispatch` raises `LookupError` when
no route matches.

## What it does not do

The package has no web server, no HTML rendering and no command-line
program: the route table only maps paths to handlers, and the game service
returns plain data for something else to display.