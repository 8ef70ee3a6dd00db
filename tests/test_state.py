from templweaver.state import new_game_state
from templweaver.units import Direction, Monster, Point, Turret

PATH = [Point(3, 0), Point(2, 0), Point(1, 0), Point(0, 0)]
DIRECTIONS = [Direction.RIGHT, Direction.RIGHT, Direction.RIGHT]


def _run(state, original, rounds):
    states = [state]
    for _ in range(rounds):
        states.append(states[-1].update(original, PATH, DIRECTIONS))
    return states


def test_new_game_state_defaults():
    board = ["0111"]
    state = new_game_state(board, [], [Monster(0), Monster(4), Monster(0)])
    assert state.round == 0
    assert state.score == 0
    assert state.survivors == []
    assert state.blank_count == 2
    assert state.current == board


def test_first_update_places_first_monster_at_start():
    original = ["0111"]
    state = new_game_state(original, [], [Monster(5), Monster(7)])
    nxt = state.update(original, PATH, DIRECTIONS)
    assert nxt.round == 1
    assert nxt.monsters[0].position == PATH[-1]
    assert nxt.monsters[1].position == Point(-1, -1)
    assert nxt.current[0][0] == "@"
    assert nxt.current[0][1:] == original[0][1:]


def test_update_leaves_previous_state_untouched():
    original = ["0111"]
    state = new_game_state(original, [], [Monster(5), Monster(7)])
    state.update(original, PATH, DIRECTIONS)
    assert state.round == 0
    assert all(m.position == Point(-1, -1) for m in state.monsters)
    assert state.current == original


def test_without_turrets_all_monsters_survive():
    original = ["0111"]
    state = new_game_state(original, [], [Monster(5), Monster(7)])
    states = _run(state, original, 8)
    final = states[-1]
    max_rounds = len(PATH) + 2
    assert final.round == max_rounds
    assert final.survivors == [(0, 5), (1, 7)]
    assert final.score == 5 + 7
    assert [s.round for s in states[: max_rounds + 1]] == list(range(max_rounds + 1))


def test_blank_monsters_are_not_counted():
    original = ["0111"]
    state = new_game_state(original, [], [Monster(0), Monster(4)])
    final = _run(state, original, 7)[-1]
    assert final.survivors == [(0, 4)]
    assert final.score == 4
    assert final.blank_count == 1


def test_turret_spends_its_shots_on_first_monster_in_range():
    original = ["0111", " A  "]
    shots = 2
    turret = Turret(Point(1, 1), "A", 1, shots)
    state = new_game_state(original, [turret], [Monster(5), Monster(7)])
    states = _run(state, original, 2)
    second = states[2]
    assert second.monsters[0].position == Point(1, 0)
    assert second.monsters[0].health == 5 - shots
    assert second.turrets[0].ammo == 0
    assert second.monsters[1].health == 7


def test_turrets_reduce_final_score():
    original = ["0111", " A  "]
    turret = Turret(Point(1, 1), "A", 1, 2)
    state = new_game_state(original, [turret], [Monster(5), Monster(7)])
    final = _run(state, original, 8)[-1]
    assert final.score == sum(health for _, health in final.survivors)
    assert final.score < 5 + 7
    assert all(m.health >= 0 for m in final.monsters)


def test_previous_turrets_are_reloaded():
    original = ["0111", " A  "]
    turret = Turret(Point(1, 1), "A", 1, 2)
    state = new_game_state(original, [turret], [Monster(5), Monster(7)])
    states = _run(state, original, 2)
    states[2].update(original, PATH, DIRECTIONS)
    assert states[2].turrets[0].ammo == states[2].turrets[0].shots