import pytest

from solong.game import Direction, Game, MoveResult
from solong.validate import check_map

LINE = ["1111111", "1P0C0E1", "1111111"]
EXIT_FIRST = ["1111111", "1PE0C01", "1111111"]
OPEN = ["11111", "1C0E1", "10P01", "10001", "11111"]


def _game(grid):
    return Game(check_map(grid))


@pytest.mark.parametrize(
    "direction, delta",
    [
        (Direction.UP, (-1, 0)),
        (Direction.DOWN, (1, 0)),
        (Direction.LEFT, (0, -1)),
        (Direction.RIGHT, (0, 1)),
    ],
)
def test_direction_deltas_follow_keys(direction, delta):
    game = _game(OPEN)
    row, col = game.player
    assert game.move(direction) is MoveResult.MOVED
    assert game.player == (row + delta[0], col + delta[1])
    assert direction.delta == delta


def test_wall_blocks_without_counting():
    game = _game(LINE)
    before = game.rows()
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.moves == 0
    assert game.rows() == before
    assert game.player == game.map.player


def test_move_updates_grid():
    game = _game(LINE)
    start = game.player
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.moves == 1
    assert game.player == (start[0], start[1] + 1)
    rows = game.rows()
    assert rows[start[0]][start[1]] == "0"
    assert rows[game.player[0]][game.player[1]] == "P"


def test_collecting_opens_exit():
    game = _game(LINE)
    game.move(Direction.RIGHT)
    assert game.exit_open is False
    assert game.move(Direction.RIGHT) is MoveResult.COLLECTED
    assert game.collected == game.items
    assert game.exit_open is True
    assert all("C" not in row for row in game.rows())


def test_reaching_open_exit_wins():
    game = _game(LINE)
    results = [game.move(Direction.RIGHT) for _ in range(4)]
    assert results[-1] is MoveResult.WON
    assert game.finished is True
    assert game.moves == len(results)
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_closed_exit_is_walked_over():
    game = _game(EXIT_FIRST)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.player == game.exit
    assert game.finished is False
    game.move(Direction.RIGHT)
    row, col = game.exit
    assert game.rows()[row][col] == "0"
    assert game.move(Direction.RIGHT) is MoveResult.COLLECTED
    game.move(Direction.LEFT)
    assert game.move(Direction.LEFT) is MoveResult.WON
    assert game.moves == 5


def test_one_player_tile_at_all_times():
    game = _game(["11111", "1PC01", "10C01", "1C0E1", "11111"])
    for direction in [Direction.DOWN, Direction.DOWN, Direction.RIGHT, Direction.UP,
                      Direction.UP, Direction.RIGHT, Direction.DOWN]:
        game.move(direction)
        assert sum(row.count("P") for row in game.rows()) == 1
    assert game.collected == game.items


def test_map_is_not_changed_by_play():
    game_map = check_map(LINE)
    game = Game(game_map)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game_map.grid == tuple(LINE)
    assert game.rows() != list(LINE)