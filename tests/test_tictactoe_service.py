import pytest

from lldsystems.tictactoe.service import (
    GameNotFoundError,
    TicTacToeService,
    get_instance,
)
from lldsystems.tictactoe.states import MoveError
from lldsystems.tictactoe.symbols import GameStatus, Symbol


@pytest.fixture
def service():
    return TicTacToeService()


def test_create_new_game_registers_it(service):
    game = service.create_new_game("alice", "bob")
    assert game.id.startswith("GAME")
    assert len(game.id) == len("GAME") + 8
    assert service.get_game(game.id) is game
    assert game.player1.name == "alice"
    assert game.player1.symbol is Symbol.X
    assert game.player2.symbol is Symbol.O
    assert game.board.size == 3


def test_custom_size(service):
    game = service.create_new_game("alice", "bob", 5)
    assert game.board.size == 5


def test_ids_are_unique(service):
    ids = {service.create_new_game("a", "b").id for _ in range(50)}
    assert len(ids) == 50
    assert set(service.games) == ids


def test_unknown_game_raises(service):
    with pytest.raises(GameNotFoundError):
        service.get_game("GAMEmissing")
    with pytest.raises(GameNotFoundError):
        service.print_board("GAMEmissing")


def test_make_move_through_service(service):
    game = service.create_new_game("alice", "bob")
    service.make_move(game.id, game.player1, 1, 1)
    assert game.board.get_cell(1, 1) is Symbol.X
    assert game.current_player is game.player2
    with pytest.raises(MoveError):
        service.make_move(game.id, game.player1, 0, 0)


def test_full_game_through_service(service):
    game = service.create_new_game("alice", "bob")
    for player, x, y in [(game.player1, 0, 0), (game.player2, 1, 0),
                         (game.player1, 0, 1), (game.player2, 1, 1),
                         (game.player1, 0, 2)]:
        service.make_move(game.id, player, x, y)
    assert game.status is GameStatus.WINNER_X


def test_print_board(service, capsys):
    game = service.create_new_game("alice", "bob")
    service.make_move(game.id, game.player1, 0, 0)
    service.print_board(game.id)
    out = capsys.readouterr().out
    assert out == game.board.render() + "\n"
    assert out.splitlines()[0].split()[0] == "X"


def test_get_instance_is_shared():
    game = get_instance().create_new_game("carol", "dave")
    found = get_instance().get_game(game.id)
    assert found is game
    assert found.player1.name == "carol"
    assert found.player2.name == "dave"