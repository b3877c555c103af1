# lldsystems

Two small systems that run inside a single Python process:

- `lldsystems.pubsub`: a publish/subscribe service with topics, subscribers and messages.
- `lldsystems.tictactoe`: a tic-tac-toe engine for square boards of any size, with winning strategies and game states.

There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Publish/subscribe

```python
from lldsystems.pubsub.message import Message
from lldsystems.pubsub.service import get_instance

service = get_instance()

topic_id = service.create_topic("weather")
subscriber_id = service.create_subscriber("news", "daily-digest")

service.subscribe(subscriber_id, topic_id)
service.publish(topic_id, Message("Rain expected tomorrow"))

subscriber = service.subscribers[subscriber_id]
print([m.payload for m in subscriber.received])   # ['Rain expected tomorrow']

service.unsubscribe(subscriber_id, topic_id)
service.remove_subscriber(subscriber_id)
service.remove_topic(topic_id)
```

- `get_instance()` in `lldsystems.pubsub.service` returns one shared `PubSubService`. You can also create independent services with `PubSubService()`.
- Topic ids have the form `TOP:` followed by ten random letters or digits. Subscriber ids have the form `SUB:` followed by ten random letters or digits. An id is never reused while one with the same value is registered.
- `topics` and `subscribers` are read-only mappings from id to object.
- `subscribe`, `unsubscribe` and `publish` raise `TopicNotFoundError` for an unknown topic id. `subscribe` and `unsubscribe` raise `SubscriberNotFoundError` for an unknown subscriber id. Both errors are subclasses of `KeyError`.
- `remove_topic` and `remove_subscriber` ignore unknown ids. Removing a subscriber also detaches it from every topic.
- `create_subscriber` accepts the kinds `"news"` and `"alert"`. Any other kind raises `ValueError`.

The pieces can also be used on their own:

- `Message(payload)` in `lldsystems.pubsub.message` is a frozen dataclass. Its `timestamp` defaults to the current time in whole seconds.
- `lldsystems.pubsub.subscribers` provides the abstract `Subscriber` with `on_message`, plus `NewsSubscriber`, `AlertSubscriber` and `create_subscriber(kind, subscriber_id, name)`. Both concrete subscribers append every message they get to their `received` list.
- `Topic(topic_id, name)` in `lldsystems.pubsub.topic` has `add_subscriber`, `remove_subscriber` and `broadcast`. Adding the same subscriber twice has no further effect. The `subscribers` property returns them in the order they were added.

## Tic-tac-toe

```python
from lldsystems.tictactoe.service import get_instance

service = get_instance()
game = service.create_new_game("Alice", "Bob", 3)

alice, bob = game.player1, game.player2

service.make_move(game.id, alice, 0, 0)
service.make_move(game.id, bob, 1, 1)
service.print_board(game.id)
# X . .
# . O .
# . . .

print(game.status)   # In_Progress
```

- `TicTacToeService` keeps games by id. Ids have the form `GAME` followed by eight random letters or digits. `get_game` raises `GameNotFoundError`, a `KeyError`, for an unknown id. `games` is a read-only mapping of all games.
- The first player plays `Symbol.X` and moves first. The second player plays `Symbol.O`.
- Each move is passed to the game's current state. While the game is in progress, `InProgressState` raises `MoveError` in three cases: the move is out of turn, the cell is taken, or the game is no longer in progress. A move off the board raises `IndexError`.
- After each move, `HorizontalStrategy`, `VerticalStrategy` and `DiagonalStrategy` check the lines through that cell.
  - If a line is complete, `game.status` becomes `GameStatus.WINNER_X` or `GameStatus.WINNER_Y`, `game.winner` is set, and the game moves to `WinState`.
  - If the board is full, the status becomes `GameStatus.DRAW` and the game moves to `DrawState`.
  - Otherwise the turn passes to the other player.
- `WinState` and `DrawState` refuse every further move with `MoveError`.
- `Game.reset()` clears the board and gives the first move back to the first player.

Other building blocks:

- `Board(size)` in `lldsystems.tictactoe.board` has `get_cell`, `place_symbol` (returns `False` for a taken cell), `is_full`, `render`, `reset` and `move_count`.
- `Symbol` (`X`, `O`, `EMPTY` shown as `.`) and `GameStatus` are in `lldsystems.tictactoe.symbols`.
- `Player(name, symbol)` and `Game` are in `lldsystems.tictactoe.game`.

## What it does not do

This is a library only. It has no command-line program, and it runs no server or network transport. Nothing is saved to disk: all topics, subscribers, messages and games exist only in memory for the lifetime of the process. The built-in subscribers only record the messages they receive. To act on messages, subclass `Subscriber` and implement `on_message`.