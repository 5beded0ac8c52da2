# dojo

A collection of practice pieces from test-driven coding sessions: classic
katas, several poker-hand scorers, a terminal 2048 game and a handful of
helpers for small HTTP services.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing 2048

```
dojo-2048
```

Move the tiles with the arrow keys and press Esc to quit. The terminal
screen is drawn with the standard-library `curses` module, so this mode
needs a Python that ships it.

The state is kept in `~/.config/2048/game.toml` (under `$HOME`). It is read
at start-up, and written again after every move that shifts a tile: the
score, the high score and the board. When the game is over only the high
score is kept, so the next start deals a fresh board.

```
dojo-2048 --debug
```

reads moves from standard input instead, one per line: `u`, `d`, `l` or
`r`; other lines are ignored. After each move that shifts a tile the
occupied cells, the sum of their values, the number of empty cells and
whether the game is over are printed.

The game can also be driven from Python:

- `dojo.twenty48.game.Game` holds the rules (`move`, `move_with`,
  `moves_available`, ...) and the scores;
- `dojo.twenty48.grid.Grid` and `Tile` are the board, addressed as
  `cells[x][y]`;
- `dojo.twenty48.state.GameInfo` loads and saves the TOML state;
- `dojo.twenty48.events.EventBus` maps the event names `up`, `down`,
  `left` and `right` to the game's moves once `Game.setup` has run.

## Katas

```python
from dojo.kata.fizzbuzz import fizzbuzz
from dojo.kata.primes import prime_factors, primes_up_to, is_prime

fizzbuzz(15, "Fizz", "Buzz")   # "FizzBuzz"
fizzbuzz(7)                    # "7"
prime_factors(1001)            # [7, 11, 13]
primes_up_to(10)               # [2, 3, 5, 7]
is_prime(13)                   # True
```

## Poker hands

Each game is a line of ten cards, for example
`"8C TS KC 9H 4S 7D 2S 5D 3S AC"`: the first five belong to player one,
the last five to player two. A card is its rank (`2`–`9`, `T`, `J`, `Q`,
`K`, `A`) followed by its suit.

```python
from dojo.poker.highcard import compare_poker_hand, player_one_win_percentage
from dojo.poker.pairs import Hand, player_one_wins, win_percentage

compare_poker_hand("8C TS KC 9H 4S 7D 2S 5D 3S AC")          # "lose"
player_one_win_percentage(["8C TS 2C 9H 4S 7D 3S 9S 5D 2S"])  # 100.0
win_percentage(["2H 2D 6S TC 3S 8H AD 6C JD 4S"])             # 100.0
player_one_wins(Hand(["3H", "7H", "6H", "6S", "5D"]),
                Hand(["8D", "AD", "JD", "TD", "9S"]))         # True
```

- `dojo.poker.cards` parses cards and splits games into hands;
- `dojo.poker.highcard` compares hands by their high cards, and counts
  wins in a list of games or in a file with one game per line;
- `dojo.poker.pairs` also takes pairs and three of a kind into account.

None of the scorers knows straights, flushes, full houses or four of a
kind.

## Service helpers

`dojo.service` holds helpers for small web services:

- `dojo.service.env` reads strings, integers, booleans and lists from
  environment variables, with defaults;
- `dojo.service.masking` hides NRIC numbers, e-mail addresses and phone
  numbers in text;
- `dojo.service.logger.AppLogger` logs through the standard `logging`
  module with a correlation id and extra fields, masking sensitive
  arguments; `DEBUG_MODE=true` enables debug lines;
- `dojo.service.retry` retries calls with growing, jittered pauses, and
  `call_external_api` sends a `requests` request that way (4xx replies are
  not retried; `TIMEOUTSEC` and `ATTEMPTS` give the defaults);
- `dojo.service.general` builds request URLs and sends GET and POST
  requests with JSON bodies, and writes JSON replies through an
  `http.server` request handler;
- `dojo.service.apiclient.ApiClient` adds an `X-Correlation-ID` header and
  logs each call.

The helpers do not include a database connection or test-data seeding.