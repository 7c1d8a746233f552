# makalu

Small utilities with no third-party dependencies: greetings in several
languages, number and text helpers, a word dictionary, a bitcoin wallet,
plane shapes, a few exercises, and two console games (LCR dice and
noughts and crosses).

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Library usage

```python
from makalu.hello import hello
from makalu.numbers import add, mars_age, factorial, fibonacci, is_prime
from makalu.text import repeat, reverse, say_number
from makalu.sums import sum_five, sum_numbers, sum_all, sum_all_tails
from makalu.dictionary import Dictionary, WordNotFoundError
from makalu.wallet import Wallet, Bitcoin, InsufficientFundsError
from makalu.shapes import Rectangle, Circle, Triangle, perimeter, area

hello("Ada", "Spanish")              # "Hola, Ada"
hello("Ada", "French")               # "Bonjour, Ada"
hello("", "")                        # "Hello, World"
repeat("a")                          # "aaaaa"
reverse("Amar")                      # "ramA"
say_number(7)                        # "Seven"; None outside 0..10
sum_all([1, 2], [0, 9])              # [3, 9]
sum_all_tails([1, 2], [0, 9])        # [2, 9]
sum_all_tails([], [3, 4, 5])         # [0, 9]
perimeter(Rectangle(10.0, 20.0))     # 60.0
Triangle(12, 6).area()               # 36.0
Circle(10).area()                    # 314.1592653589793

words = Dictionary()
words.add("test", "this is just a test")
words.search("test")                 # "this is just a test"

wallet = Wallet()
wallet.deposit(Bitcoin(10))
str(wallet.balance())                # "10 BTC"
wallet.withdraw(Bitcoin(20))         # raises InsufficientFundsError
```

### Modules

- `makalu.hello` – `hello(name, language)` and `greeting_prefix(language)`;
  `"Spanish"` and `"French"` are recognised, anything else is English.
- `makalu.numbers` – `add`, `mars_age` (Earth years to Mars years, truncated
  toward zero), `factorial` (raises `ValueError` for negative numbers),
  `fibonacci`, and `is_prime`. `is_prime` only tries divisors from 2 up to,
  but not including, `floor(sqrt(num))`, so small squares such as 4 and 9
  are reported as prime.
- `makalu.text` – `repeat` (five times), `reverse`, `say_number`, and the
  constants `WELCOME`, `MORNING_TEXT` and `EVENING_TEXT`.
- `makalu.sums` – `sum_five` (raises `ValueError` unless given exactly five
  numbers), `sum_numbers`, `sum_all`, `sum_all_tails`.
- `makalu.greet` – `greet(writer, name)` writes `Hello, <name>` to any text
  stream; `greeter_app` is a WSGI application answering `Hello, world`.
- `makalu.dictionary` – `Dictionary`, a `dict` subclass. `search` raises
  `WordNotFoundError`, `add` raises `WordExistsError` for a known word,
  `update` raises `WordDoesNotExistError` for an unknown one, and `delete`
  ignores missing words. All three errors derive from `DictionaryError`.
- `makalu.wallet` – `Wallet` with `deposit`, `withdraw` and `balance`;
  `Bitcoin` is an `int` that prints as `N BTC`.
- `makalu.shapes` – `Rectangle(height, width)`, `Circle(radius)` and
  `Triangle(base, height)`, each with `area()`, plus `perimeter` and `area`
  for rectangles.
- `makalu.validation` – `validate_input(field, value)` raises
  `InvalidInputError` for an empty value; `check_length(s)` raises
  `InvalidLengthError` for an empty string and `ValueError` for `"error"`;
  `concat(x, y)` returns the joined string and its length; `return_error`
  raises `RuntimeError` when its flag is true; `get_error` returns an error
  object instead of raising.
- `makalu.walkers` – `Point`, `Human` and `Animal` walkers that print each
  step, and `move(walker, points)`, which stops with `InvalidPointError` at
  the first point with a negative coordinate.
- `makalu.drills` – `download`, `total_download` (runs downloads in
  threads), `match_points`, and a `Timer` with `ticks(count)`.
- `makalu.lcr` – the game model: `Dice`, `DiceFace`, `Player` and `Game`
  (`join`, `finished`, `next_turn`). `Dice` takes an optional
  `random.Random` for repeatable rolls.
- `makalu.lcr_cli` and `makalu.xo` – the console games. Their `play`
  functions read answers from any iterable of lines and write to any text
  stream, and return the winner (or `None`).

## Commands

| Command          | What it does |
|------------------|--------------|
| `makalu-hello`   | Prints a greeting in Spanish, French and English. |
| `makalu-greeter` | Serves `Hello, world` over HTTP on port 5000 (`--port` to change it) until interrupted. |
| `makalu-lcr`     | Plays the LCR dice game. Enter the number of players (at least 3), then press Enter to roll; type `Exit` to quit. `--seed N` makes the dice repeatable. |
| `makalu-xo`      | Plays noughts and crosses for two players; enter the row and then the column as 0, 1 or 2. |

## Limitations

- The greeter answers every request, whatever its path or method, with the
  same text; it has no routing.
- Noughts and crosses does not detect a draw: when the board is full with no
  winner the game keeps asking for moves until input ends.
- Neither game saves or resumes a game.