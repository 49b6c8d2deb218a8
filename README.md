# pokertable

The logic of a Texas hold'em table, kept apart from any drawing code.
The package has no dependencies outside the standard library.

## Modules

- `pokertable.cards` holds the 52-card deck. `Suit`, `Rank` and `Card` are
  integer enums; cards are ordered by rank and then by suit, and each
  `Card` has `suit` and `rank` properties. `shuffle_cards(rng)` returns
  every card shuffled by 10,000 random pair swaps. `Deck(player_count, rng)`
  shuffles, keeps five community cards in `community_cards` and two hole
  cards per player in `hole_cards`; `flop()`, `turn()` and `river()` give
  the first three, four and five community cards. A `Deck` raises
  `ValueError` when the player count is negative or there are not enough
  cards for everyone.
- `pokertable.button` has `Button`, a rectangular text button whose width
  and height follow from its text (8 pixels per character) and its scale.
  `contains(x, y)` tells whether a point lies on it, edges included;
  `is_clicked(x, y, pressed)` is true when the left mouse button was
  pressed over it.
- `pokertable.table` has the settings (2 to 10 players, 5 by default,
  2000 starting money, a table radius of 250 on a 1000 by 750 screen),
  `Player` with its seat position and money, and the seating helpers
  `seat_positions(player_count)` and `seat_players(player_count)`.
  Seats are spaced evenly on a circle around the screen centre, the first
  straight above it. Fewer than one player raises `ValueError`.
- `pokertable.game` has `PokerGame`, the state machine behind the main
  menu, the settings screen and a running game, with the `State` and
  `RoundState` enums.

## Dealing cards

```python
import random

from pokertable.cards import Deck

deck = Deck(4, random.Random(7))
print(deck.flop())        # the first three community cards
print(deck.turn())        # the first four
print(deck.river())       # all five
print(deck.hole_cards)    # one pair of cards per player
```

Pass your own `random.Random` to get a repeatable shuffle.

## Seating players

```python
from pokertable.table import seat_positions

for x, y in seat_positions(5):
    print(round(x), round(y))
```

## Driving the game

`PokerGame` reacts to the mouse position and whether the left button was
pressed in that frame. `step` handles the input and then advances the
game logic, as one frame of a game loop would:

```python
import random

from pokertable.game import PokerGame, State

game = PokerGame(random.Random())
game.step(250, 520, True)   # click START on the main menu
assert game.state is State.GAME_RUNNING
print(len(game.players), game.deck.flop())
```

On the main menu, START seats `number_players` players and starts the
game; SETTINGS opens the settings screen. There, the `+` and `-` buttons
change `number_players` within 2 to 10, and `<- MENU` goes back, as it
does from a running game. `settings_label` gives the text of the
settings screen. `handle_input` and `update` can also be called
separately when a front end wants to draw between them.

## What the package does not do

There is no window, drawing, card images or command to start a game: a
front end has to render the buttons, seats and cards itself and feed
mouse input to `PokerGame`. The round never gets past its first state,
so while a game runs each `update` deals a fresh `Deck`; there is no
betting, no use of players' money and no evaluation of hands.

## Running the tests

Install the `test` extra and run pytest from the project directory.