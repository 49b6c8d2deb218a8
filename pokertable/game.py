"""The poker table's menus, settings and round state machine."""

from __future__ import annotations

import random
from enum import Enum, auto

from .button import BLACK, WHITE, Button
from .cards import Deck
from .table import DEFAULT_START_PLAYERS, MAX_PLAYERS, MIN_PLAYERS, Player, seat_players

TITLE = "POKER"


class State(Enum):
    MAIN_MENU = auto()
    SETTINGS = auto()
    GAME_RUNNING = auto()
    GAME_PAUSING = auto()
    GAME_FINISHED = auto()


class RoundState(Enum):
    INIT = auto()


class PokerGame:
    """Screen state, buttons and players of one poker table session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.state = State.MAIN_MENU
        self.round_state = RoundState.INIT
        self.mouse_x = 0
        self.mouse_y = 0
        self.number_players = DEFAULT_START_PLAYERS
        self.players: list[Player] = []
        self.deck: Deck | None = None

        self.start_button = Button(200, 500, 5, "START", BLACK, WHITE)
        self.settings_button = Button(550, 500, 5, "SETTINGS", BLACK, WHITE)
        self.back_button = Button(0, 725, 3, "<- MENU", BLACK, WHITE)
        self.increase_button = Button(750, 200, 3, "+", BLACK, WHITE)
        self.decrease_button = Button(700, 200, 3, "-", BLACK, WHITE)

    @property
    def settings_label(self) -> str:
        return f"NUMBER OF PLAYERS: {self.number_players}"

    def handle_input(self, mouse_x: int, mouse_y: int, pressed: bool) -> None:
        """React to the mouse position and whether the left button was pressed."""
        self.mouse_x = mouse_x
        self.mouse_y = mouse_y

        def clicked(button: Button) -> bool:
            return button.is_clicked(mouse_x, mouse_y, pressed)

        if self.state is State.MAIN_MENU:
            if clicked(self.start_button):
                self.players = seat_players(self.number_players)
                self.state = State.GAME_RUNNING
            elif clicked(self.settings_button):
                self.state = State.SETTINGS
        elif self.state is State.GAME_RUNNING:
            if clicked(self.back_button):
                self.state = State.MAIN_MENU
        elif self.state is State.SETTINGS:
            if clicked(self.back_button):
                self.state = State.MAIN_MENU
            elif clicked(self.increase_button) and self.number_players < MAX_PLAYERS:
                self.number_players += 1
            elif clicked(self.decrease_button) and self.number_players > MIN_PLAYERS:
                self.number_players -= 1

    def update(self) -> None:
        """Advance the round state machine while a game is running."""
        if self.state is State.GAME_RUNNING and self.round_state is RoundState.INIT:
            self.deck = Deck(self.number_players, self.rng)

    def step(self, mouse_x: int, mouse_y: int, pressed: bool) -> None:
        """Process one frame: input, then game logic."""
        self.handle_input(mouse_x, mouse_y, pressed)
        self.update()