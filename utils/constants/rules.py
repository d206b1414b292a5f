"""Game rules and default calculator inputs."""

# Star Wars: Unlimited draws two cards during each regroup phase
CARDS_DRAWN_PER_TURN = 2

MIN_DECK_SIZE = 50
OPENING_HAND_SIZE = 6

DEFAULT_DECK_SIZE = MIN_DECK_SIZE
DEFAULT_TURNS_ELAPSED = 0
DEFAULT_SAMPLE_SIZE = OPENING_HAND_SIZE
DEFAULT_TARGETS = 3

# Upper bounds for the spin controls, not validation limits
MAX_DECK_SIZE_INPUT = 250
MAX_TURNS_INPUT = 30
