# --- File: puzzlegen/constants.py ---
# Description: Contains all the static DATA constants for the puzzle generators.

# --- Star Battle cell states ---
STATE_EMPTY = 0
STATE_STAR = 1

# Marker for a cell that has not been given a region yet. Region ids are 0..size-1.
UNASSIGNED = None

# --- Tents cell states ---
TENTS_EMPTY = 0
TENTS_TREE = 1
TENTS_TENT = 2

# --- Presets ---
# Star Battle: (size, stars) -> region growth settings
STAR_BATTLE_PRESETS = {
    (10, 2): {'min_region_area': 3},
    (6, 1):  {'min_region_area': 2},
    (5, 1):  {'min_region_area': 2},
}
# Tents: size -> placement settings
TENTS_PRESETS = {
    6: {'num_trees': 8, 'cluster_max_size': 2},
}

# --- Retry budgets ---
REGION_SEED_ATTEMPTS = 10        # seeds tried per region before the layout is abandoned
STAR_BATTLE_MAX_ATTEMPTS = 2000  # region layouts tried before generation gives up (10x10 often needs several hundred)
ATTEMPTS_PER_SOLUTION = 100      # layouts tried on one star solution before drawing a new one
TENT_RETRY_BUDGET = 10000        # abandoned clusters allowed in one tent placement
TENTS_MAX_ATTEMPTS = 500         # boards tried before unique tents generation gives up

# --- Constraint backends ---
DEFAULT_BACKEND = 'z3'
BACKEND_NAMES = ('z3', 'backtracking')

# --- Export ---
SBN_B64_ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_'
SBN_INT_TO_CHAR = {i: c for i, c in enumerate(SBN_B64_ALPHABET)}
SBN_CODE_TO_DIM_MAP = {
    '55': 5,  '66': 6,  '77': 7,  '88': 8,  '99': 9, 'AA': 10, 'BB': 11, 'CC': 12, 'DD': 13,
    'EE': 14, 'FF': 15, 'GG': 16, 'HH': 17, 'II': 18, 'JJ': 19, 'KK': 20, 'LL': 21, 'MM': 22,
    'NN': 23, 'OO': 24, 'PP': 25
}
DIM_TO_SBN_CODE_MAP = {v: k for k, v in SBN_CODE_TO_DIM_MAP.items()}
BASE64_DISPLAY_ALPHABET = SBN_B64_ALPHABET

RESET = "\033[0m"
UNIFIED_COLORS_BG = [
    ("Bright Red", "\033[48;2;255;204;204m\033[38;2;0;0;0m"), ("Bright Green", "\033[48;2;204;255;204m\033[38;2;0;0;0m"),
    ("Bright Yellow", "\033[48;2;255;255;204m\033[38;2;0;0;0m"), ("Bright Blue", "\033[48;2;204;229;255m\033[38;2;0;0;0m"),
    ("Bright Magenta", "\033[48;2;255;204;255m\033[38;2;0;0;0m"), ("Bright Cyan", "\033[48;2;204;255;255m\033[38;2;0;0;0m"),
    ("Light Orange", "\033[48;2;255;229;204m\033[38;2;0;0;0m"), ("Light Purple", "\033[48;2;229;204;255m\033[38;2;0;0;0m"),
    ("Light Gray", "\033[48;2;224;224;224m\033[38;2;0;0;0m"), ("Mint", "\033[48;2;210;240;210m\033[38;2;0;0;0m"),
]
