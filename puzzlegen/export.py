# --- File: puzzlegen/export.py ---
# Text formats for finished puzzles: web task strings, SBN strings and terminal dumps.
from puzzlegen.constants import (
    BASE64_DISPLAY_ALPHABET, DIM_TO_SBN_CODE_MAP, RESET, SBN_INT_TO_CHAR, STATE_STAR,
    TENTS_TENT, TENTS_TREE, UNIFIED_COLORS_BG
)


def to_web_task(region_grid):
    """Comma separated, 1-based region numbers in row-major order."""
    return ",".join(str(cell + 1) for row in region_grid for cell in row)


def encode_to_sbn(region_grid, stars):
    """
    Encodes a region layout as a Star Battle Notation string.

    The region borders are written as a bitfield (vertical borders row by row,
    then horizontal borders column by column), left-padded to a multiple of six
    bits and packed into the SBN base64 alphabet.

    Returns:
        str: The SBN string, or None if the board size has no SBN code.
    """
    dim = len(region_grid)
    sbn_code = DIM_TO_SBN_CODE_MAP.get(dim)
    if not sbn_code: return None

    vertical_bits = ['1' if region_grid[r][c] != region_grid[r][c+1] else '0' for r in range(dim) for c in range(dim - 1)]
    horizontal_bits = ['1' if region_grid[r][c] != region_grid[r+1][c] else '0' for c in range(dim) for r in range(dim - 1)]
    clean_bitfield = "".join(vertical_bits) + "".join(horizontal_bits)

    padding_bits = (6 - (len(clean_bitfield) % 6)) % 6
    padded_bitfield = ('0' * padding_bits) + clean_bitfield

    region_data = "".join(SBN_INT_TO_CHAR[int(padded_bitfield[i:i+6], 2)] for i in range(0, len(padded_bitfield), 6))
    return f"{sbn_code}{stars}W{region_data}"


def format_region_grid(region_grid, solution=None, color=True):
    """Renders regions one symbol per cell; stars replace the symbol when a solution is given."""
    lines = []
    for r, row in enumerate(region_grid):
        chars = []
        for c, region_id in enumerate(row):
            if solution and solution[r][c] == STATE_STAR:
                symbol = '★'
            else:
                symbol = BASE64_DISPLAY_ALPHABET[region_id % len(BASE64_DISPLAY_ALPHABET)]
            if color:
                color_ansi = UNIFIED_COLORS_BG[region_id % len(UNIFIED_COLORS_BG)][1]
                chars.append(f"{color_ansi} {symbol} {RESET}")
            else:
                chars.append(f" {symbol} ")
        lines.append("".join(chars))
    return "\n".join(lines)


def format_tents_board(board, row_hints, col_hints, show_tents=False):
    """Renders trees (T), optionally tents (^), with row hints on the right and column hints below."""
    symbols = {TENTS_TREE: 'T', TENTS_TENT: '^' if show_tents else '.'}
    lines = [" ".join(symbols.get(cell, '.') for cell in row) + f" | {hint}" for row, hint in zip(board, row_hints)]
    lines.append("-" * (2 * len(board) - 1))
    lines.append(" ".join(str(hint) for hint in col_hints))
    return "\n".join(lines)
