# --- File: puzzlegen/presets.py ---
# Lookup and validation of the preset tables in constants.py.
from puzzlegen.constants import STAR_BATTLE_PRESETS, TENTS_PRESETS
from puzzlegen.errors import ConfigurationError, UnsupportedPreset


def _require_positive_ints(preset, keys, label):
    for key in keys:
        value = preset.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ConfigurationError(f"{label} preset field '{key}' must be a positive integer, got {value!r}")


def get_star_battle_preset(size, stars, presets=None):
    """
    Returns the region settings for a (size, stars) Star Battle puzzle.

    Args:
        size (int): Board dimension.
        stars (int): Stars per row, column and region.
        presets (dict, optional): Alternative preset table, mainly for tests.

    Raises:
        UnsupportedPreset: The combination is not in the table.
        ConfigurationError: The table entry is malformed.
    """
    table = STAR_BATTLE_PRESETS if presets is None else presets
    preset = table.get((size, stars))
    if preset is None:
        raise UnsupportedPreset("Star Battle", (size, stars))
    _require_positive_ints(preset, ('min_region_area',), "Star Battle")
    if preset['min_region_area'] * size > size * size:
        raise ConfigurationError(f"Star Battle preset {(size, stars)}: {size} regions of area "
                                 f"{preset['min_region_area']} do not fit on the board")
    return dict(preset)


def get_tents_preset(size, presets=None):
    """Returns the placement settings for a Tents board of the given size."""
    table = TENTS_PRESETS if presets is None else presets
    preset = table.get(size)
    if preset is None:
        raise UnsupportedPreset("Tents", size)
    _require_positive_ints(preset, ('num_trees', 'cluster_max_size'), "Tents")
    # every pair needs two cells
    if preset['num_trees'] * 2 > size * size:
        raise ConfigurationError(f"Tents preset {size}: {preset['num_trees']} trees do not fit on the board")
    return dict(preset)
