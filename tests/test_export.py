from puzzlegen.export import encode_to_sbn, format_region_grid, format_tents_board, to_web_task


def test_web_task_is_one_based():
    assert to_web_task([[0, 1], [1, 1]]) == "1,2,2,2"


def test_sbn_single_region_has_no_borders():
    # 40 border bits padded to 42 -> seven zero characters
    assert encode_to_sbn([[0] * 5 for _ in range(5)], 1) == "551W0000000"


def test_sbn_unknown_size():
    assert encode_to_sbn([[0] * 4 for _ in range(4)], 1) is None


def test_region_grid_without_color():
    text = format_region_grid([[0, 1], [1, 1]], solution=[[1, 0], [0, 0]], color=False)
    assert text.splitlines() == [" ★  1 ", " 1  1 "]


def test_tents_board_hides_tents_by_default():
    text = format_tents_board([[1, 2], [0, 0]], [1, 0], [0, 1])
    assert text.splitlines()[0] == "T . | 1"
    assert text.splitlines()[-1] == "0 1"
    assert "^" in format_tents_board([[1, 2], [0, 0]], [1, 0], [0, 1], show_tents=True)
