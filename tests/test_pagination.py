import pytest

from northstar_mods.engine.pagination import PageCursor


def test_page_forward_stops_at_last_page_holding_entries():
    cursor = PageCursor(capacity=25)

    for _ in range(3):
        cursor.page_forward(60)
    assert cursor.page_offset == 50

    cursor.page_forward(60)
    assert cursor.page_offset == 50


def test_page_forward_on_exact_multiple_does_not_open_empty_page():
    cursor = PageCursor(capacity=25)

    cursor.page_forward(50)
    cursor.page_forward(50)

    assert cursor.page_offset == 25


def test_page_forward_on_empty_collection_is_noop():
    cursor = PageCursor(capacity=25)

    cursor.page_forward(0)

    assert cursor.position == (0, 0)


def test_page_back_saturates_at_zero():
    cursor = PageCursor(capacity=25, page_offset=25)

    cursor.page_back()
    cursor.page_back()

    assert cursor.page_offset == 0


def test_move_right_at_last_cell_of_page_is_noop():
    cursor = PageCursor(capacity=25, selected_index=24)

    cursor.move_right()

    assert cursor.selected_index == 24


def test_move_down_from_last_row_clamps_to_page_end():
    cursor = PageCursor(capacity=25, selected_index=22)

    cursor.move_down()

    assert cursor.selected_index == 24
    cursor.move_down()
    assert cursor.selected_index == 24


def test_move_right_and_down_ignore_collection_length():
    # Nothing in the cursor knows the count: selection can reach EMPTY cells.
    cursor = PageCursor(capacity=25)

    cursor.move_down()
    cursor.move_right()

    assert cursor.selected_index == 6


def test_move_left_and_up_stay_on_current_page():
    cursor = PageCursor(capacity=25, page_offset=25, selected_index=27)

    cursor.move_up()
    assert cursor.selected_index == 25
    cursor.move_left()
    assert cursor.selected_index == 25


def test_move_left_at_zero_saturates():
    cursor = PageCursor(capacity=25)

    cursor.move_left()
    cursor.move_up()

    assert cursor.selected_index == 0


def test_navigation_after_paging_pulls_selection_onto_the_page():
    cursor = PageCursor(capacity=25, selected_index=3)
    cursor.page_forward(60)
    assert cursor.position == (25, 3)

    cursor.move_left()

    assert cursor.selected_index == 25


def test_reset_returns_to_origin():
    cursor = PageCursor(capacity=25, page_offset=50, selected_index=57)

    cursor.reset()

    assert cursor.position == (0, 0)


def test_visible_indices_rows_of_row_width():
    cursor = PageCursor(capacity=9, page_offset=9)

    assert cursor.row_width == 3
    assert cursor.visible_indices() == [[9, 10, 11], [12, 13, 14], [15, 16, 17]]


@pytest.mark.parametrize("capacity", [0, -4, 24])
def test_capacity_must_be_positive_perfect_square(capacity):
    with pytest.raises(ValueError):
        PageCursor(capacity=capacity)
