"""
Unit tests for the generic selectable table.
"""

import pytest

from kfconsole.table_model import SelectableTable


def make_table(count: int, cursor=None, selected=()):
    table = SelectableTable(list(range(count)))
    table.cursor = cursor
    table.selected = set(selected)
    return table


class TestCursorMovement:
    """Test cursor_up / cursor_down / boundaries."""

    def test_cursor_down_from_none_starts_at_first_row(self):
        table = make_table(3)

        table.cursor_down()

        assert table.cursor == 0

    def test_cursor_down_stops_at_last_row(self):
        table = make_table(3, cursor=2)

        table.cursor_down()

        assert table.cursor == 2

    def test_cursor_up_stops_at_first_row(self):
        table = make_table(3, cursor=0)

        table.cursor_up()

        assert table.cursor == 0

    def test_empty_table_is_noop(self):
        table = make_table(0)

        table.cursor_down()
        table.cursor_up()
        table.page_down(20)
        table.page_up(20)

        assert table.cursor is None

    def test_boundary_checks(self):
        """at_first_row covers no cursor and empty; at_last_row covers empty."""
        assert make_table(0).at_first_row()
        assert make_table(0).at_last_row()
        assert make_table(5).at_first_row()
        assert make_table(5, cursor=0).at_first_row()
        assert not make_table(5, cursor=1).at_first_row()
        assert make_table(5, cursor=4).at_last_row()
        assert not make_table(5, cursor=3).at_last_row()

    def test_current(self):
        table = make_table(3, cursor=1)
        assert table.current() == 1
        assert make_table(3).current() is None


class TestPaging:
    """Test page_up / page_down saturation."""

    def test_page_down_lands_on_last_row_of_forty(self):
        """Two pages of 20 over 40 rows: 0 -> 20 -> 39."""
        table = make_table(40, cursor=0)

        table.page_down(20)
        assert table.cursor == 20

        table.page_down(20)
        assert table.cursor == 39

    def test_page_down_never_exceeds_last_row(self):
        """Over 50 rows: 0 -> 20 -> 40 -> 49, then stays."""
        table = make_table(50, cursor=0)

        positions = []
        for _ in range(4):
            table.page_down(20)
            positions.append(table.cursor)

        assert positions == [20, 40, 49, 49]

    def test_page_up_stops_at_zero(self):
        table = make_table(50, cursor=15)

        table.page_up(20)

        assert table.cursor == 0

    def test_page_down_without_cursor_starts_from_zero(self):
        table = make_table(50)

        table.page_down(20)

        assert table.cursor == 20


class TestSelection:
    """Test toggle_row / toggle_select_all."""

    def test_toggle_row_adds_and_removes_cursor_row(self):
        table = make_table(5, cursor=2)

        table.toggle_row()
        assert table.selected == {2}

        table.toggle_row()
        assert table.selected == set()

    def test_toggle_row_without_cursor_uses_first_row(self):
        table = make_table(5)

        table.toggle_row()

        assert table.selected == {0}

    def test_toggle_row_on_empty_table_is_noop(self):
        table = make_table(0)

        table.toggle_row()

        assert table.selected == set()

    def test_select_all_then_clear(self):
        table = make_table(4, selected={1})

        table.toggle_select_all()
        assert table.selected == {0, 1, 2, 3}

        table.toggle_select_all()
        assert table.selected == set()

    @pytest.mark.parametrize("initial", [set(), {0, 1, 2, 3}])
    def test_select_all_twice_restores_selection(self, initial):
        """Applying select-all twice returns to the starting set."""
        table = make_table(4, selected=initial)

        table.toggle_select_all()
        table.toggle_select_all()

        assert table.selected == initial

    def test_select_all_on_empty_table_stays_empty(self):
        table = make_table(0)

        table.toggle_select_all()

        assert table.selected == set()

    def test_clear_drops_cursor_and_selection(self):
        table = make_table(4, cursor=2, selected={1, 3})

        table.clear()

        assert table.cursor is None
        assert table.selected == set()


class TestTargets:
    """Test which rows a batch action applies to."""

    def test_selection_in_ascending_order(self):
        table = make_table(10, cursor=0, selected={7, 2, 5})

        assert table.target_indices() == [2, 5, 7]
        assert table.targets() == [2, 5, 7]

    def test_falls_back_to_cursor_row(self):
        table = make_table(10, cursor=4)

        assert table.target_indices() == [4]

    def test_falls_back_to_first_row_without_cursor(self):
        table = make_table(10)

        assert table.target_indices() == [0]

    def test_empty_table_has_no_targets(self):
        assert make_table(0).target_indices() == []


class TestMutation:
    """Test remove/replace keep the invariants."""

    def test_remove_indices_preserves_order(self):
        table = make_table(10, cursor=9, selected={2, 5})

        removed = table.remove_indices([2, 5])

        assert removed == [2, 5]
        assert table.rows == [0, 1, 3, 4, 6, 7, 8, 9]
        assert table.selected == set()
        assert table.cursor == 7

    def test_remove_everything_drops_cursor(self):
        table = make_table(2, cursor=1)

        table.remove_indices([0, 1])

        assert table.rows == []
        assert table.cursor is None

    def test_remove_out_of_range_is_noop(self):
        table = make_table(3, cursor=1, selected={0})

        assert table.remove_indices([7]) == []
        assert table.selected == {0}

    def test_remove_where(self):
        table = make_table(6)

        removed = table.remove_where(lambda row: row % 2 == 0)

        assert removed == [0, 2, 4]
        assert table.rows == [1, 3, 5]

    def test_replace_with_same_rows_keeps_state(self):
        table = make_table(5, cursor=3, selected={1, 4})

        changed = table.replace_rows(list(range(5)))

        assert changed is False
        assert table.cursor == 3
        assert table.selected == {1, 4}

    def test_replace_with_shorter_rows_clamps(self):
        table = make_table(5, cursor=4, selected={1, 4})

        changed = table.replace_rows([0, 1])

        assert changed is True
        assert table.cursor == 1
        assert table.selected == set()

    def test_selection_stays_within_bounds_after_operations(self):
        """Every selected index stays below the row count."""
        table = make_table(8)
        table.toggle_select_all()
        table.cursor = 7
        table.toggle_row()
        table.remove_indices([0, 1, 2])
        table.toggle_select_all()
        table.replace_rows([10, 11])
        table.toggle_select_all()

        assert all(i < len(table) for i in table.selected)
        assert table.cursor is None or table.cursor < len(table)
