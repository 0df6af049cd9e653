"""Tests for pagination business logic."""

import pytest

from feature_tour.core.pagination import PaginationController, PaginatorState, clamp_index


class TestPaginatorState:
    def test_empty_state(self):
        state: PaginatorState[str] = PaginatorState(items=())
        assert state.total_items == 0
        assert state.current_item is None
        assert not state.has_next
        assert not state.has_prev

    def test_single_item(self):
        state: PaginatorState[str] = PaginatorState(items=("a",))
        assert state.current_item == "a"
        assert not state.has_next
        assert not state.has_prev

    def test_multiple_items(self):
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "c"))
        assert state.current_item == "a"
        assert state.has_next
        assert not state.has_prev

    def test_list_items_are_frozen_to_tuple(self):
        state: PaginatorState[str] = PaginatorState(items=["a", "b"])  # type: ignore[arg-type]
        assert state.items == ("a", "b")

    def test_out_of_range_index_has_no_current_item(self):
        state: PaginatorState[str] = PaginatorState(items=("a",), current_index=5)
        assert state.current_item is None

    def test_state_is_immutable(self):
        state: PaginatorState[str] = PaginatorState(items=("a", "b"))
        with pytest.raises(AttributeError):
            state.current_index = 1  # type: ignore[misc]

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_flags_follow_index(self, index):
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "c", "d"), current_index=index)
        assert state.has_next == (index != 3)
        assert state.has_prev == (index != 0)


class TestClampIndex:
    @pytest.mark.parametrize(
        ("index", "total", "expected"),
        [(0, 0, 0), (3, 0, 0), (-2, 4, 0), (2, 4, 2), (9, 4, 3)],
    )
    def test_clamp(self, index, total, expected):
        assert clamp_index(index, total) == expected


class TestPaginationController:
    def test_initial_state_clamps(self):
        controller: PaginationController[str] = PaginationController()
        state = controller.initial_state(["a", "b"], index=7)
        assert state.current_index == 1

    def test_next_page(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "c"))
        new_state = controller.next_page(state)
        assert new_state.current_index == 1
        assert new_state.current_item == "b"
        assert state.current_index == 0  # Original untouched

    def test_prev_page(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "c"), current_index=2)
        new_state = controller.prev_page(state)
        assert new_state.current_index == 1

    def test_next_at_end_returns_same_state(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b"), current_index=1)
        assert controller.next_page(state) is state

    def test_prev_at_start_returns_same_state(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b"))
        assert controller.prev_page(state) is state

    def test_go_to_valid_index(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "c"))
        new_state = controller.go_to_index(state, 2)
        assert new_state.current_index == 2

    def test_go_to_invalid_index(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "c"))
        assert controller.go_to_index(state, 10) is state
        assert controller.go_to_index(state, -1) is state

    def test_go_to_current_index_returns_same_state(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "c"), current_index=1)
        assert controller.go_to_index(state, 1) is state

    def test_find_index(self):
        controller: PaginationController[str] = PaginationController()
        state: PaginatorState[str] = PaginatorState(items=("a", "b", "b"))
        assert controller.find_index(state, lambda item: item == "b") == 1
        assert controller.find_index(state, lambda item: item == "z") is None
