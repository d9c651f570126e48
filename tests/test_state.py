"""Tests for SortState: tagged updates, param watchers, callbacks."""

import pytest

from tree_sortby.core.criteria import SortCriterion, normalize_sort_by
from tree_sortby.state.store import SORT_BY_CHANGE, SortState, SortUpdate


class TestSortState:
    def test_initially_empty(self):
        state = SortState()
        assert state.criteria == ()
        assert state.last_update is None

    def test_initial_criteria_normalized(self):
        state = SortState(sort_by=[("a", True), {"id": "b"}])
        assert state.criteria == (SortCriterion("a", True), SortCriterion("b", False))

    def test_set_state_returns_tagged_update(self):
        state = SortState()
        update = state.set_state(lambda old: old + (SortCriterion("a"),))
        assert isinstance(update, SortUpdate)
        assert update.action == SORT_BY_CHANGE
        assert update.previous == ()
        assert update.current == (SortCriterion("a"),)
        assert update.changed
        assert state.last_update is update

    def test_custom_action_tag(self):
        state = SortState()
        update = state.set_state(lambda old: old, "reset")
        assert update.action == "reset"
        assert not update.changed

    def test_callbacks_notified(self):
        state = SortState()
        received = []
        state.on_change(received.append)
        state.set_state(lambda old: (SortCriterion("a"),))
        state.set_state(lambda old: ())
        assert [u.current for u in received] == [(SortCriterion("a"),), ()]

    def test_param_watch_fires(self):
        state = SortState()
        events = []
        state.param.watch(lambda event: events.append(event.new), "sort_by")
        state.set_state(lambda old: (SortCriterion("a", True),))
        assert events == [[SortCriterion("a", True)]]

    def test_previous_list_not_mutated(self):
        state = SortState(sort_by=[("a", False)])
        before = state.sort_by
        state.set_state(lambda old: old + (SortCriterion("b"),))
        assert before == [SortCriterion("a", False)]
        assert state.sort_by is not before

    def test_repr(self):
        state = SortState(sort_by=[("a", True), ("b", False)])
        assert repr(state) == "SortState([a desc, b])"


class TestNormalizeSortBy:
    def test_mixed_forms(self):
        result = normalize_sort_by([SortCriterion("a"), ("b", 1), {"id": "c", "desc": False}])
        assert result == (SortCriterion("a"), SortCriterion("b", True), SortCriterion("c"))

    def test_duplicates_raise(self):
        with pytest.raises(ValueError, match="unique"):
            normalize_sort_by([("a", True), ("a", False)])

    def test_dict_without_id_raises(self):
        with pytest.raises(ValueError, match="'id'"):
            normalize_sort_by([{"desc": True}])

    def test_garbage_raises(self):
        with pytest.raises(TypeError, match="sort criterion"):
            normalize_sort_by([42])
