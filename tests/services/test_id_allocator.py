"""Id allocator: one persistent global sequence."""

import pytest

from epl_backend.app.core.state import AppState


def test_first_id_is_one(state):
    assert state.allocator.peek() == 0
    assert state.allocator.next_id() == 1
    assert state.allocator.peek() == 1


def test_ids_increase_by_one(state):
    assert [state.allocator.next_id() for _ in range(5)] == [1, 2, 3, 4, 5]


def test_peek_does_not_consume(state):
    state.allocator.next_id()
    state.allocator.peek()
    state.allocator.peek()
    assert state.allocator.next_id() == 2


def test_counter_survives_reopen(db_path, state):
    state.allocator.next_id()
    state.allocator.next_id()
    state.close()

    reopened = AppState.open(db_path)
    try:
        assert reopened.allocator.peek() == 2
        assert reopened.allocator.next_id() == 3
    finally:
        reopened.close()


def test_allocation_rolls_back_with_enclosing_transaction(state):
    with pytest.raises(RuntimeError):
        with state.db.transaction():
            assert state.allocator.next_id() == 1
            raise RuntimeError("insert failed")
    assert state.allocator.peek() == 0
    assert state.allocator.next_id() == 1
