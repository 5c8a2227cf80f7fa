"""Tests for conditional dispatch and sequential execution."""

import pytest

from lift import (
    ArityMismatchError,
    compose,
    do_all,
    equal,
    greater_than,
    if_then,
    if_then_else,
    less_than,
)
from fakes import Accumulator, Recorder


class TestIfThen:
    def test_action_is_called_with_value_when_predicate_is_true(self) -> None:
        action = Recorder()
        assert if_then(equal(3), action)(3) is None
        assert action.seen == [(3,)]

    def test_multi_parameter_action_is_called_with_all_values(self) -> None:
        num = []
        if_then(
            compose(equal(3), lambda x, y: x + y),
            lambda x, y: num.append(x - y),
        )(4, -1)
        assert num == [5]

    def test_action_is_not_called_when_predicate_is_false(self) -> None:
        action = Recorder()
        if_then(equal(3), action)(4)
        assert action.seen == []

    def test_predicate_is_evaluated_once(self) -> None:
        predicate = Recorder()
        action = Recorder()
        if_then(predicate, action)(1, 2)
        assert predicate.seen == [(1, 2)]
        assert action.seen == [(1, 2)]

    def test_mismatched_arities_fail_at_construction(self) -> None:
        with pytest.raises(ArityMismatchError):
            if_then(equal(3), lambda x, y: None)

    def test_captured_action_state_is_shared(self) -> None:
        accumulator = Accumulator()
        add_positive = if_then(greater_than(0), accumulator)
        add_positive(5)
        add_positive(-1)
        add_positive(2)
        assert accumulator.total == 7


class TestIfThenElse:
    def test_only_true_action_runs_when_predicate_holds(self) -> None:
        t_action = Recorder()
        f_action = Recorder()
        condition_if_3 = if_then_else(equal(3), t_action, f_action)

        condition_if_3(3)
        assert t_action.seen == [(3,)]
        assert f_action.seen == []

    def test_only_false_action_runs_when_predicate_fails(self) -> None:
        t_action = Recorder()
        f_action = Recorder()
        condition_if_3 = if_then_else(equal(3), t_action, f_action)

        condition_if_3(4)
        assert t_action.seen == []
        assert f_action.seen == [(4,)]

    def test_returns_result_of_chosen_action(self) -> None:
        clamp = if_then_else(less_than(0), lambda _: 0, lambda x: x)
        assert clamp(-1) == 0
        assert clamp(1) == 1

    def test_results_are_returned_unchanged(self) -> None:
        pick = if_then_else(less_than(0), lambda _: 0, lambda x: x / 2)
        assert type(pick(-1)) is int
        assert pick(3) == 1.5

    def test_captured_action_state_is_shared(self) -> None:
        hits = Accumulator()
        misses = Accumulator()
        tally = if_then_else(equal(3), hits, misses)
        assert tally(3) == 3
        assert tally(3) == 6
        assert tally(4) == 4
        assert (hits.total, misses.total) == (6, 4)

    def test_exceptions_from_the_predicate_propagate(self) -> None:
        action = Recorder()
        with pytest.raises(TypeError):
            if_then_else(less_than(0), action, action)("x")
        assert action.seen == []


class TestDoAll:
    def test_functions_are_called_in_sequence(self) -> None:
        num = [0]

        def step(expected: int):
            def action(i: int) -> None:
                num[0] += i
                assert num[0] == expected
            return action

        assert do_all(step(1), step(2), step(3))(1) is None
        assert num[0] == 3

    def test_results_are_discarded(self) -> None:
        recorder = Recorder()
        assert do_all(recorder, recorder)("a", "b") is None
        assert recorder.seen == [("a", "b"), ("a", "b")]

    def test_captured_state_is_shared(self) -> None:
        n = [0]
        x = [3]
        do_all(lambda p: n.__setitem__(0, p + x[0]))(5)
        assert n[0] == 8

    def test_exception_stops_later_actions(self) -> None:
        before = Recorder()
        after = Recorder()

        def fail(_: int) -> None:
            raise RuntimeError("stop")

        with pytest.raises(RuntimeError, match="stop"):
            do_all(before, fail, after)(1)
        assert before.seen == [(1,)]
        assert after.seen == []

    def test_empty_does_nothing(self) -> None:
        assert do_all()() is None
