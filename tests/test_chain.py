"""
Tests for comfort.chain: step normalization and the invoker.
"""

import pytest

from comfort import KEEP, Chain, Splice, ValidationFailure, invoke
from comfort.chain import as_step


def fail(value, key=None):
    raise ValidationFailure("bad", "bad value")


class TestAsStep:
    def test_unary_is_wrapped(self):
        step = as_step(lambda v: v + 1)
        assert step(1, "ignored") == 2

    def test_binary_passes_through(self):
        fn = lambda v, k: (v, k)  # noqa: E731
        assert as_step(fn) is fn

    def test_varargs_receives_key(self):
        step = as_step(lambda *args: args)
        assert step(1, "k") == (1, "k")

    def test_builtin_with_optional_second_arg_is_unary(self):
        assert as_step(round)(3.7, "score") == 4
        assert as_step(str.split)("a b", "words") == ["a", "b"]

    def test_optional_key_function_receives_key(self):
        def check(value, key=None):
            return (value, key)

        assert as_step(check)(1, "k") == (1, "k")

    def test_callable_instance_receives_key(self):
        class Labelled:
            def __call__(self, value, key=None):
                return f"{key}:{value}"

        assert as_step(Labelled())(1, "k") == "k:1"

    def test_not_callable(self):
        with pytest.raises(TypeError):
            as_step("nope")


class TestChain:
    def test_append_order(self):
        chain = Chain()
        chain.append(lambda v: v + "a")
        chain.append(lambda v: v + "b")
        assert len(chain) == 2
        assert chain("") == "ab"

    def test_steps_is_read_only_view(self):
        chain = Chain([lambda v: v])
        steps = chain.steps
        assert isinstance(steps, tuple)
        chain.append(lambda v: v)
        assert len(steps) == 1
        assert len(chain.steps) == 2


class TestInvoke:
    @pytest.mark.parametrize("value", [None, 0, "", "x", [1, 2], {"a": 1}])
    def test_empty_chain_returns_input(self, value):
        assert invoke(Chain(), value) is value

    def test_value_threading(self):
        seen = []

        def record(v):
            seen.append(v)

        chain = Chain([lambda v: v * 2, record, lambda v: v + 1, record])
        assert invoke(chain, 5) == 11
        assert seen == [10, 11]

    def test_none_return_keeps_value(self):
        chain = Chain([lambda v: None])
        assert invoke(chain, "same") == "same"

    def test_keep_forces_replacement(self):
        chain = Chain([lambda v: KEEP(None)])
        assert invoke(chain, "gone") is None

    def test_key_is_passed_to_binary_steps(self):
        chain = Chain([lambda v, k: f"{k}={v}"])
        assert invoke(chain, 1, "x") == "x=1"

    def test_short_circuit(self):
        calls = []
        chain = Chain(
            [
                lambda v: calls.append("first"),
                fail,
                lambda v: calls.append("third"),
            ]
        )
        with pytest.raises(ValidationFailure) as exc:
            invoke(chain, 1)
        assert exc.value.key == "bad"
        assert calls == ["first"]

    def test_splice_runs_after_queued_steps(self):
        order = []
        spliced = Chain([lambda v: order.append("spliced")])
        chain = Chain(
            [
                lambda v: Splice(spliced.steps),
                lambda v: order.append("second"),
            ]
        )
        invoke(chain, 1)
        assert order == ["second", "spliced"]
        assert len(chain) == 2

    def test_splice_with_value(self):
        chain = Chain([lambda v: Splice(Chain([lambda v: v + "!"]).steps, "new")])
        assert invoke(chain, "old") == "new!"
