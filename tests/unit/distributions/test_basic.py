from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_prob.distributions.distribution import (
    Distribution,
    combine,
    fmap,
    lift,
    pure,
    replicate,
    sequence,
)
from pysatl_prob.families.primitives import gamma, standard_normal, uniform
from pysatl_prob.random.source import create_source
from tests.utils.mocks import RecordingRandomSource, ScriptedRandomSource


class DistributionTestBase:
    SEED = 7

    def make_pair_of_sources(self) -> tuple[RecordingRandomSource, RecordingRandomSource]:
        """Two independent sources in the same initial state."""
        return (
            RecordingRandomSource(create_source(self.SEED)),
            RecordingRandomSource(create_source(self.SEED)),
        )


class TestComposition(DistributionTestBase):
    def test_map_applies_function_and_consumes_same_draws(self) -> None:
        def f(x: float) -> float:
            return 3.0 * x + 1.0

        s1, s2 = self.make_pair_of_sources()
        mapped = fmap(f, uniform()).sample(s1)
        direct = f(uniform().sample(s2))

        assert mapped == direct
        assert s1.draws == s2.draws

    def test_method_and_function_forms_agree(self) -> None:
        s1, s2 = self.make_pair_of_sources()
        assert uniform().map(abs).sample(s1) == fmap(abs, uniform()).sample(s2)

    def test_combine_draws_left_before_right(self) -> None:
        src = ScriptedRandomSource(uniforms=[0.25], normals=[-1.5])
        pair = combine(uniform(), standard_normal()).sample(src)

        assert pair == (0.25, -1.5)
        assert src.call_names == ["uniform", "standard_normal"]

    def test_combine_order_is_reversed_when_operands_swap(self) -> None:
        src = ScriptedRandomSource(uniforms=[0.25], normals=[-1.5])
        pair = standard_normal().combine(uniform()).sample(src)

        assert pair == (-1.5, 0.25)
        assert src.call_names == ["standard_normal", "uniform"]

    def test_sequence_draws_first_then_dependent(self) -> None:
        src = ScriptedRandomSource(gammas=[2.5], uniforms=[0.5])
        seen: list[float] = []

        def make_next(shape: float) -> Distribution[float]:
            seen.append(shape)
            return uniform().map(lambda u: shape * u)

        value = sequence(gamma(1.0, 1.0), make_next).sample(src)

        assert seen == [2.5]
        assert value == pytest.approx(1.25)
        assert src.call_names == ["gamma", "uniform"]

    def test_then_discards_first_value(self) -> None:
        src = ScriptedRandomSource(uniforms=[0.1, 0.9])
        assert uniform().then(uniform()).sample(src) == 0.9
        assert src.call_names == ["uniform", "uniform"]

    def test_pure_consumes_no_randomness(self) -> None:
        src = ScriptedRandomSource()
        assert pure(42).sample(src) == 42
        assert src.calls == []

    def test_lift_runs_effect_in_draw_order(self) -> None:
        src = ScriptedRandomSource(uniforms=[0.2, 0.4])
        events: list[str] = []

        def effect() -> str:
            events.append(f"effect after {len(src.calls)} draws")
            return "done"

        model = uniform().then(lift(effect)).then(uniform())
        assert model.sample(src) == 0.4
        assert events == ["effect after 1 draws"]

    def test_lift_reexecutes_effect_on_every_sample(self) -> None:
        counter = {"n": 0}

        def effect() -> int:
            counter["n"] += 1
            return counter["n"]

        dist = Distribution.lift(effect)
        src = ScriptedRandomSource()
        assert [dist.sample(src) for _ in range(3)] == [1, 2, 3]

    def test_hierarchical_model_is_reproducible_under_seed(self) -> None:
        model = (
            gamma(2.0, 1.0)
            .bind(lambda a: gamma(a, 1.0))
            .bind(lambda b: uniform().map(lambda u: b * u))
        )

        first = [model.sample(create_source(11)) for _ in range(2)]
        assert first[0] == first[1]

    def test_distribution_is_reusable(self, source) -> None:
        dist = uniform()
        draws = {dist.sample(source) for _ in range(10)}
        assert len(draws) == 10

    def test_replicate_draws_in_order(self) -> None:
        src = ScriptedRandomSource(uniforms=[0.1, 0.2, 0.3])
        assert replicate(3, uniform()).sample(src) == [0.1, 0.2, 0.3]

    def test_replicate_zero_and_negative(self) -> None:
        assert replicate(0, uniform()).sample(ScriptedRandomSource()) == []
        with pytest.raises(ValueError, match="non-negative"):
            replicate(-1, uniform())

    def test_named_and_repr(self) -> None:
        dist = uniform()
        assert dist.name == "uniform"
        assert repr(dist) == "Distribution(uniform)"
        assert dist.map(abs).name is None
        assert dist.named("u").name == "u"


class TestNumericLifting(DistributionTestBase):
    def test_addition_draws_left_operand_first(self) -> None:
        src = ScriptedRandomSource(uniforms=[0.25], normals=[2.0])
        total = (uniform() + standard_normal()).sample(src)

        assert total == pytest.approx(2.25)
        assert src.call_names == ["uniform", "standard_normal"]

    @pytest.mark.parametrize(
        "build, expected",
        [
            (lambda d: d + 1, 1.5),
            (lambda d: 1 + d, 1.5),
            (lambda d: d - 1, -0.5),
            (lambda d: 1 - d, 0.5),
            (lambda d: d * 4, 2.0),
            (lambda d: 4 * d, 2.0),
            (lambda d: d / 4, 0.125),
            (lambda d: 1 / d, 2.0),
            (lambda d: -d, -0.5),
            (lambda d: abs(-d), 0.5),
        ],
    )
    def test_operators_with_constants(self, build, expected) -> None:
        src = ScriptedRandomSource(uniforms=[0.5])
        assert build(uniform()).sample(src) == pytest.approx(expected)

    def test_sum_of_two_independent_distributions(self) -> None:
        src = ScriptedRandomSource(uniforms=[0.1, 0.2, 0.3])
        dist = uniform() * uniform() - uniform()
        assert dist.sample(src) == pytest.approx(0.1 * 0.2 - 0.3)
