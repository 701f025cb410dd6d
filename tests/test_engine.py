"""Tests for the scenario model."""

import itertools

import pytest

from rbe_sandbox.engine.classification import classify, PROFIT_MAX, RBE_LEANING
from rbe_sandbox.engine.metrics import DIALS, METRICS, get_metric, normalize_metric
from rbe_sandbox.engine.model import (
    OutcomeMetrics,
    PolicyInputs,
    clamp01,
    evaluate,
    is_rbe_leaning,
    project,
    round_half_up,
)
from rbe_sandbox.engine.presets import DEFAULT_INPUTS, PRESETS, get_preset
from rbe_sandbox.engine.seeding import parse_dial, seed_inputs


STEPS = range(0, 101, 20)


def all_inputs():
    """Coarse grid over [0, 100]^4."""
    for p, c, a, e in itertools.product(STEPS, repeat=4):
        yield PolicyInputs(p, c, a, e)


class TestHelpers:
    """Tests for clamping and rounding helpers."""

    def test_clamp01(self):
        assert clamp01(-0.2) == 0.0
        assert clamp01(0.4) == 0.4
        assert clamp01(1.7) == 1.0

    def test_round_half_up(self):
        """Halves round upward, not to the nearest even number."""
        assert round_half_up(36.5) == 37
        assert round_half_up(2.5) == 3
        assert round_half_up(37.01) == 37
        assert round_half_up(36.49) == 36

    def test_inputs_clamped_on_construction(self):
        inputs = PolicyInputs(150, -10, 42.6, 100)
        assert inputs.profit_priority == 100
        assert inputs.commons_level == 0
        assert inputs.automation_level == 43
        assert inputs.eco_constraint == 100


class TestEvaluate:
    """Tests for single-year evaluation."""

    def test_known_scenario(self):
        """Worked example with p=70, c=20, a=60, e=25."""
        outcomes = evaluate(PolicyInputs(70, 20, 60, 25))

        assert outcomes.inequality == pytest.approx(0.79)
        assert outcomes.avg_work_hours == 37
        assert outcomes.emissions_index == pytest.approx(0.76)
        assert outcomes.security_index == pytest.approx(0.104)

    def test_all_zero(self):
        outcomes = evaluate(PolicyInputs(0, 0, 0, 0))

        assert outcomes.inequality == pytest.approx(0.3)
        assert outcomes.avg_work_hours == 37
        assert outcomes.emissions_index == pytest.approx(0.5)
        assert outcomes.security_index == pytest.approx(0.08)

    def test_all_hundred(self):
        outcomes = evaluate(PolicyInputs(100, 100, 100, 100))

        assert outcomes.inequality == pytest.approx(0.5)
        assert outcomes.avg_work_hours == 27
        assert outcomes.emissions_index == pytest.approx(0.24)
        assert outcomes.security_index == pytest.approx(1.0)

    def test_outputs_in_range(self):
        """Every metric stays inside its documented range."""
        for inputs in all_inputs():
            outcomes = evaluate(inputs)
            assert 0.0 <= outcomes.inequality <= 1.0
            assert 0.0 <= outcomes.emissions_index <= 1.0
            assert 0.0 <= outcomes.security_index <= 1.0
            assert 10 <= outcomes.avg_work_hours <= 50
            assert isinstance(outcomes.avg_work_hours, int)

    def test_profit_raises_inequality_and_lowers_security(self):
        for c, a, e in itertools.product(STEPS, repeat=3):
            previous = None
            for p in range(0, 101, 5):
                outcomes = evaluate(PolicyInputs(p, c, a, e))
                if previous is not None:
                    assert outcomes.inequality >= previous.inequality
                    assert outcomes.security_index <= previous.security_index
                previous = outcomes

    def test_commons_lowers_inequality(self):
        for p, a, e in itertools.product(STEPS, repeat=3):
            previous = None
            for c in range(0, 101, 5):
                outcomes = evaluate(PolicyInputs(p, c, a, e))
                if previous is not None:
                    assert outcomes.inequality <= previous.inequality
                previous = outcomes

    def test_determinism(self):
        inputs = PolicyInputs(33, 66, 12, 90)
        assert evaluate(inputs) == evaluate(inputs)

    def test_does_not_mutate_inputs(self):
        inputs = PolicyInputs(33, 66, 12, 90)
        evaluate(inputs)
        assert inputs == PolicyInputs(33, 66, 12, 90)


class TestProject:
    """Tests for the yearly trajectory."""

    def test_thirty_year_length_and_order(self):
        trajectory = project(DEFAULT_INPUTS, 30)

        assert len(trajectory) == 31
        assert [point.year for point in trajectory] == list(range(31))

    def test_year_zero_matches_base(self):
        for inputs in all_inputs():
            base = evaluate(inputs)
            first = project(inputs, 30)[0]
            assert first.inequality == base.inequality
            assert first.emissions == base.emissions_index
            assert first.security == base.security_index

    def test_final_year_drift(self):
        """Inequality drifts by 0.4*p*(1-c) - 0.25*c over the full horizon."""
        last = project(PolicyInputs(70, 20, 60, 25), 30)[-1]

        assert last.year == 30
        assert last.inequality == pytest.approx(0.79 + 0.174)
        # 0.76 + (0.6 * 1.0 * 0.75 - 0.125) * 0.8
        assert last.emissions == pytest.approx(1.0)
        # 0.104 + (0.1 + 0.125 - 0.28)
        assert last.security == pytest.approx(0.049)

    def test_values_in_range(self):
        for inputs in all_inputs():
            for point in project(inputs, 10):
                assert 0.0 <= point.inequality <= 1.0
                assert 0.0 <= point.emissions <= 1.0
                assert 0.0 <= point.security <= 1.0

    def test_zero_horizon(self):
        """A zero horizon yields the base year only."""
        inputs = PolicyInputs(80, 20, 70, 25)
        base = evaluate(inputs)

        trajectory = project(inputs, 0)

        assert len(trajectory) == 1
        assert trajectory[0].year == 0
        assert trajectory[0].inequality == base.inequality
        assert trajectory[0].emissions == base.emissions_index
        assert trajectory[0].security == base.security_index

    def test_negative_horizon_rejected(self):
        with pytest.raises(ValueError):
            project(DEFAULT_INPUTS, -1)

    def test_default_horizon(self):
        assert len(project(DEFAULT_INPUTS)) == 31

    def test_determinism(self):
        inputs = PolicyInputs(20, 80, 70, 80)
        assert project(inputs, 30) == project(inputs, 30)


class TestClassification:
    """Tests for the RBE-leaning / profit-max label."""

    def test_fresco_preset_is_rbe_leaning(self):
        inputs = get_preset("fresco_rbe").inputs
        outcomes = evaluate(inputs)

        assert is_rbe_leaning(inputs, outcomes)
        assert classify(inputs, outcomes) is RBE_LEANING

    @pytest.mark.parametrize("key", ["late_capitalism", "greenwashed"])
    def test_profit_presets_are_profit_max(self, key):
        inputs = get_preset(key).inputs
        outcomes = evaluate(inputs)

        assert not is_rbe_leaning(inputs, outcomes)
        assert classify(inputs, outcomes) is PROFIT_MAX

    def test_commons_threshold(self):
        """Good outcomes alone are not enough without majority commons."""
        outcomes = OutcomeMetrics(
            inequality=0.1, avg_work_hours=20, emissions_index=0.1, security_index=0.9
        )
        assert not is_rbe_leaning(PolicyInputs(0, 50, 0, 100), outcomes)
        assert is_rbe_leaning(PolicyInputs(0, 51, 0, 100), outcomes)

    def test_labels(self):
        assert RBE_LEANING.label == "RBE-leaning"
        assert PROFIT_MAX.label == "Profit-max"


class TestCatalog:
    """Tests for dials, metrics and presets."""

    def test_four_dials(self):
        assert set(DIALS) == {
            "profit_priority", "commons_level", "automation_level", "eco_constraint"
        }

    def test_four_metrics(self):
        assert set(METRICS) == {
            "inequality", "avg_work_hours", "emissions_index", "security_index"
        }
        assert not METRICS["inequality"].higher_is_better
        assert METRICS["security_index"].higher_is_better

    def test_normalize_work_hours(self):
        assert normalize_metric("avg_work_hours", 10) == 0.0
        assert normalize_metric("avg_work_hours", 30) == pytest.approx(0.5)
        assert normalize_metric("avg_work_hours", 50) == 1.0

    def test_unknown_metric(self):
        with pytest.raises(KeyError):
            get_metric("happiness")

    def test_preset_values(self):
        assert PRESETS["late_capitalism"].inputs == PolicyInputs(80, 20, 70, 25)
        assert PRESETS["fresco_rbe"].inputs == PolicyInputs(20, 80, 70, 80)
        assert PRESETS["greenwashed"].inputs == PolicyInputs(75, 35, 60, 55)
        assert PRESETS["fresco_rbe"].name == "Fresco-leaning RBE"

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("utopia")


class TestSeeding:
    """Tests for seeding inputs from query parameters."""

    def test_out_of_range_clamped(self):
        seeded = seed_inputs(DEFAULT_INPUTS, {"profitPriority": "150"})
        assert seeded.profit_priority == 100
        assert seeded.commons_level == DEFAULT_INPUTS.commons_level

    def test_negative_clamped(self):
        assert seed_inputs(DEFAULT_INPUTS, {"ecoConstraint": "-5"}).eco_constraint == 0

    def test_non_numeric_keeps_prior(self):
        seeded = seed_inputs(DEFAULT_INPUTS, {"profitPriority": "abc", "commonsLevel": ""})
        assert seeded == DEFAULT_INPUTS

    def test_non_finite_keeps_prior(self):
        seeded = seed_inputs(DEFAULT_INPUTS, {"automationLevel": "nan", "ecoConstraint": "inf"})
        assert seeded == DEFAULT_INPUTS

    def test_all_fields(self):
        seeded = seed_inputs(DEFAULT_INPUTS, {
            "profitPriority": "10",
            "commonsLevel": "90",
            "automationLevel": "33.6",
            "ecoConstraint": "1e2",
        })
        assert seeded == PolicyInputs(10, 90, 34, 100)

    def test_snake_case_accepted(self):
        seeded = seed_inputs(DEFAULT_INPUTS, {"commons_level": "55"})
        assert seeded.commons_level == 55

    def test_prior_not_mutated(self):
        seed_inputs(DEFAULT_INPUTS, {"profitPriority": "0"})
        assert DEFAULT_INPUTS.profit_priority == 70

    def test_parse_dial(self):
        assert parse_dial(None) is None
        assert parse_dial("12") == 12
        assert parse_dial(" 99.4 ") == 99
