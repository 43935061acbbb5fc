"""Tests for seirahd.model: solve_ivp driver and epidemic outcomes."""

import numpy as np
import pandas as pd
import pytest

from seirahd import COMPARTMENTS, FractionOutOfRange, SEIRAHDModel, SEIRAHDParams


@pytest.fixture
def model(small_params):
    return SEIRAHDModel(small_params)


class TestInitialConditions:
    def test_default_seed(self, model):
        y0 = model.initial_conditions()
        np.testing.assert_array_equal(y0, [999, 0, 1, 0, 0, 0, 0, 1])

    def test_remainder_is_susceptible(self, model):
        y0 = model.initial_conditions(E0=5, I0=3, A0=2)
        assert y0[0] == 990
        assert y0[:7].sum() == 1000
        assert y0[7] == 5

    def test_overfull_seed(self, model):
        with pytest.raises(ValueError, match="exceed"):
            model.initial_conditions(E0=600, I0=600)

    def test_negative_seed(self, model):
        with pytest.raises(ValueError):
            model.initial_conditions(I0=-1)

    def test_invalid_params_rejected_on_construction(self):
        with pytest.raises(FractionOutOfRange):
            SEIRAHDModel(SEIRAHDParams(kappaH=1.2))


class TestSimulate:
    def test_result_keys_and_shapes(self, model):
        results = model.simulate(t_span=(0, 60))
        for key in ('time',) + COMPARTMENTS + ('N', 'incidence', 'prevalence'):
            assert key in results
            assert results[key].shape == (61,)
        assert results['time'][0] == 0
        assert results['time'][-1] == 60

    def test_population_conserved(self, model):
        results = model.simulate(t_span=(0, 180))
        total = sum(results[c] for c in ('S', 'E', 'I', 'A', 'H', 'R', 'D'))
        np.testing.assert_allclose(total, 1000.0, rtol=1e-8)

    def test_cumulative_non_decreasing(self, model):
        results = model.simulate({'E': 5, 'I': 3, 'A': 2}, t_span=(0, 180))
        assert np.all(np.diff(results['C']) >= -1e-8)

    def test_cumulative_tracks_outflow_of_exposed(self, model):
        results = model.simulate({'E': 5, 'I': 3, 'A': 2}, t_span=(0, 365))
        # everyone who left S passed through E, and C counts E -> I/A
        left_s = results['S'][0] - results['S'][-1]
        gained_c = results['C'][-1] - results['C'][0]
        assert gained_c == pytest.approx(left_s + 5 - results['E'][-1], rel=1e-4)

    def test_epidemic_takes_off(self, model):
        results = model.simulate({'I': 10}, t_span=(0, 365))
        assert results['R'][-1] > 500
        assert results['D'][-1] > 0

    def test_mismatched_initial_conditions_warn(self, model):
        with pytest.warns(UserWarning, match="Adjusting S"):
            results = model.simulate({'S': 900, 'I': 10}, t_span=(0, 10))
        assert results['S'][0] == pytest.approx(990)

    def test_unknown_compartment(self, model):
        with pytest.raises(ValueError, match="unknown"):
            model.simulate({'X': 1})

    def test_custom_t_eval(self, model):
        t_eval = np.linspace(0, 30, 7)
        results = model.simulate({'I': 5}, t_span=(0, 30), t_eval=t_eval)
        np.testing.assert_allclose(results['time'], t_eval)

    def test_alternative_method(self, model):
        a = model.simulate({'I': 5}, t_span=(0, 60))
        b = SEIRAHDModel(model.params).simulate({'I': 5}, t_span=(0, 60), method='LSODA')
        np.testing.assert_allclose(a['R'], b['R'], rtol=1e-3, atol=1e-3)

    def test_no_infection_stays_put(self, model):
        results = model.simulate({'S': 1000}, t_span=(0, 30))
        np.testing.assert_allclose(results['S'], 1000.0)
        np.testing.assert_allclose(results['C'], 0.0)


class TestParameterEdits:
    def test_edited_beta_is_integrated(self, model):
        model.params.beta = 0.9
        edited = model.simulate({'I': 10}, t_span=(0, 30))
        fresh = SEIRAHDModel(SEIRAHDParams(N0=1000, beta=0.9)).simulate({'I': 10}, t_span=(0, 30))
        for c in COMPARTMENTS:
            np.testing.assert_allclose(edited[c], fresh[c], rtol=1e-9)

    def test_incidence_uses_integrated_beta(self, model):
        model.params.beta = 0.9
        results = model.simulate({'I': 10}, t_span=(0, 30))
        infectious = results['I'] + results['A'] + results['H']
        expected = 0.9 * results['S'] * infectious / results['N']
        np.testing.assert_allclose(results['incidence'], expected)

    def test_derivatives_follow_edits(self, model):
        y0 = model.initial_conditions(I0=10)
        before = model.derivatives(0.0, y0)
        model.params.beta = 1.0
        after = model.derivatives(0.0, y0)
        assert after[0] == pytest.approx(2 * before[0])

    def test_invalid_edit_rejected(self, model):
        model.params.kappaH = 5.0
        with pytest.raises(FractionOutOfRange):
            model.simulate({'I': 10}, t_span=(0, 10))

    def test_population_edit(self, model):
        model.params.N0 = 2000
        y0 = model.initial_conditions(I0=10)
        assert y0[0] == 1990
        results = model.simulate({'I': 10}, t_span=(0, 10))
        assert results['S'][0] == pytest.approx(1990)


class TestOutcomes:
    def test_requires_simulation(self, model):
        with pytest.raises(ValueError, match="simulate"):
            model.calculate_outcomes()

    def test_outcomes(self, model):
        model.simulate({'I': 10}, t_span=(0, 365))
        outcomes = model.calculate_outcomes()
        assert outcomes['total_infections'] == pytest.approx(model.results['C'][-1])
        assert outcomes['attack_rate'] == pytest.approx(outcomes['total_infections'] / 1000)
        assert 0 < outcomes['peak_day'] < 365
        assert outcomes['peak_hospitalized'] > 0
        # hospitalization lags symptomatic onset
        assert outcomes['peak_hospitalized_day'] >= outcomes['peak_day']

    def test_to_frame(self, model):
        model.simulate(t_span=(0, 20))
        df = model.to_frame()
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 21
        assert list(df.columns[:9]) == ['time'] + list(COMPARTMENTS)

    def test_print_summary(self, model, capsys):
        model.simulate({'I': 10}, t_span=(0, 100))
        model.print_summary()
        out = capsys.readouterr().out
        assert "Total deaths" in out

    def test_r0(self, model):
        assert model.calculate_r0() == pytest.approx(model.params.R0)
