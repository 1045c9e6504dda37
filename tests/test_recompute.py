"""Integration tests for full plant recomputation."""

import pytest

from glass_capacity import recompute, reset_to_baseline
from glass_capacity.analysis.gap_analyzer import EDGE_TREATMENT, GROUPS, LAMINATION
from glass_capacity.models import DvhTargetPolicy, GlobalParameters, StationId


class TestBaselineReport:
    """The documented plant under the coupled policy."""

    @pytest.fixture
    def report(self):
        configuration, parameters = reset_to_baseline()
        return recompute(configuration, parameters)

    def test_coupled_target_floored_to_chain_limit(self, report):
        assert report.dvh_policy == DvhTargetPolicy.COUPLED
        assert report.requested_dvh_target == 800
        assert report.effective_dvh_target == 628

    def test_no_gaps(self, report):
        assert not report.needs_adjustment
        for group in GROUPS:
            assert report.gaps[group].gap >= 0

    def test_gap_figures(self, report):
        assert report.gaps["monolithic_cutting"].demand == pytest.approx(3752)
        assert report.gaps["laminated_cutting"].demand == pytest.approx(4208)
        assert report.gaps[EDGE_TREATMENT].gap == pytest.approx(7445.995 - 7440, abs=1e-3)
        assert report.gaps["tempering"].demand == pytest.approx(56570)
        assert report.gaps["dvh_assembly"].demand == pytest.approx(3140)
        assert report.gaps[LAMINATION].demand == pytest.approx(127327.496)

    def test_staffing(self, report):
        assert report.total_headcount == pytest.approx(59)
        assert report.staffing.total_incremental_hires == 0

    def test_fourth_shift_advisory(self, report):
        assert len(report.advisories) == 1
        assert "Bovone" in report.advisories[0]

    def test_summary(self, report):
        summary = report.summary()

        assert "DVH target: 628" in summary
        assert "edge_treatment" in summary

    def test_dataframes(self, report):
        assert len(report.capacity_dataframe()) == 9
        assert len(report.gaps_dataframe()) == 13


class TestPolicies:
    """Target resolution through the full pipeline."""

    def test_fixed_policy_keeps_request(self, baseline_configuration, fixed_parameters):
        report = recompute(baseline_configuration, fixed_parameters)

        assert report.effective_dvh_target == 800
        assert report.gaps.groups_needing_adjustment == [EDGE_TREATMENT, LAMINATION]

    def test_automatic_policy_ignores_request(self, baseline_configuration):
        params = GlobalParameters(dvh_follows_capacity=True, targets={"dvh": 100})
        report = recompute(baseline_configuration, params)
        assert report.effective_dvh_target == 628

    def test_coupled_never_exceeds_chain_limit(self, baseline_configuration):
        config = baseline_configuration.update_station(StationId.BILATERAL, overtime_hours_per_week=40)
        report = recompute(config, GlobalParameters())

        assert report.effective_dvh_target <= report.bottleneck.chain_limit
        assert report.bottleneck.binding_group != EDGE_TREATMENT


class TestPurity:
    """Recompute is a pure function of its inputs."""

    def test_same_inputs_same_outputs(self, baseline_configuration, baseline_parameters):
        first = recompute(baseline_configuration, baseline_parameters)
        second = recompute(baseline_configuration, baseline_parameters)

        assert first.effective_dvh_target == second.effective_dvh_target
        assert first.gaps.groups == second.gaps.groups
        assert first.total_cost == second.total_cost

    def test_inputs_unchanged(self, baseline_configuration, baseline_parameters):
        before = baseline_configuration.model_dump()
        recompute(baseline_configuration, baseline_parameters)
        assert baseline_configuration.model_dump() == before
