"""
Tests for integration.scenario: scenario runner, demo scenario, CLI.
"""

import io
import json
import logging

import pytest

from core.state import UnknownTitleError
from engines.catalog import seed
from integration.scenario import (
    DEMO_SCENARIO,
    AdvanceDay,
    Checkout,
    Pay,
    ReportState,
    Return,
    run_scenario,
)
from integration.scenario.cli import main
from projections.reporting import ReportWriter


DEMO_REPORT = [
    # seed
    "day", "1", "available_a", "3", "available_b", "2", "available_c", "1",
    "loans_m1", "0", "loans_m2", "0", "fines_m1", "0", "fines_m2", "0",
    # three checkouts
    "action_ok", "true", "action_code", "0",
    "action_ok", "true", "action_code", "0",
    "action_ok", "true", "action_code", "0",
    # late return
    "action_ok", "true", "action_code", "1005",
    # after payment
    "day", "5", "available_a", "2", "available_b", "2", "available_c", "0",
    "loans_m1", "1", "loans_m2", "1", "fines_m1", "0", "fines_m2", "275",
    # final checkout
    "action_ok", "true", "action_code", "0",
    "day", "7", "available_a", "2", "available_b", "1", "available_c", "0",
    "loans_m1", "2", "loans_m2", "1", "fines_m1", "0", "fines_m2", "275",
]


class TestRunScenario:
    def test_empty_scenario(self):
        trace = run_scenario([])
        assert trace.final_state == seed()
        assert trace.results == []

    def test_demo_final_state(self):
        trace = run_scenario(DEMO_SCENARIO)
        assert trace.final_state.to_dict() == {
            "day": 7,
            "available_copies": {1: 2, 2: 1, 3: 0},
            "active_loans": {1: 2, 2: 1},
            "outstanding_fines": {1: 0, 2: 275},
        }
        assert [r.code for r in trace.results] == [0, 0, 0, 1005, 0]
        assert trace.rejections == []

    def test_demo_report(self):
        stream = io.StringIO()
        run_scenario(DEMO_SCENARIO, writer=ReportWriter(stream))
        assert stream.getvalue().splitlines() == DEMO_REPORT

    def test_refusal_does_not_halt(self, caplog):
        steps = [
            Checkout(member_class=2, title_id=3),
            Checkout(member_class=1, title_id=3),
            Return(member_class=2, title_id=3),
            Checkout(member_class=1, title_id=3),
        ]
        with caplog.at_level(logging.WARNING, logger="libcirc.scenario"):
            trace = run_scenario(steps)
        assert [r.code for r in trace.results] == [0, 203, 1000, 0]
        assert len(trace.rejections) == 1
        assert trace.final_state.loans_of(1) == 1
        assert any("refused" in r.getMessage() for r in caplog.records)

    def test_starts_from_given_state(self):
        start = seed().with_outstanding_fines(1, 500)
        trace = run_scenario([Pay(member_class=1, amount=200), AdvanceDay(days=3)], initial=start)
        assert trace.initial_state is start
        assert trace.final_state.fines_of(1) == 300
        assert trace.final_state.day == 4

    def test_entries_record_state_after_each_step(self):
        trace = run_scenario([AdvanceDay(), ReportState(), AdvanceDay(days=2)])
        assert [e.state.day for e in trace.entries] == [2, 2, 4]
        assert all(e.result is None for e in trace.entries)

    def test_unknown_title_propagates(self):
        with pytest.raises(UnknownTitleError):
            run_scenario([Checkout(member_class=1, title_id=8)])


class TestCli:
    def test_prints_demo_report(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out.splitlines() == DEMO_REPORT

    def test_custom_config(self, tmp_path, capsys):
        path = tmp_path / "library.json"
        path.write_text(json.dumps({
            "late_fee_per_day": 10,
            "titles": [
                {"title_id": 1, "label": "a", "initial_copies": 5},
                {"title_id": 2, "label": "b", "initial_copies": 5},
                {"title_id": 3, "label": "c", "initial_copies": 5},
            ],
            "member_classes": [
                {"member_class": 1, "loan_limit": 9, "fine_ceiling": 0},
                {"member_class": 2, "loan_limit": 9, "fine_ceiling": 0},
            ],
        }))
        assert main(["--config", str(path)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[-2:] == ["fines_m2", "0"]
        assert out[out.index("available_c") + 1] == "5"

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "absent.json")]) == 2
        assert "Cannot load" in capsys.readouterr().err

    def test_config_that_does_not_fit_demo(self, tmp_path, capsys):
        path = tmp_path / "tiny.json"
        path.write_text(json.dumps({
            "titles": [{"title_id": 1, "label": "a", "initial_copies": 1}],
            "member_classes": [
                {"member_class": 1, "loan_limit": 1, "fine_ceiling": 0},
                {"member_class": 2, "loan_limit": 1, "fine_ceiling": 0},
            ],
        }))
        assert main(["--config", str(path)]) == 2
        assert "does not fit" in capsys.readouterr().err
