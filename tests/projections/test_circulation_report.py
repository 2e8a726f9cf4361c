"""
Tests for projections.reporting: label/value report output.
"""

import io

from core.commands import ActionResult
from core.config.rules import CirculationConfig, MemberClassRule, TitleRule
from engines.catalog import seed
from projections.reporting import ReportWriter, action_lines, render, state_lines


class TestStateLines:
    def test_field_order(self):
        assert state_lines(seed()) == [
            ("day", "1"),
            ("available_a", "3"),
            ("available_b", "2"),
            ("available_c", "1"),
            ("loans_m1", "0"),
            ("loans_m2", "0"),
            ("fines_m1", "0"),
            ("fines_m2", "0"),
        ]

    def test_follows_config_order(self):
        config = CirculationConfig(
            titles=(
                TitleRule(title_id=9, label="zeta", initial_copies=1),
                TitleRule(title_id=4, label="alpha", initial_copies=2),
            ),
            member_classes=(
                MemberClassRule(member_class=3, loan_limit=1, fine_ceiling=0),
            ),
        )
        labels = [label for label, _ in state_lines(seed(config), config)]
        assert labels == ["day", "available_zeta", "available_alpha", "loans_m3", "fines_m3"]


class TestActionLines:
    def test_success(self):
        result = ActionResult.success(seed())
        assert action_lines(result) == [("action_ok", "true"), ("action_code", "0")]

    def test_failure(self):
        result = ActionResult.failure(seed(), 203)
        assert action_lines(result) == [("action_ok", "false"), ("action_code", "203")]


class TestRender:
    def test_label_then_value_lines(self):
        assert render([("day", "1"), ("action_ok", "true")]) == "day\n1\naction_ok\ntrue\n"

    def test_empty(self):
        assert render([]) == ""


class TestReportWriter:
    def test_print_state_returns_state(self):
        stream = io.StringIO()
        state = seed()
        assert ReportWriter(stream).print_state(state) is state
        assert stream.getvalue().splitlines()[:4] == ["day", "1", "available_a", "3"]

    def test_print_action_returns_carried_state(self):
        stream = io.StringIO()
        result = ActionResult.success(seed(), 1005)
        assert ReportWriter(stream).print_action(result) is result.state
        assert stream.getvalue() == "action_ok\ntrue\naction_code\n1005\n"
