"""
LibCirc Integration: Scenario Driver
=======================================
Threads one snapshot through a scripted list of actions.

Doctrine: the driver decides nothing. It seeds, calls the engines in
the order given, records what came back, and reports. A refused action
is recorded and logged; it never halts the scenario.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from core.commands.outcomes import ActionResult
from core.config.rules import DEFAULT_CONFIG, CirculationConfig
from core.state.snapshot import LibraryState
from engines.catalog.services import advance_days, seed
from engines.circulation.services import checkout, return_title
from engines.members.services import pay
from projections.reporting import ReportWriter

logger = logging.getLogger("libcirc.scenario")


# ══════════════════════════════════════════════════════════════
# STEPS
# ══════════════════════════════════════════════════════════════

StepOutput = Tuple[LibraryState, Optional[ActionResult]]


@dataclass(frozen=True)
class Checkout:
    member_class: int
    title_id: int

    def apply(self, state: LibraryState, config: CirculationConfig) -> StepOutput:
        result = checkout(state, self.member_class, self.title_id, config)
        return result.state, result


@dataclass(frozen=True)
class Return:
    member_class: int
    title_id: int
    late_days: int = 0

    def apply(self, state: LibraryState, config: CirculationConfig) -> StepOutput:
        result = return_title(
            state, self.member_class, self.title_id, self.late_days, config,
        )
        return result.state, result


@dataclass(frozen=True)
class Pay:
    member_class: int
    amount: int

    def apply(self, state: LibraryState, config: CirculationConfig) -> StepOutput:
        return pay(state, self.member_class, self.amount), None


@dataclass(frozen=True)
class AdvanceDay:
    days: int = 1

    def apply(self, state: LibraryState, config: CirculationConfig) -> StepOutput:
        return advance_days(state, self.days), None


@dataclass(frozen=True)
class ReportState:
    """Marker step: report the current snapshot."""

    def apply(self, state: LibraryState, config: CirculationConfig) -> StepOutput:
        return state, None


Step = Union[Checkout, Return, Pay, AdvanceDay, ReportState]


# ══════════════════════════════════════════════════════════════
# TRACE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TraceEntry:
    step: Step
    state: LibraryState
    result: Optional[ActionResult] = None


@dataclass
class ScenarioTrace:
    """Everything a scenario run produced, in step order."""

    initial_state: LibraryState
    entries: List[TraceEntry] = field(default_factory=list)

    @property
    def final_state(self) -> LibraryState:
        if not self.entries:
            return self.initial_state
        return self.entries[-1].state

    @property
    def results(self) -> List[ActionResult]:
        return [e.result for e in self.entries if e.result is not None]

    @property
    def rejections(self) -> List[ActionResult]:
        return [r for r in self.results if not r.ok]


# ══════════════════════════════════════════════════════════════
# RUNNER
# ══════════════════════════════════════════════════════════════

def run_scenario(
    steps: Sequence[Step],
    config: CirculationConfig = DEFAULT_CONFIG,
    initial: Optional[LibraryState] = None,
    writer: Optional[ReportWriter] = None,
) -> ScenarioTrace:
    """
    Apply steps in order starting from initial (or a fresh seed).

    When a writer is given, every action result and every ReportState
    marker is reported as it happens.
    """
    state = initial if initial is not None else seed(config)
    trace = ScenarioTrace(initial_state=state)

    for index, step in enumerate(steps):
        state, result = step.apply(state, config)
        trace.entries.append(TraceEntry(step=step, state=state, result=result))

        if result is not None and not result.ok:
            logger.warning(
                f"Step {index} {step!r} refused: {result.describe()} "
                f"(code {result.code})"
            )

        if writer is None:
            continue
        if result is not None:
            writer.print_action(result)
        elif isinstance(step, ReportState):
            writer.print_state(state)

    logger.info(
        f"Scenario finished: {len(trace.entries)} steps, "
        f"{len(trace.rejections)} refused, day {trace.final_state.day}"
    )
    return trace


# Reference run: three checkouts, a late return, a part payment and a
# final checkout two days later.
DEMO_SCENARIO: Tuple[Step, ...] = (
    ReportState(),
    Checkout(member_class=1, title_id=1),
    Checkout(member_class=2, title_id=1),
    Checkout(member_class=2, title_id=3),
    AdvanceDay(days=4),
    Return(member_class=2, title_id=1, late_days=5),
    Pay(member_class=2, amount=100),
    ReportState(),
    AdvanceDay(days=2),
    Checkout(member_class=1, title_id=2),
    ReportState(),
)


__all__ = [
    "Checkout",
    "Return",
    "Pay",
    "AdvanceDay",
    "ReportState",
    "Step",
    "TraceEntry",
    "ScenarioTrace",
    "run_scenario",
    "DEMO_SCENARIO",
]
