"""
LibCirc Projections: Circulation Report
==========================================
Line-oriented read model of snapshots and action results.

Output contract (stable, consumed line by line):
- Every field is two lines: its label, then its value
- Snapshot order: day, available_<title> per title, loans_m<class>
  per class, fines_m<class> per class (config order throughout)
- Action order: action_ok, action_code
- Booleans render as 'true' / 'false'
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO, Tuple

from core.commands.outcomes import ActionResult
from core.config.rules import DEFAULT_CONFIG, CirculationConfig
from core.state.snapshot import LibraryState


ReportLine = Tuple[str, str]


def _render_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def state_lines(
    state: LibraryState,
    config: CirculationConfig = DEFAULT_CONFIG,
) -> List[ReportLine]:
    lines: List[ReportLine] = [("day", _render_value(state.day))]
    for title in config.titles:
        lines.append((
            f"available_{title.label}",
            _render_value(state.copies_of(title.title_id)),
        ))
    for member in config.member_classes:
        lines.append((
            f"loans_m{member.member_class}",
            _render_value(state.loans_of(member.member_class)),
        ))
    for member in config.member_classes:
        lines.append((
            f"fines_m{member.member_class}",
            _render_value(state.fines_of(member.member_class)),
        ))
    return lines


def action_lines(result: ActionResult) -> List[ReportLine]:
    return [
        ("action_ok", _render_value(result.ok)),
        ("action_code", _render_value(result.code)),
    ]


def render(lines: List[ReportLine]) -> str:
    """Flatten label/value pairs into newline-terminated text."""
    return "".join(f"{label}\n{value}\n" for label, value in lines)


# ══════════════════════════════════════════════════════════════
# REPORT WRITER
# ══════════════════════════════════════════════════════════════

class ReportWriter:
    """
    Writes report blocks to a text stream.

    Each print_* method returns the snapshot it reported on so the
    caller can keep threading state through.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        config: CirculationConfig = DEFAULT_CONFIG,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._config = config

    def print_state(self, state: LibraryState) -> LibraryState:
        self._stream.write(render(state_lines(state, self._config)))
        return state

    def print_action(self, result: ActionResult) -> LibraryState:
        self._stream.write(render(action_lines(result)))
        return result.state
