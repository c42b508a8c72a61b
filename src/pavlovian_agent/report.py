"""Diagnostic report generation for a running engine.

Generates:
- Consciousness report (state, drives, top associations, attention)
- Conditioning summary (top associations with status)

Reports are presentation only; nothing here feeds back into learning.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pavlovian_agent.core.engine import PavlovianConsciousnessEngine
    from pavlovian_agent.schemas import ConditionedAssociation

logger = logging.getLogger(__name__)

REPORT_WIDTH = 70
BAR_WIDTH = 10
TOP_REPORT_ASSOCIATIONS = 5
TOP_SUMMARY_ASSOCIATIONS = 10


def _bar(level: float) -> str:
    filled = int(max(0.0, min(1.0, level)) * BAR_WIDTH)
    return "█" * filled + "░" * (BAR_WIDTH - filled)


class ReportGenerator:
    """Generates text reports from a live engine.

    The generator reads only the engine's public snapshots.
    """

    def __init__(self, engine: PavlovianConsciousnessEngine) -> None:
        self.engine = engine

    def _top_associations(self, count: int) -> list[ConditionedAssociation]:
        ranked = sorted(
            self.engine.associations,
            key=lambda a: a.association_strength,
            reverse=True,
        )
        return ranked[:count]

    def _label(self, association: ConditionedAssociation) -> tuple[str, str]:
        stimulus = self.engine.get_stimulus(association.stimulus_id)
        response = self.engine.get_response(association.response_id)
        return (
            stimulus.pattern if stimulus else association.stimulus_id,
            response.name if response else association.response_id,
        )

    def generate_consciousness_report(self) -> str:
        """Generate the full consciousness report.

        Returns:
            Text report string.
        """
        state = self.engine.get_current_state()
        attention = self.engine.attention
        lines = []

        # Header
        lines.append("=" * REPORT_WIDTH)
        lines.append("PAVLOVIAN CONSCIOUSNESS REPORT")
        lines.append("=" * REPORT_WIDTH)
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append("")
        lines.append(state.describe())
        lines.append("")

        lines.append("-" * REPORT_WIDTH)
        lines.append("DRIVE STATES:")
        lines.append("-" * REPORT_WIDTH)
        drives = sorted(self.engine.drives.values(), key=lambda d: d.level, reverse=True)
        for drive in drives:
            lines.append(f"  {drive.name:<15} [{_bar(drive.level)}] {drive.level:.0%}")
        if not drives:
            lines.append("  (none)")
        lines.append("")

        lines.append("-" * REPORT_WIDTH)
        lines.append("TOP ASSOCIATIONS (by strength):")
        lines.append("-" * REPORT_WIDTH)
        top = self._top_associations(TOP_REPORT_ASSOCIATIONS)
        for association in top:
            pattern, name = self._label(association)
            status = "✗" if association.is_extinct else "✓"
            lines.append(
                f"  {status} {pattern} → {name} "
                f"({association.association_strength:.0%}, "
                f"reinforced {association.reinforcement_count}x)"
            )
        if not top:
            lines.append("  (none)")
        lines.append("")

        lines.append("-" * REPORT_WIDTH)
        lines.append(
            f"ATTENTION: capacity={attention.capacity:.0%}, "
            f"threshold={attention.threshold:.2f}"
        )
        lines.append("-" * REPORT_WIDTH)
        if state.attentional_spotlight:
            lines.append(f"  Spotlight: {', '.join(state.attentional_spotlight)}")
        lines.append("")
        lines.append("=" * REPORT_WIDTH)

        return "\n".join(lines)

    def generate_conditioning_summary(self) -> str:
        """Generate a compact summary of the strongest associations."""
        lines = ["Conditioned Associations:"]
        for association in self._top_associations(TOP_SUMMARY_ASSOCIATIONS):
            pattern, name = self._label(association)
            status = "extinct" if association.is_extinct else "active"
            lines.append(
                f"  {pattern} -> {name}: {association.association_strength:.0%} ({status})"
            )
        return "\n".join(lines) + "\n"

    def save_report(self, output_path: Path) -> Path:
        """Write the consciousness report to a file.

        Args:
            output_path: Destination path.

        Returns:
            The path written.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.generate_consciousness_report())
        logger.info(f"Report saved to {output_path}")
        return output_path


def generate_consciousness_report(engine: PavlovianConsciousnessEngine) -> str:
    """Convenience wrapper around ReportGenerator."""
    return ReportGenerator(engine).generate_consciousness_report()


def generate_conditioning_summary(engine: PavlovianConsciousnessEngine) -> str:
    """Convenience wrapper around ReportGenerator."""
    return ReportGenerator(engine).generate_conditioning_summary()
