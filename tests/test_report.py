"""Tests for text report generation."""

from __future__ import annotations

from pavlovian_agent.report import (
    generate_conditioning_summary,
    generate_consciousness_report,
    ReportGenerator,
)


class TestConsciousnessReport:
    """Tests for the multi-section consciousness report."""

    def test_sections_present(self, engine):
        report = generate_consciousness_report(engine)

        assert report.startswith("=" * 70)
        assert "PAVLOVIAN CONSCIOUSNESS REPORT" in report
        assert "DRIVE STATES:" in report
        assert "TOP ASSOCIATIONS (by strength):" in report
        assert "ATTENTION: capacity=100%, threshold=0.30" in report

    def test_includes_state_description(self, engine):
        engine.process_input("Help! I'm stuck")
        report = generate_consciousness_report(engine)

        assert engine.get_current_state().describe() in report
        assert "Spotlight: distress" in report

    def test_lists_drives_by_level(self, engine):
        report = generate_consciousness_report(engine)
        assert report.index("curiosity") < report.index("harmony")

    def test_top_associations_strongest_first(self, engine):
        report = generate_consciousness_report(engine)
        assert "✓ distress → empathy (90%, reinforced 0x)" in report
        assert report.index("distress → empathy") < report.index("praise → pleasure")

    def test_extinct_drops_out_of_top(self, engine):
        for _ in range(30):
            engine.extinguish("distress", "empathy", 5.0)
        report = generate_consciousness_report(engine)
        assert "distress → empathy" not in report

    def test_empty_engine(self, bare_engine):
        report = generate_consciousness_report(bare_engine)
        assert "(none)" in report


class TestConditioningSummary:
    """Tests for the compact conditioning summary."""

    def test_format(self, engine):
        summary = generate_conditioning_summary(engine)
        lines = summary.splitlines()

        assert lines[0] == "Conditioned Associations:"
        assert lines[1] == "  distress -> empathy: 90% (active)"
        assert summary.endswith("\n")

    def test_extinct_status(self, engine):
        for _ in range(30):
            engine.extinguish("praise", "pleasure", 5.0)
        summary = generate_conditioning_summary(engine)
        assert "praise -> pleasure: 0% (extinct)" in summary

    def test_limited_to_top_ten(self, engine):
        for i in range(10):
            engine.add_conditioned_association(f"cue{i}", "pleasure", 0.2)
        summary = generate_conditioning_summary(engine)
        assert len(summary.splitlines()) == 11


class TestReportGenerator:
    """Tests for saving reports."""

    def test_save_report(self, engine, tmp_path):
        path = tmp_path / "reports" / "consciousness.txt"

        written = ReportGenerator(engine).save_report(path)

        assert written == path
        assert "PAVLOVIAN CONSCIOUSNESS REPORT" in path.read_text(encoding="utf-8")
