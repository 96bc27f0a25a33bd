"""Testy data_model.matches."""

from data_model.matches import NO_MATCH, Matched, NoMatch, guard_progress


class TestGuardProgress:
    """Strażnik postępu: Matched bez konsumpcji staje się NoMatch."""

    def test_matched_with_progress_passes_through(self):
        outcome = Matched(extracted_text="A", remaining_text="rest")
        assert guard_progress(outcome, "<x>A</x>rest") is outcome

    def test_matched_without_progress_becomes_no_match(self):
        source = "unchanged"
        outcome = Matched(extracted_text="", remaining_text=source)
        assert guard_progress(outcome, source) is NO_MATCH

    def test_no_match_passes_through(self):
        assert guard_progress(NO_MATCH, "anything") is NO_MATCH


class TestOutcomeTypes:
    def test_outcomes_are_immutable_values(self):
        assert Matched("a", "b") == Matched("a", "b")
        assert NoMatch() == NO_MATCH
