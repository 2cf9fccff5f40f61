from unittest.mock import MagicMock

from originality.detection.ai_detector import HeuristicAIDetector
from originality.detection.models import DetectionThresholds

FILLER = "the committee reviewed the proposal and approved the budget for next year"
MARKERS = (
    "in conclusion",
    "delve into",
    "comprehensive overview",
    "significant impact",
    "paradigm shift",
    "pivotal role",
    "holistic approach",
    "rich tapestry",
    "driving force",
    "game changer",
    "pave the way",
    "uncharted territory",
    "stark contrast",
    "speaks volumes",
    "remains to be seen",
)


def _sentence(prefix: str = "", words: int = 12) -> str:
    """A sentence of exactly ``words`` words starting with ``prefix``."""
    head = prefix.split()
    tail = FILLER.split()[: words - len(head)]
    return " ".join(head + tail).capitalize() + "."


def _formulaic_text(sentences: int = 75) -> str:
    """Uniform sentences containing every marker phrase, well over 800 words."""
    parts = [_sentence(marker) for marker in MARKERS]
    parts += [_sentence() for _ in range(sentences - len(MARKERS))]
    return " ".join(parts)


class TestHeuristicAIDetector:
    def test_short_text_scores_zero(self) -> None:
        result = HeuristicAIDetector().detect("Too short.")
        assert result.score == 0
        assert result.details == ["Text too short for analysis"]

    def test_empty_text_scores_zero(self) -> None:
        assert HeuristicAIDetector().detect("").score == 0

    def test_varied_prose_is_likely_human(self, human_text: str) -> None:
        result = HeuristicAIDetector().detect(human_text)
        assert result.score < 25
        assert result.details[-1] == "Likely human-written"

    def test_formulaic_text_hits_the_ceiling(self) -> None:
        text = _formulaic_text()
        assert len(text.split()) > 800

        result = HeuristicAIDetector().detect(text)

        assert result.score == 99
        assert any("common AI-typical phrases (+70%)" in d for d in result.details)
        assert any("Robotic structure" in d for d in result.details)
        assert result.details[-1] == "High probability of AI generation"

    def test_marker_points_are_capped(self) -> None:
        detector = HeuristicAIDetector()
        text = " ".join(_sentence(marker, words=len(marker.split()) + 1) for marker in MARKERS)
        assert detector.count_marker_phrases(text) >= 12
        result = detector.detect(text)
        marker_details = [d for d in result.details if "AI-typical phrases" in d]
        assert marker_details and marker_details[0].endswith("(+70%)")

    def test_marker_phrases_are_case_insensitive(self) -> None:
        assert HeuristicAIDetector().count_marker_phrases("IN CONCLUSION, we Delve Into it") == 2

    def test_adding_markers_never_lowers_the_score(self, human_text: str) -> None:
        detector = HeuristicAIDetector()
        base = detector.detect(human_text).score
        boosted = detector.detect(human_text + " Moreover, this is a testament to resilience.")
        assert boosted.score >= base

    def test_uniform_sentences_score_points(self) -> None:
        text = " ".join(_sentence(words=8) for _ in range(7))
        result = HeuristicAIDetector().detect(text)
        assert any("Robotic structure +40%" in d for d in result.details)

    def test_five_sentences_skip_uniformity(self) -> None:
        text = " ".join(_sentence(words=12) for _ in range(5))
        result = HeuristicAIDetector().detect(text)
        assert not any("sentence" in d.lower() for d in result.details)

    def test_repetitive_vocabulary_scores_points(self) -> None:
        text = " ".join(["alpha beta gamma."] * 30)
        result = HeuristicAIDetector().detect(text)
        assert any("Extremely repetitive vocabulary (+40%)" in d for d in result.details)

    def test_score_is_always_bounded(self, human_text: str) -> None:
        detector = HeuristicAIDetector()
        for text in ("", "x" * 60, human_text, _formulaic_text(), "word. " * 500):
            assert 0 <= detector.detect(text).score <= 99

    def test_thresholds_are_configurable(self) -> None:
        detector = HeuristicAIDetector(DetectionThresholds(marker_points=1, marker_cap=1))
        text = " ".join(_sentence(marker, words=len(marker.split()) + 1) for marker in MARKERS)
        result = detector.detect(text)
        assert any(d.endswith("(+1%)") for d in result.details)

    def test_from_settings_reads_thresholds(self) -> None:
        settings = MagicMock()
        settings.ai_min_text_length = 10_000
        detector = HeuristicAIDetector.from_settings(settings)
        assert detector.detect("a" * 500).details == ["Text too short for analysis"]
