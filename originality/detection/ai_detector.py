"""Surface-statistics heuristic for machine-generated prose.

Three independent signals contribute capped points:

1. Marker phrases: formulaic expressions common in generated text.
2. Sentence-length uniformity: generated text varies sentence length less
   (low coefficient of variation).
3. Vocabulary repetition: a low type-token ratio.

The score is NOT a calibrated probability. It is an advisory indicator meant
to prompt human review, and must be presented to callers as such.
"""

import re
import statistics
from typing import ClassVar

from originality.config.settings import Settings
from originality.detection.markers import MARKER_PHRASES
from originality.detection.models import AIDetectionResult, DetectionThresholds


class HeuristicAIDetector:
    """Stateless scorer over a block of combined article text."""

    _SENTENCE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^.!?]+[.!?]+")
    _WORD_RE: ClassVar[re.Pattern[str]] = re.compile(r"[a-z]+")

    def __init__(
        self,
        thresholds: DetectionThresholds | None = None,
        phrases: tuple[str, ...] = MARKER_PHRASES,
    ) -> None:
        self._t = thresholds or DetectionThresholds()
        self._phrases = phrases

    @classmethod
    def from_settings(cls, settings: Settings) -> "HeuristicAIDetector":
        thresholds = DetectionThresholds(
            min_text_length=settings.ai_min_text_length,
            marker_points=settings.ai_marker_points,
            marker_cap=settings.ai_marker_cap,
            min_sentences=settings.ai_min_sentences,
            cv_strong_threshold=settings.ai_cv_strong_threshold,
            cv_strong_points=settings.ai_cv_strong_points,
            cv_weak_threshold=settings.ai_cv_weak_threshold,
            cv_weak_points=settings.ai_cv_weak_points,
            min_words=settings.ai_min_words,
            ttr_strong_threshold=settings.ai_ttr_strong_threshold,
            ttr_strong_points=settings.ai_ttr_strong_points,
            ttr_weak_threshold=settings.ai_ttr_weak_threshold,
            ttr_weak_points=settings.ai_ttr_weak_points,
            ttr_weak_max_words=settings.ai_ttr_weak_max_words,
            human_below=settings.ai_human_below,
            generated_above=settings.ai_generated_above,
        )
        return cls(thresholds)

    def detect(self, text: str) -> AIDetectionResult:
        if not text or len(text) < self._t.min_text_length:
            return AIDetectionResult(score=0, details=["Text too short for analysis"])

        details: list[str] = []
        score = 0
        score += self._score_marker_phrases(text, details)
        score += self._score_sentence_uniformity(text, details)
        score += self._score_vocabulary_repetition(text, details)

        score = min(self._t.max_score, max(0, score))
        if score < self._t.human_below:
            details.append("Likely human-written")
        elif score > self._t.generated_above:
            details.append("High probability of AI generation")
        return AIDetectionResult(score=score, details=details)

    def count_marker_phrases(self, text: str) -> int:
        lowered = text.lower()
        return sum(1 for phrase in self._phrases if phrase in lowered)

    def _score_marker_phrases(self, text: str, details: list[str]) -> int:
        hits = self.count_marker_phrases(text)
        if hits == 0:
            return 0
        points = min(self._t.marker_cap, hits * self._t.marker_points)
        details.append(f"Found {hits} common AI-typical phrases (+{points}%)")
        return points

    def _score_sentence_uniformity(self, text: str, details: list[str]) -> int:
        sentences = self._SENTENCE_RE.findall(text)
        if len(sentences) <= self._t.min_sentences:
            return 0
        lengths = [len(sentence.split()) for sentence in sentences]
        mean = statistics.fmean(lengths)
        if mean == 0:
            return 0
        cv = statistics.pstdev(lengths) / mean
        if cv < self._t.cv_strong_threshold:
            details.append(
                f"Extremely low sentence length variance (Robotic structure +{self._t.cv_strong_points}%)"
            )
            return self._t.cv_strong_points
        if cv < self._t.cv_weak_threshold:
            details.append(f"Low sentence variance (+{self._t.cv_weak_points}%)")
            return self._t.cv_weak_points
        return 0

    def _score_vocabulary_repetition(self, text: str, details: list[str]) -> int:
        words = self._WORD_RE.findall(text.lower())
        if len(words) <= self._t.min_words:
            return 0
        ttr = len(set(words)) / len(words)
        if ttr < self._t.ttr_strong_threshold:
            details.append(f"Extremely repetitive vocabulary (+{self._t.ttr_strong_points}%)")
            return self._t.ttr_strong_points
        if ttr < self._t.ttr_weak_threshold and len(words) < self._t.ttr_weak_max_words:
            details.append(f"Low vocabulary diversity (+{self._t.ttr_weak_points}%)")
            return self._t.ttr_weak_points
        return 0
