from dataclasses import dataclass, field


@dataclass(frozen=True)
class DetectionThresholds:
    """Point values and cut-offs for the heuristic detector.

    Defaults are empirical and uncalibrated; tune through settings.
    """

    min_text_length: int = 50
    marker_points: int = 6
    marker_cap: int = 70
    min_sentences: int = 5
    cv_strong_threshold: float = 0.38
    cv_strong_points: int = 40
    cv_weak_threshold: float = 0.48
    cv_weak_points: int = 25
    min_words: int = 50
    ttr_strong_threshold: float = 0.30
    ttr_strong_points: int = 40
    ttr_weak_threshold: float = 0.40
    ttr_weak_points: int = 25
    ttr_weak_max_words: int = 800
    human_below: int = 25
    generated_above: int = 65
    max_score: int = 99


@dataclass
class AIDetectionResult:
    """Bounded originality-risk score and a trace of the heuristics that fired."""

    score: int
    details: list[str] = field(default_factory=list)
