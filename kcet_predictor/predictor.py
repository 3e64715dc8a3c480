"""
KCET rank estimation.

Pure functions over the constant tables in :mod:`kcet_predictor.constants`.
Nothing here touches the network, the filesystem or shared mutable state.
"""

import logging
import math
import operator
from numbers import Real
from typing import Callable, List, Optional, Sequence, Tuple

from .constants import (
    BOTTOM_TIER,
    CALIBRATION_TABLE,
    COLLEGE_SUGGESTIONS,
    COMPETITION_LEVELS,
    CONFIDENCE_SPREAD,
    CUTOFF_ESTIMATES,
    DEFAULT_CATEGORY,
    ELITE_TIER,
    EXAM_MAX_SCORE,
    EXAM_WEIGHT,
    FALLBACK_SUGGESTION,
    HIGHEST_IMPROVEMENT_POTENTIAL,
    IMPROVEMENT_POTENTIAL,
    INVALID_MARKS_MESSAGE,
    LOWEST_COMPETITION_LEVEL,
    LOWEST_PERCENTILE_LABEL,
    LOWEST_RANK_ANALYSIS,
    LOWEST_RANK_BAND,
    PERCENTILE_LABELS,
    PUC_WEIGHT,
    RANK_ANALYSIS,
    RANK_BANDS,
    RANK_GAP_BANDS,
    TOTAL_CANDIDATES,
    CalibrationPoint,
)
from .models import CollegeSuggestion, CutoffEstimate, RankAnalysis, RankPrediction

logger = logging.getLogger(__name__)

class InvalidInputError(ValueError):
    """Raised when the composite score is not a number in [0, 100]."""

def first_match(
    ladder: Sequence[Tuple[float, str]],
    value: float,
    matches: Callable[[float, float], bool],
    default: str
) -> str:
    """
    Walk an ordered (bound, label) ladder and return the first label
    whose bound satisfies ``matches(value, bound)``.

    Args:
        ladder: Ordered (bound, label) pairs
        value: Value being classified
        matches: Comparator, e.g. ``operator.le`` for upper bounds
        default: Label returned when no bound matches

    Returns:
        str: Matching label
    """
    for bound, label in ladder:
        if matches(value, bound):
            return label
    return default

def is_real_number(value) -> bool:
    # bool is an int subclass but never a score
    return isinstance(value, Real) and not isinstance(value, bool)

def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; ranks round .5 upwards
    return int(math.floor(value + 0.5))

def validate_calibration_table(table: Sequence[CalibrationPoint]) -> None:
    """Raise ValueError unless scores strictly fall while ranks strictly rise."""
    if len(table) < 2:
        raise ValueError("Calibration table needs at least two points")
    for current, following in zip(table, table[1:]):
        if not (following.score < current.score and following.rank > current.rank):
            raise ValueError(
                f"Calibration table is not monotonic at {current} -> {following}"
            )

validate_calibration_table(CALIBRATION_TABLE)

def compute_composite(exam_score: float, puc_score: float) -> float:
    """
    Combine the KCET and PUC scores into a 0-100 composite.

    Raises:
        InvalidInputError: If the composite is not a finite number in [0, 100]
    """
    if not is_real_number(exam_score) or not is_real_number(puc_score):
        raise InvalidInputError(INVALID_MARKS_MESSAGE)
    exam_percentage = (exam_score / EXAM_MAX_SCORE) * 100
    composite = EXAM_WEIGHT * exam_percentage + PUC_WEIGHT * puc_score

    if math.isnan(composite) or composite < 0 or composite > 100:
        raise InvalidInputError(INVALID_MARKS_MESSAGE)
    return composite

def _with_spread(medium: int, composite: float) -> RankPrediction:
    return RankPrediction(
        low=round_half_up(medium * (1 - CONFIDENCE_SPREAD)),
        medium=medium,
        high=round_half_up(medium * (1 + CONFIDENCE_SPREAD)),
        composite=composite,
        percentile=calculate_percentile(medium),
        rank_band=get_rank_band(medium),
        competition_level=get_competition_level(composite),
    )

def _interpolate(composite: float, table: Sequence[CalibrationPoint]) -> Optional[float]:
    for current, following in zip(table, table[1:]):
        if following.score <= composite <= current.score:
            score_diff = current.score - following.score
            rank_diff = following.rank - current.rank
            score_offset = current.score - composite
            return current.rank + (score_offset / score_diff) * rank_diff
    return None

def _nearest_rank(composite: float, table: Sequence[CalibrationPoint]) -> int:
    closest = table[0]
    min_diff = abs(composite - closest.score)
    for point in table[1:]:
        diff = abs(composite - point.score)
        if diff < min_diff:
            min_diff = diff
            closest = point
    return round_half_up(closest.rank)

def estimate_rank(
    composite: float,
    table: Sequence[CalibrationPoint] = CALIBRATION_TABLE
) -> RankPrediction:
    """
    Estimate a rank from an already computed composite score.

    Args:
        composite (float): Composite score in [0, 100]
        table: Calibration points ordered by descending score

    Returns:
        RankPrediction: Rank estimate with descriptive labels
    """
    if not is_real_number(composite) or math.isnan(composite) or not 0 <= composite <= 100:
        raise InvalidInputError(INVALID_MARKS_MESSAGE)

    if composite >= table[0].score:
        return RankPrediction(composite=composite, **ELITE_TIER)
    if composite <= table[-1].score:
        return RankPrediction(composite=composite, **BOTTOM_TIER)

    interpolated = _interpolate(composite, table)
    if interpolated is not None:
        return _with_spread(round_half_up(interpolated), composite)

    logger.warning(
        f"No calibration interval covers composite {composite}; "
        "falling back to nearest calibration point"
    )
    return _with_spread(_nearest_rank(composite, table), composite)

def predict_rank(exam_score: float, puc_score: float) -> RankPrediction:
    """
    Predict a KCET rank from the KCET and PUC scores

    Args:
        exam_score (float): KCET raw score out of 180
        puc_score (float): PUC percentage

    Returns:
        RankPrediction: low/medium/high ranks, composite and labels

    Raises:
        InvalidInputError: If the composite score falls outside [0, 100]
    """
    composite = compute_composite(exam_score, puc_score)
    prediction = estimate_rank(composite)
    logger.debug(f"Predicted rank {prediction.medium} for composite {composite:.2f}")
    return prediction

def get_rank_band(rank: int) -> str:
    return first_match(RANK_BANDS, rank, operator.le, LOWEST_RANK_BAND)

def get_competition_level(composite: float) -> str:
    return first_match(COMPETITION_LEVELS, composite, operator.ge, LOWEST_COMPETITION_LEVEL)

def get_percentile(composite: float) -> str:
    """Coarse percentile range for a composite score."""
    return first_match(PERCENTILE_LABELS, composite, operator.ge, LOWEST_PERCENTILE_LABEL)

def calculate_percentile(rank: int) -> str:
    """Share of the candidate pool ranked below ``rank``, e.g. ``'99.62%'``."""
    percentile = (TOTAL_CANDIDATES - rank) / TOTAL_CANDIDATES * 100
    return f"{percentile:.2f}%"

def get_rank_analysis(rank: int) -> str:
    return first_match(RANK_ANALYSIS, rank, operator.le, LOWEST_RANK_ANALYSIS)

def get_rank_gap_analysis(composite: float) -> RankAnalysis:
    """
    Describe rank spread and candidate density around a composite score

    Args:
        composite (float): Composite score

    Returns:
        RankAnalysis: Rank gap, candidates per percent, competition level
            and improvement potential
    """
    band = next(
        (band for band in RANK_GAP_BANDS if band.low <= composite <= band.high),
        RANK_GAP_BANDS[-1]
    )
    return RankAnalysis(
        rank_gap=band.rank_range,
        candidates_per_percent=band.candidates_per_1_percent,
        competition_level=get_competition_level(composite),
        improvement_potential=first_match(
            IMPROVEMENT_POTENTIAL, composite, operator.ge, HIGHEST_IMPROVEMENT_POTENTIAL
        ),
    )

def get_college_suggestions(rank: int, category: str = DEFAULT_CATEGORY) -> CollegeSuggestion:
    """
    Suggest colleges and branches reachable at ``rank`` for a category.
    Unknown categories use the general table.
    """
    key = category.lower() if isinstance(category, str) else DEFAULT_CATEGORY
    rows = COLLEGE_SUGGESTIONS.get(key, COLLEGE_SUGGESTIONS[DEFAULT_CATEGORY])
    row = next((row for row in rows if rank <= row.rank), FALLBACK_SUGGESTION)
    return CollegeSuggestion(name=row.name, branch=row.branch)

def get_cutoff_estimates() -> List[CutoffEstimate]:
    return [
        CutoffEstimate(target_rank=target_rank, expected_aggregate=aggregate)
        for target_rank, aggregate in CUTOFF_ESTIMATES
    ]
