"""
Answer grading for navigation exercises.

Grades a learner's position against the expected one:
- Error report (great circle distance and bearing of the miss)
- Star tier (0-3) from the error as a share of distance traveled
- Tolerance checks for point-placement exercises
- Medals for time trials
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from navcore.geodesy import great_circle
from navcore.geodesy.coordinates import Coordinate
from navcore.geodesy.units import nm_to_km

logger = logging.getLogger(__name__)

MAX_STARS = 3


class Medal(Enum):
    """Time trial medal."""
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    NONE = "none"


@dataclass(frozen=True)
class ScoreThresholds:
    """Upper bounds (percent of distance traveled) for 3, 2 and 1 stars."""
    gold_pct: float = 5.0
    silver_pct: float = 10.0
    bronze_pct: float = 20.0

    def __post_init__(self):
        if not 0 < self.gold_pct < self.silver_pct < self.bronze_pct:
            raise ValueError(
                f"Thresholds must be positive and strictly increasing, got "
                f"({self.gold_pct}, {self.silver_pct}, {self.bronze_pct})"
            )


DEFAULT_THRESHOLDS = ScoreThresholds()


@dataclass(frozen=True)
class ErrorReport:
    """Offset of an answer from the expected position."""
    distance_nm: float
    distance_km: float
    bearing: float  # from expected toward actual, degrees


@dataclass(frozen=True)
class Grade:
    """Error report plus the stars it earned."""
    error: ErrorReport
    stars: int
    distance_traveled_nm: float

    @property
    def error_pct(self) -> float:
        """Error as a percentage of distance traveled (0 for an exact answer)."""
        if self.error.distance_nm == 0:
            return 0.0
        if self.distance_traveled_nm <= 0:
            return float('inf')
        return self.error.distance_nm / self.distance_traveled_nm * 100

    @property
    def passed(self) -> bool:
        return self.stars > 0


@dataclass(frozen=True)
class TimeBonus:
    """Time limits in seconds for each time trial medal."""
    gold_s: float
    silver_s: float
    bronze_s: float


def compute_error(actual: Coordinate, expected: Coordinate) -> ErrorReport:
    """
    Calculate error between two positions.

    Args:
        actual: Position given by the learner
        expected: Correct position

    Returns:
        ErrorReport with great circle distance in nm and km and the bearing
        from the expected position to the actual one
    """
    distance_nm = great_circle.distance(actual, expected)
    return ErrorReport(
        distance_nm=distance_nm,
        distance_km=nm_to_km(distance_nm),
        bearing=great_circle.initial_bearing(expected, actual),
    )


def score_tier(
    error_nm: float,
    distance_traveled_nm: float,
    thresholds: Optional[ScoreThresholds] = None,
) -> int:
    """
    Determine star rating based on error and distance traveled.

    An exact answer always earns 3 stars, even for a zero-length run.
    Otherwise a zero-length run earns nothing, since any error is
    infinitely large relative to it.
    """
    if error_nm == 0:
        return MAX_STARS
    if distance_traveled_nm <= 0:
        logger.debug(f"Non-zero error {error_nm:.3f} nm on a zero-length run")
        return 0

    thresholds = thresholds or DEFAULT_THRESHOLDS
    error_pct = error_nm / distance_traveled_nm * 100

    if error_pct <= thresholds.gold_pct:
        return 3
    elif error_pct <= thresholds.silver_pct:
        return 2
    elif error_pct <= thresholds.bronze_pct:
        return 1
    else:
        return 0


def grade_answer(
    answer: Coordinate,
    expected: Coordinate,
    distance_traveled_nm: float,
    thresholds: Optional[ScoreThresholds] = None,
) -> Grade:
    """Compute the error of an answer and the stars it earns."""
    error = compute_error(answer, expected)
    stars = score_tier(error.distance_nm, distance_traveled_nm, thresholds)
    logger.debug(
        f"Answer {answer} vs expected {expected}: "
        f"{error.distance_nm:.2f} nm off over {distance_traveled_nm:.1f} nm, {stars} star(s)"
    )
    return Grade(error=error, stars=stars, distance_traveled_nm=distance_traveled_nm)


def grade_batch(
    submissions: Iterable[Tuple[Coordinate, Coordinate, float]],
    thresholds: Optional[ScoreThresholds] = None,
) -> List[Grade]:
    """
    Grade several (answer, expected, distance_traveled_nm) triples.

    Used for multi-part exercises such as time trials. Each grade is
    independent of the others.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    return [
        grade_answer(answer, expected, traveled, thresholds)
        for answer, expected, traveled in submissions
    ]


def within_tolerance(point: Coordinate, target: Coordinate, tolerance_nm: float) -> bool:
    """True if point lies strictly closer than tolerance_nm to target."""
    return great_circle.distance(point, target) < tolerance_nm


def time_trial_medal(elapsed_s: float, bonus: TimeBonus) -> Tuple[Medal, int]:
    """
    Medal and stars for a completed time trial.

    Finishing always earns at least one star; medals need the time limits.
    """
    if elapsed_s <= bonus.gold_s:
        return Medal.GOLD, 3
    elif elapsed_s <= bonus.silver_s:
        return Medal.SILVER, 2
    elif elapsed_s <= bonus.bronze_s:
        return Medal.BRONZE, 1
    else:
        return Medal.NONE, 1
