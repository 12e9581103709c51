"""End-of-shift performance summary."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _average(total: float, count: int) -> float:
    """Average of half-minute delay units, following IEEE rules on a zero count."""
    divisor = 2 * count
    if divisor:
        return total / divisor
    if total == 0:
        return math.nan
    return math.copysign(math.inf, total)


def rating(average_delay: float, any_trains: bool) -> str | None:
    """Performance rating text for an average delay in minutes.

    Returns None when the delay falls in no band (negative or NaN).
    """
    if not any_trains:
        return "Performance rating: Atrocious"
    if average_delay == 0:
        return "Performance rating: Outstanding!"
    if 0 < average_delay <= 5:
        return "Performance rating: Excellent"
    if 5 < average_delay <= 10:
        return "Performance rating: Competent"
    if 10 < average_delay <= 20:
        return "Performance rating: Unsatisfactory"
    if average_delay > 20:
        return "Performance rating: Disastrous"
    return None


@dataclass(frozen=True)
class ShiftReport:
    """Averages and rating reached over one shift."""

    shift_length: int
    arrival_count: int
    departure_count: int
    average_arrival_delay: float
    average_departure_delay: float
    average_delay: float
    rating: str | None

    def lines(self) -> list[str]:
        """The text lines shown in the finish dialog."""
        result = [
            f"During your {self.shift_length} hour shift you achieved:",
            f"Average arrival delay: {self.average_arrival_delay:.2f} mins "
            f"({self.arrival_count} trains)",
            f"Average departure delay: {self.average_departure_delay:.2f} mins "
            f"({self.departure_count} trains)",
        ]
        if self.rating is not None:
            result.append(self.rating)
        return result


def summarise(
    shift_length: int,
    arrival_delay: float,
    arrival_count: int,
    departure_delay: float,
    departure_count: int,
) -> ShiftReport:
    """Build a report from total delays, counted in half-minutes."""
    arrival_average = _average(arrival_delay, arrival_count)
    departure_average = _average(departure_delay, departure_count)
    overall = (arrival_average + departure_average) / 2
    any_trains = arrival_count > 0 or departure_count > 0
    return ShiftReport(
        shift_length=shift_length,
        arrival_count=arrival_count,
        departure_count=departure_count,
        average_arrival_delay=arrival_average,
        average_departure_delay=departure_average,
        average_delay=overall,
        rating=rating(overall, any_trains),
    )