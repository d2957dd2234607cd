"""
Stats Aggregator

Recomputes a user's derived statistics from their game history.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

from ..models.user import GameRecord, Number, User
from ..utils.helpers import is_finite_number


def round_half_away_from_zero(value: Number) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def scored_percentages(history: List[GameRecord]) -> List[Number]:
    """
    Percentages that can be aggregated.

    Records loaded from older files may lack a percentage or hold a
    non-numeric one; they count as games played but not towards scores.
    """
    return [record.percentage for record in history if is_finite_number(record.percentage)]


def average_percentage(percentages: List[Number]) -> int:
    total = sum(Decimal(str(p)) for p in percentages)
    return round_half_away_from_zero(total / len(percentages))


class StatsAggregator:
    """The single entry point that rebuilds ``User.stats`` from history."""

    def recompute(self, user: User, new_record: GameRecord):
        """
        Append a game record and refresh the history-derived stats in place.

        Stats are computed over the history including the new record before
        anything on the user changes, so a failure leaves the user untouched.
        The new record must carry a numeric percentage, which keeps the
        average well defined.

        Args:
            user: User whose history grows
            new_record: Completed game to append
        """
        if not is_finite_number(new_record.percentage):
            raise ValueError('new game record needs a numeric percentage')

        history = user.game_history + [new_record]
        percentages = scored_percentages(history)

        games_played = len(history)
        average_score = average_percentage(percentages)
        high_score = max(percentages)

        user.game_history.append(new_record)
        user.stats.games_played = games_played
        user.stats.average_score = average_score
        user.stats.high_score = high_score

    def sync_quizzes_created(self, user: User):
        """Refresh the quiz count after a quiz id was added."""
        user.stats.quizzes_created = len(user.quizzes)
