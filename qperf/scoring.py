"""Team scoring rules for a single round.

Scoring:
    - Correct answer: 20 points
    - Correct bonus (answered after the other team errs): 10 points
    - Quiz-out: 10 points when a quizzer reaches 4 correct with no errors
    - 3rd/4th person: 10 points when a 3rd or 4th quizzer on the team
      answers their first question correctly
    - Error-out: -10 points on a quizzer's 3rd error
    - Errors on question 16 and later: -10 points each
"""

import logging
from typing import Dict, Optional

from .constants import (
    BONUS_POINTS,
    CORRECT_POINTS,
    ERROR_OUT_COUNT,
    ERROR_PENALTY,
    PENALTY_QUESTION,
    PERSON_BONUS,
    PERSON_BONUS_THRESHOLD,
    QUIZ_OUT_BONUS,
    QUIZ_OUT_COUNT,
)
from .models import ActiveQuizzer

logger = logging.getLogger('qperf.scoring')


class TeamScoreSheet:
    """A team's running score and active quizzers within one round."""

    def __init__(self, name: str):
        self.name = name
        self.score = 0
        self.active: list[ActiveQuizzer] = []

    def find(self, quizzer: str) -> Optional[ActiveQuizzer]:
        for entry in self.active:
            if entry.name == quizzer:
                return entry
        return None

    def activate(self, quizzer: str) -> ActiveQuizzer:
        """Return the quizzer's entry, adding a zeroed one if absent."""
        entry = self.find(quizzer)
        if entry is None:
            entry = ActiveQuizzer(name=quizzer)
            self.active.append(entry)
        return entry

    def scoring_quizzers(self) -> int:
        """Number of active quizzers with at least one correct answer."""
        return sum(1 for entry in self.active if entry.correct > 0)

    def record_correct(self, quizzer: str) -> Dict[str, int]:
        """
        Score a correct answer.

        Returns:
            Breakdown of the points added, by rule
        """
        breakdown = {'correct': CORRECT_POINTS}
        entry = self.activate(quizzer)
        entry.correct += 1

        if entry.correct == QUIZ_OUT_COUNT and entry.incorrect == 0:
            breakdown['quiz_out'] = QUIZ_OUT_BONUS

        if entry.correct == 1 and self.scoring_quizzers() >= PERSON_BONUS_THRESHOLD:
            breakdown['person_bonus'] = PERSON_BONUS

        self.score += sum(breakdown.values())
        return breakdown

    def record_error(self, quizzer: str, question: int) -> Dict[str, int]:
        """
        Score an incorrect answer to question number `question` (1-based).

        Returns:
            Breakdown of the points deducted (empty when no penalty applies)
        """
        breakdown = {}
        entry = self.activate(quizzer)
        entry.incorrect += 1

        if entry.incorrect == ERROR_OUT_COUNT:
            breakdown['error_out'] = -ERROR_PENALTY
        elif question >= PENALTY_QUESTION:
            breakdown['late_error'] = -ERROR_PENALTY

        self.score += sum(breakdown.values())
        return breakdown

    def record_bonus(self) -> Dict[str, int]:
        """Score a correct bonus."""
        self.score += BONUS_POINTS
        return {'bonus': BONUS_POINTS}


class RoundScoreboard:
    """Score sheets for every team in a round, keyed by team number."""

    def __init__(self, team_names: Dict[int, str]):
        self.sheets: Dict[int, TeamScoreSheet] = {
            number: TeamScoreSheet(name) for number, name in team_names.items()
        }

    def has_team(self, team_number: int) -> bool:
        return team_number in self.sheets

    def add_team(self, team_number: int, name: str) -> TeamScoreSheet:
        """Create (or replace) the sheet at team_number."""
        sheet = TeamScoreSheet(name)
        self.sheets[team_number] = sheet
        return sheet

    def is_active(self, quizzer: str) -> bool:
        """Whether the quizzer has an active entry on any team."""
        return any(sheet.find(quizzer) for sheet in self.sheets.values())

    def correct(self, team_number: int, quizzer: str) -> Dict[str, int]:
        return self.sheets[team_number].record_correct(quizzer)

    def error(self, team_number: int, quizzer: str, question: int) -> Dict[str, int]:
        return self.sheets[team_number].record_error(quizzer, question)

    def bonus(self, team_number: int, quizzer: str) -> Dict[str, int]:
        """Score a correct bonus; a quizzer not yet active anywhere joins this team."""
        sheet = self.sheets[team_number]
        breakdown = sheet.record_bonus()
        if not self.is_active(quizzer):
            sheet.active.append(ActiveQuizzer(name=quizzer))
        return breakdown

    def team_names(self) -> list[str]:
        return [self.sheets[n].name for n in sorted(self.sheets)]

    def team_scores(self) -> list[int]:
        return [self.sheets[n].score for n in sorted(self.sheets)]
