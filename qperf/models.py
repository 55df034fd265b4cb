"""Data models for the qperf tabulator."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .constants import QUESTION_TYPES


@dataclass(frozen=True)
class EventRecord:
    """One parsed line of a quiz log."""
    tournament: str
    room: str
    round: str
    question: int  # 1-based
    name: str  # quizzer name, or team name for TN events
    team: int
    seat: int
    code: str
    columns: Tuple[str, ...] = ()


@dataclass
class RosterTeam:
    """A team slot inside one round's roster."""
    name: str = ''
    quizzers: List[str] = field(default_factory=list)  # indexed by seat


@dataclass
class RoundGroup:
    """A confirmed round: its roster snapshot and its scoring events."""
    room: str
    round: str
    teams: Dict[int, RosterTeam] = field(default_factory=dict)  # keyed by team number
    records: List[EventRecord] = field(default_factory=list)

    @property
    def key(self) -> str:
        return f'Rm{self.room}Rd{self.round}'


@dataclass
class RoundRecord:
    """Final team scores for one round."""
    room: str
    round: str
    team_names: List[str] = field(default_factory=list)
    team_scores: List[int] = field(default_factory=list)


@dataclass
class ActiveQuizzer:
    """Round-scoped answer counts used for team bonuses and deductions."""
    name: str
    correct: int = 0
    incorrect: int = 0


@dataclass
class QuizzerDirectory:
    """Ordered quizzer -> team affiliations. The first registration wins."""
    entries: List[Tuple[str, str]] = field(default_factory=list)
    _index: Dict[str, int] = field(default_factory=dict, repr=False)

    def register(self, quizzer: str, team: str) -> bool:
        """Add a quizzer; returns False if the name was already registered."""
        if quizzer in self._index:
            return False
        self._index[quizzer] = len(self.entries)
        self.entries.append((quizzer, team))
        return True

    def index_of(self, quizzer: str) -> int:
        """Index of a quizzer, or -1 if never registered."""
        return self._index.get(quizzer, -1)

    def team_of(self, quizzer: str) -> str:
        i = self.index_of(quizzer)
        return self.entries[i][1] if i >= 0 else ''

    def __contains__(self, quizzer: str) -> bool:
        return quizzer in self._index

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class StatsMatrix:
    """Per-quizzer counters, one row per quizzer and one column per question type."""
    attempts: List[List[int]] = field(default_factory=list)
    correct: List[List[int]] = field(default_factory=list)
    bonus_attempts: List[List[int]] = field(default_factory=list)
    bonus: List[List[int]] = field(default_factory=list)

    @classmethod
    def zeros(cls, num_quizzers: int) -> 'StatsMatrix':
        width = len(QUESTION_TYPES)
        return cls(
            attempts=[[0] * width for _ in range(num_quizzers)],
            correct=[[0] * width for _ in range(num_quizzers)],
            bonus_attempts=[[0] * width for _ in range(num_quizzers)],
            bonus=[[0] * width for _ in range(num_quizzers)],
        )

    def row(self, quizzer_index: int, type_index: int) -> Tuple[int, int, int, int]:
        """(attempted, correct, bonuses attempted, bonuses correct) for one cell."""
        return (
            self.attempts[quizzer_index][type_index],
            self.correct[quizzer_index][type_index],
            self.bonus_attempts[quizzer_index][type_index],
            self.bonus[quizzer_index][type_index],
        )

    def __len__(self) -> int:
        return len(self.attempts)


@dataclass
class TeamStanding:
    """A team's line in the final ranking."""
    name: str
    placement: int = 0
    wins: int = 0
    losses: int = 0
    total_score: int = 0
