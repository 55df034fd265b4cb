"""Delimited text rendering of individual statistics and team results."""

from typing import Iterable, Sequence

from .constants import (
    QUESTION_TYPE_INDICES,
    QUESTION_TYPES,
    RANKING_EXPLANATION,
    STAT_COLUMNS,
    TEAM_RESULTS_HEADER,
)
from .models import QuizzerDirectory, RoundRecord, StatsMatrix, TeamStanding
from .utils import strip_marker


def selected_types(question_types: Sequence[str]) -> list[str]:
    """Requested question types in report order. An empty selection means all."""
    if not question_types:
        return list(QUESTION_TYPES)
    return [qtype for qtype in QUESTION_TYPES if qtype in question_types]


def individual_header(question_types: Sequence[str]) -> list[str]:
    header = ['Quizzer', 'Team']
    for qtype in selected_types(question_types):
        header.extend(f'{qtype} {column}' for column in STAT_COLUMNS)
    return header


def individual_rows(
    directory: QuizzerDirectory,
    stats: StatsMatrix,
    question_types: Sequence[str],
) -> list[list[str]]:
    """One row per quizzer, in directory order."""
    types = selected_types(question_types)
    rows = []
    for i, (quizzer, team) in enumerate(directory.entries):
        row = [strip_marker(quizzer), strip_marker(team)]
        for qtype in types:
            row.extend(str(value) for value in stats.row(i, QUESTION_TYPE_INDICES[qtype]))
        rows.append(row)
    return rows


def standings_rows(standings: Iterable[TeamStanding]) -> list[list[str]]:
    return [
        [
            strip_marker(s.name),
            str(s.placement),
            str(s.wins),
            str(s.losses),
            str(s.total_score),
        ]
        for s in standings
    ]


def format_individual_results(
    directory: QuizzerDirectory,
    stats: StatsMatrix,
    question_types: Sequence[str] = (),
    delimiter: str = ',',
) -> str:
    """
    Render the per-quizzer statistics table.

    Columns are quizzer, team, then attempted/correct/bonuses attempted/
    bonuses correct for each selected question type.
    """
    lines = [delimiter.join(individual_header(question_types))]
    lines.extend(delimiter.join(row) for row in individual_rows(directory, stats, question_types))
    return '\n'.join(lines) + '\n'


def format_round_results(rounds: Iterable[RoundRecord], delimiter: str = ',') -> str:
    """Render each round's team scores."""
    result = 'Individual Round Results\n\n'
    for round_record in rounds:
        result += f'Room: {round_record.room}{delimiter} Round: {round_record.round}\n'
        for name, score in zip(round_record.team_names, round_record.team_scores):
            result += f'{strip_marker(name)}{delimiter} {score}\n'
        result += '\n'
    return result + '\n'


def format_team_results(
    standings: Iterable[TeamStanding],
    rounds: Iterable[RoundRecord] = (),
    delimiter: str = ',',
    display_rounds: bool = False,
) -> str:
    """
    Render the final ranking, optionally preceded by per-round scores.
    """
    result = format_round_results(rounds, delimiter) if display_rounds else ''
    result += 'Team Results\n\n'
    result += RANKING_EXPLANATION + '\n\n'
    result += delimiter.join(TEAM_RESULTS_HEADER) + '\n'
    for row in standings_rows(standings):
        result += delimiter.join(row) + '\n'
    return result
