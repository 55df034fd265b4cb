"""Validation functions for question sets and tabulation results."""

from .constants import (
    MAX_QUESTIONS_PER_ROUND,
    MEMORY_INDEX,
    MEMORY_VERSE_TYPES,
    QUESTION_TYPE_INDICES,
    QUESTION_TYPES,
)
from .models import QuizzerDirectory, RoundRecord, StatsMatrix
from .question_sets import unknown_question_types


def validate_question_sets(question_types: dict[str, list[str]]) -> list[str]:
    """
    Check a QuestionTypeMap before tabulation.

    Checks:
    - Every code is a known question type
    - No round has more than 20 questions

    Args:
        question_types: Round id -> question-type codes

    Returns:
        List of warning messages (empty if valid)
    """
    warnings = []

    for round_id, bad in unknown_question_types(question_types).items():
        warnings.append(
            f'Question set {round_id} has unknown question types '
            f'{", ".join(sorted(set(bad)))} (counted as G)'
        )

    for round_id, types in question_types.items():
        if len(types) > MAX_QUESTIONS_PER_ROUND:
            warnings.append(
                f'Question set {round_id} has {len(types)} questions '
                f'(max {MAX_QUESTIONS_PER_ROUND})'
            )

    return warnings


def validate_stats(directory: QuizzerDirectory, stats: StatsMatrix) -> list[str]:
    """
    Check that accumulated statistics are internally consistent.

    Checks:
    - One row per quizzer, one column per question type
    - No negative counters
    - Correct never exceeds attempted (same for bonuses)
    - The memory-verse column equals the sum of Q, R and V

    Returns:
        List of error messages (empty if consistent)
    """
    errors = []

    tables = {
        'attempts': stats.attempts,
        'correct': stats.correct,
        'bonus attempts': stats.bonus_attempts,
        'bonus': stats.bonus,
    }
    for table_name, table in tables.items():
        if len(table) != len(directory):
            errors.append(
                f'{table_name} has {len(table)} rows for {len(directory)} quizzers'
            )
            return errors
        for row in table:
            if len(row) != len(QUESTION_TYPES):
                errors.append(f'{table_name} has a row with {len(row)} question types')
                return errors

    memory_slots = [QUESTION_TYPE_INDICES[t] for t in sorted(MEMORY_VERSE_TYPES)]

    for i, (quizzer, _team) in enumerate(directory.entries):
        for table_name, table in tables.items():
            if any(value < 0 for value in table[i]):
                errors.append(f'{quizzer} has a negative {table_name} count')
            if table[i][MEMORY_INDEX] != sum(table[i][j] for j in memory_slots):
                errors.append(f'{quizzer} {table_name} memory-verse total does not match Q+R+V')

        for j, qtype in enumerate(QUESTION_TYPES):
            if stats.correct[i][j] > stats.attempts[i][j]:
                errors.append(f'{quizzer} has more {qtype} correct than attempted')
            if stats.bonus[i][j] > stats.bonus_attempts[i][j]:
                errors.append(f'{quizzer} has more {qtype} bonuses correct than attempted')

    return errors


def validate_round_record(round_record: RoundRecord) -> list[str]:
    """
    Check that a round's team scores are reasonable.

    Sanity checks:
    - One score per team
    - Scores are multiples of 10 (every scoring rule is)
    - At least one named team

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    label = f'Room {round_record.room} round {round_record.round}'

    if len(round_record.team_names) != len(round_record.team_scores):
        warnings.append(
            f'{label} has {len(round_record.team_names)} teams but '
            f'{len(round_record.team_scores)} scores'
        )
        return warnings

    if not any(round_record.team_names):
        warnings.append(f'{label} has no named teams')

    for name, score in zip(round_record.team_names, round_record.team_scores):
        if score % 10:
            warnings.append(f'{label}: {name or "(unnamed)"} scored {score} (not a multiple of 10)')

    return warnings


def validate_all(
    directory: QuizzerDirectory,
    stats: StatsMatrix,
    rounds: list[RoundRecord],
) -> tuple[list[str], list[str]]:
    """
    Validate all results of a run.

    Returns:
        Tuple of (errors, warnings)
        - errors: Internal inconsistencies in the statistics
        - warnings: Round results to review
    """
    errors = validate_stats(directory, stats)
    warnings: list[str] = []
    for round_record in rounds:
        warnings.extend(validate_round_record(round_record))
    return errors, warnings
