"""Statistics accumulation over confirmed rounds."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .constants import (
    BONUS_CORRECT,
    BONUS_ERROR,
    CORRECT,
    DEFAULT_QUESTION_TYPE,
    ERROR,
    MEMORY_INDEX,
    MEMORY_VERSE_TYPES,
    QUESTION_TYPE_INDICES,
    TEAM_NAME,
)
from .models import EventRecord, QuizzerDirectory, RoundGroup, RoundRecord, StatsMatrix
from .scoring import RoundScoreboard

logger = logging.getLogger('qperf.accumulator')


@dataclass
class AccumulatedStats:
    """Everything the accumulator produces for a run."""
    stats: StatsMatrix
    rounds: list[RoundRecord] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def resolve_question_type(
    question_types: dict[str, list[str]],
    round_id: str,
    question: int,
    missing_round_type: str = DEFAULT_QUESTION_TYPE,
) -> str:
    """
    Look up the type of question number `question` (1-based) in a round.

    Rounds with no question set use missing_round_type. Questions past the
    end of the set and codes that aren't question types count as general.
    """
    types = question_types.get(round_id)
    if types is None:
        return missing_round_type
    index = question - 1
    if 0 <= index < len(types) and types[index] in QUESTION_TYPE_INDICES:
        return types[index]
    return DEFAULT_QUESTION_TYPE


def accumulate(
    rounds: Iterable[RoundGroup],
    directory: QuizzerDirectory,
    question_types: dict[str, list[str]],
    missing_round_type: str = DEFAULT_QUESTION_TYPE,
) -> AccumulatedStats:
    """
    Run every confirmed round's scoring events through the statistics and team scoring.

    Rounds from segment_rounds() carry only TC/TE/BC/BE records. TN records
    are also accepted so hand-built RoundGroups can add a team mid-round;
    they create a placeholder team only when that team number is new.

    Args:
        rounds: Confirmed rounds, in the order they should be reported
        directory: Quizzer directory from segmentation
        question_types: Round id -> question types
        missing_round_type: Type used for rounds without a question set

    Returns:
        AccumulatedStats with one StatsMatrix row per directory entry
    """
    result = AccumulatedStats(stats=StatsMatrix.zeros(len(directory)))
    missing: list[str] = []

    for group in rounds:
        logger.debug(f'Starting next round: {group.key}')
        if group.round not in question_types and group.round not in missing:
            missing.append(group.round)
            message = (
                f'Warning: Missing question set for round {group.round}. '
                f"Its questions are counted as type '{missing_round_type}'."
            )
            logger.warning(message)
            result.warnings.append(message)
        result.rounds.append(
            _score_round(group, directory, question_types, missing_round_type, result)
        )

    if missing:
        result.warnings.extend([
            'Warning: Some rounds are missing question sets! These questions will be treated as general!',
            f'Skipped Rounds: {missing}',
            'Round names must match between QuizMachine and the question set files!',
        ])
        logger.info(f'Found question sets: {sorted(question_types)}')

    return result


def _score_round(
    group: RoundGroup,
    directory: QuizzerDirectory,
    question_types: dict[str, list[str]],
    missing_round_type: str,
    result: AccumulatedStats,
) -> RoundRecord:
    board = RoundScoreboard({number: team.name for number, team in group.teams.items()})

    for record in group.records:
        if record.code == TEAM_NAME:
            if not board.has_team(record.team):
                _warn_team_added(result, group, record.team)
                board.add_team(record.team, record.name)
            continue
        if record.code not in (CORRECT, ERROR, BONUS_CORRECT, BONUS_ERROR):
            continue

        qtype = resolve_question_type(question_types, group.round, record.question, missing_round_type)
        _update_stats(result, directory, record, qtype)

        if record.code == BONUS_ERROR:
            continue
        if not board.has_team(record.team):
            _warn_team_added(result, group, record.team)
            board.add_team(record.team, directory.team_of(record.name))

        if record.code == CORRECT:
            breakdown = board.correct(record.team, record.name)
        elif record.code == ERROR:
            breakdown = board.error(record.team, record.name, record.question)
        else:
            breakdown = board.bonus(record.team, record.name)

        logger.debug(
            f'[Team Scoring] Rm: {group.room} Rd: {group.round} Q: {record.question} '
            f'{record.code} by {record.name}: {breakdown or "no change"} '
            f'-> {board.team_names()} {board.team_scores()}'
        )

    return RoundRecord(
        room=group.room,
        round=group.round,
        team_names=board.team_names(),
        team_scores=board.team_scores(),
    )


def _update_stats(
    result: AccumulatedStats,
    directory: QuizzerDirectory,
    record: EventRecord,
    qtype: str,
) -> None:
    quizzer = directory.index_of(record.name)
    if quizzer < 0:
        message = f'Warning: Quizzer {record.name!r} is not on any confirmed team; statistics not recorded.'
        logger.warning(message)
        result.warnings.append(message)
        return

    stats = result.stats
    indices = [QUESTION_TYPE_INDICES[qtype]]
    if qtype in MEMORY_VERSE_TYPES:
        indices.append(MEMORY_INDEX)

    for i in indices:
        if record.code == CORRECT:
            stats.attempts[quizzer][i] += 1
            stats.correct[quizzer][i] += 1
        elif record.code == ERROR:
            stats.attempts[quizzer][i] += 1
        elif record.code == BONUS_CORRECT:
            stats.bonus_attempts[quizzer][i] += 1
            stats.bonus[quizzer][i] += 1
        elif record.code == BONUS_ERROR:
            stats.bonus_attempts[quizzer][i] += 1


def _warn_team_added(result: AccumulatedStats, group: RoundGroup, team_number: int) -> None:
    message = (
        f'Warning: Team number {team_number} added mid-round in room {group.room} '
        f'round {group.round}. This should not happen.'
    )
    logger.warning(message)
    result.warnings.append(message)
