"""Round segmentation of the event stream.

QuizMachine logs often carry leftover team and quizzer names from practice
sessions. Practice rounds never contain scoring events, so a round only
counts once something was actually answered in it. Teams and quizzers are
confirmed from those rounds alone, which keeps practice names out of the
quizzer directory.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .constants import SCORING_CODES
from .models import EventRecord, QuizzerDirectory, RoundGroup
from .roster import RoundRoster

logger = logging.getLogger('qperf.segmenter')


@dataclass
class SegmentedRounds:
    """Confirmed rounds plus the quizzer directory built from them."""
    rounds: dict[str, RoundGroup] = field(default_factory=dict)  # keyed by 'Rm<room>Rd<round>'
    directory: QuizzerDirectory = field(default_factory=QuizzerDirectory)
    teams: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def segment_rounds(records: Iterable[EventRecord]) -> SegmentedRounds:
    """
    Group filtered event records into confirmed rounds.

    A change of room or round between consecutive records closes the
    current round. A closed round is kept only if at least one TC, TE, BC
    or BE event happened in it; identity-only rounds are dropped.

    Args:
        records: Filtered records in log order

    Returns:
        SegmentedRounds with rounds in confirmation order
    """
    result = SegmentedRounds()

    room, round_id = '', ''
    roster = RoundRoster()
    candidates: list[EventRecord] = []
    action = False

    for record in records:
        if record.room != room or record.round != round_id:
            result.warnings.extend(roster.warnings)
            if action:
                _confirm_round(result, room, round_id, roster, candidates)
            else:
                logger.debug(f'No action in room {room} round {round_id}, teams might be from practice')
            action = False
            roster = RoundRoster()
            candidates = []
            room, round_id = record.room, record.round

        if roster.apply(record):
            continue
        if record.code in SCORING_CODES:
            action = True
            candidates.append(record)

    logger.debug(f'Checking last round, {len(candidates)} records remaining')
    result.warnings.extend(roster.warnings)
    if action:
        _confirm_round(result, room, round_id, roster, candidates)

    logger.debug(f'Confirmed teams: {result.teams}')
    logger.debug(f'Confirmed quizzers: {result.directory.entries}')
    return result


def _confirm_round(
    result: SegmentedRounds,
    room: str,
    round_id: str,
    roster: RoundRoster,
    candidates: list[EventRecord],
) -> None:
    """Register a round's teams and quizzers and store its scoring events."""
    teams = roster.confirmed_teams()

    for team in teams.values():
        if team.name not in result.teams:
            result.teams.append(team.name)
        for quizzer in team.quizzers:
            result.directory.register(quizzer, team.name)

    for record in candidates:
        if not record.name or record.name in result.directory:
            continue
        team = teams.get(record.team)
        team_name = team.name if team else ''
        result.directory.register(record.name, team_name)
        _warn(
            result,
            f'Warning: Quizzer {record.name} scored in room {room} round {round_id} '
            f'without being seated. Added to team {team_name or "(unknown)"}.',
        )

    group = RoundGroup(room=room, round=round_id, teams=teams, records=list(candidates))
    if group.key in result.rounds:
        _warn(result, f'Warning: Duplicate round number: {group.key}, overwriting!')
        del result.rounds[group.key]
    result.rounds[group.key] = group

    logger.debug(
        f'Confirming round {group.key} with teams '
        f'{[t.name for t in teams.values()]} and {len(candidates)} records'
    )


def _warn(result: SegmentedRounds, message: str) -> None:
    logger.warning(message)
    result.warnings.append(message)
