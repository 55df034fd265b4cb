"""Final team ranking.

Teams are ranked first by number of losses (fewest first), then by number
of wins (most first), then by head-to-head record. A team earns one win
for every team it outscores in a round and one loss for every team that
outscores it; ties count as neither.

Head-to-head totals are kept per pair of teams across every two- and
three-team round in which they met. Each pair's totals are stored with the
alphabetically smaller team name in slot 0, so a pair that meets several
times always accumulates into the same slots.
"""

import logging
from functools import cmp_to_key
from typing import Iterable

from .models import RoundRecord, TeamStanding

logger = logging.getLogger('qperf.ranking')

PairKey = tuple[str, str]


def matchup_key(team_a: str, team_b: str) -> PairKey:
    """Order-independent key for a pair of teams."""
    return (team_a, team_b) if team_a <= team_b else (team_b, team_a)


def record_matchup(
    head_to_head: dict[PairKey, list[int]],
    team_a: str,
    score_a: int,
    team_b: str,
    score_b: int,
) -> None:
    """Add one meeting of two teams to the head-to-head totals."""
    key = matchup_key(team_a, team_b)
    totals = head_to_head.setdefault(key, [0, 0])
    if key[0] == team_a:
        totals[0] += score_a
        totals[1] += score_b
    else:
        totals[0] += score_b
        totals[1] += score_a


def head_to_head_score(head_to_head: dict[PairKey, list[int]], team: str, opponent: str) -> int:
    """A team's accumulated score against one opponent (0 if they never met)."""
    key = matchup_key(team, opponent)
    totals = head_to_head.get(key, [0, 0])
    return totals[0] if key[0] == team else totals[1]


def tally_rounds(
    rounds: Iterable[RoundRecord],
) -> tuple[dict[str, TeamStanding], dict[PairKey, list[int]]]:
    """
    Collect wins, losses, total scores and head-to-head totals.

    Returns:
        Tuple of (standings by team name in first-seen order, head-to-head totals)
    """
    standings: dict[str, TeamStanding] = {}
    head_to_head: dict[PairKey, list[int]] = {}

    for round_record in rounds:
        scored = [
            (name, score)
            for name, score in zip(round_record.team_names, round_record.team_scores)
            if name
        ]

        for name, score in scored:
            standing = standings.setdefault(name, TeamStanding(name=name))
            standing.total_score += score

        if len(scored) < 2:
            continue

        for name, score in scored:
            for other, other_score in scored:
                if other == name:
                    continue
                if score > other_score:
                    standings[name].wins += 1
                elif score < other_score:
                    standings[name].losses += 1

        if len(scored) in (2, 3):
            for i, (name, score) in enumerate(scored):
                for other, other_score in scored[i + 1:]:
                    if other != name:
                        record_matchup(head_to_head, name, score, other, other_score)

    return standings, head_to_head


def rank_teams(rounds: Iterable[RoundRecord]) -> list[TeamStanding]:
    """
    Rank every team that appears in the given rounds.

    Args:
        rounds: Round records with final team scores

    Returns:
        Standings sorted best first, with 1-based placements assigned
    """
    standings, head_to_head = tally_rounds(rounds)

    def compare(a: TeamStanding, b: TeamStanding) -> int:
        if a.losses != b.losses:
            return a.losses - b.losses
        if a.wins != b.wins:
            return b.wins - a.wins
        return head_to_head_score(head_to_head, b.name, a.name) - head_to_head_score(
            head_to_head, a.name, b.name
        )

    ranking = sorted(standings.values(), key=cmp_to_key(compare))

    for placement, standing in enumerate(ranking, 1):
        standing.placement = placement

    logger.debug(f'Ranked {len(ranking)} teams from {len(head_to_head)} head-to-head pairs')
    return ranking
