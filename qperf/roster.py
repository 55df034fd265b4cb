"""Per-round team and seating reconstruction from identity events."""

import logging

from .constants import MAX_SEATS, QUIZZER_NAME, TEAM_NAME
from .models import EventRecord, RosterTeam

logger = logging.getLogger('qperf.roster')


class RoundRoster:
    """
    Scratch roster for the round currently being read.

    Team numbers are positional keys only: TN names the team sitting at a
    number, QN seats a quizzer. Whatever arrives last for a slot wins.
    """

    def __init__(self):
        self.teams: dict[int, RosterTeam] = {}
        self.warnings: list[str] = []

    def ensure_team(self, team_number: int) -> RosterTeam:
        """Return the team at team_number, creating an unnamed placeholder if needed."""
        if team_number not in self.teams:
            self.teams[team_number] = RosterTeam()
        return self.teams[team_number]

    def set_team_name(self, team_number: int, name: str) -> None:
        """Name the team at team_number, resetting its seats."""
        self.teams[team_number] = RosterTeam(name=name)
        logger.debug(f'Set team number {team_number} to {name}')

    def seat_quizzer(self, team_number: int, seat: int, name: str) -> bool:
        """
        Put a quizzer in a seat, padding empty seats before it.

        Returns:
            False if the seat number is out of range (the event is skipped)
        """
        if not 0 <= seat < MAX_SEATS:
            message = (
                f'Warning: Seat number {seat} for {name} on team number {team_number} '
                f'is out of range, ignoring.'
            )
            logger.warning(message)
            self.warnings.append(message)
            return False

        team = self.ensure_team(team_number)
        while len(team.quizzers) <= seat:
            team.quizzers.append('')
        team.quizzers[seat] = name
        logger.debug(f'Set seat number {seat} to {name} for {team.name!r}')
        return True

    def apply(self, record: EventRecord) -> bool:
        """
        Apply an identity event.

        Returns:
            True if the record was a TN/QN event
        """
        if record.code == TEAM_NAME:
            self.set_team_name(record.team, record.name)
        elif record.code == QUIZZER_NAME:
            self.seat_quizzer(record.team, record.seat, record.name)
        else:
            return False
        return True

    def team_name_at(self, team_number: int) -> str:
        team = self.teams.get(team_number)
        return team.name if team else ''

    def confirmed_teams(self) -> dict[int, RosterTeam]:
        """
        Snapshot of the roster without unnamed teams or empty seats.

        Team numbers are kept as keys, so scoring events still find
        their team after blank slots are dropped.
        """
        return {
            number: RosterTeam(name=team.name, quizzers=[q for q in team.quizzers if q])
            for number, team in sorted(self.teams.items())
            if team.name
        }
