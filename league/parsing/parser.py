import json
import re
from typing import List, Optional, Tuple

from loguru import logger

from league.models.game import TEAM_NAME_PATTERN, Game, TeamScore

TEAM_NAME_RE = re.compile(TEAM_NAME_PATTERN)
SCORE_RE = re.compile(r" +([0-9]+)")
COMMA_RE = re.compile(r" *, *")
NEWLINES_RE = re.compile(r"[\r\n]+")
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

# Labels reported in error messages
TEAM_NAME = "<team-name>"
SCORE = "<score>"
COMMA = "<comma>"
NEWLINE = "<newline>"
END_OF_INPUT = "end of input"

# How much of the remaining input to quote in an error message
FOUND_EXCERPT_LENGTH = 10


class ParseError(Exception):
    """Raised when the input does not match the game results grammar."""

    def __init__(
        self,
        message: str,
        index: int,
        line: int,
        column: int,
        expected: Tuple[str, ...] = (),
        duplicate: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.index = index
        self.line = line
        self.column = column
        self.expected = expected
        self.duplicate = duplicate

    def __str__(self) -> str:
        return self.message


def line_and_column(text: str, index: int) -> Tuple[int, int]:
    """Converts an absolute index into a 1-based (line, column) pair."""
    line, line_start = 1, 0
    for match in LINE_BREAK_RE.finditer(text, 0, index):
        line += 1
        line_start = match.end()
    return line, index - line_start + 1


def describe_found(text: str, index: int) -> str:
    if index >= len(text):
        return END_OF_INPUT
    return json.dumps(text[index : index + FOUND_EXCERPT_LENGTH], ensure_ascii=False)


class GameParser:
    """Recursive descent parser for game result files.

    Failures are tracked by position: the parser remembers the furthest index
    at which a rule failed, along with every label that failed there, and
    reports that when the parse cannot continue. Once the first team name of
    a row has been matched the row is committed, so anything that goes wrong
    afterwards is reported as a hard error instead of ending the row list.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.failure_index = -1
        self.expected: List[str] = []

    def parse(self) -> List[Game]:
        games = [self._row()]
        while True:
            checkpoint = self.pos
            if not self._match(NEWLINES_RE, NEWLINE):
                break
            game = self._row(required=False)
            if game is None:
                # Not the start of another row, leave the newlines for the end of file
                self.pos = checkpoint
                break
            games.append(game)
        self._end_of_file()
        return games

    def _row(self, required: bool = True) -> Optional[Game]:
        team1 = self._team(required=required)
        if team1 is None:
            return None
        if not self._match(COMMA_RE, COMMA):
            raise self._failure()
        self._reject_same_team(team1)
        team2 = self._team()
        return Game(team1=team1, team2=team2)

    def _team(self, required: bool = True) -> Optional[TeamScore]:
        name = self._match(TEAM_NAME_RE, TEAM_NAME)
        if name is None:
            if required:
                raise self._failure()
            return None
        score = self._match(SCORE_RE, SCORE)
        if score is None:
            raise self._failure()
        return TeamScore(name=name.group(0), score=int(score.group(1)))

    def _reject_same_team(self, team1: TeamScore) -> None:
        """Fails the row if the opposing team repeats the first team's name."""
        if not self.text.startswith(team1.name, self.pos):
            return
        if SCORE_RE.match(self.text, self.pos + len(team1.name)) is None:
            # Only a prefix of a longer name, e.g. "A" in "A B 2"
            return
        line, column = line_and_column(self.text, self.pos)
        message = (
            f'Expected a team name other than "{team1.name}" at line {line}, '
            f"column {column} (duplicate team names for row)"
        )
        raise ParseError(
            message,
            index=self.pos,
            line=line,
            column=column,
            expected=(f'team name other than "{team1.name}"',),
            duplicate=team1.name,
        )

    def _end_of_file(self) -> None:
        self._match(NEWLINES_RE, NEWLINE)
        if self.pos != len(self.text):
            self._record(END_OF_INPUT, self.pos)
            raise self._failure()

    def _match(self, pattern: "re.Pattern[str]", label: str) -> Optional["re.Match[str]"]:
        match = pattern.match(self.text, self.pos)
        if match is None:
            self._record(label, self.pos)
            return None
        self.pos = match.end()
        return match

    def _record(self, label: str, index: int) -> None:
        if index > self.failure_index:
            self.failure_index = index
            self.expected = [label]
        elif index == self.failure_index and label not in self.expected:
            self.expected.append(label)

    def _failure(self) -> ParseError:
        index = self.failure_index
        line, column = line_and_column(self.text, index)
        expected = " | ".join(self.expected)
        message = (
            f"Expected {expected} at line {line}, column {column}, "
            f"found {describe_found(self.text, index)}"
        )
        return ParseError(
            message,
            index=index,
            line=line,
            column=column,
            expected=tuple(self.expected),
        )


def parse_games(text: str) -> List[Game]:
    """Parses the full text of a game results file.

    Args:
        text: The complete input, read up front so errors can report line and
              column numbers.

    Returns:
        The games in input order.

    Raises:
        ParseError: If the input does not match the grammar, or a row lists
                    the same team twice.
    """
    games = GameParser(text).parse()
    logger.debug(f"Parsed {len(games)} games from {len(text)} characters of input")
    return games
