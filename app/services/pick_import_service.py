"""
PickImportService - Reads pick sheets (CSV) and checks them against the schedule.

Row problems are collected, not raised: one bad line must not stop
the rest of the sheet from importing.
"""

import csv
import io
import logging
import re
from typing import Optional

from pydantic import BaseModel

from app.models.game import Game, Team
from app.models.pick import Pick
from app.services.scoring_service import DEFAULT_CONFIDENCE


logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 0.5
MAX_CONFIDENCE = 1.0

TEMPLATE_HEADERS = ["game_id", "team_a", "team_a_score", "team_b", "team_b_score", "confidence"]

GAME_ID_COLUMNS = ("game_id", "gameid", "event_id", "eventid")
TEAM_A_COLUMNS = ("team_a", "teama", "away_team", "awayteam")
TEAM_A_SCORE_COLUMNS = ("team_a_score", "teama_score", "away_score", "awayscore")
TEAM_B_COLUMNS = ("team_b", "teamb", "home_team", "hometeam")
TEAM_B_SCORE_COLUMNS = ("team_b_score", "teamb_score", "home_score", "homescore")


class PickImportError(Exception):
    """Base exception for pick import errors."""
    pass


class InvalidPicksFileError(PickImportError):
    """Raised when the file cannot be read as a pick sheet at all."""
    pass


class ImportIssue(BaseModel):
    """Error o advertencia de importación"""
    type: str  # missing_field | invalid_score | unknown_game | team_mismatch | duplicate_pick | missing_pick
    message: str
    row: Optional[int] = None
    game_id: Optional[str] = None


class PickImportResult(BaseModel):
    picks: list[Pick]
    errors: list[ImportIssue]


class ValidationSummary(BaseModel):
    total: int
    valid: int
    warnings: int
    errors: int
    coverage: float


class PickValidationResult(BaseModel):
    valid_picks: list[Pick]
    warnings: list[ImportIssue]
    errors: list[ImportIssue]
    summary: ValidationSummary


def normalize_header(header: str) -> str:
    return re.sub(r"\s+", "_", header.strip().lower())


def _first_value(row: dict, columns: tuple) -> str:
    for column in columns:
        value = row.get(column)
        if value:
            return value
    return ""


def parse_confidence(value: Optional[str]) -> float:
    """
    Confidence from a sheet cell.

    Accepts probabilities (0.75) and whole-number percentages (75).
    A fractional value above 1 (1.5) is an out-of-range probability,
    not a percentage. Blank or unreadable values fall back to a
    toss-up; everything is bounded to [0.5, 1.0].
    """
    if not value:
        return DEFAULT_CONFIDENCE

    try:
        confidence = float(value)
    except ValueError:
        return DEFAULT_CONFIDENCE

    if confidence != confidence:  # NaN
        return DEFAULT_CONFIDENCE

    if confidence > 1 and confidence.is_integer():
        confidence = confidence / 100

    return min(max(confidence, MIN_CONFIDENCE), MAX_CONFIDENCE)


def _parse_row(row: dict, row_num: int) -> tuple[Optional[Pick], Optional[ImportIssue]]:
    game_id = _first_value(row, GAME_ID_COLUMNS)
    team_a = _first_value(row, TEAM_A_COLUMNS)
    team_b = _first_value(row, TEAM_B_COLUMNS)

    if not game_id:
        return None, ImportIssue(type="missing_field", message="Missing game_id", row=row_num)

    if not team_a or not team_b:
        return None, ImportIssue(type="missing_field", message="Missing team name(s)", row=row_num)

    try:
        score_a = int(_first_value(row, TEAM_A_SCORE_COLUMNS))
        score_b = int(_first_value(row, TEAM_B_SCORE_COLUMNS))
    except ValueError:
        return None, ImportIssue(type="invalid_score", message="Invalid score value(s)", row=row_num)

    if score_a < 0 or score_b < 0:
        return None, ImportIssue(type="invalid_score", message="Scores cannot be negative", row=row_num)

    pick = Pick(
        game_id=game_id,
        team_a=team_a,
        team_a_score=score_a,
        team_b=team_b,
        team_b_score=score_b,
        confidence=parse_confidence(row.get("confidence")),
    )
    return pick, None


def parse_picks_csv(content: str) -> PickImportResult:
    """
    Parse a CSV pick sheet.

    Row numbers in errors count the header as row 1.

    Raises:
        InvalidPicksFileError: the content has no header row.
    """
    reader = csv.reader(io.StringIO(content.strip()))

    try:
        headers = [normalize_header(h) for h in next(reader)]
    except StopIteration:
        raise InvalidPicksFileError("Pick sheet is empty (no header row)")

    picks = []
    errors = []

    for row_num, values in enumerate(reader, start=2):
        if not any(value.strip() for value in values):
            continue

        row = {
            header: value.strip()
            for header, value in zip(headers, values)
        }

        pick, error = _parse_row(row, row_num)
        if error:
            errors.append(error)
        else:
            picks.append(pick)

    logger.info(f"Pick sheet parsed: {len(picks)} picks, {len(errors)} errors")

    return PickImportResult(picks=picks, errors=errors)


def _is_valid_team(team_name: str, names: set[str], abbreviations: set[str]) -> bool:
    lower = team_name.lower()
    return lower in names or lower in abbreviations


def validate_picks(
    picks: list[Pick],
    games: list[Game],
    teams: Optional[list[Team]] = None
) -> PickValidationResult:
    """
    Check parsed picks against the schedule.

    - Unknown game: error, pick dropped
    - Team name not recognised: warning (only when teams are given)
    - Duplicate game: warning, the later pick replaces the earlier one
    - Game without a pick: warning
    """
    games_by_id = {game.id: game for game in games}
    team_names = {t.name.lower() for t in teams or []}
    team_abbreviations = {t.abbreviation.lower() for t in teams or [] if t.abbreviation}

    valid_picks: list[Pick] = []
    position_by_game: dict[str, int] = {}
    warnings = []
    errors = []

    for pick in picks:
        if pick.game_id not in games_by_id:
            errors.append(ImportIssue(
                type="unknown_game",
                message=f"Game ID {pick.game_id} not found in schedule",
                game_id=pick.game_id,
            ))
            continue

        if teams:
            for team_name in (pick.team_a, pick.team_b):
                if team_name and not _is_valid_team(team_name, team_names, team_abbreviations):
                    warnings.append(ImportIssue(
                        type="team_mismatch",
                        message=f'Team "{team_name}" may not match the schedule',
                        game_id=pick.game_id,
                    ))

        if pick.game_id in position_by_game:
            warnings.append(ImportIssue(
                type="duplicate_pick",
                message=f"Duplicate pick for game {pick.game_id}, using latest",
                game_id=pick.game_id,
            ))
            valid_picks[position_by_game[pick.game_id]] = pick
        else:
            position_by_game[pick.game_id] = len(valid_picks)
            valid_picks.append(pick)

    for game in games:
        if game.id not in position_by_game:
            warnings.append(ImportIssue(
                type="missing_pick",
                message=f"No pick submitted for {game.name or game.id}",
                game_id=game.id,
            ))

    coverage = round(len(valid_picks) / len(games) * 100, 1) if games else 0.0

    return PickValidationResult(
        valid_picks=valid_picks,
        warnings=warnings,
        errors=errors,
        summary=ValidationSummary(
            total=len(picks),
            valid=len(valid_picks),
            warnings=len(warnings),
            errors=len(errors),
            coverage=coverage,
        ),
    )


def generate_picks_template(games: list[Game]) -> str:
    """CSV template with one row per game and blank scores."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(TEMPLATE_HEADERS)

    for game in games:
        team_a = game.team_a.name if game.team_a else "Team A"
        team_b = game.team_b.name if game.team_b else "Team B"
        writer.writerow([game.id, team_a, "", team_b, "", ""])

    return output.getvalue()
