"""Exceptions raised when a draft operation breaks the rules."""


class ValidationError(Exception):
    """Raised when a pick or draft setup violates draft rules."""

    reason = "invalid"


class InvalidSettingsError(ValidationError, ValueError):
    """Draft settings and team list do not describe a valid draft."""

    reason = "invalid_settings"


class OutOfTurnError(ValidationError):
    """Pick submitted for a team that is not on the clock."""

    reason = "out_of_turn"


class DuplicatePickError(ValidationError):
    """A board slot that already holds a pick received another one."""

    reason = "duplicate_pick"


class PlayerAlreadyDraftedError(ValidationError):
    """Player already appears in some team's pick history."""

    reason = "player_already_drafted"


class DraftCompleteError(ValidationError):
    """Pick submitted after the final round finished."""

    reason = "draft_complete"


class PlayerNotFoundError(ValidationError):
    """Player id could not be resolved against the catalog."""

    reason = "player_not_found"


class UnknownTeamError(ValidationError):
    """Team id does not belong to the draft."""

    reason = "unknown_team"
