from src.draft_engine.draft_controller import DraftController
from src.draft_engine.draft_initializer import DraftInitializer
from src.draft_engine.draft_order import (
    BoardCell,
    CellState,
    CurrentPick,
    advance,
    build_board,
)
from src.draft_engine.draft_rules import DraftRules
from src.draft_engine.draft_state import (
    Draft,
    DraftSettings,
    DraftStatus,
    Pick,
    Team,
)
from src.draft_engine.errors import (
    DraftCompleteError,
    DuplicatePickError,
    InvalidSettingsError,
    OutOfTurnError,
    PlayerAlreadyDraftedError,
    PlayerNotFoundError,
    UnknownTeamError,
    ValidationError,
)
from src.draft_engine.pick_queue import PickQueue
from src.draft_engine.pick_timer import PickTimer
from src.draft_engine.state_persistence import StatePersistence

__all__ = [
    "BoardCell",
    "CellState",
    "CurrentPick",
    "Draft",
    "DraftCompleteError",
    "DraftController",
    "DraftInitializer",
    "DraftRules",
    "DraftSettings",
    "DraftStatus",
    "DuplicatePickError",
    "InvalidSettingsError",
    "OutOfTurnError",
    "Pick",
    "PickQueue",
    "PickTimer",
    "PlayerAlreadyDraftedError",
    "PlayerNotFoundError",
    "StatePersistence",
    "Team",
    "UnknownTeamError",
    "ValidationError",
    "advance",
    "build_board",
]
