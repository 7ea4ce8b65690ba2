from src.autopick.mock_draft import MockDraftSimulator
from src.autopick.models import (
    AutopickContext,
    CategoryScore,
    NoPlayersAvailableError,
    TeamAnalysis,
)
from src.autopick.runner import AutopickOnExpiry, autopick, build_context
from src.autopick.strategies import (
    STRATEGIES,
    BalancedStrategy,
    BestAvailableStrategy,
    PositionNeedStrategy,
    QueueFirstStrategy,
    category_values,
    get_strategy,
)
from src.autopick.team_analysis import TeamAnalyzer

__all__ = [
    "AutopickContext",
    "AutopickOnExpiry",
    "BalancedStrategy",
    "BestAvailableStrategy",
    "CategoryScore",
    "MockDraftSimulator",
    "NoPlayersAvailableError",
    "PositionNeedStrategy",
    "QueueFirstStrategy",
    "STRATEGIES",
    "TeamAnalysis",
    "TeamAnalyzer",
    "autopick",
    "build_context",
    "category_values",
    "get_strategy",
]
