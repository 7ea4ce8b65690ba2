"""Run a full computer-drafted mock draft and report the resulting teams.

Usage:
    python -m src.autopick.run_mock [season] [team_count] [strategy]

Examples:
    python -m src.autopick.run_mock 2025
    python -m src.autopick.run_mock 2025 10 balanced
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from src.autopick.config import DEFAULT_STRATEGY
from src.autopick.mock_draft import MockDraftSimulator
from src.autopick.models import TeamAnalysis
from src.autopick.strategies import get_strategy
from src.autopick.team_analysis import TeamAnalyzer
from src.draft_engine.config import DEFAULT_TEAM_COUNT, DEFAULT_TOTAL_ROUNDS
from src.draft_engine.draft_controller import DraftController
from src.draft_engine.draft_initializer import DraftInitializer
from src.draft_engine.state_persistence import StatePersistence
from src.logging_config import setup_logging
from src.player_catalog.models import Player

logger = logging.getLogger(__name__)


def run_mock_draft(
    season: int = 2025,
    team_count: int = DEFAULT_TEAM_COUNT,
    total_rounds: int = DEFAULT_TOTAL_ROUNDS,
    strategy_name: str = DEFAULT_STRATEGY,
    player_data_dir: Optional[Path] = None,
    storage_dir: Optional[Path] = None,
    catalog: Optional[Dict[str, Player]] = None,
) -> List[TeamAnalysis]:
    """Simulate every pick of a mock draft, save it and analyze the rosters.

    Args:
        season: Season whose player catalog is loaded.
        team_count: Number of computer-drafted teams.
        total_rounds: Rounds to draft.
        strategy_name: Registered autopick strategy used by every team.
        player_data_dir: Directory holding ``players_{season}.csv``.
        storage_dir: Where the finished draft is saved.
        catalog: Pre-loaded catalog; skips the CSV load when given.

    Returns:
        One TeamAnalysis per team, best projected standing first.

    Raises:
        FileNotFoundError: If no catalog exists for the season.
        ValueError: If the catalog is too small to fill every roster.
    """
    initializer = DraftInitializer(player_data_dir)
    if catalog is None:
        catalog = initializer.load_players(season)

    needed = team_count * total_rounds
    if len(catalog) < needed:
        raise ValueError(
            f"Catalog has {len(catalog)} players; {needed} are needed "
            f"for {team_count} teams x {total_rounds} rounds"
        )

    draft = initializer.create_draft(
        name=f"Mock draft {season}",
        team_names=[f"CPU {i + 1}" for i in range(team_count)],
        total_rounds=total_rounds,
    )
    controller = DraftController(draft, catalog=catalog)
    strategy = get_strategy(strategy_name)

    logger.info("Simulating %d-team mock draft with %s strategy", team_count, strategy_name)
    simulator = MockDraftSimulator(controller, default_strategy=strategy)
    simulator.run()

    output = StatePersistence(storage_dir).save_draft(draft)
    logger.info("Mock draft saved to %s", output)

    analyses = TeamAnalyzer(catalog).analyze(draft)
    return sorted(analyses, key=lambda a: a.projected_standing)


def _format_analysis(analysis: TeamAnalysis) -> str:
    strengths = ", ".join(analysis.strengths) or "-"
    weaknesses = ", ".join(analysis.weaknesses) or "-"
    return (
        f"{analysis.projected_standing:>2}. {analysis.team_id:<8} "
        f"strong: {strengths} | weak: {weaknesses}"
    )


if __name__ == "__main__":
    setup_logging()

    season = int(sys.argv[1]) if len(sys.argv) > 1 else 2025
    team_count = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_TEAM_COUNT
    strategy_name = sys.argv[3] if len(sys.argv) > 3 else DEFAULT_STRATEGY

    try:
        results = run_mock_draft(season, team_count, strategy_name=strategy_name)
    except Exception:
        logger.exception("Mock draft failed")
        sys.exit(1)

    for result in results:
        print(_format_analysis(result))
