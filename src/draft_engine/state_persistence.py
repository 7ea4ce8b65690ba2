"""State persistence - save and load drafts to/from JSON files."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from src.draft_engine.config import DRAFTS_DIR
from src.draft_engine.draft_order import CurrentPick
from src.draft_engine.draft_state import (
    Draft,
    DraftSettings,
    DraftStatus,
    Pick,
    Team,
)

logger = logging.getLogger(__name__)


class StatePersistence:
    """Handles saving and loading drafts to/from JSON files."""

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = storage_dir or DRAFTS_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def save_draft(self, draft: Draft) -> Path:
        """Save a draft to its JSON file and mark it active.

        Args:
            draft: The complete draft to persist.

        Returns:
            Path to the saved file.
        """
        filepath = self._draft_path(draft.draft_id)
        state_dict = self._draft_to_dict(draft)

        # Readers only ever see a complete document
        tmp_path = filepath.with_suffix(".json.tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(state_dict, f, indent=2)
        tmp_path.replace(filepath)

        self._update_active_link(filepath)

        logger.info(
            "Saved draft %s (round %d, pick %d, %s) to %s",
            draft.draft_id,
            draft.current_pick.round,
            draft.current_pick.pick_in_round,
            draft.status.value,
            filepath,
        )

        return filepath

    def load_draft(self, draft_id: str) -> Optional[Draft]:
        """Load a draft from its JSON file.

        Args:
            draft_id: UUID of the draft to load.

        Returns:
            Draft if found, None otherwise.

        Raises:
            InvalidSettingsError: If the stored document describes an
                inconsistent draft.
        """
        filepath = self._draft_path(draft_id)

        if not filepath.exists():
            logger.warning("Draft file not found: %s", filepath)
            return None

        state_dict = self._read_json(filepath)
        if state_dict is None:
            return None

        logger.info("Loaded draft %s from %s", draft_id, filepath)
        return self._dict_to_draft(state_dict)

    def load_active_draft(self) -> Optional[Draft]:
        """Load the currently active draft.

        Returns:
            Draft if an active draft exists, None otherwise.
        """
        active_link = self.storage_dir / "active_draft.json"

        if not active_link.is_symlink():
            return None

        actual_file = active_link.resolve()
        if not actual_file.exists():
            logger.warning(
                "Active draft symlink points to missing file: %s", actual_file
            )
            return None

        state_dict = self._read_json(actual_file)
        if state_dict is None:
            return None

        logger.info("Loaded active draft from %s", actual_file)
        return self._dict_to_draft(state_dict)

    def list_saved_drafts(self) -> List[Dict]:
        """List all saved drafts with metadata.

        Returns:
            List of dicts with draft_id, name, created_at, status,
            current_round, picks_made, team_count, scoring_format.
            Sorted by created_at descending (most recent first).
        """
        drafts = []

        for filepath in self.storage_dir.glob("draft_*.json"):
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    data = json.load(f)

                settings = data.get("settings", {})
                drafts.append(
                    {
                        "draft_id": data["draft_id"],
                        "name": data.get("name", ""),
                        "created_at": data["created_at"],
                        "status": data.get("status", DraftStatus.SCHEDULED.value),
                        "current_round": data.get("current_pick", {}).get("round", 1),
                        "picks_made": sum(
                            len(team.get("picks", [])) for team in data.get("teams", [])
                        ),
                        "team_count": settings.get("team_count", 0),
                        "scoring_format": settings.get("scoring_format", ""),
                    }
                )
            except (json.JSONDecodeError, OSError, KeyError) as e:
                logger.warning("Skipping corrupt draft file %s: %s", filepath, e)
                continue

        return sorted(drafts, key=lambda x: x["created_at"], reverse=True)

    def delete_draft(self, draft_id: str) -> bool:
        """Delete a saved draft file.

        Args:
            draft_id: UUID of the draft to delete.

        Returns:
            True if deleted, False if not found.
        """
        filepath = self._draft_path(draft_id)

        if not filepath.exists():
            return False

        # If this is the active draft, remove the symlink
        active_link = self.storage_dir / "active_draft.json"
        if active_link.is_symlink():
            target = active_link.resolve()
            if target == filepath.resolve():
                active_link.unlink()

        filepath.unlink()
        logger.info("Deleted draft %s", draft_id)
        return True

    def _draft_path(self, draft_id: str) -> Path:
        return self.storage_dir / f"draft_{draft_id}.json"

    def _read_json(self, filepath: Path) -> Optional[Dict]:
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt draft file %s: %s", filepath, e)
            return None

    def _draft_to_dict(self, draft: Draft) -> Dict:
        """Convert a Draft to a JSON-serializable dict."""
        settings = draft.settings
        return {
            "draft_id": draft.draft_id,
            "name": draft.name,
            "settings": {
                "total_rounds": settings.total_rounds,
                "team_count": settings.team_count,
                "time_per_pick_seconds": settings.time_per_pick_seconds,
                "serpentine": settings.serpentine,
                "scoring_format": settings.scoring_format,
            },
            "teams": [
                {
                    "team_id": team.team_id,
                    "name": team.name,
                    "owner": team.owner,
                    "display_position": team.display_position,
                    "picks": [
                        {
                            "round": pick.round,
                            "pick_number": pick.pick_number,
                            "team_id": pick.team_id,
                            "player_id": pick.player_id,
                            "timestamp": pick.timestamp,
                        }
                        for pick in team.picks
                    ],
                }
                for team in draft.teams
            ],
            "current_pick": {
                "round": draft.current_pick.round,
                "pick_in_round": draft.current_pick.pick_in_round,
                "team_id": draft.current_pick.team_id,
            },
            "status": draft.status.value,
            "created_at": draft.created_at,
            "updated_at": draft.updated_at,
            "completed_at": draft.completed_at,
        }

    def _dict_to_draft(self, data: Dict) -> Draft:
        """Reconstruct and validate a Draft from dict."""
        s = data["settings"]
        settings = DraftSettings(
            total_rounds=s["total_rounds"],
            team_count=s["team_count"],
            time_per_pick_seconds=s.get("time_per_pick_seconds", 90),
            serpentine=s.get("serpentine", True),
            scoring_format=s.get("scoring_format", "standard"),
        )

        teams = [
            Team(
                team_id=td["team_id"],
                name=td["name"],
                owner=td.get("owner", ""),
                display_position=td["display_position"],
                picks=[
                    Pick(
                        round=pd["round"],
                        pick_number=pd["pick_number"],
                        team_id=pd.get("team_id", td["team_id"]),
                        player_id=pd["player_id"],
                        timestamp=pd["timestamp"],
                    )
                    for pd in td.get("picks", [])
                ],
            )
            for td in data["teams"]
        ]

        cp = data["current_pick"]
        draft = Draft(
            draft_id=data["draft_id"],
            name=data.get("name", ""),
            settings=settings,
            teams=teams,
            current_pick=CurrentPick(
                round=cp["round"],
                pick_in_round=cp["pick_in_round"],
                team_id=cp.get("team_id"),
            ),
            status=DraftStatus(data.get("status", DraftStatus.SCHEDULED.value)),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
            completed_at=data.get("completed_at"),
        )
        draft.validate()
        return draft

    def _update_active_link(self, filepath: Path):
        """Update symlink to the currently active draft."""
        active_link = self.storage_dir / "active_draft.json"

        if active_link.exists() or active_link.is_symlink():
            active_link.unlink()

        active_link.symlink_to(filepath.name)
