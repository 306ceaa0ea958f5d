from backend.engine.gameplay.game import (
    Active,
    FinishedGameError,
    Game,
    Loss,
    Status,
    Win,
)

__all__ = ["Active", "FinishedGameError", "Game", "Loss", "Status", "Win"]
