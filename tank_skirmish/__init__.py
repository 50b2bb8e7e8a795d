"""Top-level package for the Tank Skirmish arcade game."""

__version__ = "1.0.0"

from tank_skirmish.core import (
    ArenaSettings,
    Bullet,
    Game,
    GameState,
    InputState,
    Owner,
    Tank,
    run_loop,
)

__all__ = [
    "ArenaSettings",
    "Bullet",
    "Game",
    "GameState",
    "InputState",
    "Owner",
    "Tank",
    "run_loop",
]

__all__.append("__version__")

try:
    from tank_skirmish.pygame import PygameSkirmish, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameSkirmish = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the pygame dependency. "
            "Install pygame to play Tank Skirmish."
        )

    __all__.extend(["PygameSkirmish", "run_pygame"])
else:
    __all__.extend(["PygameSkirmish", "run_pygame"])
