import os
from pathlib import Path
from dataclasses import dataclass

# Creates the directory (and parents) if it isn't there yet, and hands it back.
def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True,exist_ok=True)
    return path

# Dataclass for accessing paths across program. Settings are never persisted, so the only thing we keep on disk
# is logs.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path
    logs: Path

    @staticmethod
    def build():
        # SITSTAND_HOME wins outright, otherwise we follow the XDG state dir convention.
        override = os.getenv("SITSTAND_HOME")
        if override:
            data = ensure_directory(Path(override).expanduser())
        else:
            state_home = os.getenv("XDG_STATE_HOME") or str(Path.home() / ".local" / "state")
            data = ensure_directory(Path(state_home).expanduser() / "sitstand")

        logs = ensure_directory(data / "logs")

        return ProjectPaths(
            data = data,
            logs = logs,
        )
PATHS = ProjectPaths.build()
