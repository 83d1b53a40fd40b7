# src/taskmaster/model/user_prefs.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

DEFAULT_TASK_DATA_FILE = Path("data") / "taskmasterpro.json"


@dataclass(frozen=True, slots=True)
class GuiSettings:
    """Window geometry. Not used by the core; persisted for the view layer."""

    window_width: float = 740.0
    window_height: float = 600.0
    window_coordinates: tuple[int, int] | None = None

    def to_json(self) -> dict[str, Any]:
        coords = None
        if self.window_coordinates is not None:
            x, y = self.window_coordinates
            coords = {"x": x, "y": y}
        return {
            "windowWidth": self.window_width,
            "windowHeight": self.window_height,
            "windowCoordinates": coords,
        }

    @staticmethod
    def from_json(raw: object) -> GuiSettings:
        if raw is None:
            return GuiSettings()
        if not isinstance(raw, dict):
            raise ValueError("guiSettings must be an object")
        defaults = GuiSettings()
        width = raw.get("windowWidth", defaults.window_width)
        height = raw.get("windowHeight", defaults.window_height)
        for name, value in (("windowWidth", width), ("windowHeight", height)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number")

        coords_raw = raw.get("windowCoordinates")
        coords: tuple[int, int] | None = None
        if coords_raw is not None:
            if not isinstance(coords_raw, dict):
                raise ValueError("windowCoordinates must be an object or null")
            x, y = coords_raw.get("x"), coords_raw.get("y")
            if not isinstance(x, int) or not isinstance(y, int):
                raise ValueError("windowCoordinates needs integer x and y")
            coords = (x, y)

        return GuiSettings(
            window_width=float(width),
            window_height=float(height),
            window_coordinates=coords,
        )


@dataclass(frozen=True, slots=True)
class UserPrefs:
    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    task_data_file_path: Path = DEFAULT_TASK_DATA_FILE

    def with_gui_settings(self, gui_settings: GuiSettings) -> UserPrefs:
        return replace(self, gui_settings=gui_settings)

    def to_json(self) -> dict[str, Any]:
        return {
            "guiSettings": self.gui_settings.to_json(),
            "taskDataFilePath": self.task_data_file_path.as_posix(),
        }

    @staticmethod
    def from_json(raw: object) -> UserPrefs:
        """
        Build prefs from parsed JSON.

        Missing fields take defaults (the self-healing save then writes them out);
        present-but-wrong fields raise ValueError.
        """
        if not isinstance(raw, dict):
            raise ValueError("preferences must be a JSON object")
        path_raw = raw.get("taskDataFilePath", DEFAULT_TASK_DATA_FILE.as_posix())
        if not isinstance(path_raw, str) or not path_raw.strip():
            raise ValueError("taskDataFilePath must be a non-empty string")
        return UserPrefs(
            gui_settings=GuiSettings.from_json(raw.get("guiSettings")),
            task_data_file_path=Path(path_raw),
        )
