import json
import os

import pygame

from runner.constants import DEFAULT_VIEWPORT
from runner.logger import get_logger

log = get_logger("settings")


class Settings:
    SETTINGS_FILE = "data/settings.json"

    def __init__(self, path: str | None = None):
        self.path = path or self.SETTINGS_FILE
        # Defaults
        self._window_size = DEFAULT_VIEWPORT
        self._fullscreen = False
        self._fps = 60
        self._dirty = False
        # Key bindings as pygame key integers
        self.key_bindings = {
            "jump": [pygame.K_SPACE, pygame.K_UP],
            "restart": [pygame.K_r],
            "quit": [pygame.K_ESCAPE],
        }
        self.load_settings()

    @property
    def window_size(self):
        return self._window_size

    @window_size.setter
    def window_size(self, value):
        w, h = value
        new_val = (max(320, int(w)), max(240, int(h)))
        if new_val != self._window_size:
            self._window_size = new_val
            self._dirty = True

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    @fullscreen.setter
    def fullscreen(self, value: bool) -> None:
        new_val = bool(value)
        if new_val != self._fullscreen:
            self._fullscreen = new_val
            self._dirty = True
            self.flush()

    @property
    def fps(self) -> int:
        return self._fps

    @fps.setter
    def fps(self, value) -> None:
        new_val = max(30, min(240, int(value)))
        if new_val != self._fps:
            self._fps = new_val
            self._dirty = True
            self.flush()

    def load_settings(self):
        """Load settings from the JSON file, regenerating it when missing or corrupt."""
        if os.path.exists(self.path):
            try:
                with open(self.path, "r") as f:
                    data = json.load(f)
                size = data.get("window_size", list(self._window_size))
                self.window_size = (size[0], size[1])
                self._fullscreen = bool(data.get("fullscreen", self._fullscreen))
                self._fps = max(30, min(240, int(data.get("fps", self._fps))))
                # Merge loaded bindings over defaults so new actions keep a key.
                for action, keys in data.get("key_bindings", {}).items():
                    if action in self.key_bindings and isinstance(keys, list):
                        self.key_bindings[action] = [int(k) for k in keys]
                self._dirty = False
            except (json.JSONDecodeError, OSError, TypeError, ValueError, IndexError) as e:
                log.warn("Error loading settings; regenerating", e)
                self._dirty = True
                self.flush()
        else:
            self._dirty = True
            self.flush()

    def save_settings(self):
        if self._dirty:
            self.flush()

    def flush(self):
        """Write settings to disk if dirty and clear dirty flag."""
        if not self._dirty:
            return
        data = {
            "window_size": list(self._window_size),
            "fullscreen": self._fullscreen,
            "fps": self._fps,
            "key_bindings": self.key_bindings,
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=4)
            self._dirty = False
            log.debug("Settings flushed")
        except OSError as e:
            log.error("Error saving settings", e)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


__all__ = ["Settings", "get_settings"]
