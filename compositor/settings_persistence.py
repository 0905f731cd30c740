"""Per-document print settings, persisted across runs.

Settings live in one JSON file in the OS config directory, keyed by the
absolute path of the document they belong to. Failures to read or write
the file are logged and treated as "no settings".
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .printing import Orientation, PrintSettings

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """JSON-backed store of settings dictionaries indexed by document path."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir or platformdirs.user_config_dir("compositor"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Dict[str, Any]]] = None

    def _load_all_settings(self) -> Dict[str, Dict[str, Any]]:
        if self._settings_cache is not None:
            return self._settings_cache

        self._settings_cache = {}
        if not self._settings_file.exists():
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return self._settings_cache

        if isinstance(data, dict):
            self._settings_cache = data
        else:
            logger.warning("Settings file has invalid format (not a dict), ignoring")
        return self._settings_cache

    def _save_all_settings(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        """Write every document's settings, via temp file and rename."""
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            if temp_file.exists():
                temp_file.unlink()
            return False
        self._settings_cache = settings
        return True

    def load_settings(self, document_path: Optional[str]) -> Dict[str, Any]:
        """Return a copy of the settings stored for ``document_path``.

        Unknown documents, a ``None`` path and malformed entries give ``{}``.
        """
        if document_path is None:
            return {}
        abs_path = os.path.abspath(document_path)
        doc_settings = self._load_all_settings().get(abs_path, {})
        if not isinstance(doc_settings, dict):
            logger.warning(f"Settings for {abs_path} are not a dict, ignoring")
            return {}
        return {k: v for k, v in doc_settings.items() if self.validate_setting(k, v)}

    def save_settings(self, document_path: Optional[str], settings: Dict[str, Any]) -> bool:
        if document_path is None:
            return False
        all_settings = dict(self._load_all_settings())
        all_settings[os.path.abspath(document_path)] = settings
        return self._save_all_settings(all_settings)

    def load_print_settings(self, document_path: Optional[str]) -> PrintSettings:
        """Return saved print settings for a document, or the defaults."""
        return PrintSettings.from_dict(self.load_settings(document_path))

    def save_print_settings(self, document_path: Optional[str], settings: PrintSettings) -> bool:
        return self.save_settings(document_path, settings.to_dict())

    def validate_setting(self, key: str, value: Any) -> bool:
        """Check that a stored value has the shape PrintSettings expects."""
        if value is None:
            return False
        if key in ('printer_name', 'page_range'):
            return isinstance(value, str)
        if key == 'duplex':
            return isinstance(value, bool)
        if key in ('copies', 'page_size'):
            # bool is an int subclass; reject it explicitly
            return isinstance(value, int) and not isinstance(value, bool) and value >= 1
        if key == 'orientation':
            return value in {o.value for o in Orientation}
        # Unknown keys are kept (forward compatibility)
        return True


_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Return the process-wide SettingsPersistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
