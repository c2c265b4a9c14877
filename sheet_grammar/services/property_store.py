"""
Property store implementations: in-memory and JSON file backed.
"""
import json
import os
import re
import shutil
from pathlib import Path
from typing import Dict, Optional

from sheet_grammar.config import settings
from sheet_grammar.services.property_store_base import PropertyStore
from sheet_grammar.utils.logger import get_logger

logger = get_logger("services.property_store")

# Characters allowed in a user id when used as a file name
SAFE_USER_ID_PATTERN = re.compile(r"[^A-Za-z0-9_.@-]")

PROPERTY_FILE_MODE = 0o600


class InMemoryPropertyStore(PropertyStore):
    """Property store kept in a dict, lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._properties: Dict[str, str] = dict(initial or {})

    def get_property(self, key: str) -> Optional[str]:
        return self._properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self._properties[key] = value

    def delete_property(self, key: str) -> None:
        self._properties.pop(key, None)


class JsonFilePropertyStore(PropertyStore):
    """
    Property store persisted as one JSON object per user.

    Every write rewrites the whole file through a temporary file that is then
    moved into place, so a crash never leaves a half-written file behind.
    """

    def __init__(self, user_id: str, base_path: Optional[str] = None):
        """
        Initialize the file store for one user.

        Args:
            user_id: Identifier of the user owning the properties
            base_path: Directory holding the property files
                (if None, uses settings.PROPERTIES_STORAGE_PATH)
        """
        if not user_id or not user_id.strip():
            raise ValueError("user_id is required for JsonFilePropertyStore")

        self.base_path = Path(base_path or settings.PROPERTIES_STORAGE_PATH).expanduser()
        safe_id = SAFE_USER_ID_PATTERN.sub("_", user_id.strip())
        self.file_path = self.base_path / f"{safe_id}.json"

    def _read_all(self) -> Dict[str, str]:
        """
        Load every property of the user.

        Returns:
            Property map; empty if the file is missing or unreadable
        """
        if not self.file_path.exists():
            return {}

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(
                "Failed to read property file, treating as empty",
                path=str(self.file_path),
                error=str(e)
            )
            return {}

        if not isinstance(data, dict):
            logger.error("Property file does not hold a JSON object", path=str(self.file_path))
            return {}

        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, properties: Dict[str, str]) -> None:
        """Write the property map atomically."""
        self.base_path.mkdir(parents=True, exist_ok=True)
        temp_path = self.file_path.parent / f"{self.file_path.name}.tmp"

        try:
            # Leftover from an interrupted write may carry looser permissions
            if temp_path.exists():
                temp_path.unlink()

            # Properties include the API key: owner-only from the first byte
            fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, PROPERTY_FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(properties, f, ensure_ascii=False, indent=2)

            shutil.move(str(temp_path), str(self.file_path))
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            logger.error("Failed to write property file", path=str(self.file_path), exc_info=True)
            raise

        logger.debug("Property file written", path=str(self.file_path), keys=len(properties))

    def get_property(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_property(self, key: str, value: str) -> None:
        properties = self._read_all()
        properties[key] = value
        self._write_all(properties)

    def delete_property(self, key: str) -> None:
        properties = self._read_all()
        if key in properties:
            del properties[key]
            self._write_all(properties)
