"""JSON file storage for the roster.

Reads and writes a JsonSerializableRoster document. Loaded data goes through
the same validation gate as live input.
"""

from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from roster.config.settings import settings
from roster.people.errors import PersonModelError
from roster.people.person import Person
from roster.sample_data import get_sample_persons
from roster.storage.json_models import JsonSerializableRoster


class DataLoadingError(Exception):
    """Raised when the roster file exists but cannot be turned into persons."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load roster from {path}: {reason}")


class JsonRosterStorage:
    """Roster persisted as one JSON document.

    Args:
        path: JSON file path; defaults to the ROSTER_DATA_FILE setting
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else settings.roster_data_file

    def read_persons(self) -> list[Person] | None:
        """Read all persons from the file.

        Returns:
            Persons in stored order, or None if the file does not exist

        Raises:
            DataLoadingError: If the file is malformed or holds invalid persons
        """
        if not self.path.exists():
            logger.info("Roster file not found", path=str(self.path), event="roster_file_missing")
            return None

        try:
            content = self.path.read_text(encoding="utf-8")
            document = JsonSerializableRoster.model_validate_json(content)
            persons = document.to_model_type()
        except (UnicodeDecodeError, ValidationError, PersonModelError) as e:
            logger.warning(
                "Roster file could not be loaded",
                path=str(self.path),
                error=str(e),
                event="roster_load_failed",
            )
            raise DataLoadingError(self.path, str(e)) from e

        logger.debug("Roster loaded", path=str(self.path), count=len(persons), event="roster_loaded")
        return persons

    def save_persons(self, persons: list[Person]) -> None:
        """Write all persons to the file, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = JsonSerializableRoster.from_persons(persons)
        self.path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("Roster saved", path=str(self.path), count=len(persons), event="roster_saved")


def load_or_sample(storage: JsonRosterStorage) -> list[Person]:
    """Load the roster, falling back to sample residents if no file exists.

    Raises:
        DataLoadingError: If the file exists but is invalid
    """
    persons = storage.read_persons()
    if persons is None:
        logger.info("Starting with sample roster", path=str(storage.path), event="roster_sample_used")
        return get_sample_persons()
    return persons
