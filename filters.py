"""Filter inputs for the job listing: one type select, one free-text location."""

from models import JOB_TYPES


class JobFilters:
    type_options = JOB_TYPES

    def __init__(self):
        self.type = ""
        self.location = ""

    def set_type(self, value: str) -> None:
        self.type = value

    def set_location(self, value: str) -> None:
        self.location = value

    def type_query(self) -> str | None:
        """Selected type, or None when nothing is selected."""
        return self.type or None

    def location_query(self) -> str | None:
        """Trimmed location, or None when blank."""
        trimmed = self.location.strip()
        return trimmed or None

    def clear(self) -> None:
        self.type = ""
        self.location = ""
