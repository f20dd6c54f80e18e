"""Declarative field constraints for the job forms."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Required:
    field: str
    label: str

    def check(self, value) -> str | None:
        if str(value or "").strip():
            return None
        return f"{self.label} is required"


def validate(values: dict, constraints) -> dict[str, str]:
    """Evaluate constraints against field values. Returns {field: message} for failures."""
    errors = {}
    for constraint in constraints:
        if constraint.field in errors:
            continue
        message = constraint.check(values.get(constraint.field))
        if message:
            errors[constraint.field] = message
    return errors
