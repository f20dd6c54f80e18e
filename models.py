from dataclasses import dataclass, field
from datetime import datetime

JOB_TYPES = ("Full-Time", "Part-Time", "Internship", "Contract", "Remote")


@dataclass
class Company:
    name: str = ""
    contact_email: str = ""
    contact_phone: str = ""


@dataclass
class Job:
    title: str
    type: str = "Full-Time"  # one of JOB_TYPES, not enforced here
    description: str = ""
    location: str = ""
    salary: int | float = 0
    company: Company = field(default_factory=Company)
    id: str | None = None  # assigned by the backend
    posted_date: datetime | None = None  # assigned by the backend
    raw_data: dict = field(default_factory=dict)
