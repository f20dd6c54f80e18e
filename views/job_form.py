"""Create and edit forms for a job posting.

Both forms keep the same flat field set, with the company contact block
spread over three fields. Conversion to and from the nested Job record
happens in fields_from_job() / fields_to_job(); the salary string typed
into the input becomes a number there and nowhere else.
"""

import logging
import math
from dataclasses import asdict, dataclass

import config as config
from errors import ApiError, RequestCancelled
from models import JOB_TYPES, Company, Job
from navigation import LIST_ROOT, job_path
from validation import Required, validate
from views.base import LOADED, LOADING, SUBMITTING, BaseView

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load job."
CREATE_FAILED_MESSAGE = "Failed to create job."
UPDATE_FAILED_MESSAGE = "Failed to update job."
INVALID_MESSAGE = "Please fix the highlighted fields."

FIELD_CONSTRAINTS = (
    Required("title", "Job title"),
    Required("type", "Job type"),
    Required("description", "Job description"),
    Required("location", "Location"),
    Required("salary", "Salary"),
    Required("company_name", "Company name"),
    Required("contact_email", "Contact email"),
)

# Input ids used by the HTML form markup
FIELD_ALIASES = {
    "companyName": "company_name",
    "contactEmail": "contact_email",
    "contactPhone": "contact_phone",
}


@dataclass
class JobFormFields:
    title: str = ""
    type: str = ""
    description: str = ""
    location: str = ""
    salary: str = ""
    company_name: str = ""
    contact_email: str = ""
    contact_phone: str = ""


def fields_from_job(job: Job) -> JobFormFields:
    return JobFormFields(
        title=job.title,
        type=job.type,
        description=job.description,
        location=job.location,
        salary=str(job.salary),
        company_name=job.company.name,
        contact_email=job.company.contact_email,
        contact_phone=job.company.contact_phone,
    )


def parse_salary_input(text: str) -> int | float:
    """Coerce the salary input to a number. Raises ValueError if it isn't one."""
    number = float(text.strip().replace(",", ""))
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {text!r}")
    return int(number) if number.is_integer() else number


def fields_to_job(fields: JobFormFields, base: Job | None = None) -> Job:
    """Assemble a Job from form fields, keeping server-assigned fields of base."""
    return Job(
        title=fields.title,
        type=fields.type,
        description=fields.description,
        location=fields.location,
        salary=parse_salary_input(fields.salary),
        company=Company(
            name=fields.company_name,
            contact_email=fields.contact_email,
            contact_phone=fields.contact_phone,
        ),
        id=base.id if base else None,
        posted_date=base.posted_date if base else None,
    )


class JobFormView(BaseView):
    """Field state and submission shared by the create and edit pages."""

    name = "form"
    type_options = JOB_TYPES
    failure_message = ""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields = JobFormFields()
        self.field_errors: dict[str, str] = {}

    def set_field(self, name: str, value: str) -> None:
        name = FIELD_ALIASES.get(name, name)
        if name not in JobFormFields.__dataclass_fields__:
            raise KeyError(f"Unknown form field: {name}")
        setattr(self.fields, name, value)
        self.field_errors.pop(name, None)

    def values(self) -> dict:
        return asdict(self.fields)

    @property
    def can_submit(self) -> bool:
        return self.mounted and not self.is_busy

    def validate(self) -> bool:
        self.field_errors = validate(self.values(), FIELD_CONSTRAINTS)
        if "salary" not in self.field_errors:
            try:
                parse_salary_input(self.fields.salary)
            except ValueError:
                self.field_errors["salary"] = "Salary must be a number"
        return not self.field_errors

    def submit(self) -> bool:
        """Validate and send the form. Returns False when no request was issued."""
        if not self.can_submit:
            return False
        if not self.validate():
            self.error = INVALID_MESSAGE
            logger.info(f"[{self.name}] Submission blocked: {', '.join(self.field_errors)}")
            return False

        job = fields_to_job(self.fields, self._base_job())
        self._enter(SUBMITTING)
        try:
            self._save(job)
        except RequestCancelled:
            return True
        except ApiError as e:
            # entered values stay in self.fields for resubmission
            self._fail(self.failure_message, e)
            return True
        self.state = LOADED
        self._navigate(self._destination())
        return True

    def _base_job(self) -> Job | None:
        return None

    def _save(self, job: Job) -> Job | None:
        raise NotImplementedError

    def _destination(self) -> str:
        raise NotImplementedError


class CreateJobForm(JobFormView):
    name = "create"
    failure_message = CREATE_FAILED_MESSAGE

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields = JobFormFields(type=config.DEFAULT_JOB_TYPE, salary=str(config.DEFAULT_SALARY))

    def mount(self) -> None:
        self._attach()
        self.state = LOADED

    def _save(self, job: Job) -> Job | None:
        return self.client.create_job(job, cancel_token=self.token)

    def _destination(self) -> str:
        return LIST_ROOT


class EditJobForm(JobFormView):
    name = "edit"
    failure_message = UPDATE_FAILED_MESSAGE

    def __init__(self, job_id: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.job_id = job_id
        self.job: Job | None = None

    def mount(self) -> None:
        self._attach()
        self._enter(LOADING)
        try:
            job = self.client.get_job(self.job_id, cancel_token=self.token)
        except RequestCancelled:
            return
        except ApiError as e:
            self._fail(LOAD_FAILED_MESSAGE, e)
            return
        self.job = job
        self.fields = fields_from_job(job)
        self.state = LOADED

    @property
    def can_submit(self) -> bool:
        return super().can_submit and self.job is not None

    def cancel(self) -> None:
        self._navigate(job_path(self.job_id))

    def _base_job(self) -> Job | None:
        return self.job

    def _save(self, job: Job) -> Job | None:
        job.id = self.job_id
        return self.client.update_job(job, cancel_token=self.token)

    def _destination(self) -> str:
        return job_path(self.job_id)
