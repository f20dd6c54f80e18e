from datetime import datetime, timezone

from models import Job
from navigation import job_path
from views.base import FAILED, LOADING


def render_job_list(view) -> str:
    """Render the listing page as markdown."""
    lines = ["# Jobs\n"]

    active = []
    if view.filters.type:
        active.append(f"type={view.filters.type}")
    if view.filters.location.strip():
        active.append(f"location={view.filters.location.strip()}")
    if active:
        lines.append(f"_Filters: {', '.join(active)}_\n")

    if view.state == LOADING:
        lines.append("Loading...")
    if view.state == FAILED and view.error:
        lines.append(f"**{view.error}**\n")

    if view.empty_message:
        lines.append(view.empty_message)
    else:
        for job in view.jobs:
            lines.extend(_render_summary(job))

    return "\n".join(lines)


def render_job_detail(view) -> str:
    """Render the single job page as markdown."""
    if view.state == LOADING:
        return "Loading..."
    if view.job is None:
        return f"**{view.error or 'Job not found'}**"

    job = view.job
    lines = [f"# {job.title}\n"]
    lines.append(f"**Type:** {job.type}")
    lines.append(f"**Description:** {job.description}")
    lines.append(f"**Company:** {job.company.name}")
    lines.append(f"**Contact Email:** {job.company.contact_email}")
    lines.append(f"**Contact Phone:** {job.company.contact_phone}")
    lines.append(f"**Location:** {job.location}")
    lines.append(f"**Salary:** {job.salary}")
    if job.posted_date:
        lines.append(f"**Posted:** {_format_posted(job.posted_date)}")
    lines.append(f"\n[Edit Job]({view.edit_path})")
    if view.error:
        lines.append(f"\n**{view.error}**")
    return "\n".join(lines)


FORM_LABELS = (
    ("title", "Job title"),
    ("type", "Job type"),
    ("description", "Job Description"),
    ("company_name", "Company Name"),
    ("contact_email", "Contact Email"),
    ("contact_phone", "Contact Phone"),
    ("location", "Location"),
    ("salary", "Salary"),
)


def render_job_form(view) -> str:
    """Render a create/edit form with inline field errors."""
    values = view.values()
    lines = []
    for field_name, label in FORM_LABELS:
        lines.append(f"{label}: {values[field_name]}")
        if field_name in view.field_errors:
            lines.append(f"  ! {view.field_errors[field_name]}")
    if view.error:
        lines.append(f"\n**{view.error}**")
    return "\n".join(lines)


def _render_summary(job: Job) -> list[str]:
    lines = [f"### {job.title} — {job.company.name}"]
    lines.append(f"**Type:** {job.type} | **Location:** {job.location}")
    if job.salary:
        lines.append(f"**Salary:** {job.salary:,}")
    if job.id:
        lines.append(f"`{job_path(job.id)}`")
    lines.append("")  # blank line between entries
    return lines


def _format_posted(posted: datetime) -> str:
    """Format a posted date as human-readable age."""
    now = datetime.now(timezone.utc)
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)
    days = (now - posted).days
    if days == 0:
        return "Today"
    elif days == 1:
        return "Yesterday"
    elif days < 7:
        return f"{days} days ago"
    else:
        return posted.strftime("%Y-%m-%d")
