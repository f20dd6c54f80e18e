"""Tests for views/job_form.py — create and edit job forms."""

import json

import pytest
import requests
import responses

from views.base import FAILED, LOADED, SUBMITTING
from views.job_form import (
    CREATE_FAILED_MESSAGE,
    LOAD_FAILED_MESSAGE,
    CreateJobForm,
    EditJobForm,
    JobFormFields,
    fields_from_job,
    fields_to_job,
    parse_salary_input,
)

JOBS_URL = "http://jobs.test/api/jobs"

CREATE_INPUT = {
    "title": "Software Engineer",
    "type": "Full-Time",
    "description": "Great job",
    "location": "Helsinki",
    "salary": "5000",
    "companyName": "Tech Corp",
    "contactEmail": "hr@tech.com",
    "contactPhone": "123-456-7890",
}


def _fill(form, values):
    for name, value in values.items():
        form.set_field(name, value)


@pytest.fixture
def create_form(client, reporter, navigator):
    form = CreateJobForm(client, reporter, navigator)
    form.mount()
    return form


# --- field state ---


def test_create_defaults(create_form):
    assert create_form.fields == JobFormFields(type="Full-Time", salary="4500")
    assert create_form.state == LOADED


def test_set_field_accepts_markup_ids(create_form):
    create_form.set_field("companyName", "DevCo")
    create_form.set_field("contact_phone", "555-1234")
    assert create_form.fields.company_name == "DevCo"
    assert create_form.fields.contact_phone == "555-1234"


def test_set_field_unknown_name(create_form):
    with pytest.raises(KeyError):
        create_form.set_field("bonus", "lots")


def test_fields_round_trip_through_job(make_job):
    job = make_job()
    fields = fields_from_job(job)
    assert fields.salary == "5000"
    rebuilt = fields_to_job(fields, job)
    assert rebuilt.company == job.company
    assert rebuilt.id == "123"
    assert rebuilt.posted_date == job.posted_date


@pytest.mark.parametrize("text,expected", [
    ("5000", 5000),
    (" 5000 ", 5000),
    ("4,500", 4500),
    ("5000.50", 5000.5),
    ("5000.0", 5000),
])
def test_parse_salary_input(text, expected):
    result = parse_salary_input(text)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("text", ["abc", "nan", "inf", ""])
def test_parse_salary_input_rejects(text):
    with pytest.raises(ValueError):
        parse_salary_input(text)


# --- create ---


@responses.activate
def test_create_posts_nested_company(create_form, navigator, job_payload):
    responses.add(responses.POST, JOBS_URL, json=job_payload, status=201)
    _fill(create_form, CREATE_INPUT)

    assert create_form.submit() is True

    assert len(responses.calls) == 1
    request = responses.calls[0].request
    body = json.loads(request.body)
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert body == {
        "title": "Software Engineer",
        "type": "Full-Time",
        "description": "Great job",
        "location": "Helsinki",
        "salary": 5000,
        "company": {
            "name": "Tech Corp",
            "contactEmail": "hr@tech.com",
            "contactPhone": "123-456-7890",
        },
    }
    assert navigator.history == ["/"]


@pytest.mark.parametrize("body", ["", "OK"])
@responses.activate
def test_create_succeeds_without_json_echo(create_form, reporter, navigator, body):
    """Any 2xx means the job was stored, whatever the body holds."""
    responses.add(responses.POST, JOBS_URL, body=body, status=201)
    _fill(create_form, CREATE_INPUT)

    assert create_form.submit() is True

    assert navigator.history == ["/"]
    assert create_form.state == LOADED
    assert create_form.error == ""
    assert reporter.reports == []


@pytest.mark.parametrize("failure", [
    {"status": 400},
    {"body": requests.exceptions.ConnectionError("Network error")},
])
@responses.activate
def test_create_failure_keeps_values(create_form, reporter, navigator, failure):
    responses.add(responses.POST, JOBS_URL, **failure)
    _fill(create_form, CREATE_INPUT)

    create_form.submit()

    assert navigator.history == []
    assert create_form.state == FAILED
    assert create_form.error == CREATE_FAILED_MESSAGE
    assert len(reporter.reports) == 1
    assert create_form.fields.title == "Software Engineer"
    assert create_form.fields.company_name == "Tech Corp"
    assert create_form.fields.salary == "5000"


@responses.activate
def test_create_resubmit_after_failure(create_form, navigator, job_payload):
    responses.add(responses.POST, JOBS_URL, status=500)
    _fill(create_form, CREATE_INPUT)
    create_form.submit()

    responses.replace(responses.POST, JOBS_URL, json=job_payload, status=201)
    assert create_form.submit() is True

    assert len(responses.calls) == 2
    assert navigator.history == ["/"]


@responses.activate
def test_required_fields_block_submission(create_form):
    create_form.set_field("title", "Developer")

    assert create_form.submit() is False

    assert len(responses.calls) == 0
    assert set(create_form.field_errors) == {
        "description", "location", "company_name", "contact_email",
    }
    assert create_form.field_errors["location"] == "Location is required"


@responses.activate
def test_non_numeric_salary_blocks_submission(create_form):
    _fill(create_form, {**CREATE_INPUT, "salary": "competitive"})

    assert create_form.submit() is False

    assert create_form.field_errors == {"salary": "Salary must be a number"}
    assert len(responses.calls) == 0


def test_editing_a_field_clears_its_error(create_form):
    create_form.validate()
    assert "title" in create_form.field_errors
    create_form.set_field("title", "Dev")
    assert "title" not in create_form.field_errors


@responses.activate
def test_one_post_per_click(create_form, job_payload):
    seen = {}

    def _callback(request):
        seen["state"] = create_form.state
        seen["second"] = create_form.submit()
        return (201, {}, json.dumps(job_payload))

    responses.add_callback(responses.POST, JOBS_URL, callback=_callback)
    _fill(create_form, CREATE_INPUT)
    create_form.submit()

    assert seen == {"state": SUBMITTING, "second": False}
    assert len(responses.calls) == 1


def test_unmounted_form_does_not_submit(client, reporter, navigator):
    form = CreateJobForm(client, reporter, navigator)
    _fill(form, CREATE_INPUT)
    assert form.submit() is False


# --- edit ---


@pytest.fixture
def edit_form(client, reporter, navigator):
    return EditJobForm("123", client, reporter, navigator)


@responses.activate
def test_edit_loads_with_get_and_populates(edit_form, job_payload):
    responses.add(responses.GET, f"{JOBS_URL}/123", json=job_payload, status=200)

    edit_form.mount()

    assert responses.calls[0].request.method == "GET"
    assert edit_form.state == LOADED
    assert edit_form.fields == JobFormFields(
        title="Software Engineer",
        type="Full-Time",
        description="Develop amazing software",
        location="Helsinki",
        salary="5000",
        company_name="Tech Corp",
        contact_email="hr@tech.com",
        contact_phone="123-456-7890",
    )


@responses.activate
def test_edit_submit_puts_full_record_once(edit_form, navigator, job_payload):
    responses.add(responses.GET, f"{JOBS_URL}/123", json=job_payload, status=200)
    responses.add(responses.PUT, f"{JOBS_URL}/123", json={**job_payload, "title": "Senior Developer"}, status=200)

    edit_form.mount()
    edit_form.set_field("title", "Senior Developer")
    assert edit_form.submit() is True

    puts = [c for c in responses.calls if c.request.method == "PUT"]
    assert len(puts) == 1
    assert puts[0].request.url == f"{JOBS_URL}/123"
    body = json.loads(puts[0].request.body)
    assert body["id"] == "123"
    assert body["title"] == "Senior Developer"
    assert body["description"] == "Develop amazing software"
    assert str(body["salary"]) == "5000"
    assert body["company"] == {
        "name": "Tech Corp",
        "contactEmail": "hr@tech.com",
        "contactPhone": "123-456-7890",
    }
    assert navigator.history == ["/jobs/123"]


@responses.activate
def test_edit_record_without_id_uses_route_id(edit_form, navigator, job_payload):
    payload = {k: v for k, v in job_payload.items() if k not in ("id", "_id")}
    responses.add(responses.GET, f"{JOBS_URL}/123", json=payload, status=200)
    responses.add(responses.PUT, f"{JOBS_URL}/123", json=job_payload, status=200)

    edit_form.mount()
    edit_form.submit()

    body = json.loads(responses.calls[1].request.body)
    assert body["id"] == "123"
    assert navigator.history == ["/jobs/123"]


@responses.activate
def test_edit_no_content_navigates_to_detail(edit_form, reporter, navigator, job_payload):
    responses.add(responses.GET, f"{JOBS_URL}/123", json=job_payload, status=200)
    responses.add(responses.PUT, f"{JOBS_URL}/123", status=204)

    edit_form.mount()
    assert edit_form.submit() is True

    assert navigator.history == ["/jobs/123"]
    assert edit_form.state == LOADED
    assert reporter.reports == []


@responses.activate
def test_edit_update_failure_keeps_values(edit_form, reporter, navigator, job_payload):
    responses.add(responses.GET, f"{JOBS_URL}/123", json=job_payload, status=200)
    responses.add(responses.PUT, f"{JOBS_URL}/123", status=500)

    edit_form.mount()
    edit_form.set_field("location", "Tampere")
    edit_form.submit()

    assert navigator.history == []
    assert edit_form.state == FAILED
    assert edit_form.fields.location == "Tampere"
    assert len(reporter.reports) == 1


@responses.activate
def test_edit_load_failure_disables_submit(edit_form, reporter, job_payload):
    responses.add(responses.GET, f"{JOBS_URL}/123", status=404)

    edit_form.mount()

    assert edit_form.state == FAILED
    assert edit_form.error == LOAD_FAILED_MESSAGE
    assert edit_form.can_submit is False
    assert edit_form.submit() is False
    assert len(responses.calls) == 1
    assert len(reporter.reports) == 1


@responses.activate
def test_edit_cancel_navigates_without_request(edit_form, navigator, job_payload):
    responses.add(responses.GET, f"{JOBS_URL}/123", json=job_payload, status=200)
    edit_form.mount()

    edit_form.cancel()

    assert navigator.history == ["/jobs/123"]
    assert len(responses.calls) == 1


@responses.activate
def test_unmount_during_update_skips_navigation(edit_form, reporter, navigator, job_payload):
    responses.add(responses.GET, f"{JOBS_URL}/123", json=job_payload, status=200)

    def _callback(request):
        edit_form.unmount()
        return (200, {}, json.dumps(job_payload))

    responses.add_callback(responses.PUT, f"{JOBS_URL}/123", callback=_callback)
    edit_form.mount()
    edit_form.submit()

    assert navigator.history == []
    assert reporter.reports == []
