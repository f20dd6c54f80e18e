import logging
import math
from datetime import datetime
from urllib.parse import quote

import requests

import config as config
from cancellation import CancelToken
from errors import DecodeFailure, NetworkFailure, RequestFailed
from models import Company, Job

logger = logging.getLogger(__name__)

JOBS_PATH = "/api/jobs"


class JobsClient:
    """Thin wrapper over the /api/jobs REST resource.

    Each call is a single attempt. Transport problems raise NetworkFailure,
    non-2xx statuses raise RequestFailed, unusable read bodies raise
    DecodeFailure. Writes succeed on any 2xx whatever the body holds.
    Passing a CancelToken makes a call raise RequestCancelled instead of
    returning once the token has been cancelled.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None,
                 session: requests.Session | None = None):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = session or requests.Session()

    # --- reads ---

    def list_jobs(self, cancel_token: CancelToken | None = None) -> list[Job]:
        return self._fetch_list(JOBS_PATH, cancel_token)

    def list_jobs_by_type(self, job_type: str, cancel_token: CancelToken | None = None) -> list[Job]:
        return self._fetch_list(f"{JOBS_PATH}/type/{_segment(job_type)}", cancel_token)

    def list_jobs_by_location(self, location: str, cancel_token: CancelToken | None = None) -> list[Job]:
        return self._fetch_list(f"{JOBS_PATH}/location/{_segment(location)}", cancel_token)

    def get_job(self, job_id: str, cancel_token: CancelToken | None = None) -> Job:
        resp = self._request("GET", f"{JOBS_PATH}/{_segment(job_id)}", cancel_token)
        return job_from_dict(_decode(resp))

    # --- writes ---

    def create_job(self, job: Job, cancel_token: CancelToken | None = None) -> Job | None:
        """POST a new job. Returns the stored record if the server echoed one."""
        resp = self._request("POST", JOBS_PATH, cancel_token, payload=job_to_payload(job))
        return _saved_job(resp)

    def update_job(self, job: Job, cancel_token: CancelToken | None = None) -> Job | None:
        if not job.id:
            raise ValueError("Cannot update a job without an id")
        resp = self._request(
            "PUT",
            f"{JOBS_PATH}/{_segment(job.id)}",
            cancel_token,
            payload=job_to_payload(job, include_server_fields=True),
        )
        return _saved_job(resp)

    def delete_job(self, job_id: str, cancel_token: CancelToken | None = None) -> None:
        self._request("DELETE", f"{JOBS_PATH}/{_segment(job_id)}", cancel_token)

    # --- plumbing ---

    def _fetch_list(self, path: str, cancel_token: CancelToken | None) -> list[Job]:
        data = _decode(self._request("GET", path, cancel_token))
        if not isinstance(data, list):
            raise DecodeFailure(f"Expected a list of jobs from {path}, got {type(data).__name__}")
        return [job_from_dict(item) for item in data]

    def _request(self, method: str, path: str, cancel_token: CancelToken | None,
                 payload: dict | None = None) -> requests.Response:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        url = f"{self.base_url}{path}"
        logger.debug(f"[api] {method} {url}")
        try:
            # json= sets Content-Type: application/json on writes
            resp = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            if cancel_token is not None:
                cancel_token.raise_if_cancelled()
            logger.warning(f"[api] {method} {path} failed before a response: {e}")
            raise NetworkFailure(str(e)) from e

        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        if not 200 <= resp.status_code < 300:
            logger.warning(f"[api] {method} {path} returned {resp.status_code}")
            raise RequestFailed(resp.status_code)
        return resp


def _segment(value: str) -> str:
    """Percent-encode a value as a single path segment."""
    return quote(str(value), safe="")


def _decode(resp: requests.Response):
    try:
        return resp.json()
    except ValueError as e:
        raise DecodeFailure(f"Response body is not valid JSON: {e}") from e


def _saved_job(resp: requests.Response) -> Job | None:
    # 2xx means saved; the echoed record is optional
    if not resp.content or not resp.content.strip():
        return None
    try:
        return job_from_dict(_decode(resp))
    except DecodeFailure as e:
        logger.warning(f"[api] {resp.request.method} {resp.url} succeeded but echoed an unusable body: {e}")
        return None


def job_from_dict(item) -> Job:
    """Build a Job from its wire representation."""
    if not isinstance(item, dict):
        raise DecodeFailure(f"Expected a job object, got {type(item).__name__}")

    company = item.get("company") or {}
    if not isinstance(company, dict):
        raise DecodeFailure("Job 'company' must be an object")

    job_id = item.get("id") or item.get("_id")
    return Job(
        title=item.get("title", "") or "",
        type=item.get("type", "") or "",
        description=item.get("description", "") or "",
        location=item.get("location", "") or "",
        salary=_parse_salary(item.get("salary")),
        company=Company(
            name=company.get("name", "") or "",
            contact_email=company.get("contactEmail", "") or "",
            contact_phone=company.get("contactPhone", "") or "",
        ),
        id=str(job_id) if job_id is not None else None,
        posted_date=_parse_date(item.get("postedDate", "")),
        raw_data=item,
    )


def job_to_payload(job: Job, include_server_fields: bool = False) -> dict:
    """Wire body for a Job. Creation bodies omit id and postedDate."""
    payload = {
        "title": job.title,
        "type": job.type,
        "description": job.description,
        "location": job.location,
        "salary": job.salary,
        "company": {
            "name": job.company.name,
            "contactEmail": job.company.contact_email,
            "contactPhone": job.company.contact_phone,
        },
    }
    if include_server_fields:
        payload["id"] = job.id
        if job.posted_date is not None:
            payload["postedDate"] = job.posted_date.isoformat()
    return payload


def _parse_salary(value) -> int | float:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise DecodeFailure(f"Job salary is not numeric: {value!r}")
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        raise DecodeFailure(f"Job salary is not numeric: {value!r}")
    if not math.isfinite(number):
        raise DecodeFailure(f"Job salary is not a finite number: {value!r}")
    return int(number) if number.is_integer() else number


def _parse_date(date_str) -> datetime | None:
    if not date_str or not isinstance(date_str, str):
        return None
    try:
        return datetime.fromisoformat(date_str.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"[api] Unparseable postedDate: {date_str}")
        return None
