#!/usr/bin/env python3
"""Job board client — list, show, add, edit and delete postings from the terminal."""

import logging
import sys

from api_client import JobsClient
from navigation import HistoryNavigator
from render import render_job_detail, render_job_form, render_job_list
from views.base import FAILED
from views.detail_view import DetailView
from views.job_form import CreateJobForm, EditJobForm
from views.list_view import ListView

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

USAGE = """usage:
  main.py list [type VALUE | location VALUE]
  main.py show ID
  main.py delete ID
  main.py add field=value ...
  main.py edit ID field=value ..."""


def run(argv: list[str], client: JobsClient | None = None, out=print) -> int:
    """Dispatch one command. Returns the process exit code."""
    client = client or JobsClient()
    navigator = HistoryNavigator()
    command = argv[0] if argv else "list"
    args = argv[1:]

    if command == "list":
        return _list(client, navigator, args, out)
    if command == "show" and len(args) == 1:
        view = DetailView(args[0], client, navigator=navigator)
        view.mount()
        out(render_job_detail(view))
        return 1 if view.state == FAILED else 0
    if command == "delete" and len(args) == 1:
        view = DetailView(args[0], client, navigator=navigator)
        view.mount()
        if view.job is None:
            out(render_job_detail(view))
            return 1
        view.delete()
        if view.error:
            out(render_job_detail(view))
            return 1
        out(f"Deleted job {args[0]}")
        return 0
    if command == "add":
        form = CreateJobForm(client, navigator=navigator)
        form.mount()
        return _fill_and_submit(form, args, navigator, out)
    if command == "edit" and args:
        form = EditJobForm(args[0], client, navigator=navigator)
        form.mount()
        if form.job is None:
            out(render_job_form(form))
            return 1
        return _fill_and_submit(form, args[1:], navigator, out)

    out(USAGE)
    return 2


def _list(client, navigator, args, out) -> int:
    if args and (len(args) != 2 or args[0] not in ("type", "location")):
        out(USAGE)
        return 2

    view = ListView(client, navigator=navigator)
    view.mount()
    if args and args[0] == "type":
        view.filters.set_type(args[1])
        if not view.submit_type_filter():
            out("A job type is required")
            return 2
    elif args:
        view.filters.set_location(args[1])
        if not view.submit_location_filter():
            out("A location is required")
            return 2
    out(render_job_list(view))
    return 1 if view.state == FAILED else 0


def _fill_and_submit(form, assignments, navigator, out) -> int:
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep:
            out(f"Expected field=value, got '{item}'")
            return 2
        try:
            form.set_field(name, value)
        except KeyError as e:
            out(str(e.args[0]))
            return 2

    form.submit()
    if form.field_errors or form.state == FAILED:
        out(render_job_form(form))
        return 1
    out(f"Saved. Next page: {navigator.current}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        sys.exit(1)
