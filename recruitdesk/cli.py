"""
Command line interface for recruitdesk.

Two subcommands sit on top of a CSV directory store:

* ``get`` prints a `get_data` payload as JSON, e.g.
  ``recruitdesk get callListBundle --id CL1``.
* ``log-activity`` appends one activity and prints the new ID.

Settings come from ``--config`` (YAML) and ``RECRUITDESK_*``
environment variables; ``--data-dir`` overrides the store directory.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List

from .config import Settings, load_settings
from .errors import RecruitDeskError
from .resolve.dispatch import ENTITIES, get_data
from .store.csv_store import CsvTableStore
from .write.activity_writer import save_activity

logger = logging.getLogger("recruitdesk.cli")


def _store(settings: Settings) -> CsvTableStore:
    return CsvTableStore(settings.data_dir)


def cmd_get(args: argparse.Namespace, settings: Settings) -> None:
    """Print the payload for one entity tag."""
    options: Dict[str, object] = {}
    if args.id:
        options["id"] = args.id
    if args.candidate:
        options["candidateId"] = args.candidate
    if args.job:
        options["jobId"] = args.job
    if args.company:
        options["companyId"] = args.company
    payload = get_data(_store(settings), args.entity, **options)
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_log_activity(args: argparse.Namespace, settings: Settings) -> None:
    """Append an activity built from the command line flags."""
    fields = {
        "Type": args.type,
        "CandidateID": args.candidate,
        "JobID": args.job,
        "CallListID": args.call_list,
        "CompanyID": args.company,
        "Outcome": args.outcome,
        "Notes": args.notes,
        "RecruiterID": args.recruiter_id,
        "RecruiterName": args.recruiter_name,
    }
    result = save_activity(_store(settings), fields, settings)
    print(json.dumps(result))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recruitdesk", description="Recruiting table join layer")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--data-dir", dest="data_dir", help="Directory holding the table CSV files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    get_cmd = subparsers.add_parser("get", help="Print an entity payload as JSON")
    get_cmd.add_argument("entity", choices=ENTITIES, help="Entity tag")
    get_cmd.add_argument("--id", help="Record ID (job, company, candidate or call list)")
    get_cmd.add_argument("--candidate", help="CandidateID for activities")
    get_cmd.add_argument("--job", help="JobID for activities")
    get_cmd.add_argument("--company", help="CompanyID for jobs")
    get_cmd.set_defaults(func=cmd_get)

    log_cmd = subparsers.add_parser("log-activity", help="Append an activity")
    log_cmd.add_argument("--type", help="Activity type (default: Note)")
    log_cmd.add_argument("--candidate", help="CandidateID")
    log_cmd.add_argument("--job", help="JobID")
    log_cmd.add_argument("--call-list", dest="call_list", help="CallListID")
    log_cmd.add_argument("--company", help="CompanyID")
    log_cmd.add_argument("--outcome", help="Outcome of the activity")
    log_cmd.add_argument("--notes", help="Free text notes")
    log_cmd.add_argument("--recruiter-id", dest="recruiter_id", help="RecruiterID")
    log_cmd.add_argument("--recruiter-name", dest="recruiter_name", help="RecruiterName")
    log_cmd.set_defaults(func=cmd_log_activity)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.config)
    except RecruitDeskError as exc:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        logger.error("%s", exc)
        return 1
    if args.data_dir:
        settings.data_dir = args.data_dir
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    try:
        args.func(args, settings)
    except RecruitDeskError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
