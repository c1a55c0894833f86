# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import logging
import pathlib
import sys

from .sessions import run_batch, write_actions
from .settings import Settings

logger = logging.getLogger(__name__)


def session_list(value: str) -> list[str]:
    sessions = [s.strip() for s in value.split(",") if s.strip()]
    if not sessions:
        raise argparse.ArgumentTypeError("at least one session id is required")
    return sessions


extract_actions_parser = argparse.ArgumentParser(prog="actiontrace-extract")
extract_actions_parser.add_argument("-d", "--data", type=pathlib.Path, default=pathlib.Path("."), help="directory holding one folder per session")
extract_actions_parser.add_argument("-s", "--sessions", type=session_list, required=True, help="comma-separated session ids")
extract_actions_parser.add_argument("-o", "--out", type=pathlib.Path, default=None, help="where to write actions (defaults to the data directory)")
extract_actions_parser.add_argument("--settings", type=pathlib.Path, default=None)
extract_actions_parser.add_argument("-v", "--verbose", action="store_true")


def extract_actions_cli(argv=sys.argv):
    args = extract_actions_parser.parse_args(argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    settings = Settings.default() if args.settings is None else Settings.load(args.settings)
    out_dir = args.data if args.out is None else args.out

    result = run_batch(args.data, args.sessions, settings)
    for session_id in args.sessions:
        if session_id in result.actions:
            dest = write_actions(out_dir, session_id, result.actions[session_id])
            logger.info("[%s] wrote %s", session_id, dest)
    if not result.ok:
        logger.warning("%d of %d sessions failed: %s", len(result.failures), len(args.sessions), ", ".join(result.failures))
        return 1
    return 0
