from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from checkers.config import ENV_CAPTURE_RULE, ENV_QUIET_MOVE_LIMIT, ENV_STARTING_PLAYER, CaptureRule


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the Checkers FastAPI backend.")
	parser.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default="info", help="Log level for the engine and uvicorn.")
	parser.add_argument(
		"--capture-rule",
		choices=[rule.value for rule in CaptureRule],
		default=None,
		help="Whether available captures restrict other moves.",
	)
	parser.add_argument("--starting-player", choices=["white", "black"], default=None)
	parser.add_argument(
		"--quiet-move-limit",
		type=int,
		default=None,
		help="Declare a draw after this many plies without a capture or a man moving.",
	)
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	# the app factory reads rules from the environment so --reload workers see them too
	if args.capture_rule:
		os.environ[ENV_CAPTURE_RULE] = args.capture_rule
	if args.starting_player:
		os.environ[ENV_STARTING_PLAYER] = args.starting_player
	if args.quiet_move_limit is not None:
		os.environ[ENV_QUIET_MOVE_LIMIT] = str(args.quiet_move_limit)

	uvicorn.run(
		"checkers_api.app:create_app",
		factory=True,
		host=args.host,
		port=args.port,
		reload=args.reload,
		log_level=args.log_level,
	)


if __name__ == "__main__":
	main()
