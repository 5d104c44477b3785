from __future__ import annotations

import json
import logging
import os
import sys
from typing import Dict, List

from dotenv import dotenv_values

from settings.config import REQUIRED_ENV, Settings
from settings.logging_config import configure_logging

logger = logging.getLogger(__name__)

_SECRET_KEYS = {"SURREALDB_PASS"}


def missing_env(environ=None, env_file=".env") -> List[str]:
	"""Required keys set neither in the process environment nor in ``env_file``.

	Mirrors the sources ``Settings`` reads: environment variables first,
	then the dotenv file.
	"""
	environ = os.environ if environ is None else environ
	values = {k: v for k, v in dotenv_values(env_file).items() if v} if env_file else {}
	values.update({k: v for k, v in environ.items() if v})
	return [key for key in REQUIRED_ENV if not values.get(key)]


def resolved_config(cfg: Settings) -> Dict[str, object]:
	values = cfg.model_dump()
	for key in _SECRET_KEYS:
		values[key] = "set" if values.get(key) else "missing"
	return values


def main() -> int:
	configure_logging()
	cfg = Settings()
	print("Config validation results:")
	print(json.dumps(resolved_config(cfg), indent=2))

	missing = missing_env(env_file=cfg.model_config.get("env_file"))
	if missing:
		logger.warning("Missing environment variables (using defaults): %s", ", ".join(missing))
		return 1
	logger.info("All required environment variables are set.")
	return 0


if __name__ == "__main__":
	sys.exit(main())
