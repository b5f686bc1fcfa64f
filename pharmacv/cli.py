#!/usr/bin/env python3
# Copyright 2025 Ivo Mateev
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
``pharmacv`` command.

A run parses arguments into a UserConfig (cli_gather), checks the CV file
and output folders (cli_prepare), then verifies, renders or exports the CV
(cli_execute). Failures after parsing are logged and turn into exit code 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .cli_config import UserConfig
from .cli_execute import execute
from .cli_gather import gather_user_requirements
from .cli_prepare import prepare_execution_environment
from .logging_utils import LOG, setup_logging


def _start_logging(config: UserConfig) -> None:
    if config.log_file:
        Path(config.log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    setup_logging(config.debug, log_file=config.log_file, verbosity=config.verbosity)


def _run(config: UserConfig) -> int:
    return execute(prepare_execution_environment(config))


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``pharmacv`` console script; returns the exit code."""
    # argparse exits on its own for --help and bad arguments
    config = gather_user_requirements(argv)
    _start_logging(config)

    try:
        return _run(config)
    except Exception as exc:
        LOG.error("%s", exc)
        LOG.debug("Traceback of the failed run", exc_info=True)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
