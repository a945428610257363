#
#  Copyright (C) 2017-2025 Dremio Corporation
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
import logging
import sys
from os import environ
from pathlib import Path
from typing import Optional, Union

import structlog

_ROOT = "pluginutils"

_shared_processors = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def get_log_file() -> Path:
    return (
        Path(environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
        / _ROOT
        / f"{_ROOT}.log"
    )


def _handler(to_file: bool) -> logging.Handler:
    if to_file:
        lf = get_log_file()
        lf.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(lf)
    return logging.StreamHandler(sys.stderr)


# routes structlog events through the stdlib logging tree rooted at
# "pluginutils" so that set_level and handlers apply to every module
def configure(enable_json_logging: bool = False, to_file: bool = False) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if enable_json_logging
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=_shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = _handler(to_file)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer, foreign_pre_chain=_shared_processors
        )
    )
    root = logging.getLogger(_ROOT)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.propagate = False


def set_level(level: Union[str, int]) -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(_ROOT).setLevel(level)


def logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    if name is None or name == _ROOT:
        return structlog.get_logger(_ROOT)
    if not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return structlog.get_logger(name)
