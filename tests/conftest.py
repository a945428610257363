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

"""
Global pytest fixtures for plugin-utils tests.
"""
import os

import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from pluginutils.config import settings


@pytest.fixture(autouse=True)
def reset_settings():
    """
    Drop the settings instance between tests so that overrides applied by one
    test (e.g. through the cli callback) do not leak into the next.
    """
    tok = settings._settings.set(None)
    yield
    settings._settings.reset(tok)


@pytest.fixture
def temp_config_dir():
    """Create a temporary directory for config files"""
    with TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def mock_config_dir(temp_config_dir):
    """Mock the home directory to use our temporary directory"""
    with patch.object(Path, "home", return_value=temp_config_dir):
        old_env = {k: os.environ.get(k) for k in ("XDG_CONFIG_HOME", "XDG_STATE_HOME")}
        os.environ["XDG_CONFIG_HOME"] = str(temp_config_dir)
        os.environ["XDG_STATE_HOME"] = str(temp_config_dir / "state")
        yield temp_config_dir
        for k, v in old_env.items():
            if v:
                os.environ[k] = v
            else:
                os.environ.pop(k, None)


@pytest.fixture
def form_data():
    return {
        "command": {"data": "FIND"},
        "smartSubstitution": {"data": True},
        "body": {"data": {"filter": {"status": "active"}}},
        "limit": 10,
    }
