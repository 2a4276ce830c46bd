#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

import os
import tempfile
from unittest import mock

import pytest
import requests

from postprocessors.plugins.plugin_interface import Ui

# The logger is a process-wide singleton; keep its files out of the working tree
os.environ.setdefault("PACKER_TEAMCITY_LOG_DIR", tempfile.mkdtemp(prefix="packer-teamcity-logs-"))


class RecordingUi(Ui):
    def __init__(self):
        self.messages = []
        self.errors = []

    def message(self, message: str) -> None:
        self.messages.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def ui():
    return RecordingUi()


def fake_response(status_code=200, reason="OK"):
    response = mock.MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


@pytest.fixture
def make_response():
    return fake_response


@pytest.fixture
def session():
    """A real session whose send() is replaced, so request preparation still runs."""
    s = requests.Session()
    s.send = mock.MagicMock(return_value=fake_response())
    return s


@pytest.fixture
def cloud_image_raw():
    return {
        "teamcity_url": "https://teamcity.example.com",
        "username": "admin",
        "password": "secret",
        "project_id": "Infra",
        "cloud_image": "build-agent",
    }


@pytest.fixture
def custom_image_raw():
    return {
        "teamcity_url": "https://teamcity.example.com",
        "username": "admin",
        "password": "secret",
        "project_id": "Infra",
        "custom_image_name": "linux-agent",
        "agent_name": "agent-2026-10",
    }
