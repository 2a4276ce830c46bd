#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

import os
from dataclasses import dataclass

TEAMCITY_VERSION_ENV = 'TEAMCITY_VERSION'


@dataclass(frozen=True)
class ExecutionContext:
    """What the post-processor knows about the process it runs in."""
    teamcity_version: str = ''

    @classmethod
    def from_environ(cls, environ=None) -> 'ExecutionContext':
        environ = os.environ if environ is None else environ
        return cls(teamcity_version=environ.get(TEAMCITY_VERSION_ENV) or '')

    @property
    def in_teamcity(self) -> bool:
        return self.teamcity_version != ''
