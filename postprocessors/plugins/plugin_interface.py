#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Ui(ABC):
    @abstractmethod
    def message(self, message: str) -> None:
        """Writes a line to the build log."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Writes an error line to the build log."""
        pass


@dataclass
class PostProcessResult:
    artifact: Any
    keep: bool = True
    force_override: bool = False


class PostProcessor(ABC):
    @abstractmethod
    def configure(self, *raws: dict) -> None:
        """Decodes and validates the raw configuration bundles."""
        pass

    @abstractmethod
    def post_process(self, ui: Ui, artifact) -> PostProcessResult:
        """Processes a built artifact and returns it to the pipeline."""
        pass
