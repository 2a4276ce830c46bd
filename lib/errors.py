#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0


class PostProcessorError(Exception):
    """Base class for every error raised by the TeamCity post-processor."""


class ConfigFileError(PostProcessorError):
    pass


class ConfigValidationError(PostProcessorError):
    """Aggregate of every configuration rule that failed."""

    def __init__(self, errors: list):
        self.errors = list(errors)
        super().__init__(self._format())

    def _format(self) -> str:
        points = "\n".join(f"* {e}" for e in self.errors)
        return f"{len(self.errors)} error(s) occurred:\n\n{points}"


class MalformedArtifactIdError(PostProcessorError):
    def __init__(self, builder_id: str, artifact_id: str):
        self.builder_id = builder_id
        self.artifact_id = artifact_id
        super().__init__(
            f"Artifact id '{artifact_id}' from builder {builder_id} is not in the form <region>:<image-id>"
        )


class CloudProfileUpdateError(PostProcessorError):
    """Updating the cloud profile failed.

    The artifact is handed back unchanged together with ``keep`` so the
    pipeline can decide whether the whole build fails.
    """

    def __init__(self, message: str, artifact=None, keep: bool = True):
        super().__init__(message)
        self.artifact = artifact
        self.keep = keep


class RequestConstructionError(CloudProfileUpdateError):
    pass


class TransportError(CloudProfileUpdateError):
    pass


class RemoteStatusError(CloudProfileUpdateError):
    def __init__(self, status_code: int, reason: str, artifact=None, keep: bool = True):
        self.status_code = status_code
        self.status = f"{status_code} {reason}".strip()
        super().__init__(f"Error updating a cloud profile: {self.status}", artifact, keep)
