#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from typing import Optional
from lib.errors import MalformedArtifactIdError
from monitoring.logger import Logger

# Amazon builders report artifact ids as "<region>:<ami-id>"
AMAZON_BUILDER_IDS = (
    'mitchellh.amazonebs',
    'mitchellh.amazon.ebssurrogate',
    'mitchellh.amazon.instance',
    'mitchellh.amazon.chroot',
)


@dataclass(frozen=True)
class Artifact:
    builder_id: str
    id: str
    build_name: str = ''
    # Set by producers that know their id format; None falls back to the builder id
    region_qualified: Optional[bool] = None

    @property
    def is_region_qualified(self) -> bool:
        if self.region_qualified is not None:
            return self.region_qualified
        return self.builder_id in AMAZON_BUILDER_IDS


@dataclass(frozen=True)
class ImageReference:
    image_id: str
    region: Optional[str] = None


def extract_image(artifact: Artifact) -> ImageReference:
    """Extract the cloud-native image id (and region, if encoded) from an artifact.

    Raises:
        MalformedArtifactIdError: If a region-qualified id has no image part.
    """
    if not artifact.is_region_qualified:
        return ImageReference(image_id=artifact.id)

    segments = artifact.id.split(':')
    if len(segments) < 2 or not segments[1]:
        Logger().error(f"Malformed artifact id '{artifact.id}' from builder {artifact.builder_id}")
        raise MalformedArtifactIdError(artifact.builder_id, artifact.id)
    return ImageReference(image_id=segments[1], region=segments[0])
