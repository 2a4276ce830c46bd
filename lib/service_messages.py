#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

from lib.artifact import Artifact, ImageReference
from lib.config import Config, CUSTOM_IMAGE_MODE
from lib.execution_context import ExecutionContext
from monitoring.logger import Logger

PARAMETER_PREFIX = 'packer.artifact'


def service_message(name: str, value: str) -> str:
    # TODO: escape |, ', [, ] and newlines in values as TeamCity expects
    return f"##teamcity[setParameter name='{name}' value='{value}']"


def build_parameters(config: Config, artifact: Artifact, image: ImageReference) -> list:
    """Return the (name, value) pairs to publish for an artifact."""
    build_name = artifact.build_name or config.packer_build_name
    if config.mode != CUSTOM_IMAGE_MODE:
        return [(f"{PARAMETER_PREFIX}.{build_name}.id", image.image_id)]
    if artifact.is_region_qualified:
        return [
            (f"{PARAMETER_PREFIX}.aws.region", image.region),
            (f"{PARAMETER_PREFIX}.aws.ami", image.image_id),
        ]
    return [
        (f"{PARAMETER_PREFIX}.{build_name}.id", artifact.id),
        (f"{PARAMETER_PREFIX}.last.id", artifact.id),
    ]


def notify(ui, context: ExecutionContext, config: Config, artifact: Artifact, image: ImageReference) -> list:
    """Write setParameter service messages to the build log when running under TeamCity."""
    if not context.in_teamcity:
        return []
    messages = [service_message(name, value) for name, value in build_parameters(config, artifact, image)]
    for message in messages:
        ui.message(message)
    Logger().info(f"Published {len(messages)} TeamCity parameter(s) for artifact {artifact.id}")
    return messages
