#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

from lib.artifact import Artifact, extract_image
from lib.config import Config, CUSTOM_IMAGE_MODE, decode_config
from lib.execution_context import ExecutionContext
from lib.service_messages import notify
from lib.teamcity_api import CloudProfileClient
from monitoring.logger import Logger
from postprocessors.plugins.plugin_interface import PostProcessor, PostProcessResult, Ui


class TeamCityPostProcessor(PostProcessor):
    def __init__(self, context: ExecutionContext = None, session=None):
        self.logger = Logger()
        self.context = context or ExecutionContext.from_environ()
        self.session = session
        self.config = Config()

    def configure(self, *raws: dict) -> None:
        self.config = decode_config(*raws)

    def post_process(self, ui: Ui, artifact: Artifact) -> PostProcessResult:
        self.logger.info(f"Post-processing artifact {artifact.id} from builder {artifact.builder_id}")
        image = extract_image(artifact)
        if not self.context.in_teamcity and not self.config.updates_cloud_profile:
            self.logger.warning(f"Not running under TeamCity and no teamcity_url configured, nothing to report for {artifact.id}")

        notify(ui, self.context, self.config, artifact, image)

        if self.config.updates_cloud_profile:
            client = CloudProfileClient(self.config, self.session)
            value = client.update(artifact, image)
            if self.config.mode == CUSTOM_IMAGE_MODE:
                ui.message(f"Cloud agent image '{self.config.custom_image_name}' is switched to agent '{value}'")
            else:
                ui.message(f"Cloud agent image '{self.config.cloud_image}' is switched to image '{value}'")

        return PostProcessResult(artifact=artifact, keep=True, force_override=False)
