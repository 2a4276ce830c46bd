#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

import sys
from lib.artifact import Artifact
from lib.config import load_raw_config
from lib.errors import CloudProfileUpdateError, PostProcessorError
from monitoring.logger import Logger
from postprocessors.plugins.plugin_interface import Ui
from postprocessors.teamcity.teamcity_post_processor import TeamCityPostProcessor

USAGE = "Usage: packer-teamcity <config_path> <builder_id> <artifact_id> [build_name]"


class StdoutUi(Ui):
    def __init__(self, out=None, err=None):
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err

    def message(self, message: str) -> None:
        print(message, file=self.out, flush=True)

    def error(self, message: str) -> None:
        print(message, file=self.err, flush=True)


def main(argv: list = None, post_processor: TeamCityPostProcessor = None, ui: Ui = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 3 or len(argv) > 4:
        print(USAGE)
        return 1

    config_path, builder_id, artifact_id = argv[:3]
    build_name = argv[3] if len(argv) > 3 else ''
    logger = Logger()
    ui = ui or StdoutUi()
    post_processor = post_processor or TeamCityPostProcessor()
    artifact = Artifact(builder_id=builder_id, id=artifact_id, build_name=build_name)

    try:
        raws = [load_raw_config(config_path)]
        if build_name:
            raws.append({'packer_build_name': build_name})
        post_processor.configure(*raws)
        post_processor.post_process(ui, artifact)
    except CloudProfileUpdateError as e:
        logger.error(f"Cloud profile update failed for artifact {artifact_id}: {e}")
        ui.error(f"Error running post-processor: {e}")
        if e.keep:
            ui.error(f"Artifact {artifact_id} was kept, update the cloud profile manually")
        return 1
    except PostProcessorError as e:
        logger.error(f"Post-processor failed: {e}")
        ui.error(f"Error running post-processor: {e}")
        return 1
    logger.info(f"Post-processing of {artifact_id} completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
