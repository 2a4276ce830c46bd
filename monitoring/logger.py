#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

import logging
import os
from datetime import datetime

LOG_DIR_ENV = 'PACKER_TEAMCITY_LOG_DIR'
LOG_LEVEL_ENV = 'PACKER_TEAMCITY_LOG_LEVEL'

class Logger:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, 'INFO').upper())
        if not isinstance(level, int):
            level = logging.INFO
        self.logger = logging.getLogger('PackerTeamCity')
        self.logger.setLevel(level)
        # The pipeline owns stdout and stderr; records only go to the file
        self.logger.propagate = False
        self.logger.handlers = []

        log_dir = os.environ.get(LOG_DIR_ENV) or 'logs'
        os.makedirs(log_dir, exist_ok=True)

        # Parallel builds start one plugin process per build
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(log_dir, f'post_processor_{stamp}_{os.getpid()}.log')
        file_handler = logging.FileHandler(self.log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        self.logger.addHandler(file_handler)

    def info(self, message: str):
        self.logger.info(message)

    def error(self, message: str):
        self.logger.error(message)

    def warning(self, message: str):
        self.logger.warning(message)
