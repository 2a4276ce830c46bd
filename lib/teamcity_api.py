#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

import requests
from lib.artifact import Artifact, ImageReference
from lib.config import Config, CUSTOM_IMAGE_MODE
from lib.errors import RemoteStatusError, RequestConstructionError, TransportError
from monitoring.logger import Logger

CLOUD_IMAGE_PATH = ("{base}/httpAuth/app/rest/projects/id:{project}/projectFeatures/"
                    "type:CloudImage,property(name:{selector},value:{image})/properties/{prop}")


def cloud_image_property_url(config: Config, artifact: Artifact) -> str:
    base = config.teamcity_url.rstrip('/')
    if config.mode == CUSTOM_IMAGE_MODE:
        selector, image, prop = 'source-id', config.custom_image_name, 'sourceVmName'
    elif artifact.is_region_qualified:
        selector, image, prop = 'image-name-prefix', config.cloud_image, 'amazon-id'
    else:
        selector, image, prop = 'source-id', config.cloud_image, 'sourceVmName'
    return CLOUD_IMAGE_PATH.format(base=base, project=config.project_id, selector=selector, image=image, prop=prop)


def property_value(config: Config, image: ImageReference) -> str:
    if config.mode == CUSTOM_IMAGE_MODE:
        return config.agent_name
    return image.image_id


class CloudProfileClient:
    """Updates a cloud image property of a TeamCity project through the REST API."""

    def __init__(self, config: Config, session: requests.Session = None):
        self.config = config
        self.session = session
        self.logger = Logger()

    def update(self, artifact: Artifact, image: ImageReference) -> str:
        """PUT the new value into the cloud image property and return it.

        Raises:
            RequestConstructionError: If the request cannot be built.
            TransportError: If the server cannot be reached.
            RemoteStatusError: If the server answers with anything but 200.
        """
        if self.session is not None:
            return self._put(self.session, artifact, image)
        with requests.Session() as session:
            return self._put(session, artifact, image)

    def _put(self, session: requests.Session, artifact: Artifact, image: ImageReference) -> str:
        url = cloud_image_property_url(self.config, artifact)
        value = property_value(self.config, image)
        request = requests.Request(
            'PUT',
            url,
            data=value.encode('utf-8'),
            headers={'Content-Type': 'text/plain'},
            auth=(self.config.username, self.config.password),
        )
        try:
            prepared = session.prepare_request(request)
        except (requests.exceptions.RequestException, ValueError) as e:
            self.logger.error(f"Failed to build cloud profile request for {url}: {e}")
            raise RequestConstructionError(str(e), artifact) from e

        self.logger.info(f"Updating cloud profile property at {url}")
        try:
            # CA bundle, proxies and verify settings from the environment (REQUESTS_CA_BUNDLE, HTTPS_PROXY)
            settings = session.merge_environment_settings(prepared.url, {}, None, None, None)
            with session.send(prepared, timeout=self.config.http_timeout, **settings) as response:
                status_code, reason = response.status_code, response.reason or ''
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Failed to reach TeamCity at {self.config.teamcity_url}: {e}")
            raise TransportError(str(e), artifact) from e

        if status_code != 200:
            self.logger.error(f"TeamCity rejected cloud profile update: {status_code} {reason}")
            raise RemoteStatusError(status_code, reason, artifact)
        self.logger.info(f"Cloud profile property updated to {value}")
        return value
