#
#  Copyright (C) 2017-2025 Dremio Corporation
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
"""
Localhost Guard - Advisory Hints for Local Datasource Addresses.

A datasource that points at the local machine usually cannot be reached when
the server runs in a container or in the cloud. This module detects such
configurations and returns a hint for the user. Hints never fail validation.

Matching is by substring, so hosts that merely contain an identifier (for
example ``myhost.docker.internal.example.com``) also match. A datasource url
is only checked for ``localhost``, while endpoint hosts are checked for every
identifier.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError

from pluginutils.config import settings
from pluginutils.models.datasource import DatasourceConfiguration, Endpoint

logger = structlog.get_logger(__name__)

LOCALHOST_IDENTIFIERS = ("localhost", "host.docker.internal", "127.0.0.1")
URL_LOCALHOST_IDENTIFIER = "localhost"
LOCALHOST_HINT = (
    "You may not be able to access your localhost if Appsmith is running inside a docker "
    "container or on the cloud. To enable access to your localhost you may use ngrok to expose "
    "your local endpoint to the internet. Please check out Appsmith's documentation to understand more"
    "."
)

DatasourceLike = Union[DatasourceConfiguration, Mapping[str, Any], None]
EndpointLike = Union[Endpoint, Mapping[str, Any], None]


class LocalhostGuard:
    """
    Detects datasource configurations that point at the local machine.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        endpoint_identifiers: Iterable[str] = LOCALHOST_IDENTIFIERS,
        url_identifier: str = URL_LOCALHOST_IDENTIFIER,
        message: str = LOCALHOST_HINT,
        enabled: bool = True,
    ):
        """
        Initialize the guard.

        Args:
            endpoint_identifiers: Lower case substrings that mark a local host
            url_identifier: Substring that marks a local datasource url
            message: The advisory returned when a local address is found
            enabled: When False no hints are ever returned
        """
        self.endpoint_identifiers = tuple(i.lower() for i in endpoint_identifiers)
        self.url_identifier = url_identifier
        self.message = message
        self.enabled = enabled

    @classmethod
    def from_settings(cls, hints: Optional[settings.Hints] = None) -> "LocalhostGuard":
        if hints is None:
            hints = settings.instance().hints or settings.Hints()
        return cls(
            endpoint_identifiers=(
                hints.endpoint_identifiers
                if hints.endpoint_identifiers is not None
                else LOCALHOST_IDENTIFIERS
            ),
            url_identifier=hints.url_identifier or URL_LOCALHOST_IDENTIFIER,
            message=hints.message or LOCALHOST_HINT,
            enabled=hints.enabled is not False,
        )

    def is_local_endpoint(self, endpoint: EndpointLike) -> bool:
        match endpoint:
            case Endpoint(host=host):
                pass
            case Mapping():
                host = endpoint.get("host")
            case _:
                return False

        if not host or not isinstance(host, str):
            return False

        host = host.lower()
        return any(identifier in host for identifier in self.endpoint_identifiers)

    def uses_localhost(self, config: DatasourceConfiguration) -> bool:
        if config.uses_url:
            return self.url_identifier in config.url
        if config.uses_endpoints:
            return any(self.is_local_endpoint(e) for e in config.endpoints)
        return False

    def hint_for_localhost(self, config: DatasourceLike) -> set[str]:
        """
        Check whether a datasource points at localhost.

        Args:
            config: The datasource configuration, or its raw mapping form

        Returns:
            A set holding the advisory message, or an empty set
        """
        if config is None or not self.enabled:
            return set()

        if not isinstance(config, DatasourceConfiguration):
            try:
                config = DatasourceConfiguration.model_validate(config)
            except ValidationError as e:
                logger.warning(
                    "datasource_configuration_unreadable",
                    errors=e.error_count(),
                )
                return set()

        if not self.uses_localhost(config):
            return set()

        logger.debug(
            "localhost_hint_raised",
            source="url" if config.url else "endpoints",
        )
        return {self.message}


_default = LocalhostGuard()


def is_local_endpoint(endpoint: EndpointLike) -> bool:
    return _default.is_local_endpoint(endpoint)


def hint_for_localhost(config: DatasourceLike) -> set[str]:
    return _default.hint_for_localhost(config)
