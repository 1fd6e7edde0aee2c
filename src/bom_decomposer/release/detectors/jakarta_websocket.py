# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the release id detector of the Jakarta WebSocket API."""

import logging
from typing import TYPE_CHECKING

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.release.detectors.detector_base import ReleaseIdDetector
from bom_decomposer.release.release_id import ReleaseId, release_id_for_scm_and_tag

if TYPE_CHECKING:
    from bom_decomposer.release.resolver import ReleaseIdResolver

logger: logging.Logger = logging.getLogger(__name__)


class JakartaWebsocketReleaseIdDetector(ReleaseIdDetector):
    """Attribute Jakarta WebSocket artifacts to the jakartaee/websocket repository.

    Some releases publish the SCM connection of the eclipse-ee4j umbrella organization while the API is
    released from jakartaee/websocket with tags of the form ``<version>-RELEASE``.
    """

    name = "jakarta-websocket"

    GROUP_ID = "jakarta.websocket"
    WRONG_HOST_MARKER = "eclipse-ee4j"
    REPOSITORY = "https://github.com/jakartaee/websocket"

    def detect_release_id(self, resolver: "ReleaseIdResolver", coords: ArtifactCoords) -> ReleaseId | None:
        if coords.group_id != self.GROUP_ID:
            return None

        release_id = resolver.default_release_id(coords)
        if not release_id.origin_contains(self.WRONG_HOST_MARKER):
            return release_id

        logger.debug("Overriding release id %s of %s.", release_id, coords)
        return release_id_for_scm_and_tag(self.REPOSITORY, f"{coords.version}-RELEASE")
