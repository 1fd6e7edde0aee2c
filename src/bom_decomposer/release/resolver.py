# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the ReleaseIdResolver class, which finds the release an artifact was built from."""

import logging
from collections.abc import Iterable, Sequence

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.errors import ResolutionError
from bom_decomposer.metadata.metadata_source_base import BaseMetadataSource
from bom_decomposer.release.detectors import default_detectors
from bom_decomposer.release.detectors.detector_base import ReleaseIdDetector
from bom_decomposer.release.release_id import (
    GroupArtifactOrigin,
    PlainVersion,
    ReleaseId,
    ReleaseVersion,
    ScmConnectionOrigin,
    Tag,
)

logger: logging.Logger = logging.getLogger(__name__)


class ReleaseIdResolver:
    """Resolve release ids by consulting the detectors in order before falling back to the default heuristic."""

    def __init__(
        self,
        metadata_source: BaseMetadataSource,
        detectors: Sequence[ReleaseIdDetector] | None = None,
    ) -> None:
        """Initialise the resolver.

        Parameters
        ----------
        metadata_source : BaseMetadataSource
            The source of the published metadata used by the default heuristic.
        detectors : Sequence[ReleaseIdDetector] | None
            The detectors to consult, in order. Defaults to the detectors enabled in ``defaults.ini``.
        """
        self.metadata_source = metadata_source
        self._detectors = tuple(default_detectors() if detectors is None else detectors)

    @property
    def detectors(self) -> tuple[ReleaseIdDetector, ...]:
        """Return the detectors in the order they are consulted."""
        return self._detectors

    def resolve(self, coords: ArtifactCoords) -> ReleaseId:
        """Return the release id of an artifact.

        The first detector returning a release id wins. If no detector applies, the default heuristic is used.

        Parameters
        ----------
        coords : ArtifactCoords
            The coordinates of the artifact.

        Returns
        -------
        ReleaseId
            The release id of the artifact.

        Raises
        ------
        ResolutionError
            If no detector applies and the default heuristic cannot determine the release id.
        """
        for detector in self._detectors:
            release_id = detector.detect_release_id(self, coords)
            if release_id is not None:
                logger.debug("Release id of %s detected by %s: %s", coords, detector.name, release_id)
                return release_id
        return self.default_release_id(coords)

    def default_release_id(self, coords: ArtifactCoords) -> ReleaseId:
        """Return the release id derived from the published metadata of the artifact.

        If the metadata declares an SCM connection, the release originates from it and is named by the SCM tag
        when one is declared, or by the artifact version otherwise. If no SCM connection is declared, the release
        originates from the group and name of the artifact and is named by its version.

        Parameters
        ----------
        coords : ArtifactCoords
            The coordinates of the artifact.

        Returns
        -------
        ReleaseId
            The default release id of the artifact.

        Raises
        ------
        ResolutionError
            If the artifact has no version or its metadata cannot be retrieved.
        """
        if not coords.version:
            raise ResolutionError(f"Cannot resolve the release of {coords} without a version.")

        connection = self.metadata_source.fetch_scm_connection(coords)
        if not connection:
            return ReleaseId(GroupArtifactOrigin(coords.group_id, coords.artifact_id), PlainVersion(coords.version))

        scm_tag = self.metadata_source.fetch_scm_tag(coords)
        version: ReleaseVersion = Tag(scm_tag) if scm_tag else PlainVersion(coords.version)
        return ReleaseId(ScmConnectionOrigin(connection), version)

    def resolve_all(self, artifacts: Iterable[ArtifactCoords]) -> dict[ArtifactCoords, ReleaseId]:
        """Resolve the release ids of several artifacts, keeping their order."""
        return {coords: self.resolve(coords) for coords in artifacts}
