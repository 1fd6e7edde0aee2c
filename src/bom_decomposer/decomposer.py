# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module groups artifacts by the release they were built from."""

import logging
from collections.abc import Iterable

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.release.project_release import ProjectRelease, ProjectReleaseBuilder
from bom_decomposer.release.release_id import ReleaseId
from bom_decomposer.release.resolver import ReleaseIdResolver

logger: logging.Logger = logging.getLogger(__name__)


def decompose(artifacts: Iterable[ArtifactCoords], resolver: ReleaseIdResolver) -> list[ProjectRelease]:
    """Decompose a list of artifacts into the releases they were built from.

    Parameters
    ----------
    artifacts : Iterable[ArtifactCoords]
        The artifacts, e.g. the constraints of a BOM.
    resolver : ReleaseIdResolver
        The resolver used to find the release of each artifact.

    Returns
    -------
    list[ProjectRelease]
        The releases in the order their first artifact appears in ``artifacts``.

    Raises
    ------
    ResolutionError
        If the release of an artifact cannot be resolved.
    """
    builders: dict[ReleaseId, ProjectReleaseBuilder] = {}
    for coords in artifacts:
        release_id = resolver.resolve(coords)
        builder = builders.get(release_id)
        if builder is None:
            builder = builders[release_id] = ProjectRelease.builder(release_id)
        builder.add_artifact(coords)

    releases = [builder.build() for builder in builders.values()]
    for release in releases:
        logger.debug(
            "Release %s: %s artifact(s) at version(s) %s",
            release.release_id,
            len(release),
            ", ".join(release.artifact_versions()),
        )
    return releases
