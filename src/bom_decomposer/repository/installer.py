# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the ProjectReleaseInstaller class, which materializes a release into a repository.

The installed POM files record the SCM information of the release, so resolving the installed artifacts
again must produce the release id they were installed with. This is used to build reproducible
repository fixtures for the release id resolution.
"""

import logging

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.errors import ConfigurationError
from bom_decomposer.release.project_release import (
    ProjectRelease,
    ProjectReleaseBuilder,
    create_dependency,
)
from bom_decomposer.release.release_id import (
    GroupArtifactOrigin,
    PlainVersion,
    ReleaseId,
    ReleaseOrigin,
    ScmConnectionOrigin,
    Tag,
)
from bom_decomposer.repository.local_repo import LocalRepository
from bom_decomposer.repository.pom import PomModel, ScmReference

logger: logging.Logger = logging.getLogger(__name__)


class ProjectReleaseInstaller:
    """Assemble a release artifact by artifact and install it, optionally under a parent POM.

    Examples
    --------
    >>> release = (
    ...     ProjectReleaseInstaller.for_scm_and_tag("https://github.com/acme/acme", "1.0")
    ...     .project_group_id("org.acme")
    ...     .parent_pom_artifact_id("acme-parent")
    ...     .artifact_id("acme-core")
    ...     .repository(LocalRepository(repo_dir))
    ...     .install()
    ... )  # doctest: +SKIP
    """

    def __init__(self, origin: ReleaseOrigin) -> None:
        self.origin = origin
        self._project_group_id: str | None = None
        self._project_version: str | None = None
        self._parent_pom: PomModel | None = None
        self._builder: ProjectReleaseBuilder | None = None
        self._repository: LocalRepository | None = None

    @classmethod
    def for_ga(cls, group_id: str, artifact_id: str) -> "ProjectReleaseInstaller":
        """Create an installer for a release originating from a coordinate namespace."""
        return cls(GroupArtifactOrigin(group_id, artifact_id)).project_group_id(group_id)

    @classmethod
    def for_scm(cls, scm: str) -> "ProjectReleaseInstaller":
        """Create an installer for a release originating from an SCM connection."""
        return cls(ScmConnectionOrigin(scm))

    @classmethod
    def for_scm_and_tag(cls, scm: str, tag: str) -> "ProjectReleaseInstaller":
        """Create an installer for a tag of an SCM repository."""
        return cls.for_scm(scm).tag(tag)

    @classmethod
    def for_parent_pom(cls, coords: str) -> "ProjectReleaseInstaller":
        """Create an installer for a release whose parent POM has the passed ``group:name:version`` coordinates.

        Raises
        ------
        ParseError
            If the coordinates cannot be parsed.
        """
        parent_coords = ArtifactCoords.from_string(coords)
        return (
            cls.for_ga(parent_coords.group_id, parent_coords.artifact_id)
            .version(parent_coords.version)
            .parent_pom_artifact_id(parent_coords.artifact_id)
        )

    @property
    def release_id(self) -> ReleaseId | None:
        """Return the id of the release, or None if neither a tag nor a version has been set."""
        return self._builder.release_id if self._builder else None

    def tag(self, tag: str) -> "ProjectReleaseInstaller":
        """Name the release by a tag, which is also used as the version of its artifacts.

        Either a tag or a version has to be set. Setting it again discards the artifacts added so far.
        """
        self._builder = ProjectRelease.builder(ReleaseId(self.origin, Tag(tag)))
        self._project_version = tag
        return self

    def version(self, version: str) -> "ProjectReleaseInstaller":
        """Name the release by a plain version.

        Either a tag or a version has to be set. Setting it again discards the artifacts added so far.
        """
        self._builder = ProjectRelease.builder(ReleaseId(self.origin, PlainVersion(version)))
        self._project_version = version
        return self

    def project_group_id(self, group_id: str) -> "ProjectReleaseInstaller":
        """Set the group id used by :meth:`artifact_id` and :meth:`parent_pom_artifact_id`."""
        self._project_group_id = group_id
        return self

    def parent_pom_artifact_id(self, artifact_id: str) -> "ProjectReleaseInstaller":
        """Install the release under a parent POM listing every artifact of the release as a module.

        Raises
        ------
        ConfigurationError
            If the project group id or version has not been set.
        """
        if not self._project_group_id or not self._project_version:
            raise ConfigurationError("The project group id and version must be set before the parent POM.")
        self._parent_pom = PomModel(
            group_id=self._project_group_id,
            artifact_id=artifact_id,
            version=self._project_version,
            packaging="pom",
        )
        return self

    def artifact_coords(self, coords: str) -> "ProjectReleaseInstaller":
        """Add the artifact with the passed ``group:name:version[:classifier][:type]`` coordinates."""
        self._add_artifact(ArtifactCoords.from_string(coords))
        return self

    def artifact_id(self, artifact_id: str) -> "ProjectReleaseInstaller":
        """Add a jar artifact of the project group id at the project version.

        Raises
        ------
        ConfigurationError
            If the project group id has not been set.
        """
        if not self._project_group_id:
            raise ConfigurationError("The project group id has not been set.")
        if not self._project_version:
            raise ConfigurationError("Neither a tag nor a version has been set for the release.")
        self._add_artifact(ArtifactCoords(self._project_group_id, artifact_id, self._project_version))
        return self

    def repository(self, repository: LocalRepository) -> "ProjectReleaseInstaller":
        """Set the repository the release is installed into."""
        self._repository = repository
        return self

    def install(self) -> ProjectRelease:
        """Install the parent POM, if any, then the POM and content of every artifact of the release.

        Returns
        -------
        ProjectRelease
            The installed release.

        Raises
        ------
        ConfigurationError
            If the repository or the release version has not been set.
        ValidationError
            If the release cannot be built.
        InstallationError
            If a file cannot be written. Files installed before are left in place.
        """
        if self._repository is None:
            raise ConfigurationError("The repository to install the release into has not been set.")
        if self._builder is None:
            raise ConfigurationError("Neither a tag nor a version has been set for the release.")

        release = self._builder.build()
        logger.info("Installing release %s into %s", release.release_id, self._repository.base_dir)

        if self._parent_pom:
            self._repository.install_pom(self._parent_pom)

        scm = None
        if isinstance(release.release_id.origin, ScmConnectionOrigin):
            scm = ScmReference(str(release.release_id.origin), release.release_id.version.as_string())

        for dependency in release.dependencies:
            coords = dependency.coords
            pom = PomModel(
                group_id=coords.group_id,
                artifact_id=coords.artifact_id,
                version=coords.version,
                parent=self._parent_pom.as_parent() if self._parent_pom else None,
                scm=scm,
            )
            if coords.is_aggregator():
                pom.packaging = "pom"
            else:
                self._repository.write_artifact(coords, str(coords))
            self._repository.install_pom(pom)

        return release

    def _add_artifact(self, coords: ArtifactCoords) -> None:
        if self._builder is None or self._builder.release_id is None:
            raise ConfigurationError("Neither a tag nor a version has been set for the release.")
        self._builder.add(create_dependency(self._builder.release_id, coords))
        if self._parent_pom:
            self._parent_pom.add_module(coords.artifact_id)
