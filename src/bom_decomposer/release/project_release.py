# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the types linking a release id to the artifacts attributed to it."""

from collections.abc import Iterator
from dataclasses import dataclass

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.errors import ValidationError
from bom_decomposer.release.release_id import ReleaseId


@dataclass(frozen=True)
class ProjectDependency:
    """The fact that an artifact belongs to a release."""

    release_id: ReleaseId
    coords: ArtifactCoords


def create_dependency(release_id: ReleaseId, coords: ArtifactCoords) -> ProjectDependency:
    """Create the dependency attributing ``coords`` to ``release_id``."""
    return ProjectDependency(release_id, coords)


@dataclass(frozen=True)
class ProjectRelease:
    """A release and the artifacts attributed to it, in the order they were added.

    Instances are created by :class:`ProjectReleaseBuilder` and are immutable afterwards. Every dependency must
    belong to the release and list distinct coordinates.

    Raises
    ------
    ValidationError
        If a dependency belongs to another release or its coordinates are listed twice.
    """

    release_id: ReleaseId
    dependencies: tuple[ProjectDependency, ...]

    def __post_init__(self) -> None:
        coords: set[ArtifactCoords] = set()
        for dependency in self.dependencies:
            if dependency.release_id != self.release_id:
                raise ValidationError(
                    f"{dependency.coords} is attributed to {dependency.release_id}, not to {self.release_id}."
                )
            if dependency.coords in coords:
                raise ValidationError(f"{dependency.coords} is listed more than once in {self.release_id}.")
            coords.add(dependency.coords)

    @staticmethod
    def builder(release_id: ReleaseId | None) -> "ProjectReleaseBuilder":
        """Return a builder accumulating the dependencies of ``release_id``."""
        return ProjectReleaseBuilder(release_id)

    def artifacts(self) -> list[ArtifactCoords]:
        """Return the coordinates of the artifacts of this release."""
        return [dependency.coords for dependency in self.dependencies]

    def artifact_versions(self) -> list[str]:
        """Return the distinct artifact versions of this release, sorted."""
        return sorted({dependency.coords.version for dependency in self.dependencies})

    def group_ids(self) -> list[str]:
        """Return the distinct group ids of this release, sorted."""
        return sorted({dependency.coords.group_id for dependency in self.dependencies})

    def contains(self, coords: ArtifactCoords) -> bool:
        """Return True if the artifact is attributed to this release."""
        return any(dependency.coords == coords for dependency in self.dependencies)

    def __iter__(self) -> Iterator[ProjectDependency]:
        return iter(self.dependencies)

    def __len__(self) -> int:
        return len(self.dependencies)


class ProjectReleaseBuilder:
    """Accumulates the dependencies of a release before freezing them into a :class:`ProjectRelease`."""

    def __init__(self, release_id: ReleaseId | None) -> None:
        self._release_id = release_id
        self._dependencies: dict[ArtifactCoords, ProjectDependency] = {}

    @property
    def release_id(self) -> ReleaseId | None:
        """Return the id of the release under construction."""
        return self._release_id

    def add(self, dependency: ProjectDependency) -> "ProjectReleaseBuilder":
        """Add a dependency to the release.

        A dependency whose coordinates were already added is ignored.

        Parameters
        ----------
        dependency : ProjectDependency
            The dependency to add.

        Returns
        -------
        ProjectReleaseBuilder
            This builder.

        Raises
        ------
        ValidationError
            If the dependency belongs to another release.
        """
        if dependency.release_id != self._release_id:
            raise ValidationError(
                f"Cannot add {dependency.coords} attributed to {dependency.release_id} "
                f"to the release {self._release_id}."
            )
        self._dependencies.setdefault(dependency.coords, dependency)
        return self

    def add_artifact(self, coords: ArtifactCoords) -> "ProjectReleaseBuilder":
        """Attribute an artifact to the release under construction."""
        if self._release_id is None:
            raise ValidationError(f"Cannot add {coords} to a release without an id.")
        return self.add(create_dependency(self._release_id, coords))

    def build(self) -> ProjectRelease:
        """Freeze the accumulated dependencies into a release.

        Raises
        ------
        ValidationError
            If the release id has not been set.
        """
        if self._release_id is None:
            raise ValidationError("The release id has not been set.")
        return ProjectRelease(self._release_id, tuple(self._dependencies.values()))
