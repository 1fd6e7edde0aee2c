# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the value types identifying the source-control release an artifact was built from.

A release is identified by its origin, i.e. where the release is recorded, and its version, i.e. how the
release is named at its origin. All types are immutable and compare by value, so ids created by separate
resolution calls can be used as dictionary keys and compared with each other.
"""

from dataclasses import dataclass

from bom_decomposer.errors import ValidationError


@dataclass(frozen=True)
class GroupArtifactOrigin:
    """An origin made of a plain coordinate namespace, used when no SCM connection is known."""

    group: str
    name: str

    def __post_init__(self) -> None:
        if not self.group or not self.name:
            raise ValidationError("The group and the name of a release origin must not be empty.")

    def __str__(self) -> str:
        return f"{self.group}:{self.name}"


@dataclass(frozen=True)
class ScmConnectionOrigin:
    """An origin given by a source-control connection string, e.g. ``scm:git:https://github.com/org/repo``."""

    url: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValidationError("The SCM connection of a release origin must not be empty.")

    def __str__(self) -> str:
        return self.url


ReleaseOrigin = GroupArtifactOrigin | ScmConnectionOrigin


@dataclass(frozen=True)
class Tag:
    """A release named by a source-control tag."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError("A release tag must not be empty.")

    def as_string(self) -> str:
        """Return the tag name."""
        return self.value

    def is_tag(self) -> bool:
        """Return True, a tag is the more specific form of a release version."""
        return True

    def __str__(self) -> str:
        return f"tag({self.value})"


@dataclass(frozen=True)
class PlainVersion:
    """A release named by the version of its artifacts."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError("A release version must not be empty.")

    def as_string(self) -> str:
        """Return the version."""
        return self.value

    def is_tag(self) -> bool:
        """Return False."""
        return False

    def __str__(self) -> str:
        return f"version({self.value})"


ReleaseVersion = Tag | PlainVersion


@dataclass(frozen=True)
class ReleaseId:
    """The canonical key artifacts are grouped by: a release origin and a release version."""

    origin: ReleaseOrigin
    version: ReleaseVersion

    def origin_contains(self, marker: str) -> bool:
        """Return True if the rendered origin contains ``marker``.

        Parameters
        ----------
        marker : str
            The substring to look for, e.g. the name of a shared umbrella organization.

        Returns
        -------
        bool
            True if the marker is found in the rendered origin.
        """
        return marker in str(self.origin)

    def __str__(self) -> str:
        return f"{self.origin}@{self.version}"


def ga_origin(group: str, name: str) -> GroupArtifactOrigin:
    """Create an origin from a coordinate namespace."""
    return GroupArtifactOrigin(group, name)


def scm_origin(url: str) -> ScmConnectionOrigin:
    """Create an origin from an SCM connection string."""
    return ScmConnectionOrigin(url)


def tag(value: str) -> Tag:
    """Create a tag release version."""
    return Tag(value)


def plain_version(value: str) -> PlainVersion:
    """Create a plain release version."""
    return PlainVersion(value)


def create_release_id(origin: ReleaseOrigin, version: ReleaseVersion) -> ReleaseId:
    """Create a release id from an origin and a version."""
    return ReleaseId(origin, version)


def release_id_for_scm_and_tag(url: str, tag_name: str) -> ReleaseId:
    """Create the release id of a tag in an SCM repository."""
    return ReleaseId(ScmConnectionOrigin(url), Tag(tag_name))


def release_id_for_ga(group: str, name: str, version: str) -> ReleaseId:
    """Create the release id of a coordinate namespace at a plain version."""
    return ReleaseId(GroupArtifactOrigin(group, name), PlainVersion(version))
