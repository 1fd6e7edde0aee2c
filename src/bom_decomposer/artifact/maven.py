# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module declares types and utilities for Maven artifacts."""
from dataclasses import dataclass

from packageurl import PackageURL

from bom_decomposer.errors import ParseError

#: Artifact types whose files do not use the type as the file extension.
TYPE_TO_EXTENSION = {
    "test-jar": "jar",
    "javadoc": "jar",
    "java-source": "jar",
    "maven-plugin": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "bundle": "jar",
}

#: Artifact types that imply a classifier when none is given explicitly.
TYPE_TO_CLASSIFIER = {
    "test-jar": "tests",
    "javadoc": "javadoc",
    "java-source": "sources",
    "ejb-client": "client",
}

#: Packaging types recognized in the fourth segment of a coordinate string.
PACKAGING_TYPES = {"jar", "pom", "war", "ear", "rar", "aar", "zip", *TYPE_TO_EXTENSION}


@dataclass(frozen=True)
class ArtifactCoords:
    """The coordinates of a Maven artifact."""

    group_id: str
    artifact_id: str
    version: str
    classifier: str = ""
    type: str = "jar"

    @staticmethod
    def from_string(coords: str) -> "ArtifactCoords":
        """Parse an artifact coordinate string.

        The accepted format is ``group:name:version[:classifier][:type]``. The classifier may be left empty to
        only set the type, e.g. ``org.acme:acme-parent:1.0::pom``. A fourth segment naming a packaging type
        listed in ``PACKAGING_TYPES``, e.g. ``org.acme:acme:1.0:war``, is read as the type, any other value
        as the classifier.

        Parameters
        ----------
        coords : str
            The coordinate string.

        Returns
        -------
        ArtifactCoords
            The parsed coordinates.

        Raises
        ------
        ParseError
            If the string does not have three to five segments or misses the group, name or version.
        """
        parts = coords.strip().split(":")
        if not 3 <= len(parts) <= 5:
            raise ParseError(
                f"Invalid artifact coordinates {coords!r}: expected group:name:version[:classifier][:type]"
            )
        group_id, artifact_id, version = parts[0], parts[1], parts[2]
        if not group_id or not artifact_id or not version:
            raise ParseError(f"Invalid artifact coordinates {coords!r}: the group, name and version are required")
        if len(parts) == 4 and parts[3] in PACKAGING_TYPES:
            return ArtifactCoords(group_id, artifact_id, version, "", parts[3])
        classifier = parts[3] if len(parts) > 3 else ""
        artifact_type = parts[4] if len(parts) > 4 and parts[4] else "jar"
        return ArtifactCoords(group_id, artifact_id, version, classifier, artifact_type)

    @staticmethod
    def from_purl(purl: PackageURL) -> "ArtifactCoords":
        """Create the coordinates identified by a Maven PackageURL.

        Raises
        ------
        ParseError
            If the PURL is not a Maven PURL with a namespace and a version.
        """
        if purl.type != "maven" or not purl.namespace or not purl.version:
            raise ParseError(f"{purl} does not identify a versioned Maven artifact.")
        qualifiers = purl.qualifiers if isinstance(purl.qualifiers, dict) else {}
        return ArtifactCoords(
            group_id=purl.namespace,
            artifact_id=purl.name,
            version=purl.version,
            classifier=qualifiers.get("classifier", ""),
            type=qualifiers.get("type", "jar"),
        )

    def to_purl(self) -> PackageURL:
        """Return the Maven PackageURL of these coordinates."""
        qualifiers = {"type": self.type}
        if self.classifier:
            qualifiers["classifier"] = self.classifier
        return PackageURL(
            type="maven",
            namespace=self.group_id,
            name=self.artifact_id,
            version=self.version,
            qualifiers=qualifiers,
        )

    @property
    def extension(self) -> str:
        """Return the file extension of the artifact."""
        return TYPE_TO_EXTENSION.get(self.type, self.type)

    @property
    def effective_classifier(self) -> str:
        """Return the classifier, or the one implied by the type if none was set."""
        return self.classifier or TYPE_TO_CLASSIFIER.get(self.type, "")

    def is_aggregator(self) -> bool:
        """Return True if the artifact consists of its POM only."""
        return self.extension == "pom"

    def pom_coords(self) -> "ArtifactCoords":
        """Return the coordinates of the POM describing this artifact."""
        return ArtifactCoords(self.group_id, self.artifact_id, self.version, "", "pom")

    def __str__(self) -> str:
        if self.classifier or self.type not in PACKAGING_TYPES:
            return f"{self.group_id}:{self.artifact_id}:{self.version}:{self.classifier}:{self.type}"
        return f"{self.group_id}:{self.artifact_id}:{self.version}:{self.type}"


def construct_maven_repository_path(
    group_id: str,
    artifact_id: str | None = None,
    version: str | None = None,
    asset_name: str | None = None,
) -> str:
    """Construct a path to a folder or file on the registry, assuming Maven repository layout.

    For more details regarding Maven repository layout, see the following:
    - https://maven.apache.org/repository/layout.html
    - https://maven.apache.org/guides/mini/guide-naming-conventions.html

    Parameters
    ----------
    group_id : str
        The group id of a Maven package.
    artifact_id : str
        The artifact id of a Maven package.
    version : str
        The version of a Maven package.
    asset_name : str
        The asset name.

    Returns
    -------
    str
        The path to a folder or file on the registry.
    """
    path = group_id.replace(".", "/")
    if artifact_id:
        path = "/".join([path, artifact_id])
    if version:
        path = "/".join([path, version])
    if asset_name:
        path = "/".join([path, asset_name])
    return path


def artifact_file_name(coords: ArtifactCoords) -> str:
    """Return the file name of an artifact in a Maven repository, e.g. ``acme-core-1.0-sources.jar``."""
    classifier = coords.effective_classifier
    suffix = f"-{classifier}" if classifier else ""
    return f"{coords.artifact_id}-{coords.version}{suffix}.{coords.extension}"


def artifact_repository_path(coords: ArtifactCoords) -> str:
    """Return the path of an artifact relative to the root of a Maven repository."""
    return construct_maven_repository_path(
        coords.group_id,
        coords.artifact_id,
        coords.version,
        artifact_file_name(coords),
    )
