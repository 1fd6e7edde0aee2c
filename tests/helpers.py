# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Helpers shared by the tests."""

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.metadata.metadata_source_base import BaseMetadataSource


class MockMetadataSource(BaseMetadataSource):
    """A metadata source serving SCM information from memory and recording the artifacts it was asked about."""

    def __init__(self, scm: dict[str, tuple[str | None, str | None]] | None = None) -> None:
        # Maps "group:name:version" to the SCM connection and tag.
        self.scm = scm or {}
        self.requested: list[ArtifactCoords] = []

    def _lookup(self, coords: ArtifactCoords) -> tuple[str | None, str | None]:
        self.requested.append(coords)
        return self.scm.get(f"{coords.group_id}:{coords.artifact_id}:{coords.version}", (None, None))

    def fetch_scm_connection(self, coords: ArtifactCoords) -> str | None:
        return self._lookup(coords)[0]

    def fetch_scm_tag(self, coords: ArtifactCoords) -> str | None:
        return self._lookup(coords)[1]


def make_pom(
    group_id: str,
    artifact_id: str,
    version: str,
    scm: str = "",
    parent: tuple[str, str, str] | None = None,
    properties: dict[str, str] | None = None,
) -> str:
    """Return the text of a minimal POM file."""
    parent_element = ""
    if parent:
        parent_element = (
            f"<parent><groupId>{parent[0]}</groupId><artifactId>{parent[1]}</artifactId>"
            f"<version>{parent[2]}</version></parent>"
        )
    properties_element = ""
    if properties:
        properties_element = (
            "<properties>" + "".join(f"<{key}>{value}</{key}>" for key, value in properties.items()) + "</properties>"
        )
    return f"""
    <project xmlns="http://maven.apache.org/POM/4.0.0">
        <modelVersion>4.0.0</modelVersion>
        {parent_element}
        <groupId>{group_id}</groupId>
        <artifactId>{artifact_id}</artifactId>
        <version>{version}</version>
        {properties_element}
        {scm}
    </project>
    """
