# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the model of the POM files written into a repository and its XML rendering."""

from dataclasses import dataclass, field
from xml.etree import ElementTree  # nosec B405

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.errors import ParseError
from bom_decomposer.parsers.pomparser import find_element, find_text, parse_pom_string

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
POM_MODEL_VERSION = "4.0.0"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


@dataclass(frozen=True)
class ParentReference:
    """The reference of a POM to its parent POM."""

    group_id: str
    artifact_id: str
    version: str


@dataclass(frozen=True)
class ScmReference:
    """The SCM section of a POM."""

    connection: str
    tag: str | None = None


@dataclass
class PomModel:
    """The content of a POM file."""

    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    parent: ParentReference | None = None
    scm: ScmReference | None = None
    modules: list[str] = field(default_factory=list)

    @property
    def coords(self) -> ArtifactCoords:
        """Return the coordinates of the POM file itself."""
        return ArtifactCoords(self.group_id, self.artifact_id, self.version, "", "pom")

    def as_parent(self) -> ParentReference:
        """Return the reference a child module uses to point at this POM."""
        return ParentReference(self.group_id, self.artifact_id, self.version)

    def add_module(self, module: str) -> None:
        """Add a module to the POM, unless it is already listed."""
        if module not in self.modules:
            self.modules.append(module)

    def to_xml(self) -> str:
        """Render the POM as an XML document.

        The rendering only depends on the model, so writing the same model twice produces identical files.
        """
        project = ElementTree.Element("project", {"xmlns": POM_NAMESPACE})
        ElementTree.SubElement(project, "modelVersion").text = POM_MODEL_VERSION

        if self.parent:
            parent = ElementTree.SubElement(project, "parent")
            ElementTree.SubElement(parent, "groupId").text = self.parent.group_id
            ElementTree.SubElement(parent, "artifactId").text = self.parent.artifact_id
            ElementTree.SubElement(parent, "version").text = self.parent.version

        ElementTree.SubElement(project, "groupId").text = self.group_id
        ElementTree.SubElement(project, "artifactId").text = self.artifact_id
        ElementTree.SubElement(project, "version").text = self.version
        ElementTree.SubElement(project, "packaging").text = self.packaging

        if self.modules:
            modules = ElementTree.SubElement(project, "modules")
            for module in self.modules:
                ElementTree.SubElement(modules, "module").text = module

        if self.scm:
            scm = ElementTree.SubElement(project, "scm")
            ElementTree.SubElement(scm, "connection").text = self.scm.connection
            if self.scm.tag:
                ElementTree.SubElement(scm, "tag").text = self.scm.tag

        ElementTree.indent(project, space="  ")
        return "\n".join([XML_DECLARATION, ElementTree.tostring(project, encoding="unicode"), ""])


def read_pom_model(pom_string: str) -> PomModel:
    """Read back the model of a POM file.

    The group id and version are inherited from the parent reference when the POM does not declare them.

    Parameters
    ----------
    pom_string : str
        The content of the POM file.

    Returns
    -------
    PomModel
        The model of the POM.

    Raises
    ------
    ParseError
        If the POM cannot be parsed or misses its coordinates.
    """
    pom = parse_pom_string(pom_string)
    if pom is None:
        raise ParseError("Failed to parse the POM.")

    parent = None
    parent_element = find_element(pom, "parent")
    if parent_element is not None:
        parent_group_id = find_text(parent_element, "groupId")
        parent_artifact_id = find_text(parent_element, "artifactId")
        parent_version = find_text(parent_element, "version")
        if not parent_group_id or not parent_artifact_id or not parent_version:
            raise ParseError("The parent reference of the POM is incomplete.")
        parent = ParentReference(parent_group_id, parent_artifact_id, parent_version)

    group_id = find_text(pom, "groupId") or (parent.group_id if parent else None)
    artifact_id = find_text(pom, "artifactId")
    version = find_text(pom, "version") or (parent.version if parent else None)
    if not group_id or not artifact_id or not version:
        raise ParseError("The POM does not declare its group id, artifact id and version.")

    scm = None
    connection = find_text(pom, "scm.connection")
    if connection:
        scm = ScmReference(connection, find_text(pom, "scm.tag"))

    modules = []
    modules_element = find_element(pom, "modules")
    if modules_element is not None:
        modules = [module.text.strip() for module in modules_element if module.text and module.text.strip()]

    return PomModel(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        packaging=find_text(pom, "packaging") or "jar",
        parent=parent,
        scm=scm,
        modules=modules,
    )
