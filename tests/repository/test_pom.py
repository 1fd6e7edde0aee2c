# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module tests the POM model written into repositories."""

import pytest

from bom_decomposer.errors import ParseError
from bom_decomposer.repository.pom import ParentReference, PomModel, ScmReference, read_pom_model


def test_render_leaf_pom() -> None:
    """Test rendering a POM with a parent and SCM information."""
    model = PomModel(
        group_id="org.acme",
        artifact_id="acme-core",
        version="1.0",
        parent=ParentReference("org.acme", "acme-parent", "1.0"),
        scm=ScmReference("https://github.com/acme/acme", "v1.0"),
    )
    assert model.to_xml() == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
        "  <modelVersion>4.0.0</modelVersion>\n"
        "  <parent>\n"
        "    <groupId>org.acme</groupId>\n"
        "    <artifactId>acme-parent</artifactId>\n"
        "    <version>1.0</version>\n"
        "  </parent>\n"
        "  <groupId>org.acme</groupId>\n"
        "  <artifactId>acme-core</artifactId>\n"
        "  <version>1.0</version>\n"
        "  <packaging>jar</packaging>\n"
        "  <scm>\n"
        "    <connection>https://github.com/acme/acme</connection>\n"
        "    <tag>v1.0</tag>\n"
        "  </scm>\n"
        "</project>\n"
    )


def test_render_escapes_text() -> None:
    """Test that special characters are escaped."""
    model = PomModel("org.acme", "acme", "1.0", scm=ScmReference("https://example.org/?a=1&b=<2>"))
    assert "https://example.org/?a=1&amp;b=&lt;2&gt;" in model.to_xml()
    assert read_pom_model(model.to_xml()).scm == ScmReference("https://example.org/?a=1&b=<2>")


@pytest.mark.parametrize(
    "model",
    [
        PomModel("org.acme", "acme", "1.0"),
        PomModel("org.acme", "acme-parent", "1.0", packaging="pom", modules=["acme-core", "acme-api"]),
        PomModel(
            "org.acme",
            "acme-core",
            "1.0",
            parent=ParentReference("org.acme", "acme-parent", "1.0"),
            scm=ScmReference("scm:git:https://github.com/acme/acme.git"),
        ),
    ],
)
def test_read_pom_model(model: PomModel) -> None:
    """Test that a rendered POM reads back to the same model."""
    assert read_pom_model(model.to_xml()) == model


def test_read_inherited_coordinates() -> None:
    """Test that the group id and version are inherited from the parent reference."""
    model = read_pom_model(
        """
        <project>
            <parent><groupId>org.acme</groupId><artifactId>acme-parent</artifactId><version>1.0</version></parent>
            <artifactId>acme-core</artifactId>
        </project>
        """
    )
    assert (model.group_id, model.artifact_id, model.version) == ("org.acme", "acme-core", "1.0")
    assert model.packaging == "jar"


@pytest.mark.parametrize(
    "pom_string",
    [
        "<project>",
        "<project><groupId>org.acme</groupId><version>1.0</version></project>",
        "<project><parent><groupId>org.acme</groupId></parent><artifactId>a</artifactId></project>",
    ],
)
def test_read_invalid_pom(pom_string: str) -> None:
    """Test reading POMs that cannot be parsed or miss their coordinates."""
    with pytest.raises(ParseError):
        read_pom_model(pom_string)


def test_add_module() -> None:
    """Test that modules are listed once, in the order they were added."""
    model = PomModel("org.acme", "acme-parent", "1.0", packaging="pom")
    for module in ["b", "a", "b"]:
        model.add_module(module)
    assert model.modules == ["b", "a"]
