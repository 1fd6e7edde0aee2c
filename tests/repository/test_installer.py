# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module tests installing releases into a local repository."""

from pathlib import Path

import pytest

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.decomposer import decompose
from bom_decomposer.errors import ConfigurationError, InstallationError, ParseError
from bom_decomposer.metadata.pom_metadata_source import LocalRepositoryMetadataSource
from bom_decomposer.release.detectors import JakartaWebsocketReleaseIdDetector
from bom_decomposer.release.release_id import (
    GroupArtifactOrigin,
    PlainVersion,
    ReleaseId,
    Tag,
    release_id_for_scm_and_tag,
)
from bom_decomposer.release.resolver import ReleaseIdResolver
from bom_decomposer.repository.installer import ProjectReleaseInstaller
from bom_decomposer.repository.local_repo import LocalRepository
from bom_decomposer.repository.pom import ParentReference, ScmReference


def _installed_files(repo: LocalRepository) -> dict[str, bytes]:
    return {
        path.relative_to(repo.base_dir).as_posix(): path.read_bytes()
        for path in sorted(repo.base_dir.rglob("*"))
        if path.is_file()
    }


def test_install_under_parent_pom(local_repo: LocalRepository) -> None:
    """Test installing a release originating from a coordinate namespace under a parent POM."""
    release = (
        ProjectReleaseInstaller.for_ga("g", "a1")
        .tag("1.0")
        .parent_pom_artifact_id("g-parent")
        .artifact_coords("g:a1:1.0:jar")
        .artifact_coords("g:a2:1.0:jar")
        .repository(local_repo)
        .install()
    )

    assert release.release_id == ReleaseId(GroupArtifactOrigin("g", "a1"), Tag("1.0"))
    assert release.artifacts() == [ArtifactCoords("g", "a1", "1.0"), ArtifactCoords("g", "a2", "1.0")]

    poms = sorted(path for path in _installed_files(local_repo) if path.endswith(".pom"))
    assert poms == ["g/a1/1.0/a1-1.0.pom", "g/a2/1.0/a2-1.0.pom", "g/g-parent/1.0/g-parent-1.0.pom"]
    jars = sorted(path for path in _installed_files(local_repo) if path.endswith(".jar"))
    assert jars == ["g/a1/1.0/a1-1.0.jar", "g/a2/1.0/a2-1.0.jar"]

    parent = local_repo.read_pom(ArtifactCoords("g", "g-parent", "1.0", "", "pom"))
    assert parent.packaging == "pom"
    assert parent.modules == ["a1", "a2"]
    for coords in release.artifacts():
        pom = local_repo.read_pom(coords)
        assert pom.parent == ParentReference("g", "g-parent", "1.0")
        assert pom.scm is None
        assert pom.packaging == "jar"
        assert local_repo.path_for(coords).read_text(encoding="utf-8") == str(coords)


def test_install_scm_release(local_repo: LocalRepository) -> None:
    """Test that the POMs of a release originating from an SCM connection record the connection and tag."""
    release = (
        ProjectReleaseInstaller.for_scm_and_tag("https://github.com/acme/acme", "v1.0")
        .project_group_id("org.acme")
        .artifact_id("acme-core")
        .artifact_coords("org.acme:acme-core:v1.0:sources")
        .artifact_coords("org.acme:acme-bom:v1.0::pom")
        .repository(local_repo)
        .install()
    )

    for coords in release.artifacts():
        pom = local_repo.read_pom(coords)
        assert (pom.group_id, pom.artifact_id, pom.version) == (coords.group_id, coords.artifact_id, coords.version)
        assert pom.parent is None
        assert pom.scm == ScmReference("https://github.com/acme/acme", "v1.0")

    assert local_repo.read_pom(ArtifactCoords("org.acme", "acme-bom", "v1.0")).packaging == "pom"
    bom_dir = local_repo.path_for(ArtifactCoords("org.acme", "acme-bom", "v1.0")).parent
    assert [path.name for path in bom_dir.iterdir()] == ["acme-bom-v1.0.pom"]
    assert local_repo.path_for(ArtifactCoords("org.acme", "acme-core", "v1.0", "sources")).is_file()


def test_install_plain_version(local_repo: LocalRepository) -> None:
    """Test that a plain version is recorded as the SCM tag."""
    release = (
        ProjectReleaseInstaller.for_scm("https://github.com/acme/acme")
        .version("1.0")
        .artifact_coords("org.acme:acme:1.0")
        .repository(local_repo)
        .install()
    )
    assert release.release_id.version == PlainVersion("1.0")
    assert local_repo.read_pom(ArtifactCoords("org.acme", "acme", "1.0")).scm == ScmReference(
        "https://github.com/acme/acme", "1.0"
    )


def test_for_parent_pom(local_repo: LocalRepository) -> None:
    """Test installing a release named after its parent POM."""
    release = (
        ProjectReleaseInstaller.for_parent_pom("org.acme:acme-parent:2.0")
        .artifact_id("acme-core")
        .repository(local_repo)
        .install()
    )

    assert release.release_id == ReleaseId(GroupArtifactOrigin("org.acme", "acme-parent"), PlainVersion("2.0"))
    assert local_repo.read_pom(ArtifactCoords("org.acme", "acme-parent", "2.0")).modules == ["acme-core"]
    assert local_repo.read_pom(ArtifactCoords("org.acme", "acme-core", "2.0")).parent == ParentReference(
        "org.acme", "acme-parent", "2.0"
    )


def test_install_is_idempotent(local_repo: LocalRepository) -> None:
    """Test that installing the same release twice produces identical files."""
    installer = (
        ProjectReleaseInstaller.for_scm_and_tag("https://github.com/acme/acme", "1.0")
        .project_group_id("org.acme")
        .parent_pom_artifact_id("acme-parent")
        .artifact_id("acme-core")
        .artifact_id("acme-api")
        .repository(local_repo)
    )
    first_release = installer.install()
    first = _installed_files(local_repo)
    second_release = installer.install()

    assert first_release == second_release
    assert _installed_files(local_repo) == first
    assert len(first) == 5


def test_installed_release_resolves_to_its_id(local_repo: LocalRepository) -> None:
    """Test that resolving the installed artifacts produces the release id they were installed with."""
    acme = (
        ProjectReleaseInstaller.for_scm_and_tag("scm:git:https://github.com/acme/acme.git", "acme-1.0")
        .project_group_id("org.acme")
        .parent_pom_artifact_id("acme-parent")
        .artifact_id("acme-core")
        .artifact_id("acme-api")
        .repository(local_repo)
        .install()
    )
    websocket = (
        ProjectReleaseInstaller.for_scm_and_tag("scm:git:git@github.com:eclipse-ee4j/websocket-api.git", "2.1.0")
        .project_group_id("jakarta.websocket")
        .artifact_id("jakarta.websocket-api")
        .artifact_id("jakarta.websocket-client-api")
        .repository(local_repo)
        .install()
    )
    resolver = ReleaseIdResolver(LocalRepositoryMetadataSource(local_repo.base_dir), detectors=[])

    releases = decompose(acme.artifacts() + websocket.artifacts(), resolver)
    assert releases == [acme, websocket]

    resolver = ReleaseIdResolver(
        LocalRepositoryMetadataSource(local_repo.base_dir), detectors=[JakartaWebsocketReleaseIdDetector()]
    )
    releases = decompose(acme.artifacts() + websocket.artifacts(), resolver)
    assert [release.release_id for release in releases] == [
        acme.release_id,
        release_id_for_scm_and_tag("https://github.com/jakartaee/websocket", "2.1.0-RELEASE"),
    ]


def test_install_without_repository() -> None:
    """Test that a repository is required to install a release."""
    installer = ProjectReleaseInstaller.for_ga("org.acme", "acme").version("1.0").artifact_id("acme")
    with pytest.raises(ConfigurationError):
        installer.install()


def test_install_without_version(local_repo: LocalRepository) -> None:
    """Test that a tag or version is required to add artifacts and install a release."""
    installer = ProjectReleaseInstaller.for_ga("org.acme", "acme").repository(local_repo)
    with pytest.raises(ConfigurationError):
        installer.artifact_id("acme")
    with pytest.raises(ConfigurationError):
        installer.artifact_coords("org.acme:acme:1.0")
    with pytest.raises(ConfigurationError):
        installer.install()


def test_artifact_id_without_group() -> None:
    """Test that adding an artifact by name requires a project group id."""
    with pytest.raises(ConfigurationError):
        ProjectReleaseInstaller.for_scm_and_tag("https://github.com/acme/acme", "1.0").artifact_id("acme")
    with pytest.raises(ConfigurationError):
        ProjectReleaseInstaller.for_scm_and_tag("https://github.com/acme/acme", "1.0").parent_pom_artifact_id("p")


def test_invalid_coords() -> None:
    """Test adding artifacts with invalid coordinates."""
    with pytest.raises(ParseError):
        ProjectReleaseInstaller.for_scm_and_tag("https://github.com/acme/acme", "1.0").artifact_coords("acme")


def test_install_failure_keeps_written_files(tmp_path: Path) -> None:
    """Test that an I/O failure aborts the installation without removing the files written before."""
    tmp_path.joinpath("org", "acme", "acme-b").mkdir(parents=True)
    # A file where the repository expects the version directory of the second artifact.
    tmp_path.joinpath("org", "acme", "acme-b", "1.0").write_text("", encoding="utf-8")
    repo = LocalRepository(tmp_path)
    installer = ProjectReleaseInstaller.for_ga("org.acme", "acme").version("1.0").artifact_id("acme-a")
    installer.artifact_id("acme-b").repository(repo)

    with pytest.raises(InstallationError) as error:
        installer.install()

    assert error.value.coords == ArtifactCoords("org.acme", "acme-b", "1.0")
    assert repo.path_for(ArtifactCoords("org.acme", "acme-a", "1.0")).is_file()
    assert repo.path_for(ArtifactCoords("org.acme", "acme-a", "1.0", "", "pom")).is_file()
