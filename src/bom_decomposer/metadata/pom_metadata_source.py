# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the metadata sources reading the SCM information published in Maven POM files."""

import logging
import os
import re
import urllib.parse
from abc import abstractmethod
from dataclasses import dataclass
from pathlib import Path
from xml.etree.ElementTree import Element  # nosec B405

from bom_decomposer.artifact.maven import ArtifactCoords, artifact_repository_path
from bom_decomposer.config.defaults import defaults
from bom_decomposer.errors import ConfigurationError, ResolutionError
from bom_decomposer.metadata.metadata_source_base import BaseMetadataSource
from bom_decomposer.parsers.pomparser import find_element, find_text, parse_pom_string
from bom_decomposer.util import send_get_http_raw

logger: logging.Logger = logging.getLogger(__name__)

MAVEN_CENTRAL = "https://repo.maven.apache.org/maven2"

DEFAULT_SCM_POM_PATHS = ["scm.connection", "scm.developerConnection", "scm.url"]

# Project elements inherited from the parent POM when a POM does not declare them.
INHERITED_PROJECT_ELEMENTS = {"groupId", "version"}


@dataclass(frozen=True)
class ScmInfo:
    """The SCM information found in a POM."""

    connection: str
    tag: str | None


class PomMetadataSource(BaseMetadataSource):
    """This class reads the SCM connection of an artifact from its POM, falling back to its parent POMs.

    Subclasses decide where the POM files are retrieved from.
    """

    def __init__(
        self,
        scm_pom_paths: list[str] | None = None,
        find_parents: bool | None = None,
        parent_limit: int | None = None,
    ) -> None:
        """Initialise the POM metadata source.

        Parameters
        ----------
        scm_pom_paths : list[str] | None
            The ``.`` separated POM element paths holding the SCM connection, tried in order.
        find_parents : bool | None
            Whether to inspect parent POMs when a POM has no SCM connection.
        parent_limit : int | None
            The maximum number of POMs inspected for one artifact, including its own.

        Values that are not passed are read from ``defaults.ini``.

        Raises
        ------
        ConfigurationError
            If ``parent_limit`` is lower than one.
        """
        if scm_pom_paths is None:
            scm_pom_paths = defaults.get_list("metadata.pom", "scm_pom_paths", fallback=DEFAULT_SCM_POM_PATHS)
        if find_parents is None:
            find_parents = defaults.getboolean("metadata.pom", "find_parents", fallback=True)
        if parent_limit is None:
            parent_limit = defaults.getint("metadata.pom", "parent_limit", fallback=10)
        if parent_limit < 1:
            raise ConfigurationError(f"The POM parent limit must be at least one, got {parent_limit}.")

        self.scm_pom_paths = scm_pom_paths
        self.find_parents = find_parents
        self.parent_limit = parent_limit
        self._scm_info: dict[ArtifactCoords, ScmInfo | None] = {}

    @abstractmethod
    def _retrieve_pom(self, coords: ArtifactCoords) -> str | None:
        """
        Return the content of the POM identified by ``coords``.

        Parameters
        ----------
        coords : ArtifactCoords
            The coordinates of a POM.

        Returns
        -------
        str | None
            The POM content, or None if the POM cannot be found.
        """

    def fetch_scm_connection(self, coords: ArtifactCoords) -> str | None:
        scm_info = self._find_scm_info(coords)
        return scm_info.connection if scm_info else None

    def fetch_scm_tag(self, coords: ArtifactCoords) -> str | None:
        scm_info = self._find_scm_info(coords)
        return scm_info.tag if scm_info else None

    def _find_scm_info(self, coords: ArtifactCoords) -> ScmInfo | None:
        """Find the SCM information of an artifact, walking up its parent POMs if needed.

        Raises
        ------
        ResolutionError
            If the POM of the artifact itself cannot be retrieved or parsed.
        """
        pom_coords = coords.pom_coords()
        if pom_coords in self._scm_info:
            return self._scm_info[pom_coords]

        scm_info = None
        current: ArtifactCoords | None = pom_coords
        limit = self.parent_limit
        while current is not None and limit > 0:
            pom_text = self._retrieve_pom(current)
            pom = parse_pom_string(pom_text) if pom_text else None
            if pom is None:
                if current == pom_coords:
                    raise ResolutionError(f"Failed to retrieve the POM of {coords}.")
                logger.debug("Parent POM %s of %s is not available.", current, coords)
                break

            connection = self._read_scm_connection(pom)
            if connection:
                tag = find_text(pom, "scm.tag")
                if tag == "HEAD":
                    tag = None
                scm_info = ScmInfo(connection, tag)
                logger.debug("Found SCM connection %s for %s in %s", connection, coords, current)
                break

            if not self.find_parents:
                break
            current = self._find_parent(pom)
            limit = limit - 1

        self._scm_info[pom_coords] = scm_info
        return scm_info

    def _read_scm_connection(self, pom: Element) -> str | None:
        """Return the first configured SCM element of the POM whose properties all resolve."""
        for path in self.scm_pom_paths:
            value = find_text(pom, path)
            if not value:
                continue
            resolved = self._resolve_properties(pom, value)
            if resolved:
                return resolved
            logger.debug("Skipping %s with unresolved properties: %s", path, value)
        return None

    def _find_parent(self, pom: Element) -> ArtifactCoords | None:
        """Return the coordinates of the parent POM, or None if the POM has no complete parent reference."""
        parent = find_element(pom, "parent")
        group_id = find_text(parent, "groupId")
        artifact_id = find_text(parent, "artifactId")
        version = find_text(parent, "version")
        if group_id and artifact_id and version:
            return ArtifactCoords(group_id, artifact_id, version, "", "pom")
        return None

    def _resolve_properties(self, pom: Element, value: str) -> str | None:
        """Resolve the Maven properties found within the passed value.

        Only properties defined in the same POM are resolved: ``${project.x}`` where ``x`` is an element path
        of the project, and ``${x}`` where ``x`` is found at ``project.properties.x``. The group id and version
        fall back to the parent reference. Properties are not resolved recursively.

        Returns
        -------
        str | None
            The value with its properties replaced, or None if a property cannot be resolved.
        """
        unresolved = False

        def replace(match: re.Match) -> str:
            nonlocal unresolved
            name = match.group(1)
            if name.startswith("project."):
                element_path = name[len("project.") :]
                result = find_text(pom, element_path)
                if result is None and element_path in INHERITED_PROJECT_ELEMENTS:
                    result = find_text(pom, f"parent.{element_path}")
            else:
                result = find_text(pom, f"properties.{name}")
            if result is None:
                unresolved = True
                return match.group(0)
            return result

        resolved = re.sub(r"\$\{([^}]+)}", replace, value)
        return None if unresolved else resolved


class RemoteRepositoryMetadataSource(PomMetadataSource):
    """This class retrieves POM files from remote Maven repositories over HTTP."""

    def __init__(
        self,
        repositories: list[str] | None = None,
        scm_pom_paths: list[str] | None = None,
        find_parents: bool | None = None,
        parent_limit: int | None = None,
    ) -> None:
        """Initialise the remote metadata source.

        Parameters
        ----------
        repositories : list[str] | None
            The base URLs of the Maven repositories, tried in order. Read from ``defaults.ini`` if not passed.

        Raises
        ------
        ConfigurationError
            If no repository is configured.
        """
        super().__init__(scm_pom_paths, find_parents, parent_limit)
        if repositories is None:
            repositories = defaults.get_list("metadata.pom", "artifact_repositories", fallback=[MAVEN_CENTRAL])
        if not repositories:
            raise ConfigurationError("No Maven repository has been configured to retrieve POM files from.")
        self.repositories = repositories

    def _create_urls(self, coords: ArtifactCoords) -> list[str]:
        """Create the URLs of the POM in every configured repository."""
        urls = []
        for repo in self.repositories:
            repo_url = urllib.parse.urlparse(repo)
            pom_url = urllib.parse.ParseResult(
                scheme=repo_url.scheme,
                netloc=repo_url.netloc,
                path="/".join([repo_url.path.rstrip("/"), artifact_repository_path(coords)]),
                params="",
                query="",
                fragment="",
            ).geturl()
            urls.append(pom_url)
        return urls

    def _retrieve_pom(self, coords: ArtifactCoords) -> str | None:
        for url in self._create_urls(coords):
            response = send_get_http_raw(url, check_response_fails=True)
            if response is None:
                continue
            if response.status_code != 200:
                logger.debug("Failed to retrieve POM from %s: HTTP %s", url, response.status_code)
                continue
            logger.debug("Found artifact POM at: %s", url)
            return response.text
        return None


class LocalRepositoryMetadataSource(PomMetadataSource):
    """This class reads POM files from a Maven repository on the local file system."""

    def __init__(
        self,
        repo_dir: str | os.PathLike,
        scm_pom_paths: list[str] | None = None,
        find_parents: bool | None = None,
        parent_limit: int | None = None,
    ) -> None:
        super().__init__(scm_pom_paths, find_parents, parent_limit)
        self.repo_dir = Path(repo_dir)

    def _retrieve_pom(self, coords: ArtifactCoords) -> str | None:
        path = self.repo_dir.joinpath(artifact_repository_path(coords))
        try:
            with open(path, encoding="utf-8") as pom_file:
                return pom_file.read()
        except OSError as error:
            logger.debug("Failed to read POM %s: %s", path, error)
            return None
