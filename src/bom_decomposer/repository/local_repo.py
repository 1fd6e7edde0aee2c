# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the LocalRepository class, which writes artifacts into a Maven repository on disk."""

import logging
import os
from pathlib import Path

from bom_decomposer.artifact.maven import ArtifactCoords, artifact_repository_path
from bom_decomposer.errors import InstallationError
from bom_decomposer.repository.pom import PomModel, read_pom_model

logger: logging.Logger = logging.getLogger(__name__)


class LocalRepository:
    """A Maven repository on the local file system.

    The repository does not lock the files it writes: concurrent installations of the same
    artifacts must be serialized by the caller.
    """

    def __init__(self, base_dir: str | os.PathLike) -> None:
        self.base_dir = Path(base_dir)

    def path_for(self, coords: ArtifactCoords) -> Path:
        """Return the path of an artifact in the repository."""
        return self.base_dir.joinpath(artifact_repository_path(coords))

    def write_artifact(self, coords: ArtifactCoords, content: str) -> Path:
        """Write the content of an artifact, creating the missing directories.

        Parameters
        ----------
        coords : ArtifactCoords
            The coordinates of the artifact.
        content : str
            The content to write.

        Returns
        -------
        Path
            The path of the written file.

        Raises
        ------
        InstallationError
            If the file cannot be written. Files written before are left in place.
        """
        path = self.path_for(coords)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="\n") as artifact_file:
                artifact_file.write(content)
        except OSError as error:
            raise InstallationError(coords, path, error) from error

        logger.debug("Wrote %s at %s", coords, path)
        return path

    def install_pom(self, model: PomModel) -> Path:
        """Write a POM file into the repository."""
        return self.write_artifact(model.coords, model.to_xml())

    def read_pom(self, coords: ArtifactCoords) -> PomModel:
        """Read the model of the POM of an artifact installed in the repository.

        Raises
        ------
        OSError
            If the POM cannot be read.
        ParseError
            If the POM cannot be parsed.
        """
        with open(self.path_for(coords.pom_coords()), encoding="utf-8") as pom_file:
            return read_pom_model(pom_file.read())
