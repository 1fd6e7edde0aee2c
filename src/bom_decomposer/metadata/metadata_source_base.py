# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the base class for the metadata sources."""

from abc import ABC, abstractmethod

from bom_decomposer.artifact.maven import ArtifactCoords


class BaseMetadataSource(ABC):
    """This abstract class is used to represent the published metadata of artifacts."""

    @abstractmethod
    def fetch_scm_connection(self, coords: ArtifactCoords) -> str | None:
        """
        Return the source-control connection published for the passed artifact.

        Parameters
        ----------
        coords : ArtifactCoords
            The coordinates of an artifact.

        Returns
        -------
        str | None
            The SCM connection, or None if the metadata does not declare one.

        Raises
        ------
        ResolutionError
            If the metadata of the artifact cannot be retrieved.
        """

    def fetch_scm_tag(self, coords: ArtifactCoords) -> str | None:  # pylint: disable=unused-argument
        """
        Return the source-control tag published for the passed artifact.

        Sources that do not record tags return None.

        Parameters
        ----------
        coords : ArtifactCoords
            The coordinates of an artifact.

        Returns
        -------
        str | None
            The SCM tag, or None if the metadata does not declare one.
        """
        return None
