# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the base class for the release id detectors."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from bom_decomposer.artifact.maven import ArtifactCoords
from bom_decomposer.release.release_id import ReleaseId

if TYPE_CHECKING:
    from bom_decomposer.release.resolver import ReleaseIdResolver


class ReleaseIdDetector(ABC):
    """This abstract class is used to represent a correction of the default release id heuristic.

    A detector recognizes a narrow set of artifacts whose published metadata is known to point at the wrong
    release and returns None for every other artifact. Detectors hold no state.
    """

    #: The name used to enable the detector in ``defaults.ini``.
    name: str = ""

    @abstractmethod
    def detect_release_id(self, resolver: "ReleaseIdResolver", coords: ArtifactCoords) -> ReleaseId | None:
        """
        Return the release id of the artifact if the detector applies to it.

        Implementations that need the default release id to decide must obtain it from
        :meth:`ReleaseIdResolver.default_release_id`, never from :meth:`ReleaseIdResolver.resolve`.

        Parameters
        ----------
        resolver : ReleaseIdResolver
            The resolver consulting this detector.
        coords : ArtifactCoords
            The coordinates of the artifact.

        Returns
        -------
        ReleaseId | None
            The release id, or None if the detector does not apply to the artifact.
        """
