# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains error classes for the BOM decomposer."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bom_decomposer.artifact.maven import ArtifactCoords


class BomDecomposerError(Exception):
    """The base class for BOM decomposer errors."""


class ResolutionError(BomDecomposerError):
    """Happens when the release id of an artifact cannot be determined from its metadata."""


class ValidationError(BomDecomposerError):
    """Happens when a release is assembled from dependencies that violate its invariants."""


class ConfigurationError(BomDecomposerError):
    """Happens when a required collaborator or setting has not been configured."""


class ParseError(BomDecomposerError):
    """Happens when an artifact coordinate string cannot be parsed."""


class InstallationError(BomDecomposerError):
    """Happens when an artifact or its POM cannot be written into a repository.

    Files written before the failure are left in place.
    """

    def __init__(self, coords: "ArtifactCoords", path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to persist {coords} at {path}: {cause}")
        self.coords = coords
        self.path = path
        self.cause = cause
