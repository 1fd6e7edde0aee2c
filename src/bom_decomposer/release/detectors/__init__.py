# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""The detectors package contains the corrections applied on top of the default release id heuristic."""

import logging

from bom_decomposer.config.defaults import defaults

from .detector_base import ReleaseIdDetector
from .jakarta_websocket import JakartaWebsocketReleaseIdDetector

logger: logging.Logger = logging.getLogger(__name__)

# The list of supported detectors. The order of the list determines the order
# in which the detectors are consulted: the first detector returning a release id wins.
DETECTORS: list[ReleaseIdDetector] = [
    JakartaWebsocketReleaseIdDetector(),
]


def default_detectors() -> list[ReleaseIdDetector]:
    """Return the detectors enabled in ``defaults.ini``, in their registration order.

    All detectors are enabled when the configuration does not list any.
    """
    enabled = defaults.get_list("detectors", "enabled", fallback=[])
    if not enabled:
        return list(DETECTORS)

    unknown = set(enabled).difference(detector.name for detector in DETECTORS)
    if unknown:
        logger.warning("Ignoring unknown release id detectors: %s", ", ".join(sorted(unknown)))
    return [detector for detector in DETECTORS if detector.name in enabled]
