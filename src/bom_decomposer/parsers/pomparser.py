# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the parser for POM files and helpers to navigate the parsed POM."""
import logging
from xml.etree.ElementTree import Element  # nosec B405

import defusedxml.ElementTree
from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

logger: logging.Logger = logging.getLogger(__name__)


def parse_pom_string(pom_string: str) -> Element | None:
    """
    Parse the passed POM string using defusedxml.

    Parameters
    ----------
    pom_string : str
        The contents of a POM file as a string.

    Returns
    -------
    Element | None
        The parsed element representing the POM's XML hierarchy.
    """
    try:
        # Stored here first to help with type checking.
        pom: Element = fromstring(pom_string)
        return pom
    except (DefusedXmlException, defusedxml.ElementTree.ParseError) as error:
        logger.debug("Failed to parse XML: %s", error)
        return None


def find_element(parent: Element | None, target: str) -> Element | None:
    """Return the first direct child of ``parent`` with the ``target`` tag.

    Tags qualified with the Maven namespace, e.g. ``{http://maven.apache.org/POM/4.0.0}scm``, also match.
    """
    if parent is None:
        return None

    for child in parent:
        if child.tag == target or child.tag.endswith(f"}}{target}"):
            return child
    return None


def find_text(parent: Element | None, path: str) -> str | None:
    """Return the stripped text of the element at the ``.`` separated ``path``, or None if it is absent or empty.

    Paths starting with ``properties.`` address a single property element, since property names may contain dots.
    """
    if path.startswith("properties."):
        parts = ["properties", path[len("properties.") :]]
    else:
        parts = path.split(".")

    element = parent
    for part in parts:
        element = find_element(element, part)
        if element is None:
            return None

    if element is None or not element.text or not element.text.strip():
        return None
    return element.text.strip()
