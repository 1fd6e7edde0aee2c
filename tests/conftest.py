# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Fixtures for tests."""
from collections.abc import Iterator
from pathlib import Path

import pytest

from bom_decomposer.config.defaults import defaults, load_defaults
from bom_decomposer.repository.local_repo import LocalRepository
from tests.helpers import MockMetadataSource

# We need to pass fixture names as arguments to maintain an order.
# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def setup_test() -> Iterator[None]:
    """Load the packaged ``defaults.ini`` before each test and clear it afterwards."""
    load_defaults("")
    yield
    defaults.clear()


@pytest.fixture()
def local_repo(tmp_path: Path) -> LocalRepository:
    """Create an empty local Maven repository.

    Returns
    -------
    LocalRepository
        The repository rooted in a temporary directory.
    """
    return LocalRepository(tmp_path.joinpath("repository"))


@pytest.fixture()
def mock_metadata_source() -> MockMetadataSource:
    """Create a metadata source without any SCM information."""
    return MockMetadataSource()
