import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import DATA_DIR, open_file  # noqa: E402


@pytest.fixture(autouse=True)
def clear_raisers():
    # Errors and warnings are collected globally, start every test clean
    from strcalc.error.communicator import ErrorRaiser, WarningRaiser

    ErrorRaiser.ERRORS.clear()
    WarningRaiser.WARNINGS.clear()
    yield


@pytest.fixture(scope="session")
def grouped_program() -> str:
    return open_file(os.path.join(DATA_DIR, "valid", "grouped.sc"))


def valid_files() -> List[str]:
    return sorted(glob(os.path.join(DATA_DIR, "valid", "*.sc")))


def parser_error_files() -> List[str]:
    return sorted(glob(os.path.join(DATA_DIR, "parserError", "*.sc")))


@pytest.fixture(scope="session", params=valid_files(), ids=os.path.basename)
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=parser_error_files(), ids=os.path.basename)
def parser_error(request) -> str:
    return request.param
