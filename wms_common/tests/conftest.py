from typing import Iterator

import pytest

from wms_common.app.transport.policy import reset_policy

BARCODE_ENV_VARS = (
    "BARCODE_LENGTH",
    "BARCODE_PADDED",
    "BARCODE_PAD_CHAR",
    "BARCODE_ALIGNMENT",
)


@pytest.fixture(autouse=True)
def _isolate_barcode_policy(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from the default process-wide policy and a clean env.

    The policy is global state shared by all tests, so it is reset on both
    sides of each test.
    """
    for name in BARCODE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_policy()
    yield
    reset_policy()
