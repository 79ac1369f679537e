# tests/conftest.py

import pytest

from hashring.utils.metrics import reset_metrics


@pytest.fixture(autouse=True)
def clean_metrics():
    """Metrik bersifat global per modul, jadi dikosongkan di setiap tes."""
    reset_metrics()
    yield
    reset_metrics()
