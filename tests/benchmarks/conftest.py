"""pytest-benchmark configuration for noam benchmarks.

Configures benchmark defaults and shared inputs.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add noam metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "noam"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def sum_input() -> str:
    """1000 comma-separated integers followed by ', hello world'."""
    return (DATA_DIR / "sum_input.txt").read_text(encoding="utf-8")
