"""Nox sessions orchestrating the connector config unit suite."""

from __future__ import annotations

from pathlib import Path

import nox


PYTHON_VERSIONS = ["3.11"]
PROJECT_ROOT = Path(__file__).parent

nox.options.sessions = ["tests(unit)"]


def _install_test_requirements(session: nox.Session) -> None:
    """Install the package and the core testing toolchain inside the session environment."""

    session.install("-e", ".[test]")


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit)")
def tests_unit(session: nox.Session) -> None:
    """Execute connector config unit suites under coverage."""

    _install_test_requirements(session)

    targets = session.posargs or ["tests/unit"]
    session.log("Running unit suites: %s", " ".join(targets))
    session.run(
        "coverage", "run", "--source", "materialize_connector", "-m", "pytest", *targets,
        env={"PYTHONPATH": str(PROJECT_ROOT)},
    )
    session.run("coverage", "report", "-m")
