from __future__ import annotations

import nox


@nox.session(python="3.12")
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "-q", *session.posargs)


@nox.session(python="3.12")
def mypy(session: nox.Session) -> None:
    session.install("-e", ".[dev]")
    session.run("mypy", *session.posargs)


@nox.session(python=False)
def error_codes(session: nox.Session) -> None:
    session.run("python", "scripts/check_error_codes.py")


# Alias with version suffix for CI convenience
@nox.session(name="tests-3.10", python="3.10")
def tests_310(session: nox.Session) -> None:
    tests(session)
