import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

# Packages with C extensions that must be rebuilt per Python version.
# Poetry's wheel cache can serve a .so compiled for the wrong interpreter.
_C_EXT_PACKAGES = ["psycopg2-binary", "bcrypt"]


def _install(session: nox.Session) -> None:
    """Install the storefront with its test extra into the nox virtualenv."""
    session.run("poetry", "install", "--extras", "test", external=True)
    session.run(
        "pip",
        "install",
        "--force-reinstall",
        "--no-cache-dir",
        *_C_EXT_PACKAGES,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the full suite on the in-memory providers."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run aggregate and event tests only."""
    _install(session)
    session.run(
        "pytest",
        "tests/identity/domain/",
        "tests/catalogue/domain/",
        "tests/ordering/domain/",
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_http(session: nox.Session) -> None:
    """Run the HTTP endpoint and behaviour suites."""
    _install(session)
    session.run("pytest", "-m", "integration or bdd")
