# type: ignore
from invoke import task


@task
def venv(ctx):
    """Create the virtualenv with test and dev extras."""
    ctx.run("uv sync --extra test --extra dev")


@task
def lint(ctx):
    """Run ruff and mypy over the package and tests."""
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """Run tests with coverage."""
    ctx.run("pytest --cov=printfleet --cov-report=term-missing", pty=True)


@task
def build_package(ctx):
    """Build sdist and wheel into dist/."""
    ctx.run("rm -rf dist")
    ctx.run("uv build")
