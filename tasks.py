from invoke import task


@task
def env(c):
    """
    Create/update the project virtual environment and install dependencies.
    """
    c.run("uv pip install -e '.[dev]'")


@task(help={"k": "Only run tests matching this expression"})
def test(c, k=""):
    """
    Run the test suite.
    """
    selector = f" -k '{k}'" if k else ""
    c.run(f"uv run pytest tests{selector}", pty=True)


@task(help={"query": "Answer a single query instead of starting the interactive loop"})
def run(c, query=""):
    """
    Launch the futbol-nlq CLI.
    """
    args = f" --query '{query}'" if query else ""
    c.run(f"uv run python -m futbol_nlq{args}", pty=True)
