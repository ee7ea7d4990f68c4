"""Allow ``python -m html_grader``."""

from html_grader.presentation.cli.app import app

if __name__ == "__main__":
    app()
