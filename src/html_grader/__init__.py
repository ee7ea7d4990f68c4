"""HTML Grader — rubric-based auto-grading for single-file HTML assignments."""

__version__ = "0.1.0"
