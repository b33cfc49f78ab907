"""Cyclopts App definition for project card commands."""

from cyclopts import App

app = App(name="projects", help="Inspect and validate project cards", help_on_error=True)
