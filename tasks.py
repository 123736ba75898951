"""Useful tasks for use when developing html-grid.

This uses the `Invoke` library."""
from pathlib import Path

from invoke import Context, Exit, task

PROJECT_DIR = Path(__file__).parent


@task
def test(c: Context, path="", keyword=None):
    """Run the test suite"""
    cmd = f"pytest {path}".strip()
    if keyword:
        cmd += f" -k {keyword}"
    c.run(cmd, pty=True)


@task
def requirements(c: Context, upgrade=False):
    """Install the package with its test dependencies"""
    args = " -U" if upgrade else ""
    c.run(f"pip install{args} -e .[test,dev]")


@task
def translations(c: Context, locale=None):
    """Make Django translations"""
    if locale is None:
        raise Exit("Pass a locale, for example: inv translations --locale=fr", -1)
    with c.cd(PROJECT_DIR / "html_grid"):
        c.run(f"django-admin makemessages -l {locale} --settings=config.settings.local --pythonpath=..")
        c.run("django-admin compilemessages --settings=config.settings.local --pythonpath=..")
