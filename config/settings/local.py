from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="pR7vN2kLxQ9wE4tY6uI1oA3sD5fG8hJ0zXcVbNmMqWeRtYuIoPaSdFgHjKlZx",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"] + env.list("DJANGO_ALLOWED_HOSTS", default=[])

# html-grid
# ------------------------------------------------------------------------------
HTML_GRID["form"]["view"] = env("HTML_GRID_FORM_VIEW", default="html_grid/form/vertical.html")  # noqa: F405
