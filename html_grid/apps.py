from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class HtmlGridConfig(AppConfig):
    name = "html_grid"
    verbose_name = _("HTML Grid")

    def ready(self):
        from html_grid import services

        services.register()
