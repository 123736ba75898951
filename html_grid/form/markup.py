from django import forms
from django.middleware.csrf import get_token
from django.utils.safestring import mark_safe

METHOD_FIELD = "_method"
SPOOFED_METHODS = ("PUT", "PATCH", "DELETE")


class FormMarkup:
    """Raw form markup used by grids and builders."""

    def hidden(self, name, value="", attributes=None):
        return mark_safe(forms.HiddenInput(attrs=attributes).render(name, value))

    def form_method(self, method):
        """The method to put on the ``<form>`` tag, which only understands GET and POST."""
        method = (method or "POST").upper()
        return "GET" if method == "GET" else "POST"

    def method_override(self, method):
        method = (method or "POST").upper()
        if method not in SPOOFED_METHODS:
            return mark_safe("")
        return self.hidden(METHOD_FIELD, method)

    def token(self, request):
        return self.hidden("csrfmiddlewaretoken", get_token(request))
