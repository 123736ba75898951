from django.urls import NoReverseMatch, reverse


class GridListener:
    """Base for code that resolves urls for grids and populates them.

    ``Grid.setup()`` and ``Grid.resource()`` call ``handles()`` to turn a
    route name or path into a url and then ``setup_form()`` so the
    listener can declare fieldsets and controls.
    """

    def handles(self, url, *args, **kwargs):
        if url.startswith(("/", "http://", "https://", "#", "?")):
            return url
        try:
            return reverse(url, args=args or None, kwargs=kwargs or None)
        except NoReverseMatch:
            return url

    def setup_form(self, grid):
        pass