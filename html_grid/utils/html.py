from django.forms.utils import flatatt
from django.utils.safestring import mark_safe
from django.utils.text import slugify


def slugify_name(name):
    return slugify(str(name))


def flat_attrs(attrs):
    """Render an attribute mapping as HTML attribute markup.

    ``None`` and ``False`` values are dropped and ``True`` becomes a bare
    attribute, matching how Django widgets treat boolean attributes.
    """
    if not attrs:
        return mark_safe("")
    cleaned = {key: value for key, value in attrs.items() if value is not None and value is not False}
    return flatatt(cleaned)
