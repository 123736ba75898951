from django import template

from html_grid.utils.html import flat_attrs

register = template.Library()


@register.simple_tag
def grid_attrs(attrs):
    """
    Renders an attribute mapping as HTML attributes.
    Usage: <form{% grid_attrs attributes %}>
    """
    return flat_attrs(attrs)


@register.simple_tag
def render_grid(builder):
    """
    Renders a form or table builder.
    Usage: {% render_grid form %}
    """
    return builder.render()
