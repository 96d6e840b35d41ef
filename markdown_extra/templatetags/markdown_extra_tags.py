# markdown_extra/templatetags/markdown_extra_tags.py

from django import template
from django.utils.safestring import mark_safe

from ..config import get_extra_config
from ..renderer import render_markdown
from ..session import ConversionSession
from ..spans import convert_spans

register = template.Library()


@register.filter(name="markdown_extra")
def markdown_extra_filter(value):
    return mark_safe(render_markdown(value or ""))


@register.filter(name="markdown_extra_inline")
def markdown_extra_inline_filter(value):
    """Render span-level markdown only (for titles, captions and the like)"""
    session = ConversionSession(get_extra_config())
    return mark_safe(convert_spans(value or "", session.span_host))


@register.simple_tag(takes_context=True)
def markdown_extra_with_context(context, value):
    """Template tag that reads Markdown Extra options from the template context"""
    options = context.get("markdown_extra_options") or {}
    return mark_safe(render_markdown(value or "", config=get_extra_config(options)))
