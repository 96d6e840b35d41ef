# markdown_extra/extensions/markdown_extra.py
"""
Python-Markdown extension that adds Markdown Extra tables, fenced code
blocks and definition lists.

Usage:

    import markdown
    from markdown_extra.extensions.markdown_extra import MarkdownExtraExtension

    html = markdown.markdown(text, extensions=[MarkdownExtraExtension(table_class="table")])

The extension hooks into the host's pipeline:

1. NormalizeWhitespace (host, priority 30)
2. MarkdownExtraPreprocessor (priority 25): escapes, recognizers, placeholders
3. HtmlBlockPreprocessor (host, priority 20): stashes the placeholders as raw HTML
   ...block and inline parsing...
4. RawHtmlPostprocessor (host, priority 30): puts the placeholders back
5. MarkdownExtraPostprocessor (priority 5): swaps placeholders for the generated HTML

Embedded markdown (cells, terms, definitions) is rendered by a private
host, never by the ``md`` instance this extension is registered on.
"""

from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor
from markdown.preprocessors import Preprocessor

from ..config import extensions_from, get_extra_config
from ..session import ConversionSession


class MarkdownExtraPreprocessor(Preprocessor):
    def __init__(self, md, extension):
        super().__init__(md)
        self.extension = extension

    def run(self, lines):
        session = self.extension.start_session()
        return session.preprocess("\n".join(lines)).split("\n")


class MarkdownExtraPostprocessor(Postprocessor):
    def __init__(self, md, extension):
        super().__init__(md)
        self.extension = extension

    def run(self, text):
        session = self.extension.session
        if session is None:
            return text
        try:
            return session.postprocess(text)
        finally:
            self.extension.session = None


class MarkdownExtraExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "extensions": [["all"], "Extensions to enable: all, tables, fenced_code_gfm, def_list"],
            "table_class": ["", "Class attribute for generated tables"],
            "highlighter": ["", "Code highlighter: prettify, highlight or empty for none"],
            "sanitize": [True, "Render embedded markdown with the sanitizing host"],
            "tab_width": [4, "Spaces per indentation level"],
        }
        self.session = None
        super().__init__(**kwargs)

    def get_extra_config(self):
        options = self.getConfigs()
        options["extensions"] = extensions_from(options["extensions"])
        return get_extra_config(options)

    def start_session(self):
        # A fresh session per conversion, whatever the previous one left behind
        self.session = ConversionSession(self.get_extra_config())
        return self.session

    def extendMarkdown(self, md):
        md.registerExtension(self)
        md.preprocessors.register(MarkdownExtraPreprocessor(md, self), "markdown_extra", priority=25)
        md.postprocessors.register(MarkdownExtraPostprocessor(md, self), "markdown_extra", priority=5)

    def reset(self):
        self.session = None


def makeExtension(**kwargs):
    return MarkdownExtraExtension(**kwargs)
