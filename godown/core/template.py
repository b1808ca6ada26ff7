"""HTML page template framing rendered content."""

from jinja2 import Environment, Template, TemplateError, select_autoescape
from markupsafe import Markup

from godown.content.errors import InternalRenderError
from godown.models.content import RenderedPage

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <link rel="stylesheet" href="{{ stylesheet }}">
</head>
<body>
    {{ content }}
</body>
</html>"""


class PageTemplate:
    """Wraps a RenderedPage in the HTML document shell."""

    def __init__(self, source: str = PAGE_TEMPLATE) -> None:
        self._environment = Environment(autoescape=select_autoescape(default_for_string=True))
        try:
            self._template: Template = self._environment.from_string(source)
        except TemplateError as ex:
            raise InternalRenderError(f"Invalid page template: {ex}") from ex

    def render(self, page: RenderedPage) -> str:
        """Render the full document; content is trusted markup, title is escaped."""
        try:
            return self._template.render(
                title=page.title,
                stylesheet=page.stylesheet,
                content=Markup(page.content),
            )
        except TemplateError as ex:
            raise InternalRenderError(f"Page template failed for {page.title!r}: {ex}") from ex


page_template = PageTemplate()
