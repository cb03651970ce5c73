"""Page generation: front matter + template + components -> finished HTML"""

import re
from pathlib import Path

from pagesmith.core.components import expand_components
from pagesmith.core.frontmatter import parse_frontmatter
from pagesmith.core.stores import ComponentStore, TemplateStore


TEMPLATE_FIELD = "template"


def _placeholder(name: str) -> re.Pattern:
    return re.compile(r'{{\s*' + re.escape(name) + r'\s*}}')


def fill_template(template: str, body: str, fields: dict[str, str]) -> str:
    """Substitute {{ content }} with body, then {{ <field> }} for every field except `template`.

    Values are inserted literally; placeholders with no matching field are left verbatim.
    """
    html = _placeholder("content").sub(lambda _: body, template)
    for key, value in fields.items():
        if key == TEMPLATE_FIELD:
            continue
        html = _placeholder(key).sub(lambda _, v=value: v, html)
    return html


class PageGenerator:
    """Binds the template/component stores and default template name for a build."""

    def __init__(
        self,
        templates: TemplateStore,
        components: ComponentStore,
        default_template: str = "page.html",
        ):
        self.templates = templates
        self.components = components
        self.default_template = default_template

    def render(self, raw: str) -> str:
        """Render source text. Raises TemplateNotFoundError if the selected template is missing."""
        fields, body = parse_frontmatter(raw)
        template = self.templates.load(fields.get(TEMPLATE_FIELD) or self.default_template)
        return expand_components(fill_template(template, body, fields), self.components)

    def generate(self, source_path: Path) -> str:
        """Read a source document (UTF-8) and render it."""
        return self.render(Path(source_path).read_text(encoding="utf-8"))
