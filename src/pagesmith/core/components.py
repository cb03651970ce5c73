"""Inline `<component src="..."></component>` tags from the component store"""

import logging
import re

from pagesmith.core.stores import ComponentStore


logger = logging.getLogger(__name__)

COMPONENT_RE = re.compile(r'<component\s+src="([^"]+)"\s*></component>')


def expand_components(html: str, components: ComponentStore) -> str:
    """Replace each component tag with its fragment; missing fragments become ''.

    Single pass: tags inside an inserted fragment are left as-is.
    """
    def _replace(m: re.Match) -> str:
        src = m.group(1)
        fragment = components.get(src)
        if fragment is None:
            logger.warning("Component %s not found.", src)
            return ""
        return fragment

    return COMPONENT_RE.sub(_replace, html)
