"""Front-matter extraction: one `key: value` line per field, values kept as strings"""

import re


FRONTMATTER_RE = re.compile(r'^---\n([\s\S]+?)\n---')


def parse_frontmatter(raw: str) -> tuple[dict[str, str], str]:
    """Return (fields, body). Text without a leading `---` block is returned unchanged as body.

    Each interior line is split on its first colon only, so values may contain
    colons (URLs, times). Lines without a colon or with an empty key are skipped.
    """
    m = FRONTMATTER_RE.match(raw)
    if not m:
        return {}, raw

    fields: dict[str, str] = {}
    for line in m.group(1).split('\n'):
        key, sep, value = line.partition(':')
        if not sep or not key.strip():
            continue
        fields[key.strip()] = value.strip()
    return fields, raw[m.end():].strip()
