"""Shared fixtures for core unit tests: a throwaway site layout under tmp_path"""

import pytest

from pagesmith.core.render import PageGenerator
from pagesmith.core.stores import ComponentStore, TemplateStore


PAGE_TEMPLATE = """\
<html><head><title>{{ title }}</title></head>
<body><h1>{{title}}</h1>{{ content }}</body></html>
"""

POST_TEMPLATE = "<article data-author=\"{{ author }}\">{{content}}</article>"

HEADER = "<header>Site</header>"


@pytest.fixture(name="templates_dir")
def templates_dir_fixture(tmp_path):
    d = tmp_path / "templates"
    d.mkdir()
    (d / "page.html").write_text(PAGE_TEMPLATE)
    (d / "post.html").write_text(POST_TEMPLATE)
    return d


@pytest.fixture(name="components_dir")
def components_dir_fixture(tmp_path):
    d = tmp_path / "components"
    (d / "partials").mkdir(parents=True)
    (d / "header.html").write_text(HEADER)
    (d / "partials" / "footer.html").write_text("<footer>(c)</footer>")
    return d


@pytest.fixture(name="generator")
def generator_fixture(templates_dir, components_dir):
    return PageGenerator(TemplateStore(templates_dir), ComponentStore(components_dir))
