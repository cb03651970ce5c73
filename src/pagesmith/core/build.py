"""Site build: mirror the pages tree into the output tree, rendering every .html page"""

import logging
from pathlib import Path

from pagesmith.config import Settings
from pagesmith.core.render import PageGenerator
from pagesmith.core.stores import ComponentStore, TemplateStore
from pagesmith.errors import BuildError


logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".html"


def make_generator(settings: Settings) -> PageGenerator:
    """PageGenerator wired to the template/component directories named in settings."""
    return PageGenerator(
        TemplateStore(Path(settings.templates_dir)),
        ComponentStore(Path(settings.components_dir)),
        settings.default_template,
    )


def _build_page(src: Path, out: Path, generator: PageGenerator) -> None:
    try:
        html = generator.generate(src)
    except (OSError, UnicodeDecodeError) as e:
        raise BuildError(f"Failed to read {src}: {e}") from e
    try:
        out.write_text(html, encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Failed to write {out}: {e}") from e
    logger.info("Generated: %s", out)


def _build_dir(src_dir: Path, out_dir: Path, generator: PageGenerator, results: list) -> None:
    for item in sorted(src_dir.iterdir(), key=lambda p: p.name):
        out = out_dir / item.name
        if item.is_dir():
            out.mkdir(parents=True, exist_ok=True)
            _build_dir(item, out, generator, results)
        elif item.is_file() and item.suffix == PAGE_SUFFIX:
            _build_page(item, out, generator)
            results.append((item, out))


def build_site(source_root: Path, output_root: Path, generator: PageGenerator) -> list[tuple[Path, Path]]:
    """Render every .html page under source_root into output_root. Returns (source, output) pairs.

    Entries are visited in sorted name order so repeated builds are byte-identical.
    Non-HTML files are skipped. TemplateNotFoundError and BuildError abort the build.
    """
    source_root, output_root = Path(source_root), Path(output_root)
    if not source_root.is_dir():
        raise BuildError(f"Pages directory not found: {source_root}")
    output_root.mkdir(parents=True, exist_ok=True)
    results: list[tuple[Path, Path]] = []
    _build_dir(source_root, output_root, generator, results)
    logger.info("Site build complete. Output directory: %s", output_root)
    return results


def run_build(settings: Settings) -> list[tuple[Path, Path]]:
    """Build the site from the directories configured in settings."""
    return build_site(Path(settings.pages_dir), Path(settings.output_dir), make_generator(settings))
