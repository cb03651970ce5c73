"""Read-only file stores for templates and component fragments"""

from pathlib import Path

from pagesmith.errors import TemplateNotFoundError


class FileStore:
    """Text documents addressed by a path relative to a fixed root directory.

    Names that resolve outside the root, or cannot be resolved at all, are
    treated as absent.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def _resolve(self, name: str) -> Path | None:
        root = self.root.resolve()
        try:
            path = (root / name).resolve()
            if path != root and root not in path.parents:
                return None
            return path if path.is_file() else None
        except (ValueError, OSError):
            # unrepresentable names, e.g. embedded NUL bytes
            return None

    def exists(self, name: str) -> bool:
        return self._resolve(name) is not None

    def get(self, name: str) -> str | None:
        """Return the document text, or None when absent."""
        path = self._resolve(name)
        if path is None:
            return None
        return path.read_text(encoding="utf-8")


class TemplateStore(FileStore):
    def load(self, name: str) -> str:
        """Return template text. A missing template is a configuration error for the whole build."""
        text = self.get(name)
        if text is None:
            raise TemplateNotFoundError(name)
        return text


class ComponentStore(FileStore):
    pass
