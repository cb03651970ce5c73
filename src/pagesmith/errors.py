"""Exception hierarchy shared by the build pipeline, auth, and CLI"""


class PagesmithError(Exception):
    """Base class for all pagesmith errors."""


class ConfigurationError(PagesmithError):
    """Deployment misconfiguration: missing template, secret, or credential."""


class TemplateNotFoundError(ConfigurationError):
    """A page referenced a template that does not exist in the template store."""

    def __init__(self, name: str):
        super().__init__(f"Template {name} not found.")
        self.name = name


class BuildError(PagesmithError):
    """A single source document could not be read or written during a build."""
