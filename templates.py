# templates.py

import logging
import os

import pystache

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), 'personal_site', 'resources', 'templates')
TEMPLATE_EXTENSION = '.mustache'

logger = logging.getLogger('site')


class DirectoryNotFound(Exception):
    """Raised when the template directory is missing at startup."""


def html_escape(value: str) -> str:
    # Apostrophes are left alone so page copy reads as written.
    return (
        value.replace('&', '&amp;')
             .replace('<', '&lt;')
             .replace('>', '&gt;')
             .replace('"', '&quot;')
    )


class Template:

    def __init__(self, name: str, source: str):
        self.name = name
        self.source = source
        self.parsed = pystache.parse(source)

    def __repr__(self):
        return f"Template({self.name!r})"


def load_templates(directory: str = TEMPLATE_DIR) -> dict:
    """
    Walk `directory` recursively and parse every *.mustache file into a
    Template keyed by its base name. Parse and read errors propagate.
    """
    if not os.path.isdir(directory):
        raise DirectoryNotFound(f"Template directory not found: {directory}")

    templates = {}
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for filename in sorted(files):
            if not filename.endswith(TEMPLATE_EXTENSION):
                continue

            name = filename[:-len(TEMPLATE_EXTENSION)]
            path = os.path.join(root, filename)
            with open(path, 'r', encoding='utf-8') as f:
                source = f.read()

            if name in templates:
                logger.warning("Template %r redefined by %s", name, path)
            templates[name] = Template(name, source)

    logger.debug("Loaded %d templates from %s", len(templates), directory)
    return templates


class TemplateLibrary:
    """Read-only set of loaded templates shared by all request handlers."""

    def __init__(self, templates: dict):
        self._templates = dict(templates)
        self._renderer = pystache.Renderer(
            partials={name: t.source for name, t in self._templates.items()},
            escape=html_escape,
            missing_tags='strict',
        )

    def __contains__(self, name):
        return name in self._templates

    def names(self):
        return sorted(self._templates)

    def render(self, template_name: str, data: dict) -> str:
        """
        Render a template with `data`. Unknown templates and render errors
        produce an empty string instead of failing the request.
        """
        template = self._templates.get(template_name)
        if template is None:
            logger.warning("Template not found: %s", template_name)
            return ''

        try:
            return self._renderer.render(template.parsed, data)
        except Exception as e:
            logger.warning("Failed to render %s: %s", template_name, e)
            return ''

    def render_page(self, title: str, template_name: str, data: dict,
                    layout: str = 'layout') -> str:
        content = self.render(template_name, data)
        return self.render(layout, {'title': title, 'content': content})
