# spigot/templating.py
"""Jinja2 adapter used by generators to compile and render log line templates."""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from jinja2 import Environment, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError
from jinja2 import TemplateSyntaxError

from .errors import RenderError, TemplateError


def strftime(value: datetime, layout: str) -> str:
    """Format ``value`` with a strftime layout; ``%-d`` is the unpadded day."""
    return value.strftime(layout.replace('%-d', str(value.day)))


def utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc)


def unix(value: datetime) -> int:
    return int(value.timestamp())


def itoa(value: int, width: int = 0) -> str:
    return str(int(value)).zfill(width)


DEFAULT_FUNCTIONS: Dict[str, Callable] = {
    'strftime': strftime,
    'utc': utc,
    'unix': unix,
    'itoa': itoa,
}


class CompiledTemplate:
    """A parsed template ready to render against a record."""

    def __init__(self, name: str, template):
        self.name = name
        self._template = template

    def render(self, data: Mapping[str, Any]) -> bytes:
        try:
            text = self._template.render(data)
        except (JinjaTemplateError, TypeError, ValueError, AttributeError) as e:
            raise RenderError(self.name, str(e)) from e
        return text.encode('utf-8')

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.name!r})"


class TemplateEngine:
    """Owns one Jinja2 environment and the custom functions visible to it.

    Functions are registered both as filters (``{{ date | unix }}``) and as
    globals (``{{ unix(date) }}``) on this engine's environment only.
    """

    def __init__(self, functions: Optional[Mapping[str, Callable]] = None):
        self.functions = dict(DEFAULT_FUNCTIONS if functions is None else functions)
        self._env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=False,
        )
        self._env.filters.update(self.functions)
        self._env.globals.update(self.functions)

    def compile(self, name: str, source: str) -> CompiledTemplate:
        try:
            template = self._env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateError(name, f"line {e.lineno}: {e.message}") from e
        return CompiledTemplate(name, template)


def compile_template(name: str, source: str,
                     functions: Optional[Mapping[str, Callable]] = None) -> CompiledTemplate:
    """Compile one template with its own engine."""
    return TemplateEngine(functions).compile(name, source)
