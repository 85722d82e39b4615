# spigot/__init__.py
"""
spigot - synthetic vendor log lines for testing ingestion pipelines.

Generators are looked up by format id in a :class:`Registry` and produce
one log line per :meth:`Generator.next` call.
"""

__version__ = '1.0.0'

from .errors import SpigotError, ConfigError, TemplateError, RenderError
from .generator import Generator, TemplatedGenerator
from .registry import Registry, build_registry
from .templating import TemplateEngine, CompiledTemplate, compile_template
from .config import load_config, AppConfig, RunnerConfig, OutputConfig

__all__ = [
    'SpigotError',
    'ConfigError',
    'TemplateError',
    'RenderError',
    'Generator',
    'TemplatedGenerator',
    'Registry',
    'build_registry',
    'TemplateEngine',
    'CompiledTemplate',
    'compile_template',
    'load_config',
    'AppConfig',
    'RunnerConfig',
    'OutputConfig',
]
