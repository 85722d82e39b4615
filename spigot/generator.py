# spigot/generator.py
"""Generator contract and the shared randomize-then-render implementation."""

import dataclasses
import logging
import random
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from . import rand
from .errors import RenderError
from .options import NoOptions, unpack
from .templating import CompiledTemplate, TemplateEngine


class Generator(ABC):
    """A source of synthetic log lines.

    Instances hold mutable state and must not be shared between threads
    without external locking.
    """

    name: ClassVar[str] = ''

    @abstractmethod
    def next(self) -> bytes:
        """Return the next log line (no trailing newline)."""


class TemplatedGenerator(Generator):
    """Generator that renders a random template against a random record.

    Subclasses declare:

    * ``templates``: mapping of template name to Jinja2 source
    * ``options_class``: dataclass of recognized configuration options
    * ``randomize()``: returns a freshly drawn record dataclass
    """

    templates: ClassVar[Mapping[str, str]] = {}
    options_class: ClassVar[Type] = NoOptions

    def __init__(self, config: Optional[Any] = None,
                 rng: Optional[random.Random] = None,
                 engine: Optional[TemplateEngine] = None):
        self.options = unpack(self.options_class, config, self.name)
        self.rng = rng or rand.source()
        self.fake = rand.faker(self.rng)

        engine = engine or TemplateEngine()
        self.compiled: List[CompiledTemplate] = [
            engine.compile(template_name, source)
            for template_name, source in self.templates.items()
        ]

        self.record = self.randomize()
        logging.debug(f"{self.name}: compiled {len(self.compiled)} templates")

    @abstractmethod
    def randomize(self):
        """Draw a new record with every field in its domain."""

    def fields(self) -> Dict[str, Any]:
        """Template context for the current record."""
        return {f.name: getattr(self.record, f.name)
                for f in dataclasses.fields(self.record)}

    def next(self) -> bytes:
        template = rand.choice(self.compiled, self.rng)
        line = template.render(self.fields())
        if b'\n' in line or b'\r' in line:
            raise RenderError(template.name, "rendered line contains a line break")

        # Randomize after rendering so tests can set the record directly.
        self.record = self.randomize()
        return line
