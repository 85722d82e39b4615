# spigot/config.py
"""Configuration loader and validator."""

import copy
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError


@dataclass
class OutputConfig:
    mode: str = "console"
    host: str = "127.0.0.1"
    port: int = 514
    file_path: str = "./logs/spigot.log"
    file_rotation: bool = True
    max_file_size_mb: int = 100
    color: bool = True


@dataclass
class RunnerConfig:
    generator: Dict[str, Any] = field(default_factory=dict)
    output: OutputConfig = field(default_factory=OutputConfig)
    rate: float = 10.0
    records: int = 0
    duration: int = 0

    @property
    def generator_type(self) -> str:
        return self.generator.get('type', '')


@dataclass
class AppConfig:
    runners: List[RunnerConfig] = field(default_factory=list)


OUTPUT_MODES = ('console', 'file', 'udp', 'tcp')

DEFAULT_RUNNER = {
    'rate': 10,
    'records': 0,
    'duration': 0,
}

DEFAULT_OUTPUT = {
    'mode': 'console',
    'host': '127.0.0.1',
    'port': 514,
    'file_path': './logs/spigot.log',
    'file_rotation': True,
    'max_file_size_mb': 100,
    'color': True,
}


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from YAML file.

    A missing file yields a configuration with no runners.
    """
    if not os.path.exists(config_path):
        return AppConfig()

    try:
        with open(config_path, 'r') as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: invalid YAML: {e}") from e

    return parse_config(file_config, source=config_path)


def parse_config(data: Any, source: str = "<config>") -> AppConfig:
    """Build an AppConfig from already-parsed YAML data."""
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: top level must be a mapping")

    runners = data.get('runners') or []
    if not isinstance(runners, list):
        raise ConfigError(f"{source}: 'runners' must be a list")

    return AppConfig(runners=[
        parse_runner(item, f"{source}: runners[{i}]")
        for i, item in enumerate(runners)
    ])


def parse_runner(data: Any, where: str = "runner") -> RunnerConfig:
    """Merge one runner section with defaults."""
    if not isinstance(data, dict):
        raise ConfigError(f"{where}: must be a mapping")

    generator = data.get('generator')
    if not isinstance(generator, dict) or not generator.get('type'):
        raise ConfigError(f"{where}: 'generator' must be a mapping with a 'type'")

    output = copy.deepcopy(DEFAULT_OUTPUT)
    output_section = data.get('output') or {}
    if not isinstance(output_section, dict):
        raise ConfigError(f"{where}: 'output' must be a mapping")
    unknown = set(output_section) - set(output)
    if unknown:
        raise ConfigError(f"{where}: unrecognized output options: {', '.join(sorted(unknown))}")
    check_types(output_section, DEFAULT_OUTPUT, f"{where}: output")
    output.update(output_section)
    output['mode'] = output['mode'].lower()
    if output['mode'] not in OUTPUT_MODES:
        raise ConfigError(
            f"{where}: output mode must be one of {', '.join(OUTPUT_MODES)}, got '{output['mode']}'"
        )
    if not 0 <= output['port'] <= 65535:
        raise ConfigError(f"{where}: output port must be in 0-65535, got {output['port']}")
    if output['max_file_size_mb'] <= 0:
        raise ConfigError(f"{where}: output max_file_size_mb must be positive")

    settings = dict(DEFAULT_RUNNER)
    for key in settings:
        if key in data:
            settings[key] = data[key]
    unknown = set(data) - set(settings) - {'generator', 'output'}
    if unknown:
        raise ConfigError(f"{where}: unrecognized runner options: {', '.join(sorted(unknown))}")

    try:
        rate = float(settings['rate'])
        records = int(settings['records'])
        duration = int(settings['duration'])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{where}: {e}") from e
    if rate < 0 or records < 0 or duration < 0:
        raise ConfigError(f"{where}: rate, records and duration must not be negative")

    return RunnerConfig(
        generator=dict(generator),
        output=OutputConfig(**output),
        rate=rate,
        records=records,
        duration=duration,
    )


def single_runner(generator_type: str, options: Optional[Dict[str, Any]] = None) -> RunnerConfig:
    """Runner config for a generator named on the command line."""
    generator = dict(options or {})
    generator['type'] = generator_type
    return parse_runner({'generator': generator}, where=generator_type)


def check_types(section: Dict[str, Any], defaults: Dict[str, Any], where: str) -> None:
    """Reject values whose type differs from the default for that key."""
    for key, value in section.items():
        expected = type(defaults[key])
        if isinstance(value, bool) and expected is not bool:
            ok = False
        else:
            ok = isinstance(value, expected)
        if not ok:
            raise ConfigError(
                f"{where}: '{key}' must be {expected.__name__}, got {type(value).__name__}"
            )
