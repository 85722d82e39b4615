"""
Unit tests for configuration loading
"""

import pytest

from spigot.config import OutputConfig, load_config, parse_config, single_runner
from spigot.errors import ConfigError


class TestLoadConfig:

    def test_missing_file_has_no_runners(self, tmp_path):
        assert load_config(str(tmp_path / "absent.yaml")).runners == []

    def test_empty_file_has_no_runners(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)).runners == []

    def test_runner_defaults_merged(self, tmp_path):
        path = tmp_path / "spigot.yaml"
        path.write_text(
            "runners:\n"
            "  - generator:\n"
            "      type: fortinet:firewall\n"
            "      vd: branch\n"
            "    output:\n"
            "      mode: file\n"
            "      file_path: /tmp/out.log\n"
            "    records: 5\n"
        )
        config = load_config(str(path))

        assert len(config.runners) == 1
        runner = config.runners[0]
        assert runner.generator_type == "fortinet:firewall"
        assert runner.generator == {"type": "fortinet:firewall", "vd": "branch"}
        assert runner.records == 5
        assert runner.rate == 10.0
        assert runner.duration == 0
        assert runner.output == OutputConfig(mode="file", file_path="/tmp/out.log")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("runners: [\n")
        with pytest.raises(ConfigError):
            load_config(str(path))


class TestParseConfig:

    @pytest.mark.parametrize("data", [
        ["runners"],
        {"runners": {"generator": {"type": "citrix:cef"}}},
        {"runners": ["citrix:cef"]},
        {"runners": [{"generator": {}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"mode": "carrier-pigeon"}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"colour": False}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "interval": "5s"}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "rate": "fast"}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "records": -1}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"mode": "udp", "port": "5514"}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"port": 70000}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"max_file_size_mb": "100"}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"max_file_size_mb": 0}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"file_rotation": "yes"}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"color": 1}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"port": True}}]},
        {"runners": [{"generator": {"type": "citrix:cef"}, "output": {"mode": 4}}]},
    ])
    def test_rejected(self, data):
        with pytest.raises(ConfigError):
            parse_config(data)

    def test_generator_options_left_for_generator(self):
        config = parse_config({"runners": [{"generator": {"type": "citrix:cef", "x": 1}}]})
        assert config.runners[0].generator == {"type": "citrix:cef", "x": 1}


class TestSingleRunner:

    def test_console_defaults(self):
        runner = single_runner("citrix:cef")
        assert runner.generator == {"type": "citrix:cef"}
        assert runner.output.mode == "console"
        assert runner.records == 0


class TestOutputSection:

    def test_mode_is_case_insensitive(self):
        config = parse_config({"runners": [
            {"generator": {"type": "citrix:cef"}, "output": {"mode": "UDP", "port": 5514}},
        ]})
        assert config.runners[0].output.mode == "udp"
        assert config.runners[0].output.port == 5514

    def test_mistyped_value_named_in_error(self):
        with pytest.raises(ConfigError) as excinfo:
            parse_config({"runners": [
                {"generator": {"type": "citrix:cef"}, "output": {"port": "5514"}},
            ]})
        assert "'port' must be int" in str(excinfo.value)
