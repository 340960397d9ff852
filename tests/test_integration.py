"""Integration tests for the conversion pipeline."""

import json
import pytest
from json2env import EnvConverter, FlattenConfig, OutputFormat
from json2env.types import ConversionError, ErrorType


class TestEnvConverterIntegration:
    """Integration tests for the complete json2env pipeline."""

    def setup_method(self):
        """Set up test fixtures."""
        self.converter = EnvConverter()

    def test_convert_default_configuration(self, sample_config_json):
        result = self.converter.convert(json.dumps(sample_config_json))

        assert result.success
        assert result.output == "db__host=localhost\ndb__port=5432\ntags=a,b"
        assert len(result.entries) == 3
        assert result.collisions == []
        assert result.errors is None

    def test_convert_enumerated(self):
        converter = EnvConverter(FlattenConfig(enumerate_array=True))

        result = converter.convert('{"a": [1, 2]}')

        assert result.output == "a__0=1\na__1=2"

    def test_convert_custom_separators(self):
        converter = EnvConverter(FlattenConfig(key_separator="_", array_separator=";"))

        result = converter.convert('{"app": {"hosts": ["x", "y"], "port": 80}}')

        assert result.output == "app_hosts=x;y\napp_port=80"

    def test_convert_dotenv(self, sample_service_json):
        converter = EnvConverter(output_format=OutputFormat.DOTENV)

        result = converter.convert(json.dumps(sample_service_json))

        assert result.output.splitlines() == [
            'service__name="billing"',
            "service__debug=false",
            "service__replicas=3",
            "service__ratio=0.25",
            "service__owner=",
            'service__hosts="alpha,beta"',
            'service__limits__cpu="500m"',
            'service__limits__memory="1Gi"',
            'features=""',
        ]

    def test_convert_empty_object(self):
        result = self.converter.convert("{}")

        assert result.success
        assert result.output == ""
        assert result.entries == []

    def test_convert_scalar_root(self):
        result = self.converter.convert('"hello"')

        assert result.success
        assert result.output == ""
        assert [(entry.key, entry.value) for entry in result.entries] == [("", "hello")]

    def test_convert_invalid_json(self):
        result = self.converter.convert('{"db": ')

        assert not result.success
        assert result.output == ""
        assert "Invalid JSON input" in result.errors[0]

    def test_convert_rejects_keys_with_line_breaks(self):
        result = self.converter.convert('{"a\\nb": 1, "c": {"d\\re": 2}}')

        assert not result.success
        assert result.output == ""
        assert "Flattened keys contain line breaks: 'a\\nb', 'c__d\\re'" in result.errors[0]
        assert "must not contain line breaks" in result.errors[0]

    def test_convert_rejects_out_of_range_number(self):
        result = self.converter.convert('{"big": 1e400}')

        assert not result.success
        assert "Number out of range: 1e400" in result.errors[0]

    def test_convert_deeply_nested(self):
        result = self.converter.convert('{"a": ' + "[" * 300 + "1" + "]" * 300 + "}")

        assert result.success
        assert result.output == "a=1"

    def test_convert_collision_overwrites(self):
        result = self.converter.convert('{"a__b": 1, "a": {"b": 2}}')

        assert result.success
        assert result.output == "a__b=2"
        assert result.collisions == ["a__b"]

    def test_convert_collision_strict(self):
        converter = EnvConverter(strict=True)

        result = converter.convert('{"a__b": 1, "a": {"b": 2}}')

        assert not result.success
        assert result.collisions == ["a__b"]
        assert "Flattened keys collide: a__b" in result.errors[0]

    def test_convert_is_deterministic(self, sample_service_json):
        text = json.dumps(sample_service_json)

        assert self.converter.convert(text).output == self.converter.convert(text).output

    def test_convert_records_metrics(self, sample_config_json):
        self.converter.convert(json.dumps(sample_config_json))

        assert self.converter.profiler.metrics_history[-1].entries_emitted == 3


class TestEnvConverterFiles:
    """Integration tests for reading and writing files."""

    def test_convert_file_to_file(self, sample_json_file, temp_dir):
        output = temp_dir / ".env"

        result = EnvConverter().convert_file(sample_json_file, output)

        assert result.success
        assert output.read_text(encoding="utf-8") == "db__host=localhost\ndb__port=5432\ntags=a,b\n"

    def test_convert_file_to_stdout(self, sample_json_file, capsys):
        EnvConverter().convert_file(sample_json_file)

        assert capsys.readouterr().out == "db__host=localhost\ndb__port=5432\ntags=a,b\n"

    def test_invalid_json_writes_nothing(self, temp_dir):
        source = temp_dir / "bad.json"
        source.write_text("{oops}", encoding="utf-8")
        output = temp_dir / ".env"

        result = EnvConverter().convert_file(source, output)

        assert not result.success
        assert not output.exists()

    def test_missing_input_raises(self, temp_dir):
        with pytest.raises(ConversionError) as exc_info:
            EnvConverter().convert_file(temp_dir / "missing.json")

        assert exc_info.value.error_type == ErrorType.INPUT

    def test_unwritable_output_raises(self, sample_json_file, temp_dir):
        with pytest.raises(ConversionError) as exc_info:
            EnvConverter().convert_file(sample_json_file, temp_dir / "missing" / ".env")

        assert exc_info.value.error_type == ErrorType.OUTPUT
