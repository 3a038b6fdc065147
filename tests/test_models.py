import pytest

from stand.errors import ConfigError, ConfigValidationError, MissingFieldError
from stand.models import Configuration, Environment, NestedBehavior, Settings


def _document():
    return {
        "version": "2.0",
        "settings": {"default_environment": "dev", "show_env_in_prompt": True},
        "common": {"APP_NAME": "MyApp", "LOG_FORMAT": "json"},
        "environments": {
            "dev": {
                "description": "Development environment",
                "color": "green",
                "DATABASE_URL": "postgres://localhost:5432/dev",
                "DEBUG": "true",
            },
            "prod": {
                "description": "Production environment",
                "color": "red",
                "extends": "dev",
                "requires_confirmation": True,
                "DATABASE_URL": "postgres://prod.example.com/myapp",
                "DEBUG": "false",
            },
        },
    }


def test_configuration_from_dict():
    config = Configuration.from_dict(_document())
    assert config.version == "2.0"
    assert config.settings.default_environment == "dev"
    assert config.settings.show_env_in_prompt is True
    assert config.common == {"APP_NAME": "MyApp", "LOG_FORMAT": "json"}
    assert list(config.environments) == ["dev", "prod"]


def test_environment_fields_are_not_variables():
    config = Configuration.from_dict(_document())
    prod = config.environments["prod"]
    assert prod.extends == "dev"
    assert prod.color == "red"
    assert prod.requires_confirmation is True
    assert prod.variables == {
        "DATABASE_URL": "postgres://prod.example.com/myapp",
        "DEBUG": "false",
    }


def test_environment_optional_fields_default_to_none():
    env = Environment.from_dict({"description": "d", "KEY": "v"})
    assert env.extends is None
    assert env.color is None
    assert env.requires_confirmation is None
    assert env.variables == {"KEY": "v"}


def test_common_is_optional():
    doc = _document()
    del doc["common"]
    assert Configuration.from_dict(doc).common is None


@pytest.mark.parametrize("field", ["version", "environments", "settings"])
def test_missing_top_level_field(field):
    doc = _document()
    del doc[field]
    with pytest.raises(MissingFieldError) as info:
        Configuration.from_dict(doc)
    assert info.value.field == field


def test_missing_description():
    with pytest.raises(MissingFieldError) as info:
        Environment.from_dict({"DATABASE_URL": "x"})
    assert info.value.field == "description"


def test_missing_default_environment():
    with pytest.raises(MissingFieldError):
        Settings.from_dict({"show_env_in_prompt": True})


def test_non_string_variable_rejected():
    with pytest.raises(ConfigValidationError):
        Environment.from_dict({"description": "d", "files": [".stand.dev.env"]})


def test_non_bool_confirmation_rejected():
    with pytest.raises(ConfigValidationError):
        Environment.from_dict({"description": "d", "requires_confirmation": "yes"})


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("prevent", NestedBehavior.PREVENT),
        ("allow", NestedBehavior.ALLOW),
        ("warn", NestedBehavior.WARN),
    ],
)
def test_nested_behavior_values(raw, expected):
    settings = Settings.from_dict(
        {"default_environment": "dev", "nested_shell_behavior": raw}
    )
    assert settings.nested_shell_behavior is expected


def test_unknown_nested_behavior_rejected():
    with pytest.raises(ConfigError):
        Settings.from_dict({"default_environment": "dev", "nested_shell_behavior": "maybe"})


def test_non_mapping_document_rejected():
    with pytest.raises(ConfigValidationError):
        Configuration.from_dict(["not", "a", "table"])