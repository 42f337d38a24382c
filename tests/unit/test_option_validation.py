"""Tests for option declarations and value validation."""

import math

import pytest

from garbageman_embassy.core.exceptions import (
    SchemaDefinitionError,
    ValidationError,
    ValidationErrorKind,
)
from garbageman_embassy.platform.options import (
    NumberRange,
    Option,
    OptionKind,
    validate_option,
    validate_options,
    validator_for,
)


class TestNumberRange:
    """Test cases for interval notation."""

    def test_parse_inclusive(self):
        r = NumberRange.parse("[1024,65535]")

        assert r.low == 1024
        assert r.high == 65535
        assert r.contains(1024)
        assert r.contains(65535)
        assert not r.contains(1023)
        assert not r.contains(65536)

    def test_parse_exclusive_and_unbounded(self):
        r = NumberRange.parse("(0,*)")

        assert not r.contains(0)
        assert r.contains(0.001)
        assert r.contains(10 ** 12)
        assert str(r) == "(0,*)"

    def test_parse_mixed_brackets(self):
        r = NumberRange.parse("[0,1)")

        assert r.contains(0)
        assert not r.contains(1)

    def test_non_finite_never_contained(self):
        r = NumberRange.unbounded()

        assert not r.contains(math.inf)
        assert not r.contains(math.nan)

    def test_huge_integers_compare_exactly(self):
        r = NumberRange.parse("[1024,65535]")

        assert not r.contains(10 ** 400)
        assert not r.contains(-(10 ** 400))
        assert NumberRange.unbounded().contains(10 ** 400)
        assert not NumberRange.parse("[0,*)").contains(-math.inf)

    @pytest.mark.parametrize("notation", ["1,2", "[a,b]", "[5,1]", "[1;2]"])
    def test_malformed_notation(self, notation):
        with pytest.raises(SchemaDefinitionError):
            NumberRange.parse(notation)


class TestNumberValidation:
    """Test cases for number options."""

    @pytest.fixture
    def port(self):
        return Option.number("port", "Port", range="[1024,65535]", integral=True, default=8080)

    def test_valid_value(self, port):
        assert validate_option(port, 8080) == 8080

    def test_out_of_range(self, port):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(port, 70000)

        assert exc_info.value.kind == ValidationErrorKind.RANGE
        assert exc_info.value.path == "port"

    def test_fractional_on_integral(self, port):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(port, 8080.5)

        assert exc_info.value.kind == ValidationErrorKind.TYPE

    def test_whole_float_on_integral_accepted(self, port):
        assert validate_option(port, 8080.0) == 8080.0

    @pytest.mark.parametrize("value", ["8080", True, [8080], math.nan])
    def test_non_numbers_rejected(self, port, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(port, value)

        assert exc_info.value.kind == ValidationErrorKind.TYPE

    @pytest.mark.parametrize("value", [10 ** 400, -(10 ** 400)])
    def test_huge_integer_out_of_range(self, port, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(port, value)

        assert exc_info.value.kind == ValidationErrorKind.RANGE
        assert len(exc_info.value.reason) < 100

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinity_rejected(self, port, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(port, value)

        assert exc_info.value.kind == ValidationErrorKind.TYPE

    def test_missing_required(self, port):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(port, None)

        assert exc_info.value.kind == ValidationErrorKind.MISSING_REQUIRED

    def test_optional_accepts_none(self):
        option = Option.number("limit", "Limit", required=False)

        assert validate_option(option, None) is None

    def test_fractional_allowed_when_not_integral(self):
        option = Option.number("ratio", "Ratio", range="[0,1]", default=0.5)

        assert validate_option(option, 0.25) == 0.25


class TestStringValidation:
    """Test cases for string options."""

    @pytest.fixture
    def password(self):
        return Option.string(
            "admin-password",
            "Admin Password",
            pattern="[a-zA-Z0-9!@#$%^&*]+",
            pattern_description="Must contain letters, numbers, and special characters",
            sensitive=True,
            default="abc123",
        )

    def test_matching_value(self, password):
        assert validate_option(password, "Passw0rd!") == "Passw0rd!"

    def test_pattern_mismatch_uses_description(self, password):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(password, "has space")

        error = exc_info.value
        assert error.kind == ValidationErrorKind.PATTERN
        assert error.reason == "Must contain letters, numbers, and special characters"
        assert "has space" not in error.message

    def test_pattern_must_match_whole_value(self):
        option = Option.string("code", "Code", pattern="[0-9]+", default="1")

        with pytest.raises(ValidationError):
            validate_option(option, "12ab")

    def test_empty_required_string(self, password):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(password, "")

        assert exc_info.value.kind == ValidationErrorKind.MISSING_REQUIRED

    def test_empty_optional_string(self):
        option = Option.string("nick", "Nickname", pattern="[a-z]+", required=False)

        assert validate_option(option, "") == ""

    def test_non_string(self, password):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(password, 1234)

        assert exc_info.value.kind == ValidationErrorKind.TYPE

    def test_invalid_pattern_declaration(self):
        with pytest.raises(SchemaDefinitionError):
            Option.string("bad", "Bad", pattern="[unclosed")


class TestBooleanAndEnumValidation:
    """Test cases for boolean and enum options."""

    def test_boolean(self):
        option = Option.boolean("enable-tor-proxy", "Enable Tor Proxy", default=True)

        assert validate_option(option, False) is False
        with pytest.raises(ValidationError) as exc_info:
            validate_option(option, "true")
        assert exc_info.value.kind == ValidationErrorKind.TYPE

    def test_boolean_rejects_integers(self):
        option = Option.boolean("flag", "Flag")

        with pytest.raises(ValidationError):
            validate_option(option, 1)

    def test_enum_member(self):
        option = Option.enum("log-level", "Log Level", values=["debug", "info"], default="info")

        assert validate_option(option, "debug") == "debug"

    def test_enum_non_member(self):
        option = Option.enum("log-level", "Log Level", values=["debug", "info"], default="info")

        with pytest.raises(ValidationError) as exc_info:
            validate_option(option, "trace")

        assert exc_info.value.kind == ValidationErrorKind.ENUM
        assert exc_info.value.details["allowed"] == ["debug", "info"]

    def test_enum_requires_values(self):
        with pytest.raises(SchemaDefinitionError):
            Option.enum("empty", "Empty", values=[])

    def test_enum_labels_must_name_declared_values(self):
        with pytest.raises(SchemaDefinitionError):
            Option.enum("level", "Level", values=["a"], value_names={"b": "B"})


class TestObjectValidation:
    """Test cases for nested object options."""

    @pytest.fixture
    def advanced(self):
        return Option.object(
            "advanced",
            "Advanced Settings",
            spec=[
                Option.string("tor-proxy-host", "Tor Proxy Host", default="127.0.0.1"),
                Option.number("tor-proxy-port", "Tor Proxy Port", range="[1024,65535]", integral=True, default=9050),
            ],
        )

    def test_kind_and_default(self, advanced):
        assert advanced.kind == OptionKind.OBJECT
        assert advanced.default_value() == {"tor-proxy-host": "127.0.0.1", "tor-proxy-port": 9050}

    def test_nested_error_carries_path(self, advanced):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(advanced, {"tor-proxy-host": "127.0.0.1", "tor-proxy-port": 80})

        assert exc_info.value.path == "advanced.tor-proxy-port"
        assert exc_info.value.kind == ValidationErrorKind.RANGE

    def test_unknown_nested_key(self, advanced):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(advanced, {"tor-proxy-host": "h", "tor-proxy-port": 9050, "extra": 1})

        assert exc_info.value.kind == ValidationErrorKind.UNKNOWN_KEY
        assert exc_info.value.path == "advanced.extra"

    def test_missing_nested_key(self, advanced):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(advanced, {"tor-proxy-host": "h"})

        assert exc_info.value.kind == ValidationErrorKind.MISSING_REQUIRED
        assert exc_info.value.path == "advanced.tor-proxy-port"

    def test_non_mapping(self, advanced):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(advanced, ["not", "a", "mapping"])

        assert exc_info.value.kind == ValidationErrorKind.TYPE

    def test_validation_does_not_modify_candidate(self, advanced):
        candidate = {"tor-proxy-host": "h", "tor-proxy-port": 9050}

        validated = validate_option(advanced, candidate)
        validated["tor-proxy-host"] = "changed"

        assert candidate["tor-proxy-host"] == "h"

    def test_duplicate_keys_rejected(self):
        with pytest.raises(SchemaDefinitionError):
            Option.object("group", "Group", spec=[
                Option.boolean("a", "A"),
                Option.boolean("a", "A again"),
            ])

    def test_root_level_validation(self, advanced):
        with pytest.raises(ValidationError) as exc_info:
            validate_options([advanced], {"advanced": advanced.default_value(), "stray": True})

        assert exc_info.value.path == "stray"


class TestValidatorFor:
    """Test cases for standalone validate functions."""

    def test_validator_uses_option_key_as_path(self):
        validate = validator_for(Option.number("max-instances", "Maximum Instances", range="[1,50]", integral=True, default=10))

        assert validate(5) == 5
        with pytest.raises(ValidationError) as exc_info:
            validate(51)
        assert exc_info.value.path == "max-instances"

    def test_error_serialization(self):
        validate = validator_for(Option.number("port", "Port", range="[1024,65535]", default=8080))

        with pytest.raises(ValidationError) as exc_info:
            validate(1)

        data = exc_info.value.to_dict()
        assert data["error_code"] == "VALIDATION_RANGE"
        assert data["path"] == "port"
        assert data["kind"] == "range"
