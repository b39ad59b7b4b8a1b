"""
Tests cho core.exclusion_policy.

- Phan loai --exclude tokens: extension vs name pattern
- Flags --no-json / --no-markdown / --no-yaml
- is_excluded: extension (case-insensitive) va test/spec markers
"""

import pytest

from core.constants import EXCLUDABLE_EXTENSIONS
from core.exclusion_policy import (
    ExclusionConfig,
    build_exclusion_config,
    is_excluded,
    is_name_pattern,
    normalize_extension,
    parse_exclude_option,
)


class TestParseExcludeOption:
    def test_none(self):
        assert parse_exclude_option(None) == []

    def test_comma_separated(self):
        assert parse_exclude_option(".lock, .test.ts,,svg ") == [".lock", ".test.ts", "svg"]


class TestBuildExclusionConfig:
    """Test suite cho build_exclusion_config."""

    def test_empty_config(self):
        config = build_exclusion_config()
        assert config == ExclusionConfig()
        assert config.extensions == frozenset()
        assert config.name_patterns == ()

    @pytest.mark.parametrize(
        "token, expected",
        [("lock", ".lock"), (".LOCK", ".lock"), (" .Svg ", ".svg")],
    )
    def test_extension_duoc_chuan_hoa(self, token, expected):
        config = build_exclusion_config([token])
        assert config.extensions == frozenset({expected})
        assert config.name_patterns == ()

    @pytest.mark.parametrize("token", [".test.js", "foo.spec.ts", "*.gen.go", "*"])
    def test_name_patterns(self, token):
        config = build_exclusion_config([token])
        assert config.name_patterns == (token,)
        assert config.extensions == frozenset()

    def test_name_patterns_giu_thu_tu(self):
        config = build_exclusion_config([".spec.ts", "*.gen.go", ".test.js"])
        assert config.name_patterns == (".spec.ts", "*.gen.go", ".test.js")

    def test_blank_tokens_bi_bo_qua(self):
        config = build_exclusion_config(["", "  "])
        assert config == ExclusionConfig()

    def test_no_json(self):
        config = build_exclusion_config(no_json=True)
        assert set(EXCLUDABLE_EXTENSIONS["json"]) <= config.extensions
        assert ".json" in config.extensions

    def test_no_markdown(self):
        config = build_exclusion_config(no_markdown=True)
        assert ".md" in config.extensions
        assert ".json" not in config.extensions

    def test_no_yaml(self):
        config = build_exclusion_config(no_yaml=True)
        assert {".yml", ".yaml"} <= config.extensions

    def test_flags_va_tokens_ket_hop(self):
        config = build_exclusion_config(["lock"], no_json=True, no_yaml=True)
        assert {".lock", ".json", ".yml"} <= config.extensions

    def test_config_immutable(self):
        config = build_exclusion_config(["lock"])
        with pytest.raises(Exception):
            config.extensions = frozenset()  # type: ignore[misc]


class TestIsExcluded:
    """Test suite cho is_excluded."""

    def test_extension_match(self):
        config = build_exclusion_config(no_json=True)
        assert is_excluded(config, "package.json", ".json")
        assert not is_excluded(config, "main.py", ".py")

    def test_extension_case_insensitive(self):
        config = build_exclusion_config(["LOCK"])
        assert is_excluded(config, "deps.lock", ".LOCK")

    def test_extensionless_file(self):
        config = build_exclusion_config(no_json=True)
        assert not is_excluded(config, "makefile", "")

    def test_test_marker(self):
        config = build_exclusion_config([".test.js"])
        assert is_excluded(config, "app.test.js", ".js")
        # Marker `.test.` match ca file .test.ts
        assert is_excluded(config, "app.test.ts", ".ts")
        assert not is_excluded(config, "app.spec.js", ".js")
        assert not is_excluded(config, "app.js", ".js")

    def test_spec_marker(self):
        config = build_exclusion_config(["*.spec.*"])
        assert is_excluded(config, "user.spec.ts", ".ts")
        assert not is_excluded(config, "user.test.ts", ".ts")

    def test_wildcard_only_pattern_khong_match(self):
        """Pattern chi co wildcard duoc luu nhung khong loai file nao."""
        config = build_exclusion_config(["*.gen.go"])
        assert config.name_patterns == ("*.gen.go",)
        assert not is_excluded(config, "types.gen.go", ".go")

    def test_wildcard_token_khong_thanh_extension(self):
        config = build_exclusion_config(["*.min.js"])
        assert not is_excluded(config, "app.js", ".js")


class TestHelpers:
    def test_normalize_extension(self):
        assert normalize_extension("TS") == ".ts"
        assert normalize_extension(".ts") == ".ts"

    def test_is_name_pattern(self):
        assert is_name_pattern("*.log")
        assert is_name_pattern("x.test.y")
        assert not is_name_pattern(".log")
