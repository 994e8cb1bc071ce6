"""Unit tests for BCP-47 language tag parsing."""

from __future__ import annotations

import pytest

from gtfs_translations_schemas.language import LanguageTag, LanguageTagError


def test_parse_simple_language() -> None:
    """Parse a bare primary language subtag."""
    tag = LanguageTag.parse("en")

    assert tag.language == "en"
    assert tag.region is None
    assert str(tag) == "en"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("EN-us", "en-US"),
        ("sr-latn-rs", "sr-Latn-RS"),
        ("zh-Hant-TW", "zh-Hant-TW"),
        ("es-419", "es-419"),
        ("de-CH-1996", "de-CH-1996"),
        ("zh-yue-HK", "zh-yue-HK"),
        ("en-A-BBB-x-Private", "en-a-bbb-x-private"),
    ],
)
def test_parse_normalizes_case(text: str, expected: str) -> None:
    """Render parsed tags with RFC 5646 subtag casing."""
    assert str(LanguageTag.parse(text)) == expected


def test_parse_splits_subtags() -> None:
    """Expose each subtag category separately."""
    tag = LanguageTag.parse("zh-yue-Hant-HK-1606nict-u-co-pinyin-x-test")

    assert tag.language == "zh"
    assert tag.extlangs == ("yue",)
    assert tag.script == "Hant"
    assert tag.region == "HK"
    assert tag.variants == ("1606nict",)
    assert tag.extensions == ("u-co-pinyin",)
    assert tag.private_use == "x-test"


def test_parse_private_use_only() -> None:
    """Accept a tag made only of a private use sequence."""
    tag = LanguageTag.parse("x-whatever")

    assert tag.language is None
    assert tag.private_use == "x-whatever"
    assert str(tag) == "x-whatever"


@pytest.mark.parametrize(
    ("text", "expected"),
    [("i-klingon", "i-klingon"), ("EN-gb-OED", "en-GB-oed"), ("zh-min-nan", "zh-min-nan")],
)
def test_parse_grandfathered(text: str, expected: str) -> None:
    """Recognize grandfathered registry tags."""
    tag = LanguageTag.parse(text)

    assert tag.grandfathered == expected
    assert str(tag) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "e",
        "en_US",
        "en-",
        "en--US",
        "123",
        "toolonglang",
        "en-US-x",
        "de-DE-1901-1901",
        "en-a-bbb-a-ccc",
        "fr ",
    ],
)
def test_parse_rejects_malformed_tags(text: str) -> None:
    """Raise LanguageTagError for text that is not a well-formed tag."""
    with pytest.raises(LanguageTagError):
        LanguageTag.parse(text)


def test_language_tag_error_is_value_error() -> None:
    """Allow callers to catch malformed tags as ValueError."""
    with pytest.raises(ValueError, match="Malformed language tag"):
        LanguageTag.parse("not a tag")


def test_tags_compare_case_insensitively() -> None:
    """Treat differently cased spellings as the same tag."""
    assert LanguageTag.parse("en-US") == LanguageTag.parse("en-us")
    assert len({LanguageTag.parse("fr"), LanguageTag.parse("FR")}) == 1
    assert LanguageTag.parse("en") != LanguageTag.parse("en-GB")
