"""BCP-47 language tags used to key translations."""

from __future__ import annotations

import re

from pydantic import Field

from gtfs_translations_schemas.base import FrozenSchema

# RFC 5646 section 2.1 langtag / privateuse productions.
_LANGTAG_RE = re.compile(
    r"""
    (?:
        (?P<language>[a-z]{2,3}(?:-[a-z]{3}){0,3}|[a-z]{4,8})
        (?:-(?P<script>[a-z]{4}))?
        (?:-(?P<region>[a-z]{2}|[0-9]{3}))?
        (?P<variants>(?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*)
        (?P<extensions>(?:-[0-9a-wyz](?:-[a-z0-9]{2,8})+)*)
        (?:-(?P<private_use>x(?:-[a-z0-9]{1,8})+))?
    |
        (?P<private_only>x(?:-[a-z0-9]{1,8})+)
    )
    """,
    re.IGNORECASE | re.VERBOSE | re.ASCII,
)

_GRANDFATHERED_TAGS = (
    "en-GB-oed",
    "i-ami",
    "i-bnn",
    "i-default",
    "i-enochian",
    "i-hak",
    "i-klingon",
    "i-lux",
    "i-mingo",
    "i-navajo",
    "i-pwn",
    "i-tao",
    "i-tay",
    "i-tsu",
    "sgn-BE-FR",
    "sgn-BE-NL",
    "sgn-CH-DE",
    "art-lojban",
    "cel-gaulish",
    "no-bok",
    "no-nyn",
    "zh-guoyu",
    "zh-hakka",
    "zh-min",
    "zh-min-nan",
    "zh-xiang",
)
_GRANDFATHERED = {tag.lower(): tag for tag in _GRANDFATHERED_TAGS}


class LanguageTagError(ValueError):
    """Raised when text is not a well-formed BCP-47 language tag."""


class LanguageTag(FrozenSchema):
    """Structured, case-normalized BCP-47 language tag.

    Two tags compare equal when their subtags match after RFC 5646 case
    normalization, so ``en-us`` and ``en-US`` key the same translations.
    """

    language: str | None = Field(None, description="Primary language subtag")
    extlangs: tuple[str, ...] = Field((), description="Extended language subtags")
    script: str | None = Field(None, description="Script subtag")
    region: str | None = Field(None, description="Region subtag")
    variants: tuple[str, ...] = Field((), description="Variant subtags")
    extensions: tuple[str, ...] = Field(
        (), description="Extension sequences such as u-co-phonebk"
    )
    private_use: str | None = Field(None, description="Private use sequence")
    grandfathered: str | None = Field(
        None, description="Grandfathered tag from the IANA registry"
    )

    @classmethod
    def parse(cls, text: str) -> LanguageTag:
        """Parse a textual language tag.

        Args:
            text: Language tag text, e.g. ``fr-CA``.

        Returns:
            LanguageTag: The parsed and case-normalized tag.

        Raises:
            LanguageTagError: If the text is not a well-formed tag.
        """
        grandfathered = _GRANDFATHERED.get(text.lower())
        if grandfathered is not None:
            return cls(grandfathered=grandfathered)

        match = _LANGTAG_RE.fullmatch(text)
        if match is None:
            raise LanguageTagError(f"Malformed language tag: {text!r}")

        if match["private_only"] is not None:
            return cls(private_use=match["private_only"].lower())

        language, *extlangs = match["language"].lower().split("-")
        variants = _split_subtags(match["variants"])
        if len(set(variants)) != len(variants):
            raise LanguageTagError(f"Duplicate variant in language tag: {text!r}")

        script = match["script"]
        region = match["region"]
        private_use = match["private_use"]
        return cls(
            language=language,
            extlangs=tuple(extlangs),
            script=script.title() if script else None,
            region=region.upper() if region else None,
            variants=tuple(variants),
            extensions=_group_extensions(match["extensions"], text),
            private_use=private_use.lower() if private_use else None,
        )

    def __str__(self) -> str:
        if self.grandfathered is not None:
            return self.grandfathered
        subtags = [
            self.language,
            *self.extlangs,
            self.script,
            self.region,
            *self.variants,
            *self.extensions,
            self.private_use,
        ]
        return "-".join(subtag for subtag in subtags if subtag)


def _split_subtags(value: str | None) -> list[str]:
    if not value:
        return []
    return value.lower().lstrip("-").split("-")


def _group_extensions(value: str | None, text: str) -> tuple[str, ...]:
    groups: list[list[str]] = []
    for subtag in _split_subtags(value):
        if len(subtag) == 1:
            groups.append([subtag])
        else:
            groups[-1].append(subtag)

    singletons = [group[0] for group in groups]
    if len(set(singletons)) != len(singletons):
        raise LanguageTagError(f"Duplicate extension in language tag: {text!r}")
    return tuple("-".join(group) for group in groups)
