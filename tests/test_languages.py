from __future__ import annotations

import re

import pytest

from language_changer.core.errors import LanguageNotFoundError
from language_changer.core.languages import LANGUAGES, find_language, find_language_by_name

TAG_SHAPE = re.compile(r"^[a-z]{2}_[A-Z]{2}$")


def test_tags_are_well_formed() -> None:
    for language in LANGUAGES:
        assert len(language.tag) == 5
        assert TAG_SHAPE.match(language.tag), language.tag


def test_tags_and_names_are_unique() -> None:
    assert len({language.tag for language in LANGUAGES}) == len(LANGUAGES)
    assert len({language.display_name for language in LANGUAGES}) == len(LANGUAGES)


def test_catalog_order_starts_with_us_english() -> None:
    assert len(LANGUAGES) == 17
    assert LANGUAGES[0].tag == "en_US"
    assert LANGUAGES[-1].tag == "ja_JP"


def test_find_language_by_tag() -> None:
    assert find_language("tr_TR").display_name == "Türkçe"
    assert find_language("de_DE").display_name == "Deutsch"


def test_find_language_by_name() -> None:
    assert find_language_by_name("Español (MX)").tag == "es_MX"


def test_unknown_tag_raises() -> None:
    with pytest.raises(LanguageNotFoundError) as excinfo:
        find_language("zh_CN")
    assert excinfo.value.key == "zh_CN"
    assert isinstance(excinfo.value, LookupError)


def test_languages_are_immutable() -> None:
    with pytest.raises(AttributeError):
        LANGUAGES[0].tag = "xx_XX"  # type: ignore[misc]
