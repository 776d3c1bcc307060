from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakePrompter, make_install
from language_changer.config.schema import Settings, WriteMode
from language_changer.core.context import AppContext
from language_changer.core.errors import LanguageNotFoundError, LocaleFieldNotFoundError
from language_changer.core.languages import find_language
from language_changer.core.path_resolver import PathResolver
from language_changer.core import settings_accessor
from language_changer.core.settings_accessor import SettingsAccessor

SAMPLE = (
    "install:\n"
    "  globals:\n"
    "    locale: \"en_US\"\n"
    "    region: \"NA\"\n"
    "  patchline: live  # keep me\n"
)


def _accessor(install: Path, write_mode: WriteMode = WriteMode.OVERWRITE) -> SettingsAccessor:
    context = AppContext(prompter=FakePrompter(), settings=Settings(write_mode=write_mode))
    # Folder already known; skip discovery
    context.install_dir = install
    return SettingsAccessor(context, PathResolver(context))


def test_extract_language(tmp_path: Path) -> None:
    make_install(tmp_path, SAMPLE)
    assert _accessor(tmp_path).extract_language() == find_language("en_US")


def test_missing_locale_field_is_unknown(tmp_path: Path) -> None:
    make_install(tmp_path, "install:\n  region: \"NA\"\n")
    accessor = _accessor(tmp_path)
    assert accessor.extract_language() is None
    assert accessor.current_language is None


def test_malformed_locale_is_unknown(tmp_path: Path) -> None:
    make_install(tmp_path, "locale: \"EN_us\"\n")
    assert _accessor(tmp_path).current_language is None


def test_unsupported_locale_raises(tmp_path: Path) -> None:
    make_install(tmp_path, "locale: \"zh_CN\"\n")
    with pytest.raises(LanguageNotFoundError):
        _accessor(tmp_path).extract_language()


def test_apply_changes_only_the_tag(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, SAMPLE)
    accessor = _accessor(tmp_path)

    change = accessor.apply_language(find_language("pt_BR"))

    assert change.old == find_language("en_US")
    assert change.new == find_language("pt_BR")
    assert accessor.current_language == find_language("pt_BR")
    assert settings_path.read_bytes() == SAMPLE.replace("en_US", "pt_BR").encode("utf-8")


def test_apply_same_language_leaves_file_identical(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, SAMPLE)
    before = settings_path.read_bytes()

    _accessor(tmp_path).apply_language(find_language("en_US"))

    assert settings_path.read_bytes() == before


def test_end_to_end_turkish_to_german(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, "other: 1\nlocale: \"tr_TR\"\nother2: 2\n")
    accessor = _accessor(tmp_path)
    assert accessor.current_language.display_name == "Türkçe"

    change = accessor.apply_language(find_language("de_DE"))

    assert settings_path.read_bytes() == b"other: 1\nlocale: \"de_DE\"\nother2: 2\n"
    assert (change.old.display_name, change.new.display_name) == ("Türkçe", "Deutsch")


def test_crlf_line_endings_are_preserved(tmp_path: Path) -> None:
    content = "a: 1\r\nlocale: \"it_IT\"\r\nb: ünï\r\n"
    settings_path = make_install(tmp_path, content)

    _accessor(tmp_path).apply_language(find_language("ja_JP"))

    assert settings_path.read_bytes() == content.replace("it_IT", "ja_JP").encode("utf-8")


def test_only_first_locale_field_is_replaced(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, "locale: \"fr_FR\"\nlocale: \"fr_FR\"\n")

    _accessor(tmp_path).apply_language(find_language("pl_PL"))

    assert settings_path.read_text(encoding="utf-8") == "locale: \"pl_PL\"\nlocale: \"fr_FR\"\n"


def test_apply_without_locale_field_writes_nothing(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, "region: \"NA\"\n")

    with pytest.raises(LocaleFieldNotFoundError):
        _accessor(tmp_path).apply_language(find_language("de_DE"))
    assert settings_path.read_text(encoding="utf-8") == "region: \"NA\"\n"


def test_atomic_write_replaces_file(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, SAMPLE)

    _accessor(tmp_path, WriteMode.ATOMIC).apply_language(find_language("ru_RU"))

    assert settings_path.read_bytes() == SAMPLE.replace("en_US", "ru_RU").encode("utf-8")
    leftovers = [p.name for p in settings_path.parent.iterdir() if p.name.endswith(".tmp")]
    assert leftovers == []


def test_document_is_read_once(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, SAMPLE)
    accessor = _accessor(tmp_path)
    assert accessor.current_language.tag == "en_US"

    # External edits are not seen until reload()
    settings_path.write_text("locale: \"hu_HU\"\n", encoding="utf-8")
    assert accessor.extract_language().tag == "en_US"

    accessor.reload()
    assert accessor.current_language.tag == "hu_HU"


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        _accessor(tmp_path).current_language


def test_undecodable_bytes_survive_rewrite(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, "")
    settings_path.write_bytes(b'# caf\xe9\nlocale: "en_US"\n')
    accessor = _accessor(tmp_path)

    change = accessor.apply_language(find_language("de_DE"))

    assert change.new == find_language("de_DE")
    assert settings_path.read_bytes() == b'# caf\xe9\nlocale: "de_DE"\n'


def test_undecodable_bytes_survive_atomic_rewrite(tmp_path: Path) -> None:
    settings_path = make_install(tmp_path, "")
    settings_path.write_bytes(b'\xff\xfe junk\r\nlocale: "es_ES"\r\n')

    _accessor(tmp_path, WriteMode.ATOMIC).apply_language(find_language("es_MX"))

    assert settings_path.read_bytes() == b'\xff\xfe junk\r\nlocale: "es_MX"\r\n'


def test_failed_atomic_write_leaves_no_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    settings_path = make_install(tmp_path, SAMPLE)

    def failing_fsync(fd: int) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(settings_accessor.os, "fsync", failing_fsync)

    with pytest.raises(OSError, match="disk full"):
        _accessor(tmp_path, WriteMode.ATOMIC).apply_language(find_language("ru_RU"))

    assert sorted(p.name for p in settings_path.parent.iterdir()) == [settings_path.name]
    assert settings_path.read_bytes() == SAMPLE.encode("utf-8")
