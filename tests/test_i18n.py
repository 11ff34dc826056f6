"""Tests for i18n: translation lookup and catalog consistency."""

import pytest

from i18n import CATALOG, Translator


class TestTranslator:
    def test_default_language(self) -> None:
        t = Translator()
        assert t.language == "en"
        assert t("nav.home") == "Home"

    def test_change_language(self) -> None:
        t = Translator()
        assert t.change_language("fr") == "fr"
        assert t("nav.home") == "Accueil"

    def test_unsupported_language_falls_back(self) -> None:
        t = Translator(language="de")
        assert t.language == "en"
        assert t.change_language("xx") == "en"

    def test_list_values(self) -> None:
        t = Translator(language="fr")
        assert isinstance(t("about.beliefs"), list)
        assert t("about.beliefs") == CATALOG["fr"]["about.beliefs"]

    def test_format_arguments(self) -> None:
        t = Translator()
        assert t("footer.copy", year=2030).startswith("© 2030")

    def test_missing_key_returns_key(self, caplog) -> None:
        t = Translator()
        with caplog.at_level("WARNING", logger="harmiana.i18n"):
            assert t("nope.missing") == "nope.missing"
        assert "nope.missing" in caplog.text

    def test_missing_key_falls_back_to_english(self) -> None:
        catalog = {"en": {"only.en": "English only"}, "fr": {}}
        t = Translator(catalog, language="fr")
        assert t("only.en") == "English only"

    def test_empty_value_is_returned(self) -> None:
        t = Translator({"en": {"blank": ""}})
        assert t("blank") == ""


class TestSequence:
    def test_list(self) -> None:
        assert len(Translator().sequence("home.values")) == 4

    def test_missing_is_empty(self) -> None:
        assert Translator().sequence("home.nothing") == []

    def test_string_is_wrapped(self) -> None:
        assert Translator().sequence("nav.home") == ["Home"]


class TestCatalog:
    def test_same_keys_in_every_locale(self) -> None:
        assert set(CATALOG["en"]) == set(CATALOG["fr"])

    @pytest.mark.parametrize("key", ["home.values", "about.beliefs"])
    def test_list_keys_are_lists(self, key) -> None:
        for table in CATALOG.values():
            assert isinstance(table[key], list)
            assert table[key]

    @pytest.mark.parametrize("page", ["home", "privacy", "terms", "about"])
    def test_nav_labels(self, page) -> None:
        for table in CATALOG.values():
            assert table[f"nav.{page}"]
