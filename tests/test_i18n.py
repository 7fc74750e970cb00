"""Tests i18n — résolution clés, passthrough, placeholders."""
from editor_blocks.core.i18n import i18n_resolve, reload_cache, resolve, resolve_placeholders


def setup_function():
    reload_cache()


def test_passthrough_direct_text():
    assert i18n_resolve("Texte direct") == "Texte direct"


def test_passthrough_empty():
    assert i18n_resolve("") == ""


def test_resolve_existing_key():
    assert i18n_resolve("@editor_block.name", lang="fr") == "Nom du bloc"


def test_english_key():
    assert i18n_resolve("@editor_block.name", lang="en") == "The name of the Block"


def test_missing_key_returns_placeholder():
    assert i18n_resolve("@inexistant.cle", lang="fr") == "[missing:inexistant.cle]"


def test_section_key_is_missing():
    assert i18n_resolve("@editor_block", lang="fr").startswith("[missing:")


def test_unknown_lang_returns_missing():
    assert i18n_resolve("@editor_block.name", lang="xx").startswith("[missing:")


def test_placeholders():
    assert resolve_placeholders("Bloc {title} ({name})", {"title": "Image"}) == "Bloc Image ({name})"


def test_full_pipeline():
    result = resolve("@block_type.description", lang="en", context={"title": "Image", "name": "core/image"})
    assert result == "Image block (core/image)"
