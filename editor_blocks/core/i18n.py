"""
i18n — descriptions localisées du schéma GraphQL.

Clés format "@namespace.key" → texte localisé
Textes directs → retournés tels quels
Placeholders {name}, {title}, etc. → résolus via context dict
"""
import json
import re
from pathlib import Path
from typing import Optional

DEFAULT_LANG = "fr"

_I18N_CACHE: dict = {}
_I18N_DIR = Path(__file__).parent.parent / "i18n"


def _load_lang(lang: str) -> dict:
    """Charge le fichier i18n/{lang}.json (lazy, mis en cache)."""
    if lang not in _I18N_CACHE:
        path = _I18N_DIR / f"{lang}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _I18N_CACHE[lang] = json.load(f)
        else:
            _I18N_CACHE[lang] = {}
    return _I18N_CACHE[lang]


def i18n_resolve(value: str, lang: str = DEFAULT_LANG) -> str:
    """
    Résout une clé i18n.
    "@editor_block.name" → texte localisé
    "texte direct" → retourné tel quel
    """
    if not value or not value.startswith("@"):
        return value

    key = value[1:]
    node = _load_lang(lang)
    for part in key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return f"[missing:{key}]"

    return str(node) if not isinstance(node, dict) else f"[missing:{key}]"


def resolve_placeholders(text: str, context: Optional[dict] = None) -> str:
    """Remplace {name}, {title}… par les valeurs du contexte ; les placeholders inconnus restent intacts."""
    if not context or not text:
        return text

    def replacer(match):
        return str(context.get(match.group(1), match.group(0)))

    return re.sub(r"\{(\w+)\}", replacer, text)


def resolve(value: str, lang: str = DEFAULT_LANG, context: Optional[dict] = None) -> str:
    """Pipeline complet : i18n → placeholders."""
    return resolve_placeholders(i18n_resolve(value, lang), context)


def reload_cache():
    """Force le rechargement du cache i18n (utile en dev)."""
    _I18N_CACHE.clear()
