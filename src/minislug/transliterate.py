"""Static transliteration table.

Maps single non-ASCII characters to short ASCII replacements: accented
Latin letters, a practical subset of Cyrillic and a few symbols that are
commonly used as letter look-alikes. The table is built once at import and
is read-only afterwards.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

# (replacement text, characters that map to it), upper and lower case forms
_LATIN: Tuple[Tuple[str, str], ...] = (
    ("a", "ÀÁÂÃÄÅĀĂĄàáâãäåāăą"),
    ("c", "ÇĆĈĊČçćĉċč"),
    ("d", "ÐĎĐðďđ"),
    ("e", "ÈÉÊËĒĔĖĘĚèéêëēĕėęěƏə€"),
    ("i", "ÌÍÎÏĨĪĬĮİìíîïĩīĭįı"),
    ("l", "Łł"),
    ("n", "ÑŃŅŇñńņň"),
    ("o", "ÒÓÔÕÖØŌŎŐòóôõöøōŏő∂"),
    ("s", "ŠšŚś∫"),
    ("u", "ÙÚÛÜŨŪŬŮŰŲùúûüũūŭůűų"),
    ("y", "ÝŸýÿ"),
    ("z", "ŽžŹźŻż"),
    ("b", "β"),
    ("th", "Þþ"),
    ("ae", "Ææ"),
    ("oe", "Œœ"),
    ("ss", "ß"),
)

_CYRILLIC: Tuple[Tuple[str, str], ...] = (
    ("a", "Аа"),
    ("b", "Бб"),
    ("v", "Вв"),
    ("g", "ГгҐґ"),
    ("d", "Дд"),
    ("e", "ЕеЁёЭэ"),
    ("ye", "Єє"),
    ("zh", "Жж"),
    ("z", "Зз"),
    ("i", "ИиІі"),
    ("yi", "Її"),
    ("y", "ЙйЫы"),
    ("k", "Кк"),
    ("l", "Лл"),
    ("m", "Мм"),
    ("n", "Нн"),
    ("o", "Оо"),
    ("p", "Пп"),
    ("r", "Рр"),
    ("s", "Сс"),
    ("t", "Тт"),
    ("u", "Уу"),
    ("f", "Фф"),
    ("h", "Хх"),
    ("ts", "Цц"),
    ("ch", "Чч"),
    ("sh", "Шш"),
    ("shch", "Щщ"),
    ("yu", "Юю"),
    ("ya", "Яя"),
    # Hard and soft signs are dropped without leaving a word boundary
    ("", "ЪъЬь"),
)


def _build_table(*groups: Iterable[Tuple[str, str]]) -> Mapping[str, str]:
    """Invert replacement groups into a read-only char -> replacement mapping."""
    table = {}
    for group in groups:
        for replacement, chars in group:
            for ch in chars:
                if ch in table:
                    raise ValueError(f"Duplicate transliteration entry for {ch!r}")
                table[ch] = replacement
    return MappingProxyType(table)


TRANSLITERATION_TABLE: Mapping[str, str] = _build_table(_LATIN, _CYRILLIC)


def transliterate(ch: str, lowercase: bool = True) -> Optional[str]:
    """Look up the ASCII replacement for a single character.

    Args:
        ch: Character to transliterate
        lowercase: If False, an uppercase source letter yields title-case text
            (``Æ`` -> ``Ae``); replacements are lowercase otherwise

    Returns:
        Replacement text (possibly empty), or None if the character is ASCII
        or has no mapping
    """
    if ch.isascii():
        return None
    replacement = TRANSLITERATION_TABLE.get(ch)
    if replacement is None:
        return None
    if replacement and not lowercase and ch.isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement
