"""
record.py — Parsed representation of one KANJIDIC line.

A KanjiRecord is built once by the parser and never mutated. Reference-work
indices that were not present on the line are None; repeatable fields are
tuples in file order.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


# Reference-work index fields, in the order they are documented
REFERENCE_FIELDS = (
    'nelson',
    'radical_nelson',
    'grade',
    'strokes',
    'halpern',
    'frequency',
    'new_nelson',
    'henshall',
    'gakken',
    'heiseg',
    'oneill',
    'morohashi',
    'tuttle',
)


@dataclass(frozen=True)
class KanjiRecord:
    """One kanji entry.

    character, jis_code and unicode_code are always present; everything else
    depends on which tags the line carried.
    """
    character: str
    jis_code: str
    unicode_code: str

    # Indices into reference works
    nelson: Optional[int] = None
    radical_nelson: Optional[int] = None
    grade: Optional[int] = None
    strokes: Optional[int] = None
    halpern: Optional[int] = None
    frequency: Optional[int] = None
    new_nelson: Optional[int] = None
    henshall: Optional[int] = None
    gakken: Optional[int] = None
    heiseg: Optional[int] = None
    oneill: Optional[int] = None
    morohashi: Optional[int] = None
    tuttle: Optional[int] = None

    radical: Optional[int] = None
    skip: Optional[str] = None
    morohashi_page: Optional[str] = None
    additional: Mapping[str, int] = field(default_factory=dict)
    spahn: Optional[str] = None
    four_corner: Optional[str] = None

    korean: Tuple[str, ...] = ()
    pinyin: Tuple[str, ...] = ()
    meaning: Tuple[str, ...] = ()
    hiragana: Tuple[str, ...] = ()
    katakana: Tuple[str, ...] = ()

    joyo: bool = False

    def __post_init__(self):
        # additional is read-only, however the record was built
        object.__setattr__(self, 'additional', MappingProxyType(dict(self.additional)))

    @property
    def codepoint(self) -> int:
        """Unicode scalar value as an integer."""
        return int(self.unicode_code, 16)

    def to_dict(self, include_empty: bool = False) -> Dict[str, Any]:
        """
        Convert to a plain dict suitable for JSON serialization.

        Args:
            include_empty: Keep None values and empty sequences/mappings

        Returns:
            Dict with lists in place of tuples
        """
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                value = list(value)
            elif f.name == 'additional':
                value = dict(value)

            if not include_empty and (value is None or value == [] or value == {}):
                continue
            result[f.name] = value
        return result
