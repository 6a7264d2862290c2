"""
DarkMahou Query Translator

The site indexes titles in Portuguese, so English season/part wording in a
query is rewritten before searching.
"""

import re


ORDINAL_WORDS = {
    "first": "1ª",
    "second": "2ª",
    "third": "3ª",
    "fourth": "4ª",
    "fifth": "5ª",
}

TERMS = {
    "movie": "filme",
    "ova": "ova",
    "special": "especial",
}

SEASON_ORDINAL = re.compile(r'\b(\d+)(?:st|nd|rd|th)\s+season\b', re.IGNORECASE)
SEASON_NUMBER = re.compile(r'\bseason\s+(\d+)\b', re.IGNORECASE)
PART_NUMBER = re.compile(r'\bpart\s+(\d+)\b', re.IGNORECASE)


class PortugueseQueryTranslator:
    """Rewrites English anime search queries into the site's Portuguese terms."""
    
    @staticmethod
    def convert(query: str) -> str:
        """
        Translate a query.
        
        Rules run in order: ordinal seasons ("2nd season"), numbered seasons
        ("season 2"), spelled ordinals ("second season"), common terms, parts,
        then whitespace normalisation.
        
        Args:
            query: Raw query, e.g. ``"Kimetsu no Yaiba 2nd Season"``
            
        Returns:
            Translated query, e.g. ``"Kimetsu no Yaiba 2ª temporada"``
        """
        result = SEASON_ORDINAL.sub(r'\1ª temporada', query or "")
        result = SEASON_NUMBER.sub(r'\1ª temporada', result)
        
        for english, portuguese in ORDINAL_WORDS.items():
            result = re.sub(rf'\b{english}\s+season\b', f'{portuguese} temporada', result, flags=re.IGNORECASE)
        
        for english, portuguese in TERMS.items():
            result = re.sub(rf'\b{english}\b', portuguese, result, flags=re.IGNORECASE)
        
        result = PART_NUMBER.sub(r'parte \1', result)
        return re.sub(r'\s+', ' ', result).strip()


__all__ = ["PortugueseQueryTranslator"]
