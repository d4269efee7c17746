"""Curated lookup tables.

Read-only constants shared by selection, transformation and alternative
spelling generation.
"""

from types import MappingProxyType


# English loanwords kept unchanged (Danish practice)
ENGLISH_LOANWORDS: frozenset[str] = frozenset({
    "computer", "internet", "email", "software", "website", "app", "smartphone",
    "online", "download", "upload", "login", "password", "browser", "server",
    "database", "backup", "cloud", "streaming", "podcast", "blog", "chat",
    "social", "media", "digital", "technology", "system", "network", "platform",
})

# Norwegian numeral -> English gloss; the Norwegian system is the most regular
NORWEGIAN_NUMERALS = MappingProxyType({
    "tjue": "twenty",
    "tretti": "thirty",
    "førti": "forty",
    "femti": "fifty",
    "seksti": "sixty",
    "sytti": "seventy",
    "åtti": "eighty",
    "nitti": "ninety",
    "hundre": "hundred",
    "tusen": "thousand",
})

NUMERALS_BY_GLOSS = MappingProxyType(
    {gloss: numeral for numeral, gloss in NORWEGIAN_NUMERALS.items()}
)

# Source question word -> Nordum form (v- pattern, no silent h)
QUESTION_WORDS = MappingProxyType({
    "hva": "vad",
    "hvad": "vad",
    "hvor": "var",
    "hvem": "vem",
    "hvorfor": "varför",
    "hvilken": "vilken",
    "hvornår": "ven",
})

QUESTION_WORD_FORMS: frozenset[str] = frozenset(QUESTION_WORDS.values())

# Nordum question word -> (spelling, rationale) pronunciation variants
QUESTION_ALTERNATIVES = MappingProxyType({
    "vad": (
        ("va", "Short form variant (common in speech)"),
    ),
    "var": (
        ("vor", "Norwegian/Danish pronunciation variant"),
    ),
    "varför": (
        ("vorfor", "Norwegian/Danish pronunciation variant"),
    ),
    "ven": (
        ("vornår", "Full form variant (Danish hvornår → vornår)"),
        ("når", "Norwegian pronunciation variant"),
        ("när", "Swedish pronunciation variant"),
    ),
})

# Irregular verbs: canonical form -> (infinitive, present, past, supine,
# past participle, present participle, imperative)
IRREGULAR_VERBS = MappingProxyType({
    "være": ("være", "er", "var", "vært", "vært", "værende", "vær"),
    "ha": ("ha", "har", "hadde", "hatt", "hatt", "havende", "ha"),
    "gå": ("gå", "går", "gikk", "gått", "gått", "gående", "gå"),
    "gjøre": ("gjøre", "gjør", "gjorde", "gjort", "gjort", "gjørende", "gjør"),
    "si": ("si", "sier", "sa", "sagt", "sagt", "sigende", "si"),
    "få": ("få", "får", "fikk", "fått", "fått", "fående", "få"),
    "se": ("se", "ser", "så", "sett", "sett", "seende", "se"),
    "komme": ("komme", "kommer", "kom", "kommet", "kommet", "kommende", "kom"),
    "vite": ("vite", "vet", "visste", "visst", "visst", "vitende", "vit"),
})


def is_loanword(concept: str) -> bool:
    return bool(concept) and concept.lower() in ENGLISH_LOANWORDS


def numeral_for(concept: str):
    """Norwegian numeral for an English gloss, or None."""
    if not concept:
        return None
    return NUMERALS_BY_GLOSS.get(concept.lower())
