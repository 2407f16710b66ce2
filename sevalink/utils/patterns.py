"""
Centralized regex patterns for detection and extraction
"""

import re
from typing import Iterable, Pattern

# Script ranges
DEVANAGARI_CHARS = r'\u0900-\u097F'
TELUGU_CHARS = r'\u0C00-\u0C7F'

DEVANAGARI_PATTERN = re.compile(rf'[{DEVANAGARI_CHARS}]')
TELUGU_PATTERN = re.compile(rf'[{TELUGU_CHARS}]')
INDIC_PATTERN = re.compile(rf'[{DEVANAGARI_CHARS}{TELUGU_CHARS}]')


def compile_keywords(latin: Iterable[str] = (), native: Iterable[str] = ()) -> Pattern:
    """
    Build one case-insensitive alternation.

    Latin entries are regex fragments matched on word boundaries. Native
    script entries are matched as plain substrings, since Indic combining
    marks are not word characters and break ``\\b``.
    """
    parts = [rf'\b(?:{fragment})\b' for fragment in latin]
    parts += [re.escape(term) for term in native]
    if not parts:
        # Never matches
        return re.compile(r'(?!x)x')
    return re.compile('|'.join(parts), re.IGNORECASE)


# ---------------- Blood types ----------------

# "O+", "AB-", "B+ve", "O positive", "ab neg", "O-negative"
# Whitespace may precede the word forms only; "+", "-" and "+ve" touch the letter.
BLOOD_TYPE_COMPACT = re.compile(
    r'(?<![A-Za-z0-9])(AB|A|B|O)(?:[\s-]*(?=positive|negative|pos|neg))?'
    r'(\+\s?ve|-\s?ve|\+|-|positive|negative|pos|neg)(?![A-Za-z0-9])',
    re.IGNORECASE
)

# "need A positive", "चाहिए O पॉजिटिव", "కావాలి B నెగటివ్"
BLOOD_TYPE_NEED_PHRASE = re.compile(
    r'(?:need|want|require|looking\s+for|चाहिए|आवश्यक|కావాలి|అవసరం)\s+(AB|A|B|O)(?:\s*(?=[^\s+-]))?'
    r'(positive|negative|\+|-|पॉजिटिव|पोजिटिव|पाजिटिव|नेगेटिव|नेगटिव|పాజిటివ్|పోజిటివ్|నెగటివ్|నెగెటివ్)',
    re.IGNORECASE
)

# "ओ पॉजिटिव खून", "एबी नेगेटिव"
HINDI_BLOOD_TYPE = re.compile(
    rf'(?<![{DEVANAGARI_CHARS}])(एबी|ए|बी|ओ)\s*(पॉजिटिव|पोजिटिव|पाजिटिव|नेगेटिव|नेगटिव|\+|-)'
)

# "ఓ పాజిటివ్ రక్తం", "ఎబి నెగటివ్"
TELUGU_BLOOD_TYPE = re.compile(
    rf'(?<![{TELUGU_CHARS}])(ఎబి|ఎ|బి|ఓ)\s*(పాజిటివ్|పోజిటివ్|నెగటివ్|నెగెటివ్|\+|-)'
)

# ---------------- Request details ----------------

UNITS_PATTERN = re.compile(r'(\d+)\s*(?:units?|pints?|bags?)\b', re.IGNORECASE)

HOSPITAL_PATTERN = re.compile(
    r'(?i:\b(?:at|in|from))\s+'
    r"((?:[A-Z][\w.&'-]*\s+)+"
    r'(?i:hospitals?|medical\s+college|medical\s+cent(?:re|er)|medical|clinic|cent(?:re|er))(?![A-Za-z]))'
)

PATIENT_NAME_PATTERN = re.compile(
    r"(?i:\bpatient(?:'s)?\s+(?:name\s+is\s+|is\s+|named\s+)?)([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)"
)

# Capitalized phrase after in/at/near, e.g. "near MG Road, Vijayawada"
LOCATION_PATTERN = re.compile(
    r"(?i:\b(?:at|in|near))\s+([A-Z][\w.'-]*(?:,?\s+[A-Z0-9][\w.'-]*)*)"
)

# Loose variant used only for titles
ROUGH_LOCATION_PATTERN = re.compile(r'\b(?:in|at|near)\s+([A-Za-z][A-Za-z\s]{2,40})', re.IGNORECASE)

AGE_PATTERNS = [
    re.compile(r'(\d{2,3})\s*(?:years?|yrs?|age)\b', re.IGNORECASE),
    re.compile(r'\bage(?:d|\s+is)?\s*:?\s*(\d{2,3})\b', re.IGNORECASE),
]

ELDER_NAME_PATTERN = re.compile(
    r"(?i:\b(?:for|help|my)\s+(?:my\s+)?(?:mother|father|grandmother|grandfather|grandma|grandpa)\s+(?:named\s+|called\s+)?)([A-Z][a-z]+)"
)

# ---------------- Time ----------------

URGENT_WORDING = compile_keywords(
    latin=[r'(?<!not )urgent(?:ly)?', r'emergency', r'immediately', r'turant', r'aapatkaal', r'athyavasaram'],
    native=['तुरंत', 'तत्काल', 'आपातकाल', 'అత్యవసర', 'తక్షణ']
)

TODAY_WORDING = compile_keywords(latin=[r'today', r'tonight'], native=['आज', 'ఈరోజు', 'ఈ రోజు'])

TOMORROW_WORDING = compile_keywords(latin=[r'tomorrow'], native=['రేపు'])
