"""
Star Marking Keywords

Addresses containing any of these dwelling types are flagged for special
handling at delivery. Matching is a plain case-sensitive substring test.
"""

STAR_KEYWORDS = [
    "아파트",       # Apartment
    "빌라",         # Villa / row house
    "상가",         # Commercial building
    "오피스텔",     # Studio-office complex
    "원룸",         # One-room unit
]

STAR_MARKER = "*"   # Appended to the address field
