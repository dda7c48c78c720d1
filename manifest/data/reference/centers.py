"""
Special Center Names

Center-type selectors that route a run to a special pricing variant.
Compared case-insensitively; any other value uses the standard pipeline.
"""

REGIONAL_SURCHARGE_NAMES = ("감천", "gamcheon")   # Gamcheon: regional surcharge
EVENT_DISCOUNT_NAMES = ("카카오", "kakao")        # Kakao: event discount
