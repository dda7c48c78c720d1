"""
Consolidated Invoice Configuration

Individual items for the same recipient (name + address) are shipped under
one consolidated invoice when the group has at least MIN_GROUP_SIZE items.
"""

MIN_GROUP_SIZE = 2

ORDER_NUMBER_SUFFIX = "_consolidated"             # Appended to first member's order number
PRODUCT_NAME_TEMPLATE = "Consolidated ({count} items)"
SPECIAL_NOTE_SEPARATOR = ", "                     # Joins member product names
