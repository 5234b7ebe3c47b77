"""
Pre-compiled regular expressions shared by the name parsing services.
"""

import re

# A parenthesized span, or a span opened and closed by the same quote
# character. Group 1 holds the parenthesized text, group 3 the quoted text.
NICKNAME_REGEX = re.compile(r"""\s*(?:\((.+?)\))|(?:(["'])(.+?)\2)""")

# "macbeth" -> ("mac", "beth"), "mcbride" -> ("mc", "bride")
MAC_REGEX = re.compile(r"^(ma?c)(\w+)", re.IGNORECASE)

# Separators between names in a multi-name string: "&" wins over " and ".
AMPERSAND_REGEX = re.compile(r"&")
AND_SEPARATOR_REGEX = re.compile(r" and ", re.IGNORECASE)

WHITESPACE_REGEX = re.compile(r"\s+")
