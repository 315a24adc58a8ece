"""
Text processing utilities for display strings.
"""

import re

URL_SCHEME = re.compile(r"^https?://")
URL_SCHEME_AND_WWW = re.compile(r"^https?://(www\.)?")


def strip_url_scheme(url: str, strip_www: bool = False) -> str:
    """
    Remove the http(s):// prefix from a URL for display.

    Args:
        url: URL to shorten
        strip_www: Also drop a leading "www."

    Returns:
        Display form of the URL

    Examples:
        >>> strip_url_scheme("https://example.com/blog")
        'example.com/blog'
        >>> strip_url_scheme("https://www.linkedin.com/in/jdoe", strip_www=True)
        'linkedin.com/in/jdoe'
    """
    pattern = URL_SCHEME_AND_WWW if strip_www else URL_SCHEME
    return pattern.sub("", url)

