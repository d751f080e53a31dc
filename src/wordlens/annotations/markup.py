"""Extract highlight identifiers from HTML markup."""

from __future__ import annotations

from bs4 import BeautifulSoup

DEFAULT_PREFIX = "wdautohl"


def extract_identifiers(html: str, prefix: str = DEFAULT_PREFIX) -> list[str]:
    """Return the class attribute of every element whose class starts with *prefix*.

    Elements are visited in document order.  BeautifulSoup splits ``class``
    into a list; it is re-joined with single spaces so the identifier is the
    attribute value as written.
    """
    soup = BeautifulSoup(html, "html.parser")
    identifiers: list[str] = []
    for element in soup.find_all(class_=True):
        classes = element.get("class")
        value = " ".join(classes) if isinstance(classes, list) else str(classes)
        if value.startswith(prefix):
            identifiers.append(value)
    return identifiers
