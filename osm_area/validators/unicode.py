import re
import unicodedata

from pydantic import AfterValidator, BeforeValidator

_BAD_XML_RE = re.compile(r'[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F\uFFFE\uFFFF]')  # XML/1.0


def unicode_normalize(text: str) -> str:
    """Normalize a string to NFC form."""
    return unicodedata.normalize('NFC', text)


def _validate_xml_safe(v: str) -> str:
    if _BAD_XML_RE.search(v):
        raise ValueError('Text contains characters not allowed in OSM documents')
    return v


UnicodeValidator = BeforeValidator(unicode_normalize)
XMLSafeValidator = AfterValidator(_validate_xml_safe)
