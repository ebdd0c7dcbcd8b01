_TURKISH_TO_ASCII = str.maketrans("çğıöşüÇĞİÖŞÜ", "cgiosuCGIOSU")


def normalize_for_pdf(text: str) -> str:
    """Replace Turkish letters the built-in PDF fonts cannot draw."""
    return text.translate(_TURKISH_TO_ASCII)
