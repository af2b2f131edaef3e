"""
Pulizia dei valori letti dal CSV prima dell'uso come identificativi o testo.
"""
import re

_NON_ALPHANUM = re.compile(r'[^A-Za-z0-9]')
_TAGS = re.compile(r'<[^>]*>')
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


def clean_alphanum(value) -> str:
    """Mantiene solo lettere ASCII e cifre"""
    if value is None:
        return ''
    return _NON_ALPHANUM.sub('', str(value))


def clean_text(value) -> str:
    """
    Testo semplice: rimuove tag HTML e caratteri di controllo e toglie
    gli spazi ai bordi.
    """
    if value is None:
        return ''
    text = _TAGS.sub('', str(value))
    text = _CONTROL_CHARS.sub('', text)
    return text.strip()
