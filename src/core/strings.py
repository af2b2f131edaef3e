"""
Stringhe localizzate per il report di upload dei metodi di iscrizione
"""
from typing import Any, Dict, Optional

DEFAULT_COMPONENT = "local_uploadenrolmentmethods"

STRINGS: Dict[str, Dict[str, str]] = {
    DEFAULT_COMPONENT: {
        "pluginname": "Upload enrolment methods",
        "cantreadcsv": "Unable to read the CSV file",
        "toofewcols": "Line {line}: too few columns, 5 expected",
        "toomanycols": "Line {line}: too many columns, 5 expected",
        "invalidop": "Line {line}: invalid operation \"{op}\"",
        "parentnotfound": "Line {line}: parent course not found",
        "childnotfound": "Line {line}: child course not found",
        "reldeleted": "Line {line}: {child} unlinked from {parent}",
        "reldoesntexist": "Line {line}: {child} is not linked to {parent}",
        "relmodified": "Line {line}: link between {parent} and {child} modified",
        "childisparent": "Line {line}: {child} is already a parent of {parent}",
        "relalreadyexists": "Line {line}: {child} is already linked to {parent}",
        "reladded": "Line {line}: {child} linked to {parent}",
        "reladderror": "Line {line}: error linking {child} to {parent}",
        "relsyncerror": "Line {line}: {child} linked to {parent}, enrolments not synchronised",
        "rowdberror": "Line {line}: database error, line skipped",
    },
}


class _MissingParams(dict):
    """Lascia invariati i segnaposto senza valore"""

    def __missing__(self, key):
        return "{" + key + "}"


def get_string(key: str, component: str = DEFAULT_COMPONENT, params: Optional[Dict[str, Any]] = None) -> str:
    """
    Restituisce il testo del messaggio `key` del namespace `component`
    con i parametri sostituiti.

    Una chiave sconosciuta restituisce `[[key]]`, così il report resta leggibile.
    """
    template = STRINGS.get(component, {}).get(key)
    if template is None:
        return f"[[{key}]]"
    if not params:
        return template
    return template.format_map(_MissingParams(params))
