from typing import Any, Dict, List, NamedTuple

from models import ADMIN_ROLE, EDITOR_ROLE, Band


class FieldLookup(NamedTuple):
    """Result of looking a field up in a raw document"""

    present: bool
    value: Any = None


def lookup_field(document: dict, name: str) -> FieldLookup:
    """
    Looks up a field, telling an absent field apart from a null one

    Args:
        document (dict): The raw document.
        name (str): Field name.

    Returns:
        FieldLookup: present is False when the field does not exist.
    """

    if name in document:
        return FieldLookup(True, document[name])
    return FieldLookup(False)


def is_migrated(document: dict) -> bool:
    """
    Whether a band document already carries an editorUids list.
    The contents of the list are not checked.
    """

    lookup = lookup_field(document, "editorUids")
    return lookup.present and isinstance(lookup.value, list)


def uids_with_role(band: Band, role: str) -> List[str]:
    return [member.uid for member in band.members if member.role == role]


def derive_uid_fields(band: Band) -> Dict[str, List[str]]:
    """
    Computes the derived uid arrays of a band

    Args:
        band (Band): The validated band document.

    Returns:
        dict: memberUids, adminUids and editorUids, in member order.
    """

    return {
        "memberUids": [member.uid for member in band.members],
        "adminUids": uids_with_role(band, ADMIN_ROLE),
        "editorUids": uids_with_role(band, EDITOR_ROLE),
    }


def band_label(document: dict) -> str:
    # name for console lines, falls back to the id
    name = document.get("name")
    if name:
        return str(name)
    return str(document.get("_id"))
