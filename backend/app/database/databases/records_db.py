"""
Records database definitions.

Collections are created by the spreadsheet import process and discovered at
runtime, so only the document fields are declared here.
"""


class Fields:
    """Top-level record fields editable through the API."""
    NAME = "name"
    FATHER_NAME = "fatherName"
    ADDRESS = "address"
    PHONE_NUMBER = "phoneNumber"
    EMAIL = "email"

    EDITABLE = [NAME, FATHER_NAME, ADDRESS, PHONE_NUMBER, EMAIL]

    # Fields searched by the free-text filter
    SEARCHABLE = EDITABLE


# Nested document holding the original spreadsheet columns
ADDITIONAL_INFO = "additionalInfo"

# Top-level field -> spreadsheet column under additionalInfo
SHADOW_KEYS = {
    Fields.NAME: "NAME",
    Fields.FATHER_NAME: "FATHER/HUSBAND NAME",
    Fields.ADDRESS: "ADDRESS",
    Fields.PHONE_NUMBER: "MOBILE NO",
    Fields.EMAIL: "EMAIL",
}


def shadow_path(field: str) -> str:
    """Dotted update path of the shadow copy of ``field``."""
    return f"{ADDITIONAL_INFO}.{SHADOW_KEYS[field]}"
