# This project was developed with assistance from AI tools.
"""Tests for the static document type catalog."""

import pytest

from src.services.catalog import (
    DOCUMENT_CATALOG,
    FALLBACK_DESCRIPTION,
    DocumentCategory,
    get_document_description,
    get_document_title,
    get_document_type,
    list_document_types,
)


def test_known_type_title_and_description():
    assert get_document_title("meldebescheinigung") == "Meldebescheinigung"
    assert get_document_description("meldebescheinigung") == (
        "Meldebescheinigung von allen Personen, die das Förderobjekt nach "
        "Fertigstellung beziehen sollen"
    )


def test_unknown_type_title_passes_through():
    assert get_document_title("xyz_unknown") == "xyz_unknown"


def test_unknown_type_description_is_placeholder():
    assert get_document_description("xyz_unknown") == FALLBACK_DESCRIPTION
    assert FALLBACK_DESCRIPTION == "Dokument wurde angefordert"


def test_empty_type_id_falls_back():
    assert get_document_title("") == ""
    assert get_document_description("") == FALLBACK_DESCRIPTION


def test_keys_are_case_sensitive():
    """Ids are matched verbatim, including their original mixed casing."""
    assert get_document_type("bergsenkungsGebiet_erklaerung") is not None
    assert get_document_type("bergsenkungsgebiet_erklaerung") is None
    assert get_document_title("Meldebescheinigung") == "Meldebescheinigung"
    assert get_document_description("Meldebescheinigung") == FALLBACK_DESCRIPTION


def test_hyphenated_keys_resolve():
    assert get_document_title("pregnancy-cert") == "Schwangerschafts Nachweis"
    assert get_document_title("vollmacht-cert") == "Vollmachtsurkunde"


def test_description_differs_from_title_where_catalog_says_so():
    assert get_document_title("sonstige_dokumente") == "Sonstige Dokumente"
    assert get_document_description("sonstige_dokumente") == "Weitere relevante Dokumente"


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        DOCUMENT_CATALOG["new_type"] = DOCUMENT_CATALOG["lageplan"]


def test_category_sizes():
    general = list_document_types(DocumentCategory.GENERAL)
    applicant = list_document_types(DocumentCategory.APPLICANT)
    assert len(general) == 19
    assert len(applicant) == 16
    assert len(list_document_types()) == len(DOCUMENT_CATALOG) == 35


def test_list_preserves_catalog_order():
    ids = [type_id for type_id, _ in list_document_types()]
    assert ids[0] == "meldebescheinigung"
    assert ids[-1] == "freiwillige_versicherungsbeitraege_nachweis"


def test_every_entry_has_title_and_description():
    for type_id, entry in DOCUMENT_CATALOG.items():
        assert entry.title, type_id
        assert entry.description, type_id
        assert get_document_title(type_id) == entry.title
        assert get_document_description(type_id) == entry.description
