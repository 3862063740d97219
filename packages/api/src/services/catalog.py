# This project was developed with assistance from AI tools.
"""Static document type catalog.

Document requests reference their type by a stable string key. Titles and
descriptions are resolved here, in-process, rather than joined from a table;
changing an entry means shipping a new build. The mapping is read-only at
runtime.
"""

import enum
import logging
from types import MappingProxyType
from typing import NamedTuple

logger = logging.getLogger(__name__)

FALLBACK_DESCRIPTION = "Dokument wurde angefordert"


class DocumentCategory(str, enum.Enum):
    GENERAL = "general"
    APPLICANT = "applicant"


class DocumentType(NamedTuple):
    title: str
    description: str
    category: DocumentCategory


_G = DocumentCategory.GENERAL
_A = DocumentCategory.APPLICANT

# Keys are the document_type_id values written by the review workflow.
# Note the mixed casing/separators (e.g. "bergsenkungsGebiet_erklaerung",
# "pregnancy-cert"): these are stored verbatim and must match exactly.
_CATALOG: dict[str, DocumentType] = {
    # General / property documents
    "meldebescheinigung": DocumentType(
        "Meldebescheinigung",
        "Meldebescheinigung von allen Personen, die das Förderobjekt nach "
        "Fertigstellung beziehen sollen",
        _G,
    ),
    "bauzeichnung": DocumentType(
        "Bauzeichnung",
        "Bauzeichnung (im Maßstab 1:100 mit eingezeichneter Möbelstellung)",
        _G,
    ),
    "lageplan": DocumentType(
        "Lageplan",
        "Lageplan nach den Vorschriften Bau NRW (2018)",
        _G,
    ),
    "grundbuchblattkopie": DocumentType(
        "Grundbuchblattkopie",
        "Grundbuchblattkopie nach neuestem Stand",
        _G,
    ),
    "baugenehmigung_vorbescheid": DocumentType(
        "Baugenehmigung oder Vorbescheid",
        "Baugenehmigung oder Vorbescheid gemäß § 7 BauO NRW (2018)",
        _G,
    ),
    "bergsenkungsGebiet_erklaerung": DocumentType(
        "Erklärung der Bergbaugesellschaft",
        "Erklärung der Bergbaugesellschaft über die Notwendigkeit von baulichen "
        "Anpassungs- und Sicherungsmaßnahmen",
        _G,
    ),
    "neubau_kaufvertrag": DocumentType(
        "Grundstückskaufvertrag/Entwurf des Kaufvertrags",
        "Bei Neubau: Grundstückskaufvertrag/Entwurf des Kaufvertrags.",
        _G,
    ),
    "erbbaurechtsvertrag": DocumentType(
        "Erbbaurechtsvertrag",
        "Vollständige Kopie des Erbbaurechtsvertrages",
        _G,
    ),
    "kaufvertrag": DocumentType(
        "Entwurf des Kaufvertrags",
        "Entwurf des Kaufvertrags",
        _G,
    ),
    "standortbedingte_mehrkosten": DocumentType(
        "Nachweis für standortbedingte Mehrkosten",
        "Gutachten, Rechnungen oder Kostenvoranschläge",
        _G,
    ),
    "haswoodconstructionloan": DocumentType(
        "Nachweis: Zusatzdarlehen für Bauen mit Holz",
        "Nachweis: Zusatzdarlehen für Bauen mit Holz",
        _G,
    ),
    "beg40standard_cert": DocumentType(
        "Nachweis: Zusatzdarlehen für BEG Effizienzstandard 40",
        "Nachweis: Zusatzdarlehen für BEG Effizienzstandard 40",
        _G,
    ),
    "pregnancy-cert": DocumentType(
        "Schwangerschafts Nachweis",
        "Nachweis über die Schwangerschaft",
        _G,
    ),
    "marriage_cert": DocumentType(
        "Heiratsurkunde/Lebenspartnerschaftsurkunde",
        "Aktuelle Heiratsurkunde oder Lebenspartnerschaftsurkunde",
        _G,
    ),
    "nachweis_disability": DocumentType(
        "Nachweis über die Schwerbehinderteneigenschaft/GdB",
        "Nachweis über die Schwerbehinderteneigenschaft/Grad der Behinderung (GdB). "
        "Wie z.B. Schwerbehindertenausweis oder Feststellungsbescheid nach "
        "§ 152 Abs. 1 SGB IX",
        _G,
    ),
    "pflegegrad_nachweis": DocumentType(
        "Nachweis der Pflegebedürftigkeit",
        "Nachweis über die in der Haushaltsauskunft ausgewiesene "
        "Pflegebedürftigkeit/Pflegegrad",
        _G,
    ),
    "vollmacht-cert": DocumentType(
        "Vollmachtsurkunde",
        "Vollmachtsurkunde für die bevollmächtigte Person/Firma",
        _G,
    ),
    "nachweis_darlehen": DocumentType(
        "Darlehenszusage(n)",
        "Darlehenszusage(n) von Banken oder anderen Kreditgebern",
        _G,
    ),
    "eigenkapital_nachweis": DocumentType(
        "Nachweis Eigenkapital",
        "Nachweis über verfügbares Eigenkapital (z.B. Bankauszüge, Sparbücher, Wertpapiere)",
        _G,
    ),
    # Applicant / financial documents
    "lohn_gehaltsbescheinigungen": DocumentType(
        "Lohn-/Gehaltsbescheinigungen",
        "Lohn-/Gehaltsbescheinigungen",
        _A,
    ),
    "einkommenssteuerbescheid": DocumentType(
        "Letzter Einkommenssteuerbescheid",
        "Letzter Einkommenssteuerbescheid",
        _A,
    ),
    "einkommenssteuererklaerung": DocumentType(
        "Letzte Einkommenssteuererklärung",
        "Letzte Einkommenssteuererklärung",
        _A,
    ),
    "rentenbescheid": DocumentType(
        "Rentenbescheid/Versorgungsbezüge",
        "Aktueller Rentenbescheid/aktueller Bescheid über Versorgungsbezüge",
        _A,
    ),
    "arbeitslosengeldbescheid": DocumentType(
        "Arbeitslosengeldbescheid",
        "Arbeitslosengeldbescheid",
        _A,
    ),
    "werbungskosten_nachweis": DocumentType(
        "Nachweis Werbungskosten",
        "Nachweis über erhöhte Werbungskosten (z. B. Steuerbescheid, Bestätigung Finanzamt)",
        _A,
    ),
    "kinderbetreuungskosten_nachweis": DocumentType(
        "Nachweis Kinderbetreuungskosten",
        "Nachweis über die geleisteten Kinderbetreuungskosten",
        _A,
    ),
    "unterhaltsverpflichtung_nachweis": DocumentType(
        "Nachweis Unterhaltsverpflichtung",
        "Nachweis über die gesetzliche Unterhaltsverpflichtung und Höhe der "
        "Unterhaltszahlungen",
        _A,
    ),
    "unterhaltsleistungen_nachweis": DocumentType(
        "Nachweis Unterhaltsleistungen",
        "Nachweis über erhaltene Unterhaltsleistungen/Unterhaltsvorschuss",
        _A,
    ),
    "krankengeld_nachweis": DocumentType(
        "Nachweis Krankengeld",
        "Nachweis über erhaltenes Krankengeld",
        _A,
    ),
    "elterngeld_nachweis": DocumentType(
        "Nachweis Elterngeld",
        "Nachweis über erhaltenes Elterngeld",
        _A,
    ),
    "guv_euer_nachweis": DocumentType(
        "Gewinn- und Verlustrechnung (GuV)/Einnahmenüberschussrechnung (EÜR)",
        "Gewinn- und Verlustrechnung (GuV)/Einnahmenüberschussrechnung (EÜR)",
        _A,
    ),
    "ausbildungsfoerderung_nachweis": DocumentType(
        "Leistungen der Ausbildungsförderung (BAföG, Berufsausbildungsbeihilfe SGB III)",
        "Leistungen der Ausbildungsförderung (BAföG, Berufsausbildungsbeihilfe SGB III) "
        "(optional)",
        _A,
    ),
    "sonstige_dokumente": DocumentType(
        "Sonstige Dokumente",
        "Weitere relevante Dokumente",
        _A,
    ),
    "freiwillige_krankenversicherung_nachweis": DocumentType(
        "Nachweis über freiwillige Beiträge zur Krankenversicherung",
        "Nachweis über freiwillige Beiträge zur Krankenversicherung",
        _A,
    ),
    "freiwillige_versicherungsbeitraege_nachweis": DocumentType(
        "Nachweis über freiwillige Renten- und Lebensversicherungsbeiträge",
        "Nachweis über freiwillige Renten- und Lebensversicherungsbeiträge",
        _A,
    ),
}

DOCUMENT_CATALOG = MappingProxyType(_CATALOG)
del _CATALOG


def get_document_type(document_type_id: str) -> DocumentType | None:
    """Return the catalog entry for a type id, or None if unmapped."""
    return DOCUMENT_CATALOG.get(document_type_id)


def get_document_title(document_type_id: str) -> str:
    """Display title; unmapped ids pass through verbatim."""
    entry = DOCUMENT_CATALOG.get(document_type_id)
    if entry is None:
        logger.debug("No catalog entry for document type '%s'", document_type_id)
        return document_type_id
    return entry.title


def get_document_description(document_type_id: str) -> str:
    """Display description; unmapped ids get the generic placeholder."""
    entry = DOCUMENT_CATALOG.get(document_type_id)
    if entry is None:
        return FALLBACK_DESCRIPTION
    return entry.description


def list_document_types(
    category: DocumentCategory | None = None,
) -> list[tuple[str, DocumentType]]:
    """Return (id, entry) pairs in catalog order, optionally for one category."""
    return [
        (type_id, entry)
        for type_id, entry in DOCUMENT_CATALOG.items()
        if category is None or entry.category == category
    ]
