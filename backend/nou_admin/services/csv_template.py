"""Downloadable CSV template for the member import."""
import csv
import io

from nou_admin.services.member_fields import MEMBER_CSV_COLUMNS

TEMPLATE_FILENAME = "template_import_membres.csv"

UTF8_BOM = "\ufeff"  # lets spreadsheet software detect UTF-8

EXAMPLE_ROW: dict[str, str] = {
    "nom": "Dupont",
    "prenom": "Jean",
    "surnom": "JD",
    "sexe": "Homme",
    "date_de_naissance": "1990-01-15",
    "lieu_de_naissance": "Port-au-Prince",
    "nom_pere": "Pierre Dupont",
    "nom_mere": "Marie Dupont",
    "situation_matrimoniale": "Célibataire",
    "nb_enfants": "0",
    "nb_personnes_a_charge": "2",
    "nin": "123-456-7890",
    "nif": "987-654-3210",
    "telephone_principal": "50912345678",
    "telephone_etranger": "+33612345678",
    "email": "jean.dupont@example.com",
    "adresse_complete": "123 Rue Example, Port-au-Prince",
    "profession": "Ingénieur",
    "occupation": "Développeur",
    "departement": "Ouest",
    "commune": "Port-au-Prince",
    "section_communale": "Section 1",
    "facebook": "jean.dupont",
    "instagram": "@jeandupont",
    "a_ete_membre_politique": "0",
    "nom_parti_precedent": "",
    "role_politique_precedent": "",
    "a_ete_membre_organisation": "0",
    "nom_organisation_precedente": "",
    "role_organisation_precedent": "",
    "referent_nom": "Paul Martin",
    "referent_prenom": "Sophie Martin",
    "referent_adresse": "456 Rue Référent",
    "referent_telephone": "50987654321",
    "relation_avec_referent": "Ami",
    "a_ete_condamne": "0",
    "a_violé_loi_drogue": "0",
    "a_participe_activite_terroriste": "0",
    "code_parrain": "AJD5678",
}


def render_template() -> str:
    """BOM + header line + one example row, LF-terminated."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(MEMBER_CSV_COLUMNS)
    writer.writerow([EXAMPLE_ROW.get(column, "") for column in MEMBER_CSV_COLUMNS])
    return UTF8_BOM + buf.getvalue()
