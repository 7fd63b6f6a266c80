"""Column contract of the member import CSV.

Columns are referenced by name; their order only matters for the template.
"""

MEMBER_CSV_COLUMNS: tuple[str, ...] = (
    "nom",
    "prenom",
    "surnom",
    "sexe",
    "date_de_naissance",
    "lieu_de_naissance",
    "nom_pere",
    "nom_mere",
    "situation_matrimoniale",
    "nb_enfants",
    "nb_personnes_a_charge",
    "nin",
    "nif",
    "telephone_principal",
    "telephone_etranger",
    "email",
    "adresse_complete",
    "profession",
    "occupation",
    "departement",
    "commune",
    "section_communale",
    "facebook",
    "instagram",
    "a_ete_membre_politique",
    "nom_parti_precedent",
    "role_politique_precedent",
    "a_ete_membre_organisation",
    "nom_organisation_precedente",
    "role_organisation_precedent",
    "referent_nom",
    "referent_prenom",
    "referent_adresse",
    "referent_telephone",
    "relation_avec_referent",
    "a_ete_condamne",
    "a_violé_loi_drogue",
    "a_participe_activite_terroriste",
    "code_parrain",
)

# Required column → message reported when it is blank
REQUIRED_FIELDS: dict[str, str] = {
    "nom": "Le nom est obligatoire",
    "prenom": "Le prénom est obligatoire",
    "sexe": "Le sexe est obligatoire",
    "date_de_naissance": "La date de naissance est obligatoire",
    "lieu_de_naissance": "Le lieu de naissance est obligatoire",
    "nin": "Le NIN est obligatoire",
    "telephone_principal": "Le téléphone principal est obligatoire",
    "adresse_complete": "L'adresse complète est obligatoire",
    "departement": "Le département est obligatoire",
    "commune": "La commune est obligatoire",
}

# Column that must not already exist in the store → conflict message
UNIQUE_FIELDS: dict[str, str] = {
    "email": "Cet email existe déjà",
    "telephone_principal": "Ce téléphone existe déjà",
    "nin": "Ce NIN existe déjà",
    "nif": "Ce NIF existe déjà",
}

# 0/1 flags: only the literal '1' counts as yes
BOOLEAN_FIELDS = frozenset({
    "a_ete_membre_politique",
    "a_ete_membre_organisation",
    "a_ete_condamne",
    "a_violé_loi_drogue",
    "a_participe_activite_terroriste",
})

INTEGER_FIELDS = frozenset({"nb_enfants", "nb_personnes_a_charge"})

DATE_FIELDS = frozenset({"date_de_naissance"})

# CSV column name → Membre attribute, where they differ
ATTRIBUTE_OVERRIDES: dict[str, str] = {
    "a_violé_loi_drogue": "a_viole_loi_drogue",
}


def attribute_for(column: str) -> str:
    return ATTRIBUTE_OVERRIDES.get(column, column)
