from datetime import date

from sqlalchemy import Date, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nou_admin.db.base import Base, IntIdMixin, TimestampMixin

STATUT_PRE_ADHERENT = "Membre pré-adhérent"


class Membre(Base, IntIdMixin, TimestampMixin):
    """A member of the organization (table shared with the NOU backend API)."""

    __tablename__ = "membres"

    # Identifiers and credentials
    username: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    code_adhesion: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    code_parrain: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role_utilisateur: Mapped[str] = mapped_column(String(50), nullable=False, default="membre")
    statut: Mapped[str] = mapped_column("Statuts", String(100), nullable=False, default=STATUT_PRE_ADHERENT)

    # Identity
    nom: Mapped[str] = mapped_column(String(150), nullable=False)
    prenom: Mapped[str] = mapped_column(String(150), nullable=False)
    surnom: Mapped[str | None] = mapped_column(String(150), nullable=True)
    sexe: Mapped[str] = mapped_column(String(20), nullable=False)
    date_de_naissance: Mapped[date] = mapped_column(Date, nullable=False)
    lieu_de_naissance: Mapped[str] = mapped_column(String(255), nullable=False)
    nom_pere: Mapped[str | None] = mapped_column(String(255), nullable=True)
    nom_mere: Mapped[str | None] = mapped_column(String(255), nullable=True)
    situation_matrimoniale: Mapped[str | None] = mapped_column(String(50), nullable=True)
    nb_enfants: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    nb_personnes_a_charge: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    nin: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    nif: Mapped[str | None] = mapped_column(String(50), unique=True, nullable=True)

    # Contact and address
    telephone_principal: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    telephone_etranger: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    adresse_complete: Mapped[str] = mapped_column(Text, nullable=False)
    profession: Mapped[str | None] = mapped_column(String(150), nullable=True)
    occupation: Mapped[str | None] = mapped_column(String(150), nullable=True)
    departement: Mapped[str] = mapped_column(String(100), nullable=False)
    commune: Mapped[str] = mapped_column(String(100), nullable=False)
    section_communale: Mapped[str | None] = mapped_column(String(100), nullable=True)
    facebook: Mapped[str | None] = mapped_column(String(255), nullable=True)
    instagram: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Political / organizational history
    a_ete_membre_politique: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    nom_parti_precedent: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role_politique_precedent: Mapped[str | None] = mapped_column(String(255), nullable=True)
    a_ete_membre_organisation: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    nom_organisation_precedente: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role_organisation_precedent: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Referent
    referent_nom: Mapped[str | None] = mapped_column(String(150), nullable=True)
    referent_prenom: Mapped[str | None] = mapped_column(String(150), nullable=True)
    referent_adresse: Mapped[str | None] = mapped_column(Text, nullable=True)
    referent_telephone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    relation_avec_referent: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Legal background (0/1 flags)
    a_ete_condamne: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    a_viole_loi_drogue: Mapped[int] = mapped_column("a_violé_loi_drogue", SmallInteger, nullable=False, default=0)
    a_participe_activite_terroriste: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
