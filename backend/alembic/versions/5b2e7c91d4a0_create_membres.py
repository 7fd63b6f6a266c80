"""create_membres

Revision ID: 5b2e7c91d4a0
Revises:
Create Date: 2026-10-19 09:12:40.118204

Members table with unique constraints on every identifier and contact
column the import pipeline checks, so a concurrent insert that slips past
the pre-checks is still rejected by the database.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b2e7c91d4a0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'membres',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(150), nullable=False),
        sa.Column('code_adhesion', sa.String(50), nullable=False),
        sa.Column('code_parrain', sa.String(50), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role_utilisateur', sa.String(50), nullable=False, server_default='membre'),
        sa.Column('Statuts', sa.String(100), nullable=False, server_default='Membre pré-adhérent'),
        sa.Column('nom', sa.String(150), nullable=False),
        sa.Column('prenom', sa.String(150), nullable=False),
        sa.Column('surnom', sa.String(150), nullable=True),
        sa.Column('sexe', sa.String(20), nullable=False),
        sa.Column('date_de_naissance', sa.Date(), nullable=False),
        sa.Column('lieu_de_naissance', sa.String(255), nullable=False),
        sa.Column('nom_pere', sa.String(255), nullable=True),
        sa.Column('nom_mere', sa.String(255), nullable=True),
        sa.Column('situation_matrimoniale', sa.String(50), nullable=True),
        sa.Column('nb_enfants', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('nb_personnes_a_charge', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('nin', sa.String(50), nullable=False),
        sa.Column('nif', sa.String(50), nullable=True),
        sa.Column('telephone_principal', sa.String(30), nullable=False),
        sa.Column('telephone_etranger', sa.String(30), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('adresse_complete', sa.Text(), nullable=False),
        sa.Column('profession', sa.String(150), nullable=True),
        sa.Column('occupation', sa.String(150), nullable=True),
        sa.Column('departement', sa.String(100), nullable=False),
        sa.Column('commune', sa.String(100), nullable=False),
        sa.Column('section_communale', sa.String(100), nullable=True),
        sa.Column('facebook', sa.String(255), nullable=True),
        sa.Column('instagram', sa.String(255), nullable=True),
        sa.Column('a_ete_membre_politique', sa.SmallInteger(), nullable=False, server_default='0'),
        sa.Column('nom_parti_precedent', sa.String(255), nullable=True),
        sa.Column('role_politique_precedent', sa.String(255), nullable=True),
        sa.Column('a_ete_membre_organisation', sa.SmallInteger(), nullable=False, server_default='0'),
        sa.Column('nom_organisation_precedente', sa.String(255), nullable=True),
        sa.Column('role_organisation_precedent', sa.String(255), nullable=True),
        sa.Column('referent_nom', sa.String(150), nullable=True),
        sa.Column('referent_prenom', sa.String(150), nullable=True),
        sa.Column('referent_adresse', sa.Text(), nullable=True),
        sa.Column('referent_telephone', sa.String(30), nullable=True),
        sa.Column('relation_avec_referent', sa.String(100), nullable=True),
        sa.Column('a_ete_condamne', sa.SmallInteger(), nullable=False, server_default='0'),
        sa.Column('a_violé_loi_drogue', sa.SmallInteger(), nullable=False, server_default='0'),
        sa.Column('a_participe_activite_terroriste', sa.SmallInteger(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username', name='uq_membres_username'),
        sa.UniqueConstraint('code_adhesion', name='uq_membres_code_adhesion'),
        sa.UniqueConstraint('email', name='uq_membres_email'),
        sa.UniqueConstraint('telephone_principal', name='uq_membres_telephone_principal'),
        sa.UniqueConstraint('nin', name='uq_membres_nin'),
        sa.UniqueConstraint('nif', name='uq_membres_nif'),
    )
    op.create_index('ix_membres_code_parrain', 'membres', ['code_parrain'])


def downgrade() -> None:
    op.drop_index('ix_membres_code_parrain', table_name='membres')
    op.drop_table('membres')
