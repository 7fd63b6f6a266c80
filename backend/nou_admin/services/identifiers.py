"""Membership code and username generation.

Both identifiers start from a deterministic base and, when the base is
already taken, probe numbered variants in ascending order. The probe is
bounded by `max_attempts` candidates (base included).
"""
import logging
import re

from nou_admin.core.config import settings
from nou_admin.services.member_store import MemberStore

logger = logging.getLogger(__name__)

_NON_DIGIT = re.compile(r"\D")
_USERNAME_FORBIDDEN = re.compile(r"[^a-z0-9._]")


class IdentifierError(Exception):
    pass


class InvalidInputError(IdentifierError):
    pass


class IdentifierExhaustedError(IdentifierError):
    pass


async def generate_code_adhesion(
    prenom: str,
    nom: str,
    telephone: str,
    store: MemberStore,
    max_attempts: int | None = None,
) -> str:
    """`A` + first-name initial + last-name initial + last 4 phone digits.

    Collisions append 1, 2, 3… (`AJD5678` → `AJD56781`).
    """
    digits = _NON_DIGIT.sub("", telephone or "")
    if not prenom or not nom or len(digits) < 4:
        raise InvalidInputError(
            "Impossible de générer le code d'adhésion : prénom, nom ou téléphone invalide"
        )

    base = f"A{prenom[0].upper()}{nom[0].upper()}{digits[-4:]}"
    return await _first_available(store, "code_adhesion", base, 1, max_attempts)


async def generate_username(
    prenom: str,
    nom: str,
    store: MemberStore,
    max_attempts: int | None = None,
) -> str:
    """`prenom.nom` lower-cased, restricted to [a-z0-9._].

    Collisions append 2, 3, 4… (`jean.dupont` → `jean.dupont2`).
    """
    if not prenom or not nom:
        raise InvalidInputError("Impossible de générer le nom d'utilisateur : prénom ou nom manquant")

    base = _USERNAME_FORBIDDEN.sub("", f"{prenom.lower()}.{nom.lower()}")
    return await _first_available(store, "username", base, 2, max_attempts)


async def _first_available(
    store: MemberStore,
    field: str,
    base: str,
    first_suffix: int,
    max_attempts: int | None,
) -> str:
    limit = max_attempts or settings.IDENTIFIER_MAX_ATTEMPTS
    candidate = base
    for attempt in range(limit):
        if not await store.exists(field, candidate):
            if attempt:
                logger.debug("%s %s taken, using %s", field, base, candidate)
            return candidate
        candidate = f"{base}{first_suffix + attempt}"

    raise IdentifierExhaustedError(
        f"Aucun {field} disponible pour {base} après {limit} tentatives"
    )
