from nou_admin.models.member import Membre

__all__ = [
    "Membre",
]
