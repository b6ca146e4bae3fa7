"""
Shared ingredient catalog.

The catalog is not scoped to a user: everyone lists and adds to the same
set of rows. `resolve_ingredients` is the referential check recipes go
through before their ingredient links are written.
"""

import logging
from typing import Iterable, List

from ..models import Ingredient

logger = logging.getLogger(__name__)


class UnknownIngredientError(ValueError):
    """Raised when submitted ingredient ids do not all exist in the catalog."""

    def __init__(self, missing):
        self.missing = sorted(missing)
        super().__init__(f"Unknown ingredient id(s): {', '.join(map(str, self.missing))}")


def list_ingredients() -> List[Ingredient]:
    return list(Ingredient.objects.all())


def create_ingredient(*, name: str, unit: str = "") -> Ingredient:
    ingredient = Ingredient.objects.create(name=name.strip(), unit=(unit or "").strip())
    logger.info("Added ingredient %s to the catalog.", ingredient.pk)
    return ingredient


def resolve_ingredients(refs: Iterable) -> List[Ingredient]:
    """
    Turn ingredient references (ids or Ingredient instances) into catalog rows.

    Duplicate references collapse to one row. Raises UnknownIngredientError
    if any id is not in the catalog; nothing is written in that case.
    """
    ids = set()
    for ref in refs or ():
        pk = ref.pk if isinstance(ref, Ingredient) else ref
        try:
            ids.add(int(pk))
        except (TypeError, ValueError):
            raise UnknownIngredientError([pk]) from None

    if not ids:
        return []

    found = list(Ingredient.objects.filter(pk__in=ids))
    missing = ids - {ing.pk for ing in found}
    if missing:
        raise UnknownIngredientError(missing)
    return found
