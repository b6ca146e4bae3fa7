"""
Recipe service: every read and write of a user's recipes goes through here.

Rules enforced in this module:
- The owner of a new recipe is always the requesting user.
- Show / edit / update answer "not found" and "not yours" the same way
  (both return None), so callers cannot probe for other users' ids.
- Update never touches the owner.
- Delete filters on id AND owner in a single query.
"""

import logging
from typing import Iterable, List, Optional

from django.db import transaction

from ..models import Recipe
from .ingredients import resolve_ingredients

logger = logging.getLogger(__name__)


def belongs_to(recipe: Optional[Recipe], user) -> bool:
    """True only when `recipe` exists and `user` is its authenticated owner."""
    if recipe is None or user is None:
        return False
    if not getattr(user, "is_authenticated", False):
        return False
    return recipe.owner_id == user.pk


def list_recipes(user) -> List[Recipe]:
    """The user's recipes in insertion order, ingredients populated."""
    return list(Recipe.objects.filter(owner=user).prefetch_related("ingredients"))


def get_recipe(user, pk) -> Optional[Recipe]:
    """
    Fetch one recipe with its ingredients for `user`.

    Returns None when the recipe does not exist OR belongs to someone else.
    """
    recipe = Recipe.objects.prefetch_related("ingredients").filter(pk=pk).first()
    if not belongs_to(recipe, user):
        logger.info("Recipe %s denied to user %s.", pk, getattr(user, "pk", None))
        return None
    return recipe


def create_recipe(user, *, name: str, instructions: str = "", ingredients: Iterable = ()) -> Recipe:
    """
    Create a recipe owned by `user`.

    Ingredient references are checked before anything is written; the row
    and its ingredient links are saved in one transaction.
    """
    catalog_rows = resolve_ingredients(ingredients)
    with transaction.atomic():
        recipe = Recipe.objects.create(
            owner=user,
            name=name.strip(),
            instructions=instructions or "",
        )
        recipe.ingredients.set(catalog_rows)
    logger.info("User %s created recipe %s.", user.pk, recipe.pk)
    return recipe


def update_recipe(
    user,
    pk,
    *,
    name: Optional[str] = None,
    instructions: Optional[str] = None,
    ingredients: Optional[Iterable] = None,
) -> Optional[Recipe]:
    """
    Apply the submitted changes to one of `user`'s recipes.

    A field left as None was not submitted and keeps its stored value; an
    empty ingredient list clears the set. Re-fetches and re-checks ownership
    first; returns None (and writes nothing) on denial. The owner field is
    never updated.
    """
    recipe = get_recipe(user, pk)
    if recipe is None:
        return None

    catalog_rows = resolve_ingredients(ingredients) if ingredients is not None else None
    changed = ["updated_at"]
    if name is not None:
        recipe.name = name.strip()
        changed.append("name")
    if instructions is not None:
        recipe.instructions = instructions
        changed.append("instructions")

    with transaction.atomic():
        recipe.save(update_fields=changed)
        if catalog_rows is not None:
            recipe.ingredients.set(catalog_rows)
    logger.info("User %s updated recipe %s.", user.pk, recipe.pk)
    return recipe


def delete_recipe(user, pk) -> bool:
    """
    Delete recipe `pk` if and only if `user` owns it.

    Returns whether a recipe was removed; deleting something missing or
    foreign is a no-op, not an error.
    """
    deleted, _ = Recipe.objects.filter(pk=pk, owner=user).delete()
    removed = bool(deleted)
    if removed:
        logger.info("User %s deleted recipe %s.", user.pk, pk)
    else:
        logger.info("Delete of recipe %s by user %s matched nothing.", pk, user.pk)
    return removed
