# ---- stdlib -----------------------------------------------------------------
import logging

# ---- Django ------------------------------------------------------------------
from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render, redirect
from django.views.decorators.http import require_http_methods, require_safe

# ---- App ---------------------------------------------------------------------
from .decorators import signed_in_required
from .forms import IngredientForm, RecipeForm
from .services import ingredients as ingredient_service
from .services import recipes as recipe_service
from .services.ingredients import UnknownIngredientError


# ---- Logging -----------------------------------------------------------------
logger = logging.getLogger(__name__)

# Same text whether the recipe is missing or someone else's.
RECIPE_DENIED = "Recipe not found."


def _deny(request):
    messages.info(request, RECIPE_DENIED)
    return redirect("cookbook:recipe_index")


def _form_errors(form) -> str:
    return "; ".join(
        f"{field}: {' '.join(errs)}" for field, errs in form.errors.items()
    )


# =============================================================================
# Landing page
# =============================================================================

def home(request):
    return render(request, "cookbook/home.html")


# =============================================================================
# Recipes
# =============================================================================

@signed_in_required
@require_http_methods(["GET", "HEAD", "POST"])
def recipe_index(request):
    """GET lists the user's recipes; POST creates one."""
    if request.method == "POST":
        return _recipe_create(request)

    try:
        recipes = recipe_service.list_recipes(request.user)
        return render(request, "cookbook/recipes/index.html", {"recipes": recipes})
    except DatabaseError:
        logger.exception("Could not list recipes for user %s.", request.user.pk)
        messages.error(request, "Could not load your recipes right now.")
        return redirect("cookbook:home")


def _recipe_create(request):
    try:
        form = RecipeForm(request.POST)
        if not form.is_valid():
            logger.warning("Rejected recipe submission: %s", _form_errors(form))
            messages.error(request, f"Could not create recipe: {_form_errors(form)}")
            return redirect("cookbook:home")
        recipe = recipe_service.create_recipe(
            request.user,
            name=form.cleaned_data["name"],
            instructions=form.cleaned_data.get("instructions", ""),
            ingredients=form.cleaned_data.get("ingredients") or [],
        )
    except (DatabaseError, UnknownIngredientError):
        logger.exception("Could not create recipe for user %s.", request.user.pk)
        messages.error(request, "Could not create recipe right now.")
        return redirect("cookbook:home")

    messages.success(request, f"Created {recipe.name}.")
    return redirect("cookbook:recipe_index")


@signed_in_required
@require_safe
def recipe_new(request):
    """Blank recipe form listing the whole ingredient catalog."""
    try:
        form = RecipeForm()
        return render(request, "cookbook/recipes/new.html", {"form": form})
    except DatabaseError:
        logger.exception("Could not load the ingredient catalog.")
        messages.error(request, "Could not load the ingredient catalog right now.")
        return redirect("cookbook:recipe_index")


@signed_in_required
@require_http_methods(["GET", "HEAD", "PUT", "PATCH", "DELETE"])
def recipe_detail(request, pk: int):
    """
    GET shows a recipe; PUT/PATCH update it; DELETE removes it.
    PUT and DELETE normally arrive as POST + `_method` (see MethodOverrideMiddleware).
    """
    if request.method in ("PUT", "PATCH"):
        return _recipe_update(request, pk)
    if request.method == "DELETE":
        return _recipe_delete(request, pk)

    try:
        recipe = recipe_service.get_recipe(request.user, pk)
        if recipe is None:
            return _deny(request)
        return render(request, "cookbook/recipes/show.html", {"recipe": recipe})
    except DatabaseError:
        logger.exception("Could not load recipe %s.", pk)
        messages.error(request, "Could not load that recipe right now.")
        return redirect("cookbook:recipe_index")


@signed_in_required
@require_safe
def recipe_edit(request, pk: int):
    try:
        recipe = recipe_service.get_recipe(request.user, pk)
        if recipe is None:
            return _deny(request)
        form = RecipeForm(instance=recipe)
        return render(
            request,
            "cookbook/recipes/edit.html",
            {"form": form, "recipe": recipe},
        )
    except DatabaseError:
        logger.exception("Could not load recipe %s for editing.", pk)
        messages.error(request, "Could not load that recipe right now.")
        return redirect("cookbook:recipe_index")


def _recipe_update(request, pk: int):
    try:
        form = RecipeForm(request.POST)
        sent = form.make_partial()
        if not form.is_valid():
            logger.warning("Rejected update of recipe %s: %s", pk, _form_errors(form))
            messages.error(request, f"Could not update recipe: {_form_errors(form)}")
            return redirect("cookbook:recipe_index")
        # fields the client left out keep their stored values
        changes = {field: form.cleaned_data.get(field) for field in sent}
        if "ingredients" in changes:
            changes["ingredients"] = list(changes["ingredients"] or [])
        recipe = recipe_service.update_recipe(request.user, pk, **changes)
    except (DatabaseError, UnknownIngredientError):
        logger.exception("Could not update recipe %s.", pk)
        messages.error(request, "Could not update recipe right now.")
        return redirect("cookbook:recipe_index")

    if recipe is None:
        return _deny(request)
    messages.success(request, f"Updated {recipe.name}.")
    return redirect("cookbook:recipe_detail", pk=recipe.pk)


def _recipe_delete(request, pk: int):
    try:
        if recipe_service.delete_recipe(request.user, pk):
            messages.success(request, "Recipe deleted.")
    except DatabaseError:
        logger.exception("Could not delete recipe %s.", pk)
        messages.error(request, "Could not delete recipe right now.")
    return redirect("cookbook:recipe_index")


# =============================================================================
# Ingredient catalog
# =============================================================================

@signed_in_required
@require_http_methods(["GET", "HEAD", "POST"])
def ingredient_index(request):
    """GET lists the shared catalog; POST adds an ingredient to it."""
    if request.method == "POST":
        return _ingredient_create(request)

    try:
        ingredients = ingredient_service.list_ingredients()
        return render(
            request,
            "cookbook/ingredients/index.html",
            {"ingredients": ingredients, "form": IngredientForm()},
        )
    except DatabaseError:
        logger.exception("Could not list the ingredient catalog.")
        messages.error(request, "Could not load the ingredient catalog right now.")
        return redirect("cookbook:home")


def _ingredient_create(request):
    form = IngredientForm(request.POST)
    if not form.is_valid():
        messages.error(request, f"Could not add ingredient: {_form_errors(form)}")
        return redirect("cookbook:ingredient_index")
    try:
        ingredient = ingredient_service.create_ingredient(
            name=form.cleaned_data["name"],
            unit=form.cleaned_data.get("unit", ""),
        )
        messages.success(request, f"Added {ingredient.name}.")
    except DatabaseError:
        logger.exception("Could not save ingredient.")
        messages.error(request, "Could not add ingredient right now.")
    return redirect("cookbook:ingredient_index")
