"""
Core data models for Recipe Box.

Notes:
- Ingredients form one shared catalog; nobody owns them.
- Every Recipe has exactly one owner, fixed at creation. Views and services
  never expose the owner as an editable field.
- Recipe ↔ Ingredient is a plain many-to-many; "populating" a recipe is a
  `prefetch_related("ingredients")`.
"""

from django.conf import settings
from django.db import models
from django.db.models import Index


class Ingredient(models.Model):
    """
    A catalog ingredient shared by all users.
    No uniqueness beyond the primary key: two "Salt" rows may coexist.
    """
    name = models.CharField(
        max_length=100,
        help_text="Display name, e.g. 'Chicken breast'.",
    )
    unit = models.CharField(
        max_length=32, blank=True,
        help_text="Optional default unit, e.g. 'g', 'pcs'.",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]
        indexes = [
            Index(fields=["name"], name="cookbook_ingredient_name_idx"),
        ]

    def __str__(self) -> str:
        unit = f" ({self.unit})" if self.unit else ""
        return f"{self.name}{unit}"


class Recipe(models.Model):
    """
    A recipe belonging to exactly one user.

    Listings use insertion order (primary key), which is what users see as
    "the order I added them".
    """
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recipes",
        editable=False,
        help_text="User who created the recipe. Never changes.",
    )
    name = models.CharField(max_length=200)
    instructions = models.TextField(blank=True)
    ingredients = models.ManyToManyField(
        Ingredient,
        blank=True,
        related_name="recipes",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            Index(fields=["owner", "id"], name="cookbook_recipe_owner_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.owner})"
