from django.contrib import admin
from .models import Ingredient, Recipe


@admin.register(Ingredient)
class IngredientAdmin(admin.ModelAdmin):
    """Admin configuration for the shared ingredient catalog."""

    list_display = ("name", "unit", "created_at")
    search_fields = ("name",)
    list_filter = ("unit",)


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    list_display = ("name", "owner", "created_at", "updated_at")
    search_fields = ("name", "owner__username")
    list_filter = ("owner",)
    filter_horizontal = ("ingredients",)
    readonly_fields = ("owner",)

    def save_model(self, request, obj, form, change):
        # owner is not editable; recipes added here belong to the admin user
        if not change:
            obj.owner = request.user
        super().save_model(request, obj, form, change)
