from django.urls import path, re_path
from . import views

app_name = "cookbook"

urlpatterns = [
    # Landing page
    path("", views.home, name="home"),

    # Recipes (owner-scoped). PUT/DELETE on the detail URL arrive as POST + _method.
    path("recipes/", views.recipe_index, name="recipe_index"),
    path("recipes/new/", views.recipe_new, name="recipe_new"),
    path("recipes/<int:pk>/", views.recipe_detail, name="recipe_detail"),
    path("recipes/<int:pk>/edit/", views.recipe_edit, name="recipe_edit"),

    # Shared ingredient catalog
    path("ingredients/", views.ingredient_index, name="ingredient_index"),

    # Slashless forms. APPEND_SLASH would answer a POST with a 301 that
    # browsers replay as GET, losing the form body.
    re_path(r"^recipes$", views.recipe_index),
    re_path(r"^ingredients$", views.ingredient_index),
]
