from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from cookbook.models import Ingredient, Recipe
from cookbook.services import ingredients as ingredient_service
from cookbook.services import recipes as recipe_service
from cookbook.services.ingredients import UnknownIngredientError

User = get_user_model()


class BelongsToTests(TestCase):
    def setUp(self):
        self.alice = User.objects.create_user(username="alice", password="pass123")
        self.bob = User.objects.create_user(username="bob", password="pass123")
        self.recipe = Recipe.objects.create(owner=self.alice, name="Soup")

    def test_owner(self):
        self.assertTrue(recipe_service.belongs_to(self.recipe, self.alice))

    def test_other_user(self):
        self.assertFalse(recipe_service.belongs_to(self.recipe, self.bob))

    def test_missing_recipe_or_user(self):
        self.assertFalse(recipe_service.belongs_to(None, self.alice))
        self.assertFalse(recipe_service.belongs_to(self.recipe, None))
        self.assertFalse(recipe_service.belongs_to(self.recipe, AnonymousUser()))


class RecipeServiceTests(TestCase):
    def setUp(self):
        self.alice = User.objects.create_user(username="alice", password="pass123")
        self.bob = User.objects.create_user(username="bob", password="pass123")
        self.salt = Ingredient.objects.create(name="Salt")
        self.leek = Ingredient.objects.create(name="Leek")

    def test_create_sets_owner_and_links_ingredients(self):
        recipe = recipe_service.create_recipe(
            self.alice, name="  Soup ", instructions="Boil", ingredients=[self.salt.pk, self.leek]
        )
        recipe.refresh_from_db()
        self.assertEqual(recipe.owner, self.alice)
        self.assertEqual(recipe.name, "Soup")
        self.assertEqual(recipe.instructions, "Boil")
        self.assertEqual(set(recipe.ingredients.all()), {self.salt, self.leek})

    def test_create_with_unknown_ingredient_writes_nothing(self):
        with self.assertRaises(UnknownIngredientError) as ctx:
            recipe_service.create_recipe(self.alice, name="Soup", ingredients=[self.salt.pk, 9999])
        self.assertEqual(ctx.exception.missing, [9999])
        self.assertFalse(Recipe.objects.exists())

    def test_list_only_returns_own_recipes(self):
        mine = recipe_service.create_recipe(self.alice, name="Soup")
        recipe_service.create_recipe(self.bob, name="Stew")
        self.assertEqual(recipe_service.list_recipes(self.alice), [mine])

    def test_list_populates_ingredients(self):
        recipe_service.create_recipe(self.alice, name="Soup", ingredients=[self.salt.pk])
        with self.assertNumQueries(2):
            recipes = recipe_service.list_recipes(self.alice)
            names = [i.name for r in recipes for i in r.ingredients.all()]
        self.assertEqual(names, ["Salt"])

    def test_get_recipe_denies_missing_and_foreign_alike(self):
        recipe = recipe_service.create_recipe(self.alice, name="Soup")
        self.assertEqual(recipe_service.get_recipe(self.alice, recipe.pk), recipe)
        self.assertIsNone(recipe_service.get_recipe(self.bob, recipe.pk))
        self.assertIsNone(recipe_service.get_recipe(self.bob, recipe.pk + 1000))

    def test_update_applies_fields_but_keeps_owner(self):
        recipe = recipe_service.create_recipe(self.alice, name="Soup", ingredients=[self.salt.pk])
        updated = recipe_service.update_recipe(
            self.alice, recipe.pk, name="Leek soup", instructions="Simmer", ingredients=[self.leek.pk]
        )
        recipe.refresh_from_db()
        self.assertEqual(updated.pk, recipe.pk)
        self.assertEqual(recipe.name, "Leek soup")
        self.assertEqual(recipe.instructions, "Simmer")
        self.assertEqual(recipe.owner, self.alice)
        self.assertEqual(list(recipe.ingredients.all()), [self.leek])

    def test_update_by_other_user_changes_nothing(self):
        recipe = recipe_service.create_recipe(self.alice, name="Soup", instructions="Boil")
        result = recipe_service.update_recipe(self.bob, recipe.pk, name="Hacked", instructions="")
        recipe.refresh_from_db()
        self.assertIsNone(result)
        self.assertEqual(recipe.name, "Soup")
        self.assertEqual(recipe.instructions, "Boil")

    def test_update_with_unknown_ingredient_leaves_recipe_untouched(self):
        recipe = recipe_service.create_recipe(self.alice, name="Soup", ingredients=[self.salt.pk])
        with self.assertRaises(UnknownIngredientError):
            recipe_service.update_recipe(self.alice, recipe.pk, name="Other", ingredients=[4242])
        recipe.refresh_from_db()
        self.assertEqual(recipe.name, "Soup")
        self.assertEqual(list(recipe.ingredients.all()), [self.salt])

    def test_delete_is_scoped_to_owner(self):
        recipe = recipe_service.create_recipe(self.alice, name="Soup")
        self.assertFalse(recipe_service.delete_recipe(self.bob, recipe.pk))
        self.assertTrue(Recipe.objects.filter(pk=recipe.pk).exists())

        self.assertTrue(recipe_service.delete_recipe(self.alice, recipe.pk))
        self.assertFalse(Recipe.objects.filter(pk=recipe.pk).exists())
        # second delete is a no-op
        self.assertFalse(recipe_service.delete_recipe(self.alice, recipe.pk))


class IngredientServiceTests(TestCase):
    def test_create_and_list(self):
        ingredient_service.create_ingredient(name=" Thyme ", unit=" g ")
        ingredient_service.create_ingredient(name="Basil")
        catalog = ingredient_service.list_ingredients()
        self.assertEqual([i.name for i in catalog], ["Basil", "Thyme"])
        self.assertEqual(catalog[1].unit, "g")

    def test_resolve_collapses_duplicates(self):
        salt = Ingredient.objects.create(name="Salt")
        self.assertEqual(ingredient_service.resolve_ingredients([salt.pk, str(salt.pk), salt]), [salt])

    def test_resolve_empty(self):
        self.assertEqual(ingredient_service.resolve_ingredients([]), [])
        self.assertEqual(ingredient_service.resolve_ingredients(None), [])

    def test_resolve_rejects_garbage_ids(self):
        with self.assertRaises(UnknownIngredientError):
            ingredient_service.resolve_ingredients(["not-a-number"])


class PartialUpdateTests(TestCase):
    def setUp(self):
        self.alice = User.objects.create_user(username="alice", password="pass123")
        self.salt = Ingredient.objects.create(name="Salt")
        self.recipe = recipe_service.create_recipe(
            self.alice, name="Soup", instructions="Boil", ingredients=[self.salt.pk]
        )

    def test_unsent_fields_keep_stored_values(self):
        recipe_service.update_recipe(self.alice, self.recipe.pk, name="Soup2")
        self.recipe.refresh_from_db()
        self.assertEqual(self.recipe.name, "Soup2")
        self.assertEqual(self.recipe.instructions, "Boil")
        self.assertEqual(list(self.recipe.ingredients.all()), [self.salt])

    def test_empty_ingredient_list_clears_the_set(self):
        recipe_service.update_recipe(self.alice, self.recipe.pk, ingredients=[])
        self.recipe.refresh_from_db()
        self.assertEqual(self.recipe.name, "Soup")
        self.assertFalse(self.recipe.ingredients.exists())
