from django import forms
from .models import Ingredient, Recipe


class IngredientForm(forms.ModelForm):
    class Meta:
        model = Ingredient
        fields = ["name", "unit"]
        widgets = {
            "name": forms.TextInput(attrs={
                "placeholder": "e.g. bell pepper",
                "class": "form-control"
            }),
            "unit": forms.TextInput(attrs={
                "placeholder": "e.g. g, pcs",
                "class": "form-control"
            }),
        }

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise forms.ValidationError("Please enter an ingredient name.")
        return name


class RecipeForm(forms.ModelForm):
    """
    Create/edit form for a Recipe.

    `owner` is deliberately absent: whatever a client posts under that key
    is ignored, the view always passes the signed-in user to the service.
    The ingredient choices are the whole shared catalog, so an id that is
    not in the catalog fails validation here before the service sees it.
    """
    ingredients = forms.ModelMultipleChoiceField(
        queryset=Ingredient.objects.all(),
        required=False,
        widget=forms.CheckboxSelectMultiple,
    )

    class Meta:
        model = Recipe
        fields = ["name", "instructions", "ingredients"]
        widgets = {
            "name": forms.TextInput(attrs={"class": "form-control", "placeholder": "Recipe name"}),
            "instructions": forms.Textarea(attrs={
                "class": "form-control",
                "rows": 6,
                "placeholder": "Boil water, add pasta...",
            }),
        }

    # An all-unticked checkbox group sends nothing; the form template adds this
    # hidden field so "no ingredients" still counts as submitted.
    INGREDIENTS_SENT = "ingredients_sent"

    def make_partial(self):
        """
        Make the fields missing from the bound data optional and return the
        names of those that were sent. Call before `is_valid()`.
        """
        sent = set()
        for name, field in self.fields.items():
            if name in self.data or (name == "ingredients" and self.INGREDIENTS_SENT in self.data):
                sent.add(name)
            else:
                field.required = False
        return sent

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name and self.fields["name"].required:
            raise forms.ValidationError("Please enter a name.")
        return name
