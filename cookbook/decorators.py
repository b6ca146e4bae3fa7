from django.contrib.auth.decorators import login_required

# login_required, but visitors land on the home page with no `?next=`.
# The view works with `request.user`, attached by AuthenticationMiddleware.
signed_in_required = login_required(login_url="cookbook:home", redirect_field_name=None)
