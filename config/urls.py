from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    # Sign up / sign in / sign out (namespaced)
    path("auth/", include(("accounts.urls", "accounts"), namespace="accounts")),

    # Recipes & ingredient catalog (namespaced)
    path("", include(("cookbook.urls", "cookbook"), namespace="cookbook")),
]
