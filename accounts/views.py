import logging

from django.contrib import messages
from django.contrib.auth import login, logout
from django.shortcuts import render, redirect
from django.views.decorators.http import require_http_methods, require_POST

from .forms import SignInForm, SignUpForm

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def sign_up(request):
    """Create an account and sign the new user straight in."""
    if request.method == "POST":
        form = SignUpForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user, backend="django.contrib.auth.backends.ModelBackend")
            logger.info("New user %s signed up.", user.pk)
            messages.success(request, f"Welcome, {user.username}!")
            return redirect("cookbook:home")
    else:
        form = SignUpForm()
    return render(request, "accounts/sign_up.html", {"form": form})


@require_http_methods(["GET", "POST"])
def sign_in(request):
    if request.method == "POST":
        form = SignInForm(request, data=request.POST)
        if form.is_valid():
            user = form.get_user()
            login(request, user)
            messages.success(request, f"Welcome back, {user.username}.")
            return redirect("cookbook:home")
        logger.info("Failed sign-in for username %r.", request.POST.get("username", ""))
    else:
        form = SignInForm(request)
    return render(request, "accounts/sign_in.html", {"form": form})


@require_POST
def sign_out(request):
    # logout() flushes the whole session, not just the auth keys
    logout(request)
    messages.info(request, "You have been signed out.")
    return redirect("cookbook:home")
