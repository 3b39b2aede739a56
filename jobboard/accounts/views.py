import logging

from django.contrib.auth import authenticate

from jobboard_api.errors import AuthenticationFailure, ValidationFailure
from jobboard_api.http import api_view, ok, parse_json

from .decorators import token_required
from .forms import LoginForm, ProfileForm, RegistrationForm
from .serializers import PROFILE_FIELDS, user_to_dict
from .tokens import issue_token

logger = logging.getLogger(__name__)


# -----------------------------
# Register
# -----------------------------
@api_view("POST")
def register(request):
    form = RegistrationForm(parse_json(request))
    if not form.is_valid():
        logger.info("Registration failed: errors=%s", form.errors.get_json_data())
        raise ValidationFailure.from_form(form)

    user = form.save()
    logger.info("User registered: user_id=%s email=%s role=%s", user.pk, user.email, user.role)
    return ok({"user": user_to_dict(user), "token": issue_token(user)}, status=201)


# -----------------------------
# Login
# -----------------------------
@api_view("POST")
def login(request):
    form = LoginForm(parse_json(request))
    if not form.is_valid():
        raise ValidationFailure.from_form(form)

    email = form.cleaned_data["email"]
    user = authenticate(request, email=email, password=form.cleaned_data["password"])
    if user is None:
        logger.info("Login failed: email=%s", email)
        raise AuthenticationFailure("Invalid credentials")

    logger.info("Login success: user_id=%s role=%s", user.pk, user.role)
    return ok({"user": user_to_dict(user), "token": issue_token(user)})


# -----------------------------
# Current user
# -----------------------------
@api_view("GET")
@token_required
def current_user(request):
    user = request.identity.get_user()
    return ok({"user": user_to_dict(user, include_job_refs=True)})


@api_view("PATCH", "PUT")
@token_required
def update_profile(request):
    user = request.identity.get_user()
    payload = parse_json(request)

    # name and email must always be sent; the profile fields are optional
    data = {field: getattr(user, field) for field in PROFILE_FIELDS}
    data.update({k: v for k, v in payload.items() if k in PROFILE_FIELDS or k in ("name", "email")})

    form = ProfileForm(data, instance=user)
    if not form.is_valid():
        raise ValidationFailure.from_form(form)

    user = form.save()
    logger.info("Profile updated: user_id=%s", user.pk)
    # name may have changed, so the token claims are refreshed
    return ok({"user": user_to_dict(user, include_job_refs=True), "token": issue_token(user)})
