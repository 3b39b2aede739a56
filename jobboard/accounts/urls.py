from django.urls import path
from . import views

urlpatterns = [
    path("auth/register", views.register, name="register"),
    path("auth/login", views.login, name="login"),
    path("auth/me", views.current_user, name="current_user"),
    path("auth/update", views.update_profile, name="update_profile"),
]
