from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "role", "company", "is_active", "is_staff", "created_at")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("email", "name", "company")
    ordering = ("-created_at",)
    readonly_fields = ("password", "last_login", "created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("email", "name", "role", "password")}),
        ("Profile", {"fields": ("location", "bio", "company", "position")}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")}),
        ("Dates", {"fields": ("last_login", "created_at", "updated_at")}),
    )
