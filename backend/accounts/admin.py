from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import PasswordResetToken, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("username", "email", "badge_number", "department",
                    "first_name", "last_name", "is_active", "role")
    search_fields = ("username", "email", "badge_number")
    list_filter = ("is_active", "is_staff", "role")
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Officer Profile", {"fields": ("role", "badge_number", "department",
                                        "position", "phone")}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Officer Profile", {"fields": ("email", "first_name", "last_name",
                                        "role", "badge_number", "department")}),
    )


@admin.register(PasswordResetToken)
class PasswordResetTokenAdmin(admin.ModelAdmin):
    list_display = ("user", "created_at", "expires_at")
    readonly_fields = ("token", "created_at", "updated_at")
