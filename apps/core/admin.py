# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from apps.core.models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("id", "username", "name", "email", "is_staff", "is_active")
    search_fields = ("username", "name", "email")
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Profile", {"fields": ("name", "avatar")}),
    )
