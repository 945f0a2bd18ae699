# PATH: apps/domains/forms/admin.py
from django.contrib import admin

from apps.domains.forms.models import Form, Question, Option


class OptionInline(admin.TabularInline):
    model = Option
    extra = 0


@admin.register(Form)
class FormAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "type", "status", "code", "user", "updated_at")
    list_filter = ("type", "status")
    search_fields = ("title", "code")


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "form", "position", "type", "required", "total_score")
    list_filter = ("type",)
    inlines = [OptionInline]
