# PATH: apps/domains/forms/apps.py
# 역할: forms 도메인 앱 설정(AppConfig)

from django.apps import AppConfig


class FormsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.forms"
    label = "forms"
