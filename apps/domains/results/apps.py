# PATH: apps/domains/results/apps.py
# 역할: results 도메인 앱 설정 (채점 / 결과 조회, 자체 모델 없음)

from django.apps import AppConfig


class ResultsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.results"
    label = "results"
