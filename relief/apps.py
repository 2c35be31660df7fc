from django.apps import AppConfig


class ReliefConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'relief'
    verbose_name = 'Rekod Guru Ganti'
