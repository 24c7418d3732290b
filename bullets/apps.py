from django.apps import AppConfig


class BulletsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'bullets'
    verbose_name = 'Bullet Bank'
