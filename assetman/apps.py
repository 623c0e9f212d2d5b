"""Django app configuration for Assetman."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AssetmanConfig(AppConfig):
    """Configuration for Assetman app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "assetman"
    verbose_name = _("Serialized inventory & routing")
