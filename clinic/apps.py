import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ClinicConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic'
    verbose_name = 'Clinical coordination records'

    def ready(self):
        from clinic.services.context import ServiceContext

        self.context = ServiceContext.from_settings()
        logger.debug('clinic services initialised: %r', self.context)
