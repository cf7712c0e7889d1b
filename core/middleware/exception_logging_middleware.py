"""
Middleware para capturar e logar exceções não tratadas.

Localização: core/middleware/exception_logging_middleware.py

Este middleware captura exceções não tratadas e as registra no audit_log.
"""
import logging
from pymongo.errors import PyMongoError
from core.services.audit_log_service import AuditLogService

logger = logging.getLogger(__name__)


class ExceptionLoggingMiddleware:
    """
    Middleware para capturar exceções não tratadas e logá-las.

    Deve ser adicionado após outros middlewares para capturar exceções.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        """
        Processa exceções não tratadas.

        Returns:
            None (deixa Django tratar a exceção normalmente)
        """
        source = 'api' if request.path.startswith('/api/') else 'pagina'

        logger.error(
            f"[EXCEPTION] {request.method} {request.path}: {exception}",
            exc_info=(type(exception), exception, exception.__traceback__)
        )

        try:
            AuditLogService().log_error(
                action='unhandled_exception',
                entity='system',
                error=exception,
                source=source,
                payload={
                    'path': request.path,
                    'method': request.method,
                    'exception_type': type(exception).__name__,
                    'exception_message': str(exception)
                }
            )
        except PyMongoError as e:
            logger.error(f"[EXCEPTION] Falha ao gravar log de auditoria: {e}")

        return None
