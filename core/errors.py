class CatalogError(Exception):
    """Error base del catálogo."""


class ValidationError(CatalogError):
    """Datos de producto inválidos; el mensaje se muestra tal cual al usuario."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


class CatalogSyncError(CatalogError):
    """Fallo al hablar con el servicio de catálogo (red o status no exitoso)."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
