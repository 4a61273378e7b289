"""
Storefront errors.

Every error carries a Spanish message that can be shown to the customer as-is.
"""


class StorefrontError(Exception):
    default_message = 'Ocurrió un error inesperado. Por favor intenta de nuevo.'
    code = 'error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BackendNotConfigured(StorefrontError):
    default_message = 'El backend no está configurado. Por favor revisa la configuración del servidor.'
    code = 'backend_not_configured'


class BackendUnavailable(StorefrontError):
    default_message = 'No se pudo conectar con el backend. Por favor intenta de nuevo.'
    code = 'backend_unavailable'


class ProductNotFound(StorefrontError):
    default_message = 'Producto no encontrado.'
    code = 'not_found'


class ImageValidationError(StorefrontError):
    default_message = 'Solo se permiten archivos de imagen'
    code = 'invalid_image'


class UploadError(StorefrontError):
    default_message = 'Error al subir imagen. Por favor intenta de nuevo.'
    code = 'upload_failed'


class NotAnAdmin(StorefrontError):
    default_message = 'No tienes permisos de administrador'
    code = 'not_admin'


class InvalidCredentials(StorefrontError):
    default_message = 'Email o contraseña incorrectos'
    code = 'invalid_credentials'
