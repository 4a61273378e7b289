from django.db import models


class ContactMessage(models.Model):
    """Message sent through the storefront contact form."""
    name = models.CharField(
        max_length=200,
        verbose_name='Nombre'
    )
    email = models.EmailField(
        verbose_name='Email'
    )
    subject = models.CharField(
        max_length=255,
        verbose_name='Asunto'
    )
    message = models.TextField(
        verbose_name='Mensaje'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Enviado el'
    )

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Mensaje de contacto'
        verbose_name_plural = 'Mensajes de contacto'

    def __str__(self):
        return f"{self.name} <{self.email}>: {self.subject}"
